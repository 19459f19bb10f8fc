"""
Account Outcome Page Objects

Post-submission pages and the header navigation that reflects the
session state.
"""
import logging

from playwright.sync_api import Locator, expect

from ..selectors import Headings, RegisterElements, by_data_qa
from .base_page import BasePage

logger = logging.getLogger(__name__)


class AccountCreatedPage(BasePage):
    """The "Account Created!" confirmation page."""

    PATH = "/account_created"

    BANNER = f"h2{by_data_qa(RegisterElements.ACCOUNT_CREATED)}"

    def expect_account_created(self) -> None:
        banner = self.locator(self.BANNER)
        expect(banner).to_be_visible()
        expect(banner).to_contain_text(Headings.ACCOUNT_CREATED)

    def continue_(self) -> None:
        """Click "Continue" and wait to leave the confirmation page."""
        self.click(RegisterElements.CONTINUE_BUTTON)
        self.expect_url_not_contains(self.PATH)


class AccountDeletedPage(BasePage):
    """The "Account Deleted!" confirmation page."""

    PATH = "/delete_account"

    BANNER = f"h2{by_data_qa(RegisterElements.ACCOUNT_DELETED)}"

    def expect_account_deleted(self) -> None:
        expect(self.locator(self.BANNER)).to_contain_text(Headings.ACCOUNT_DELETED)


class HeaderNav(BasePage):
    """Header links that show who is logged in."""

    NAV = ".shop-menu"
    LOGOUT_LINK = 'a[href="/logout"]'
    DELETE_ACCOUNT_LINK = 'a[href="/delete_account"]'

    def logged_in_as(self) -> Locator:
        return self.locator(self.NAV).get_by_text(Headings.LOGGED_IN_AS)

    def expect_logged_in_as(self, name: str) -> None:
        """Assert the "Logged in as <name>" indicator and the logout link."""
        indicator = self.logged_in_as()
        expect(indicator).to_be_visible()
        expect(indicator).to_contain_text(name)
        expect(self.locator(self.LOGOUT_LINK)).to_be_visible()

    def expect_logged_out(self) -> None:
        expect(self.locator(self.LOGOUT_LINK)).to_have_count(0)

    def logout(self) -> None:
        logger.info("Logging out")
        self.locator(self.LOGOUT_LINK).click()

    def delete_account(self) -> None:
        logger.info("Deleting account through the UI")
        self.locator(self.DELETE_ACCOUNT_LINK).click()
