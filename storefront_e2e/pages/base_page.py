"""
Base Page Object

Provides common functionality for all storefront page objects.
"""
import logging
import re

from playwright.sync_api import Locator, Page, expect

from ..config import DEFAULT_BASE_URL
from ..selectors import by_data_qa, by_id

logger = logging.getLogger(__name__)


class BasePage:
    """Base class for all page objects."""

    def __init__(self, page: Page, base_url: str = DEFAULT_BASE_URL):
        self.page = page
        self.base_url = base_url.rstrip("/")

    # =========================================================================
    # Navigation
    # =========================================================================

    def goto(self, path: str = "") -> None:
        """Navigate to a path relative to base URL."""
        url = f"{self.base_url}{path}"
        logger.debug("goto %s", url)
        self.page.goto(url)

    # =========================================================================
    # Element Lookup
    # =========================================================================

    def locator(self, selector: str) -> Locator:
        """Get a locator for the selector."""
        return self.page.locator(selector)

    def by_data_qa(self, value: str) -> Locator:
        """Get element by its ``data-qa`` attribute."""
        return self.locator(by_data_qa(value))

    def by_id(self, value: str) -> Locator:
        """Get element by id."""
        return self.locator(by_id(value))

    # =========================================================================
    # Element Interaction
    # =========================================================================

    def type_into(self, data_qa: str, value: str) -> None:
        """Fill an input addressed by ``data-qa``."""
        logger.debug("type %s", data_qa)
        self.by_data_qa(data_qa).fill(value)

    def select(self, data_qa: str, value: str) -> None:
        """Select a dropdown option by value or label."""
        logger.debug("select %s=%s", data_qa, value)
        self.by_data_qa(data_qa).select_option(value)

    def click(self, data_qa: str) -> None:
        """Click an element addressed by ``data-qa``."""
        logger.debug("click %s", data_qa)
        self.by_data_qa(data_qa).click()

    # =========================================================================
    # Native Form Validation
    # =========================================================================

    def validation_message(self, selector: str) -> str:
        """Browser-provided validation message for an input ("" when valid)."""
        return self.locator(selector).evaluate("el => el.validationMessage")

    def expect_natively_invalid(self, selector: str) -> None:
        """Assert the input matches the ``:invalid`` pseudo-class."""
        expect(self.locator(f"{selector}:invalid")).to_be_visible()

    # =========================================================================
    # Assertions
    # =========================================================================

    def expect_url_contains(self, fragment: str) -> None:
        expect(self.page).to_have_url(re.compile(re.escape(fragment)))

    def expect_url_not_contains(self, fragment: str) -> None:
        expect(self.page).not_to_have_url(re.compile(re.escape(fragment)))

