"""
Signup Page Object

Encapsulates the detailed registration form reached after the initial
signup step: account information, address information and submission.
"""
import logging
from typing import Optional

from playwright.sync_api import Page

from ..config import DEFAULT_BASE_URL
from ..models import PersonalData, ShippingInformation
from ..selectors import RegisterElements, by_data_qa
from .base_page import BasePage

logger = logging.getLogger(__name__)


def _has_text(value: Optional[str]) -> bool:
    return isinstance(value, str) and value.strip() != ""


class SignupPage(BasePage):
    """Page object for the detailed registration form."""

    PATH = "/signup"

    PASSWORD_INPUT = f"input{by_data_qa(RegisterElements.PASSWORD_REGISTER)}"

    def __init__(self, page: Page, base_url: str = DEFAULT_BASE_URL, elements=RegisterElements):
        super().__init__(page, base_url)
        self.elements = elements

    def fill_personal_data(self, personal: PersonalData, skip_password: bool = False) -> "SignupPage":
        """
        Fill the account information section.

        The password is typed only when present and not skipped. Newsletter
        and opt-in boxes are checked only when the flag is set and the
        element set defines a selector for them.
        """
        el = self.elements
        logger.info("Filling personal data (skip_password=%s)", skip_password)

        self.by_id(el.TITLE_IDS.get(personal.title, el.TITLE_MRS)).click()
        if not skip_password and personal.password:
            self.type_into(el.PASSWORD_REGISTER, personal.password)
        self.select(el.DAY, personal.day)
        self.select(el.MONTH, personal.month)
        self.select(el.YEAR, personal.year)

        newsletter = getattr(el, "NEWSLETTER_CHECKBOX", None)
        if personal.newsletter and newsletter:
            self.by_id(newsletter).check()
        optin = getattr(el, "OPTIN_CHECKBOX", None)
        if personal.optin and optin:
            self.by_id(optin).check()
        return self

    def fill_shipping_data(self, shipping: ShippingInformation) -> "SignupPage":
        """
        Fill the address information section.

        Company and second address line are typed only when they are
        non-blank strings and the element set defines them.
        """
        el = self.elements
        logger.info("Filling shipping data")

        self.type_into(el.NAME_ADDRESS, shipping.first_name)
        self.type_into(el.LAST_NAME_ADDRESS, shipping.last_name)
        self.type_into(el.ADDRESS, shipping.address1)
        self.select(el.COUNTRY, shipping.country)
        self.type_into(el.STATE, shipping.state)
        self.type_into(el.CITY, shipping.city)
        self.type_into(el.ZIPCODE, shipping.zipcode)
        self.type_into(el.MOBILE_NUMBER, shipping.mobile_number)

        company = getattr(el, "COMPANY", None)
        if _has_text(shipping.company) and company:
            self.type_into(company, shipping.company)
        address2 = getattr(el, "ADDRESS2", None)
        if _has_text(shipping.address2) and address2:
            self.type_into(address2, shipping.address2)
        return self

    def create_account(self) -> None:
        """Click "Create Account". The caller asserts the outcome."""
        logger.info("Submitting account creation")
        self.click(self.elements.CREATE_ACCOUNT_BUTTON)

    def expect_password_invalid(self) -> None:
        self.expect_natively_invalid(self.PASSWORD_INPUT)
