"""
Login Page Object

The ``/login`` page holds two forms: returning-customer login and the
initial signup step (name + email) that leads to the detailed form.
"""
import logging

from playwright.sync_api import Locator, Page, expect

from ..config import DEFAULT_BASE_URL
from ..models import InitialSignup
from ..selectors import Headings, LoginElements, RegisterElements, by_data_qa
from .base_page import BasePage

logger = logging.getLogger(__name__)


class LoginPage(BasePage):
    """Page object for the login / signup landing page."""

    PATH = "/login"
    SIGNUP_PATH = "/signup"

    LANDMARK_HEADING = "h2.title.text-center"
    FORM_MESSAGE = "form p"

    def __init__(self, page: Page, base_url: str = DEFAULT_BASE_URL):
        super().__init__(page, base_url)
        self.url = f"{self.base_url}{self.PATH}"

    def navigate(self) -> "LoginPage":
        """Navigate to login page."""
        self.goto(self.PATH)
        return self

    # =========================================================================
    # Login
    # =========================================================================

    def login(self, email: str, password: str) -> "LoginPage":
        """Type credentials into the login form and submit it."""
        logger.info("Logging in as %s", email)
        self.type_into(LoginElements.EMAIL, email)
        self.type_into(LoginElements.PASSWORD, password)
        self.click(LoginElements.LOGIN_BUTTON)
        return self

    # =========================================================================
    # Initial Signup
    # =========================================================================

    def fill_initial_signup(self, signup: InitialSignup) -> "LoginPage":
        """Type name and email into the signup form without submitting."""
        self.type_into(RegisterElements.NAME, signup.name)
        self.type_into(RegisterElements.EMAIL, signup.email)
        return self

    def click_signup(self) -> None:
        self.click(RegisterElements.SIGNUP_BUTTON)

    def submit_initial_signup(self, signup: InitialSignup) -> "LoginPage":
        """
        Fill and submit the initial signup form, then wait for the detailed form.

        Blocks until the URL includes ``/signup`` and the "Enter Account
        Information" heading is visible.
        """
        logger.info("Submitting initial signup for %s", signup.email)
        self.fill_initial_signup(signup)
        self.click_signup()
        self.expect_url_contains(self.SIGNUP_PATH)
        expect(self.account_information_heading()).to_be_visible()
        return self

    def account_information_heading(self) -> Locator:
        return self.locator(self.LANDMARK_HEADING).filter(
            has_text=Headings.ENTER_ACCOUNT_INFORMATION
        )

    # =========================================================================
    # Assertions
    # =========================================================================

    def expect_on_login_page(self) -> None:
        """Assert currently on login page."""
        self.expect_url_contains(self.PATH)

    def expect_signup_email_invalid(self) -> None:
        """Assert the signup email failed native validation and the step did not advance."""
        self.expect_natively_invalid(f"input{by_data_qa(RegisterElements.EMAIL)}")
        self.expect_url_not_contains(self.SIGNUP_PATH)

    def expect_email_already_exists(self) -> None:
        expect(self.locator(self.FORM_MESSAGE).filter(has_text=Headings.EMAIL_EXISTS)).to_be_visible()

    def expect_login_failed(self) -> None:
        expect(self.locator(self.FORM_MESSAGE).filter(has_text=Headings.LOGIN_FAILED)).to_be_visible()
