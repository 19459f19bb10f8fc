"""
Element Selectors

Attribute values for the storefront's login and registration forms, plus
helpers that turn them into CSS selectors. Most fields carry a ``data-qa``
attribute; radios and checkboxes are addressed by id.
"""


def by_data_qa(value: str) -> str:
    """CSS selector for an element with the given ``data-qa`` attribute."""
    return f'[data-qa="{value}"]'


def by_id(value: str) -> str:
    """CSS selector for an element id."""
    return f"#{value}"


class LoginElements:
    """``data-qa`` values on the login form."""

    EMAIL = "login-email"
    PASSWORD = "login-password"
    LOGIN_BUTTON = "login-button"


class RegisterElements:
    """``data-qa`` values (and ids where noted) on the signup forms."""

    # Initial signup step
    NAME = "signup-name"
    EMAIL = "signup-email"
    SIGNUP_BUTTON = "signup-button"

    # Personal data step (ids)
    TITLE_MR = "id_gender1"
    TITLE_MRS = "id_gender2"
    NEWSLETTER_CHECKBOX = "newsletter"
    OPTIN_CHECKBOX = "optin"

    # Personal data step
    PASSWORD_REGISTER = "password"
    DAY = "days"
    MONTH = "months"
    YEAR = "years"

    # Shipping data step
    NAME_ADDRESS = "first_name"
    LAST_NAME_ADDRESS = "last_name"
    COMPANY = "company"
    ADDRESS = "address"
    ADDRESS2 = "address2"
    COUNTRY = "country"
    STATE = "state"
    CITY = "city"
    ZIPCODE = "zipcode"
    MOBILE_NUMBER = "mobile_number"
    CREATE_ACCOUNT_BUTTON = "create-account"

    # Outcome pages
    ACCOUNT_CREATED = "account-created"
    ACCOUNT_DELETED = "account-deleted"
    CONTINUE_BUTTON = "continue-button"

    TITLE_IDS = {"Mr": TITLE_MR, "Mrs": TITLE_MRS}


class Headings:
    """Landmark texts used for synchronization and outcome checks."""

    ENTER_ACCOUNT_INFORMATION = "Enter Account Information"
    ACCOUNT_CREATED = "Account Created!"
    ACCOUNT_DELETED = "Account Deleted!"
    EMAIL_EXISTS = "Email Address already exist!"
    LOGIN_FAILED = "Your email or password is incorrect!"
    LOGGED_IN_AS = "Logged in as"
