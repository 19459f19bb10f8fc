"""
Page Object Models for the storefront E2E suite

These page objects are the command layer: each public method is a named
UI action over Playwright element lookups.
"""

from .account_page import AccountCreatedPage, AccountDeletedPage, HeaderNav
from .base_page import BasePage
from .login_page import LoginPage
from .signup_page import SignupPage

__all__ = [
    "BasePage",
    "LoginPage",
    "SignupPage",
    "AccountCreatedPage",
    "AccountDeletedPage",
    "HeaderNav",
]
