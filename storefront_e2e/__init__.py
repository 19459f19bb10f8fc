"""
Storefront E2E Suite

Browser tests for the registration and login flows of an external
e-commerce site.

Modules:
    config       - E2EConfig built from E2E_* environment variables
    models       - Registration record dataclasses
    factories    - Faker-backed record generation
    selectors    - data-qa / id selector constants
    pages/       - Page objects (the command layer)
    api          - Account API client for seeding and cleanup
    page_errors  - Uncaught in-page exception policy
    ad_blocking  - Route that aborts ad requests
    artifacts    - Failure screenshots
"""

from .config import E2EConfig, configure_logging
from .factories import create_valid_user_data, make_faker
from .models import InitialSignup, PersonalData, ShippingInformation, UserRegistrationRecord

__all__ = [
    "E2EConfig",
    "configure_logging",
    "create_valid_user_data",
    "make_faker",
    "InitialSignup",
    "PersonalData",
    "ShippingInformation",
    "UserRegistrationRecord",
]

__version__ = "0.1.0"
