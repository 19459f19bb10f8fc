"""
Test Data Factories

Generate randomized but form-valid registration records with Faker.
"""
import logging
import re
from typing import Optional

from faker import Faker

from .config import E2EConfig
from .models import InitialSignup, PersonalData, ShippingInformation, UserRegistrationRecord

logger = logging.getLogger(__name__)

MIN_AGE = 18
MAX_AGE = 65
PASSWORD_PREFIX = "Pass!1"
PASSWORD_LENGTH = 12
PHONE_FORMAT = "##########"

# Address providers name the first-level region differently per locale
REGION_PROVIDERS = ("state", "administrative_unit", "province", "region", "county", "prefecture")

_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def make_faker(locale: str = "en_US", seed: Optional[int] = None) -> Faker:
    """Create a Faker instance, seeded for reproducible runs when ``seed`` is set."""
    fake = Faker(locale)
    if seed is not None:
        fake.seed_instance(seed)
        logger.info("Faker seeded with %s", seed)
    return fake


def _email_slug(value: str) -> str:
    return _NON_ALNUM.sub("", value.lower()) or "user"


def generate_email(fake: Faker, first_name: str, last_name: str, domain: str) -> str:
    """Build an address from the names plus a token unique to this Faker instance."""
    token = fake.unique.hexify(text="^^^^^^^^")
    return f"{_email_slug(first_name)}.{_email_slug(last_name)}.{token}@{domain}"


def generate_password(fake: Faker) -> str:
    # Prefix guarantees upper, lower, digit and symbol regardless of the random tail
    tail = fake.password(
        length=PASSWORD_LENGTH - len(PASSWORD_PREFIX),
        special_chars=False,
        digits=True,
        upper_case=True,
        lower_case=True,
    )
    return f"{PASSWORD_PREFIX}{tail}"


def generate_state(fake: Faker) -> str:
    """Draw a state or its locale equivalent, falling back to a city name."""
    for name in REGION_PROVIDERS:
        provider = getattr(fake, name, None)
        if provider is not None:
            return provider()
    return fake.city()


def generate_address2(fake: Faker) -> Optional[str]:
    provider = getattr(fake, "secondary_address", None)
    return provider() if provider is not None else None


def create_valid_user_data(
    fake: Optional[Faker] = None, config: Optional[E2EConfig] = None
) -> UserRegistrationRecord:
    """
    Generate a complete, valid registration record.

    Each field is drawn independently; first and last name are copied into
    the personal and shipping groups.

    Args:
        fake: Faker instance to draw from. A new one is built from ``config``
            when omitted.
        config: Supplies locale, seed, email domain and shipping country.

    Returns:
        A fresh ``UserRegistrationRecord``.
    """
    config = config or E2EConfig()
    if fake is None:
        fake = make_faker(config.faker_locale, config.faker_seed)

    first_name = fake.first_name()
    last_name = fake.last_name()
    birthdate = fake.date_of_birth(minimum_age=MIN_AGE, maximum_age=MAX_AGE)

    record = UserRegistrationRecord(
        initial_signup=InitialSignup(
            name=f"{first_name} {last_name}",
            email=generate_email(fake, first_name, last_name, config.email_domain),
        ),
        personal_data=PersonalData(
            first_name=first_name,
            last_name=last_name,
            password=generate_password(fake),
            day=str(birthdate.day),
            month=str(birthdate.month),
            year=str(birthdate.year),
            newsletter=fake.pybool(),
            optin=fake.pybool(),
        ),
        shipping_information=ShippingInformation(
            first_name=first_name,
            last_name=last_name,
            company=fake.company(),
            address1=fake.street_address(),
            address2=generate_address2(fake),
            country=config.country,
            state=generate_state(fake),
            city=fake.city(),
            zipcode=fake.postcode(),
            mobile_number=fake.numerify(PHONE_FORMAT),
        ),
    )
    logger.debug("Generated user record for %s", record.email)
    return record
