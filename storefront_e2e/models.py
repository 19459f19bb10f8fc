"""
Registration Data Models

Structures for the user record driven through the three signup steps:
initial signup, personal data and shipping information.
"""

from dataclasses import dataclass, replace
from typing import Dict, Optional


@dataclass(frozen=True)
class InitialSignup:
    """Name and email typed into the initial signup form."""

    name: str
    email: str


@dataclass(frozen=True)
class PersonalData:
    """
    Account information section of the detailed signup form.

    Birth fields are strings because they are matched against ``<select>``
    option values. ``password`` is ``None`` when the field should be left
    empty.
    """

    first_name: str
    last_name: str
    day: str
    month: str
    year: str
    password: Optional[str] = None
    title: str = "Mrs"
    newsletter: bool = False
    optin: bool = False


@dataclass(frozen=True)
class ShippingInformation:
    """Address section of the detailed signup form."""

    first_name: str
    last_name: str
    address1: str
    country: str
    state: str
    city: str
    zipcode: str
    mobile_number: str
    company: Optional[str] = None
    address2: Optional[str] = None


@dataclass(frozen=True)
class UserRegistrationRecord:
    """A complete, transient user record for one test."""

    initial_signup: InitialSignup
    personal_data: PersonalData
    shipping_information: ShippingInformation

    @property
    def name(self) -> str:
        return self.initial_signup.name

    @property
    def email(self) -> str:
        return self.initial_signup.email

    @property
    def password(self) -> Optional[str]:
        return self.personal_data.password

    def without_password(self) -> "UserRegistrationRecord":
        """Copy of this record with the password omitted."""
        return replace(self, personal_data=replace(self.personal_data, password=None))

    def with_email(self, email: str) -> "UserRegistrationRecord":
        """Copy of this record using a different email."""
        return replace(self, initial_signup=replace(self.initial_signup, email=email))

    def to_api_payload(self) -> Dict[str, str]:
        """Form fields accepted by the site's ``createAccount`` endpoint."""
        personal = self.personal_data
        shipping = self.shipping_information
        return {
            "name": self.name,
            "email": self.email,
            "password": personal.password or "",
            "title": personal.title,
            "birth_date": personal.day,
            "birth_month": personal.month,
            "birth_year": personal.year,
            "firstname": shipping.first_name,
            "lastname": shipping.last_name,
            "company": shipping.company or "",
            "address1": shipping.address1,
            "address2": shipping.address2 or "",
            "country": shipping.country,
            "zipcode": shipping.zipcode,
            "state": shipping.state,
            "city": shipping.city,
            "mobile_number": shipping.mobile_number,
        }
