"""
Test data generators for checkout and account flows.

SauceDemo accepts any non-empty customer details at checkout, so the
suite feeds it realistic-looking but throwaway data.  Values come from
Faker; call :func:`seed` to make a run reproducible.

Key Concepts Demonstrated:
- Faker-backed data factories
- Dataclasses as lightweight typed records
- Collision-resistant usernames (timestamp + random suffix)
"""

from __future__ import annotations

import string
import time
from dataclasses import dataclass

from faker import Faker

fake = Faker("en_US")

PRODUCT_ADJECTIVES = ["Premium", "Deluxe", "Ultimate", "Pro", "Elite", "Advanced"]
PRODUCT_COLORS = ["Black", "Blue", "Red", "Green", "Gray", "White"]
PRODUCT_KINDS = ["Backpack", "Jacket", "Shirt", "Pants", "Shoes", "Hat"]

PASSWORD_ALPHABET = list(string.ascii_letters + string.digits + "!@#$%^&*")


@dataclass(frozen=True)
class UserData:
    first_name: str
    last_name: str
    email: str
    postal_code: str
    phone: str


@dataclass(frozen=True)
class AddressData:
    street: str
    city: str
    state: str
    zip_code: str
    country: str


def seed(value: int) -> None:
    """Seed the shared Faker instance."""
    fake.seed_instance(value)


def generate_zip_code() -> str:
    """Return a five-digit ZIP code (10000-99999)."""
    return str(fake.random_int(min=10000, max=99999))


def generate_phone() -> str:
    """Return a phone number formatted ``NNN-NNN-NNNN`` with no leading 0/1 groups."""
    area_code = fake.random_int(min=200, max=999)
    prefix = fake.random_int(min=200, max=999)
    line_number = fake.random_int(min=1000, max=9999)
    return f"{area_code}-{prefix}-{line_number}"


def generate_user() -> UserData:
    """
    Generate a random customer.

    The email is derived from the generated name so failures in the
    logs are easy to correlate.
    """
    first_name = fake.first_name()
    last_name = fake.last_name()
    suffix = fake.random_int(min=1, max=999)
    email = f"{first_name.lower()}.{last_name.lower()}{suffix}@test.com"
    return UserData(
        first_name=first_name,
        last_name=last_name,
        email=email,
        postal_code=generate_zip_code(),
        phone=generate_phone(),
    )


def generate_users(count: int) -> list[UserData]:
    """Generate ``count`` independent users."""
    return [generate_user() for _ in range(count)]


def generate_address() -> AddressData:
    return AddressData(
        street=fake.street_address(),
        city=fake.city(),
        state=fake.state_abbr(include_territories=False),
        zip_code=generate_zip_code(),
        country="USA",
    )


def generate_credit_card() -> str:
    """Return 16 random digits (test format, not Luhn-valid)."""
    return "".join(str(fake.random_digit()) for _ in range(16))


def generate_product_name() -> str:
    adjective = fake.random_element(PRODUCT_ADJECTIVES)
    color = fake.random_element(PRODUCT_COLORS)
    kind = fake.random_element(PRODUCT_KINDS)
    return f"{adjective} {color} {kind}"


def generate_price(min_price: float = 10, max_price: float = 100) -> float:
    """Return a price rounded to cents within ``[min_price, max_price]``."""
    if min_price > max_price:
        raise ValueError(f"min_price {min_price} is greater than max_price {max_price}")
    value = fake.random.uniform(min_price, max_price)
    return min(max(round(value, 2), min_price), max_price)


def generate_username() -> str:
    return f"user_{int(time.time() * 1000)}_{fake.random_int(min=1000, max=9999)}"


def generate_password(length: int = 12) -> str:
    if length < 1:
        raise ValueError(f"length must be >= 1, got {length}")
    return "".join(fake.random_element(PASSWORD_ALPHABET) for _ in range(length))
