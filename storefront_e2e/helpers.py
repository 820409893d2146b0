"""Small helpers shared by page objects and test scenarios."""

from __future__ import annotations

import random
import re
import string
from collections.abc import Iterable, Sequence
from datetime import date, datetime, timezone
from typing import TypeVar

T = TypeVar("T")

_NON_NUMERIC = re.compile(r"[^0-9.\-]+")
_WHITESPACE = re.compile(r"\s+")


def generate_random_string(length: int = 10) -> str:
    """Return ``length`` random lowercase letters and digits."""
    alphabet = string.ascii_lowercase + string.digits
    return "".join(random.choices(alphabet, k=length))


def generate_random_email(domain: str = "test.com") -> str:
    return f"test_{generate_random_string(8)}@{domain}"


def get_random_number(min_value: int, max_value: int) -> int:
    """Return a random integer in the inclusive range."""
    return random.randint(min_value, max_value)


def format_currency(amount: float, currency: str = "$") -> str:
    return f"{currency}{amount:.2f}"


def parse_currency(currency_string: str) -> float:
    """
    Parse a price label such as ``"Item total: $29.99"`` into a float.

    Everything except digits, ``.`` and ``-`` is discarded first.

    Raises:
        ValueError: If no number remains after stripping.
    """
    cleaned = _NON_NUMERIC.sub("", currency_string)
    if not cleaned:
        raise ValueError(f"No numeric value in {currency_string!r}")
    return float(cleaned)


def get_timestamp() -> str:
    """Current UTC time as an ISO 8601 string."""
    return datetime.now(timezone.utc).isoformat()


def format_date(value: date | None = None, fmt: str = "YYYY-MM-DD") -> str:
    """Render ``value`` (default today) using ``YYYY``/``MM``/``DD`` tokens."""
    value = value or date.today()
    return (
        fmt.replace("YYYY", f"{value.year:04d}")
        .replace("MM", f"{value.month:02d}")
        .replace("DD", f"{value.day:02d}")
    )


def array_contains_all(actual: Iterable[T], expected: Iterable[T]) -> bool:
    """True when every expected item is present in ``actual``."""
    actual_items = list(actual)
    return all(item in actual_items for item in expected)


def get_random_element(items: Sequence[T]) -> T:
    if not items:
        raise ValueError("Cannot pick from an empty sequence")
    return random.choice(items)


def shuffle_array(items: Sequence[T]) -> list[T]:
    """Return a shuffled copy; the input is left untouched."""
    shuffled = list(items)
    random.shuffle(shuffled)
    return shuffled


def product_slug(name: str) -> str:
    """
    Turn a product name into the suffix SauceDemo uses in ``data-test`` ids.

    ``"Sauce Labs Bolt T-Shirt"`` becomes ``"sauce-labs-bolt-t-shirt"``.
    """
    return _WHITESPACE.sub("-", name.strip().lower())
