"""Built-in character classes and the knob-to-request mapping.

Four built-in categories, always declared in this order:
numeric, lower, upper, special. The special set can be overridden by the
caller; an empty override means "use the default".
"""

from __future__ import annotations

import string
from enum import StrEnum

from randctl.domain.models import Category, GenerationRequest

NUMERIC_CHARS = string.digits
LOWER_CHARS = string.ascii_lowercase
UPPER_CHARS = string.ascii_uppercase
DEFAULT_SPECIAL_CHARS = "!@#$%&*()-_=+[]{}<>:?"


class CategoryName(StrEnum):
    """Names of the built-in character classes."""

    NUMERIC = "numeric"
    LOWER = "lower"
    UPPER = "upper"
    SPECIAL = "special"


CATEGORY_ORDER: tuple[CategoryName, ...] = (
    CategoryName.NUMERIC,
    CategoryName.LOWER,
    CategoryName.UPPER,
    CategoryName.SPECIAL,
)


def builtin_charsets(override_special: str | None = None) -> dict[str, str]:
    """Return the built-in charsets keyed by category name."""
    return {
        CategoryName.NUMERIC: NUMERIC_CHARS,
        CategoryName.LOWER: LOWER_CHARS,
        CategoryName.UPPER: UPPER_CHARS,
        CategoryName.SPECIAL: override_special or DEFAULT_SPECIAL_CHARS,
    }


def build_request(
    length: int,
    *,
    numeric: bool = True,
    lower: bool = True,
    upper: bool = True,
    special: bool = True,
    min_numeric: int = 0,
    min_lower: int = 0,
    min_upper: int = 0,
    min_special: int = 0,
    override_special: str | None = None,
) -> GenerationRequest:
    """Map the user-facing knobs onto a :class:`GenerationRequest`.

    Minimums apply whether or not the category is enabled; the ``enabled``
    flags only decide which charsets feed the optional pool.
    """
    charsets = builtin_charsets(override_special)
    minimums = {
        CategoryName.NUMERIC: min_numeric,
        CategoryName.LOWER: min_lower,
        CategoryName.UPPER: min_upper,
        CategoryName.SPECIAL: min_special,
    }
    flags = {
        CategoryName.NUMERIC: numeric,
        CategoryName.LOWER: lower,
        CategoryName.UPPER: upper,
        CategoryName.SPECIAL: special,
    }
    categories = tuple(
        Category(name=name, charset=charsets[name], minimum=minimums[name])
        for name in CATEGORY_ORDER
    )
    enabled = frozenset(str(name) for name in CATEGORY_ORDER if flags[name])
    return GenerationRequest(length=length, categories=categories, enabled=enabled)


def count_categories(value: str, override_special: str | None = None) -> dict[str, int]:
    """Count how many characters of *value* fall in each built-in class.

    Characters outside every class are counted under ``"other"``.
    """
    charsets = builtin_charsets(override_special)
    counts = {str(name): 0 for name in CATEGORY_ORDER}
    counts["other"] = 0
    for char in value:
        for name in CATEGORY_ORDER:
            if char in charsets[name]:
                counts[name] += 1
                break
        else:
            counts["other"] += 1
    return counts
