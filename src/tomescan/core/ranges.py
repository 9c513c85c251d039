"""Numeric range resolution for volume and chapter values.

Volume and chapter fields are stored as text so that ranges ("12-14") and
fractional releases ("2.5") survive untouched. This module turns that text
back into numbers and formats parsed numbers into their canonical text.

Parsing never raises: text without any recoverable number resolves to 0.
"""

import re

__all__ = [
    "add_chapter_part",
    "format_value",
    "max_from_range",
    "min_from_range",
    "parse_number",
    "remove_leading_zeroes",
]

_SIGNED_NUMBER = re.compile(r"^-?\d+(?:\.\d+)?$")
_NUMBER = re.compile(r"\d+(?:\.\d+)?")
_RANGE = re.compile(r"(?P<start>\d+(?:\.\d+)?)\s*[-–~]\s*(?P<end>\d+(?:\.\d+)?)")
_LEADING_ZEROES = re.compile(r"^0+(?=\d)")


def parse_number(text: str) -> float | None:
    """Parse a plain (optionally signed) number, or return None."""
    candidate = (text or "").strip()
    if not _SIGNED_NUMBER.match(candidate):
        return None
    return float(candidate)


def _bounds(text: str) -> tuple[float, float]:
    cleaned = (text or "").replace("_", "").strip()

    exact = parse_number(cleaned)
    if exact is not None:
        return exact, exact

    range_match = _RANGE.search(cleaned)
    if range_match:
        start = float(range_match.group("start"))
        end = float(range_match.group("end"))
        return min(start, end), max(start, end)

    single = _NUMBER.search(cleaned)
    if single:
        value = float(single.group(0))
        return value, value

    return 0.0, 0.0


def min_from_range(text: str) -> float:
    """Return the lower bound of a range such as "12-14" (12.0).

    Single values yield themselves ("2.5" -> 2.5). Sentinel strings such
    as "-100000" are returned as their negative value, not split on the
    hyphen. Unrecoverable text yields 0.0.
    """
    return _bounds(text)[0]


def max_from_range(text: str) -> float:
    """Return the upper bound of a range such as "12-14" (14.0)."""
    return _bounds(text)[1]


def remove_leading_zeroes(value: str) -> str:
    """Strip leading zeroes from each number in a value ("01-03" -> "1-3")."""
    if not value:
        return value
    parts = re.split(r"(-)", value)
    return "".join(_LEADING_ZEROES.sub("", part) for part in parts)


def add_chapter_part(value: str) -> str:
    """Mark a chapter as a part release ("12" -> "12.5")."""
    if "." in value:
        return value
    return f"{value}.5"


def format_value(value: str, has_part: bool = False) -> str:
    """Canonicalize a parsed volume/chapter number.

    Leading zeroes are removed and, for single values carrying a part
    suffix (``ch 12a``), the value becomes fractional. A reversed range
    ("3-1") is written low to high.
    """
    value = value.strip()
    if "-" not in value:
        value = add_chapter_part(value) if has_part else value
    value = remove_leading_zeroes(value)

    start, sep, end = value.partition("-")
    low, high = parse_number(start), parse_number(end)
    if sep and low is not None and high is not None and low > high:
        return f"{end}-{start}"
    return value
