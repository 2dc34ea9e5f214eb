"""
Syntactic predicates for plain form fields.

Every predicate treats ``None`` and ``""`` as *not* matching (except
:func:`is_empty`, of course) and tests the **whole** string, not a prefix.
"""

import re
from typing import Optional

_INTEGER_REGEX = re.compile(r"[0-9]*")
_REAL_REGEX = re.compile(r"[0-9]*\.[0-9]*")
_HEX_REGEX = re.compile(r"[0-9a-fA-F]*")
# ASCII letters and ASCII whitespace only
_ALPHABETIC_REGEX = re.compile(r"[a-zA-Z\s]*", flags=re.ASCII)
_EMAIL_REGEX = re.compile(
    r"[a-z0-9!#$%&'*+/=?^_`{|}~-]+(?:\.[a-z0-9!#$%&'*+/=?^_`{|}~-]+)*"
    r"@(?:[a-z0-9](?:[a-z0-9-]*[a-z0-9])?\.)+"
    r"[a-z0-9](?:[a-z0-9-]*[a-z0-9])?"
)


def is_empty(value: Optional[str]) -> bool:
    """``True`` when *value* is ``None`` or has no characters."""
    return value is None or len(value) == 0


def _full_match(regex: re.Pattern, value: Optional[str]) -> bool:
    return not is_empty(value) and regex.fullmatch(value) is not None


def is_integer(value: Optional[str]) -> bool:
    """Only decimal digits, e.g. ``"0042"``."""
    return _full_match(_INTEGER_REGEX, value)


def is_real(value: Optional[str]) -> bool:
    """
    Digits with exactly one decimal point, e.g. ``"3.14"``, ``".5"`` or ``"7."``.

    No sign and no exponent are accepted.
    """
    return _full_match(_REAL_REGEX, value)


def is_number(value: Optional[str]) -> bool:
    return is_integer(value) or is_real(value)


def is_hex(value: Optional[str]) -> bool:
    return _full_match(_HEX_REGEX, value)


def is_alphabetic(value: Optional[str]) -> bool:
    """ASCII letters and whitespace only - accented letters do not match."""
    return _full_match(_ALPHABETIC_REGEX, value)


def is_email(value: Optional[str]) -> bool:
    """
    Check *value* against a lowercase subset of the RFC 5322 address grammar.

    Upper-case characters are rejected, so callers that accept mixed case
    input should lower it first.
    """
    return _full_match(_EMAIL_REGEX, value)


def min_length(value: Optional[str], size: int) -> bool:
    """``True`` when *value* is non-empty and has at least *size* characters."""
    return not is_empty(value) and len(value) >= size


def max_length(value: Optional[str], size: int) -> bool:
    """``True`` when *value* is non-empty and has at most *size* characters."""
    return not is_empty(value) and len(value) <= size
