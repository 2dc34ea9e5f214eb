"""
Check-digit validators for Brazilian taxpayer documents.

* **CPF** - 11 digits, individual taxpayer number.
* **CNPJ** - 14 digits, company taxpayer number.

Both carry two trailing check digits computed with a modulo-11 weighted sum.
The validators expect bare digits; :func:`strip_mask` removes the usual
punctuation (``111.444.777-35``) when the caller wants to accept it.
"""

import logging
import re
from typing import Optional, Sequence

from field_validator_lib.core.constants import (
    CPF_LENGTH,
    CNPJ_LENGTH,
    CNPJ_WEIGHT_CAP,
)
from field_validator_lib.exceptions import InvalidDigitStringError
from field_validator_lib.validators.text import is_empty, is_integer

logger = logging.getLogger(__name__)

_CPF_WEIGHTS = (11, 10, 9, 8, 7, 6, 5, 4, 3, 2)


def _digits_of(value: str) -> list[int]:
    if not is_integer(value):
        raise InvalidDigitStringError(f"Expected a string of digits, got {value!r}")
    return [int(ch) for ch in value]


def modulo11_check_digit(digits: str, weight_cap: int = 0) -> str:
    """
    Compute the modulo-11 check digit of *digits*.

    The rightmost digit is multiplied by 2, the next one by 3 and so on.
    When ``weight_cap`` is positive the weight restarts at 2 once it would
    exceed the cap (CNPJ uses a cap of 9: ``... 5 4 3 2 9 8 7 6 5 4 3 2``).
    With ``weight_cap == 0`` the weights grow without limit.

    The check digit is ``11 - (sum % 11)``, where the results 10 and 11 are
    replaced by 0.

    Parameters
    ----------
    digits: str
        Non-empty string of decimal digits.
    weight_cap: int
        Highest weight before restarting at 2, or 0 for no limit.

    Returns
    -------
    str
        The single check digit.

    Raises
    ------
    InvalidDigitStringError
        When *digits* is empty or contains anything other than ``0-9``.
    """
    values = _digits_of(digits)

    total = 0
    weight = 2
    for digit in reversed(values):
        if weight_cap and weight > weight_cap:
            weight = 2
        total += digit * weight
        weight += 1

    check = 11 - total % 11
    return "0" if check in (10, 11) else str(check)


def _right_aligned_check_digit(digits: str, weights: Sequence[int]) -> int:
    # The last weight always applies to the last digit
    values = _digits_of(digits)
    offset = len(weights) - len(values)
    total = sum(d * weights[offset + i] for i, d in enumerate(values))
    check = 11 - total % 11
    return 0 if check > 9 else check


def zero_fill(value: str, size: int) -> str:
    """
    Left-pad *value* with zeros up to *size* characters.

    Document numbers lose their leading zeros when stored as integers
    (``1234567890`` for CPF ``01234567890``); this restores them.  Longer
    values are returned unchanged.
    """
    return value.rjust(size, "0")


def strip_mask(value: Optional[str]) -> str:
    """Remove every non-digit character: ``"111.444.777-35"`` -> ``"11144477735"``."""
    if not value:
        return ""
    return re.sub(r"\D", "", value)


def _normalize(value: Optional[str], size: int, kind: str) -> Optional[str]:
    if is_empty(value):
        logger.debug("%s rejected: empty value", kind)
        return None
    if not is_integer(value):
        logger.debug("%s rejected: non-digit characters in %r", kind, value)
        return None
    if len(value) > size:
        logger.debug(
            "%s rejected: %d digits, expected at most %d", kind, len(value), size
        )
        return None
    return zero_fill(value, size)


def is_valid_cpf(cpf: Optional[str]) -> bool:
    """
    Validate the two check digits of a CPF.

    Inputs shorter than 11 digits are zero-filled on the left before the
    check; longer inputs, empty inputs and inputs with non-digit characters
    are rejected.

    Parameters
    ----------
    cpf: str
        CPF written with digits only.

    Returns
    -------
    bool
        ``True`` when both check digits match.
    """
    number = _normalize(cpf, CPF_LENGTH, "CPF")
    if number is None:
        return False

    base = number[:9]
    first = _right_aligned_check_digit(base, _CPF_WEIGHTS)
    second = _right_aligned_check_digit(f"{base}{first}", _CPF_WEIGHTS)
    return number == f"{base}{first}{second}"


def is_valid_cnpj(cnpj: Optional[str]) -> bool:
    """
    Validate the two check digits of a CNPJ.

    Uses :func:`modulo11_check_digit` with a weight cap of 9 over the first
    12 digits and then over the first 13.  The same zero-fill normalisation as
    :func:`is_valid_cpf` applies, up to 14 digits.
    """
    number = _normalize(cnpj, CNPJ_LENGTH, "CNPJ")
    if number is None:
        return False

    first = modulo11_check_digit(number[:12], CNPJ_WEIGHT_CAP)
    second = modulo11_check_digit(number[:13], CNPJ_WEIGHT_CAP)
    return number[12:] == first + second


def format_cpf(cpf: Optional[str]) -> str:
    """Format as ``XXX.XXX.XXX-XX``; returns ``""`` unless there are 11 digits."""
    digits = strip_mask(cpf)
    if len(digits) != CPF_LENGTH:
        return ""
    return f"{digits[:3]}.{digits[3:6]}.{digits[6:9]}-{digits[9:]}"


def format_cnpj(cnpj: Optional[str]) -> str:
    """Format as ``XX.XXX.XXX/XXXX-XX``; returns ``""`` unless there are 14 digits."""
    digits = strip_mask(cnpj)
    if len(digits) != CNPJ_LENGTH:
        return ""
    return f"{digits[:2]}.{digits[2:5]}.{digits[5:8]}/{digits[8:12]}-{digits[12:]}"
