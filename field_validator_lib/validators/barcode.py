"""
Checksum validation for GS1 barcodes.

Covers every GS1 identification key that ends with a mod-10 check digit:
GTIN-8, GTIN-12 (UPC-A), GTIN-13 (EAN-13), GTIN-14, GSIN and SSCC.

The algorithm:
1. Starting with the digit immediately left of the check digit and moving
   left, multiply the digits alternately by 3 and 1.
2. Sum the results.
3. The check digit is ``(10 - sum % 10) % 10``.

A code is accepted only when, in addition, its first three digits belong to
an assigned GS1 prefix (see :mod:`field_validator_lib.validators.gs1_prefixes`).
"""

import logging
from typing import Optional

from field_validator_lib.core.constants import BARCODE_PREFIX_LENGTH
from field_validator_lib.data_models.barcode import BarcodeError, BarcodeInspection
from field_validator_lib.exceptions import InvalidDigitStringError
from field_validator_lib.validators.gs1_prefixes import country_for_prefix
from field_validator_lib.validators.text import is_empty, is_integer

logger = logging.getLogger(__name__)


def barcode_check_digit(payload: str) -> int:
    """
    Compute the GS1 mod-10 check digit for *payload*.

    Parameters
    ----------
    payload: str
        The barcode digits **without** the check digit, e.g. ``"400638133393"``
        for EAN-13 ``4006381333931``.

    Returns
    -------
    int
        The digit that completes the code.

    Raises
    ------
    InvalidDigitStringError
        When *payload* is empty or contains non-digit characters.
    """
    if not is_integer(payload):
        raise InvalidDigitStringError(f"Expected a string of digits, got {payload!r}")

    total = 0
    for position, ch in enumerate(reversed(payload)):
        total += int(ch) * (3 if position % 2 == 0 else 1)
    return (10 - total % 10) % 10


def inspect_barcode(code: Optional[str]) -> BarcodeInspection:
    """
    Check *code* and explain the outcome.

    The checks run in order - emptiness, digit format, GS1 prefix, check
    digit - and the first failing one is reported in ``error``.
    """
    if is_empty(code):
        return BarcodeInspection(error=BarcodeError.EMPTY)

    if not is_integer(code) or len(code) < BARCODE_PREFIX_LENGTH:
        logger.debug("Barcode %r rejected: invalid format", code)
        return BarcodeInspection(code=code, error=BarcodeError.INVALID_FORMAT)

    country = country_for_prefix(int(code[:BARCODE_PREFIX_LENGTH]))
    if country is None:
        logger.debug("Barcode %r rejected: unknown GS1 prefix", code)
        return BarcodeInspection(code=code, error=BarcodeError.UNKNOWN_PREFIX)

    expected = barcode_check_digit(code[:-1])
    if expected != int(code[-1]):
        logger.debug(
            "Barcode %r rejected: check digit %s, expected %d",
            code,
            code[-1],
            expected,
        )
        return BarcodeInspection(
            code=code,
            country=country,
            check_digit=expected,
            error=BarcodeError.CHECKSUM_MISMATCH,
        )

    return BarcodeInspection(
        code=code, valid=True, country=country, check_digit=expected
    )


def is_valid_barcode(code: Optional[str]) -> bool:
    """``True`` when *code* has an assigned GS1 prefix and a matching check digit."""
    return inspect_barcode(code).valid
