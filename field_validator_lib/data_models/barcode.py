"""
Barcode inspection model.

:func:`~field_validator_lib.validators.barcode.inspect_barcode` returns a
:class:`BarcodeInspection` instead of a bare boolean so callers can tell the
user *why* a code was refused.
"""

from typing import Optional

from pydantic import BaseModel


class BarcodeError:
    EMPTY = "empty"
    INVALID_FORMAT = "invalid_format"
    UNKNOWN_PREFIX = "unknown_prefix"
    CHECKSUM_MISMATCH = "checksum_mismatch"


class BarcodeInspection(BaseModel):
    """
    Outcome of a barcode check.

    Attributes
    ----------
    code : str
        The inspected code, as given.
    valid : bool
        Whether the prefix is known and the check digit matches.
    country : str | None
        Issuer label of the GS1 prefix, when the prefix is assigned.
    check_digit : int | None
        The check digit the code should end with, when it could be computed.
    error : str | None
        One of the :class:`BarcodeError` values, ``None`` for a valid code.
    """

    code: str = ""
    valid: bool = False
    country: Optional[str] = None
    check_digit: Optional[int] = None
    error: Optional[str] = None
