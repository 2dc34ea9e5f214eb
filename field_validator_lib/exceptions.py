"""
Custom exception hierarchy for the field-validator library.

All public exceptions inherit from :class:`FieldValidatorError`, allowing
callers to catch a single base class for any library failure while still being
able to differentiate specific error conditions when needed.

Validators never raise for malformed input - they return ``False``.  These
exceptions are raised only by the calculators (which cannot produce a digit
from garbage) and by programming errors detected at import time.
"""


class FieldValidatorError(Exception):
    """Base exception for all field-validator specific errors."""

    pass


class InvalidDigitStringError(FieldValidatorError, ValueError):
    """Raised when a check-digit calculator receives a non-digit string."""

    pass


class PrefixTableError(FieldValidatorError):
    """Raised when the GS1 prefix table contains overlapping ranges."""

    pass


class UnknownRuleError(FieldValidatorError):
    """Raised when a rule is requested by a name that is not registered."""

    pass
