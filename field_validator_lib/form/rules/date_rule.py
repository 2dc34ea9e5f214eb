"""
Rule that accepts dates written with a given mask.
"""

from typing import Optional

from field_validator_lib.core import constants
from field_validator_lib.form.rules.base_rule import BaseRule
from field_validator_lib.validators.dates import is_valid_date


class DateRule(BaseRule):
    """
    Accepts real calendar dates laid out as ``mask``.

    ``mask`` defaults to ``FIELD_VALIDATOR_DEFAULT_DATE_MASK``
    (``dd/MM/yyyy`` when unset).
    """

    def __init__(self, mask: Optional[str] = None):
        self.mask = mask or constants.DEFAULT_DATE_MASK
        super().__init__(
            predicate=lambda value: is_valid_date(value, self.mask),
            name=f"date:{self.mask}",
        )
