"""
Rules bounding the number of characters of a field.
"""

from field_validator_lib.form.rules.base_rule import BaseRule
from field_validator_lib.validators.text import min_length, max_length


class MinLengthRule(BaseRule):
    """Accepts values with at least ``size`` characters."""

    def __init__(self, size: int):
        self.size = size
        super().__init__(
            predicate=lambda value: min_length(value, size),
            name=f"min_length:{size}",
        )


class MaxLengthRule(BaseRule):
    """Accepts non-empty values with at most ``size`` characters."""

    def __init__(self, size: int):
        self.size = size
        super().__init__(
            predicate=lambda value: max_length(value, size),
            name=f"max_length:{size}",
        )
