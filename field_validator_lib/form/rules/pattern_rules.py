"""
Rules for the character-class predicates of :mod:`field_validator_lib.validators.text`.
"""

from field_validator_lib.form.rules.base_rule import BaseRule
from field_validator_lib.validators.text import (
    is_integer,
    is_real,
    is_number,
    is_hex,
    is_alphabetic,
)


class IntegerRule(BaseRule):
    def __init__(self):
        super().__init__(predicate=is_integer, name="integer")


class RealRule(BaseRule):
    def __init__(self):
        super().__init__(predicate=is_real, name="real")


class NumberRule(BaseRule):
    def __init__(self):
        super().__init__(predicate=is_number, name="number")


class HexRule(BaseRule):
    def __init__(self):
        super().__init__(predicate=is_hex, name="hex")


class AlphabeticRule(BaseRule):
    def __init__(self):
        super().__init__(predicate=is_alphabetic, name="alphabetic")
