"""
Rule that accepts e-mail addresses.
"""

from field_validator_lib.form.rules.base_rule import BaseRule
from field_validator_lib.validators.text import is_email


class EmailRule(BaseRule):
    """
    Accepts lowercase e-mail addresses such as ``jane.doe@example.com.br``.
    """

    def __init__(self):
        super().__init__(predicate=is_email, name="email")
