"""
Rule that rejects missing or empty fields.
"""

from field_validator_lib.form.rules.base_rule import BaseRule
from field_validator_lib.validators.text import is_empty


class RequiredRule(BaseRule):
    """
    Marks a field as mandatory.

    Fields without this rule are optional: an empty value skips their other
    rules (see :class:`~field_validator_lib.form.core.form_validator.FormValidator`).
    """

    def __init__(self):
        super().__init__(predicate=lambda value: not is_empty(value), name="required")
