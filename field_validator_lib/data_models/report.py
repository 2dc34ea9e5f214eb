"""
Result models produced by the form validator
(:class:`~field_validator_lib.form.core.form_validator.FormValidator`).
"""

from typing import List, Optional

from pydantic import BaseModel, Field


class FieldResult(BaseModel):
    """
    Validation result of a single form field.

    Attributes
    ----------
    field : str
        Field name, as declared in the form schema.
    value : str | None
        The value that was checked (after ``str()`` conversion).
    valid : bool
        ``True`` when every rule accepted the value.
    failed_rules : List[str]
        Names of the rules that rejected the value, in declaration order.
    """

    field: str
    value: Optional[str] = None
    valid: bool = True
    failed_rules: List[str] = Field(default_factory=list)


class FormReport(BaseModel):
    """Aggregated result of a whole form."""

    valid: bool = True
    fields: List[FieldResult] = Field(default_factory=list)

    def invalid_fields(self) -> List[str]:
        return [f.field for f in self.fields if not f.valid]
