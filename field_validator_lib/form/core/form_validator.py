"""
FormValidator module
====================

Provides the :class:`FormValidator` class - a thin orchestration layer that
applies, field by field, a configurable list of
:class:`~field_validator_lib.form.core.rule_interface.FieldRuleI`
implementations to a submitted form.  The public API supports:

* Single value validation via :meth:`FormValidator.validate_field`.
* Whole form validation (a ``dict`` of field name to value) via
  :meth:`FormValidator.validate`.
"""

import logging
from typing import Any, Dict, List, Optional

from field_validator_lib.data_models.report import FieldResult, FormReport
from field_validator_lib.form.core.rule_interface import FieldRuleI
from field_validator_lib.form.rules.required_rule import RequiredRule
from field_validator_lib.validators.text import is_empty


class FormValidator:
    """
    Validates form payloads against a schema of field rules.

    The schema maps each field name to an ordered list of rules.  Every rule
    of a field is evaluated (no short-circuit) so the report lists all the
    reasons a value was refused.

    A field is *optional* unless its rules contain a
    :class:`~field_validator_lib.form.rules.required_rule.RequiredRule`; an
    empty optional field is accepted without running its rules.

    Attributes
    ----------
    schema : Dict[str, List[FieldRuleI]]
        Field name -> rules.
    """

    def __init__(
        self,
        schema: Dict[str, List[FieldRuleI]],
        logger: Optional[logging.Logger] = None,
    ):
        """
        Parameters
        ----------
        schema : Dict[str, List[FieldRuleI]]
            Rules per field name.
        logger : logging.Logger | None
            Logger for diagnostic output; a module logger is used when omitted.
        """
        self.schema = schema
        self.logger = logger or logging.getLogger(__name__)

    def validate_field(self, field: str, value: Any) -> FieldResult:
        """
        Run the rules declared for *field* against *value*.

        Parameters
        ----------
        field : str
            Name of a field present in :attr:`schema`.
        value : Any
            Field value; anything but ``None`` is converted with ``str()``.

        Returns
        -------
        FieldResult
            Result carrying the names of the rules that failed.

        Raises
        ------
        KeyError
            When *field* is not part of the schema.
        """
        rules = self.schema[field]
        text = None if value is None else str(value)

        required = any(isinstance(rule, RequiredRule) for rule in rules)
        if not required and is_empty(text):
            return FieldResult(field=field, value=text)

        failed = [rule.name for rule in rules if not rule.check(text)]
        if failed:
            self.logger.debug("Field %r rejected by %s", field, failed)
        return FieldResult(
            field=field, value=text, valid=not failed, failed_rules=failed
        )

    def validate(self, payload: Dict[str, Any]) -> FormReport:
        """
        Validate every schema field of *payload*.

        Keys of *payload* that are not in the schema are ignored; schema
        fields missing from *payload* are validated as ``None``.

        Parameters
        ----------
        payload : Dict[str, Any]
            The submitted form.

        Returns
        -------
        FormReport
            One :class:`FieldResult` per schema field, in schema order.
        """
        results = [
            self.validate_field(field, payload.get(field)) for field in self.schema
        ]
        report = FormReport(valid=all(r.valid for r in results), fields=results)
        if not report.valid:
            self.logger.debug(
                "Form rejected, invalid fields: %s", report.invalid_fields()
            )
        return report
