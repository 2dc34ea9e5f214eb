"""
Definition of the rule interface that every field rule must implement.
"""

from abc import ABC, abstractmethod
from typing import Optional


class FieldRuleI(ABC):
    """
    Abstract base class for all field rules.

    Sub-classes must implement the :meth:`check` method, which receives the
    value of a form field and tells whether the value is acceptable.  The
    ``name`` attribute identifies the rule in
    :class:`~field_validator_lib.data_models.report.FieldResult`.
    """

    name: Optional[str] = None

    @abstractmethod
    def check(self, value: Optional[str]) -> bool:
        """
        Validate *value*.

        Parameters
        ----------
        value: str | None
            The field value; ``None`` when the field is missing from the form.

        Returns
        -------
        bool
            ``True`` when the rule accepts the value.
        """
        raise NotImplementedError
