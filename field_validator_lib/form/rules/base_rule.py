"""
Generic rule wrapping a single-argument predicate.
"""

from typing import Callable, Optional

from field_validator_lib.form.core.rule_interface import FieldRuleI


class BaseRule(FieldRuleI):
    """
    Adapts any ``predicate(value) -> bool`` to :class:`FieldRuleI`.

    Concrete rules usually only call ``super().__init__`` with the validator
    function and a name.
    """

    def __init__(self, predicate: Callable[[Optional[str]], bool], name: str):
        self._predicate = predicate
        self.name = name

    def check(self, value: Optional[str]) -> bool:
        return bool(self._predicate(value))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"
