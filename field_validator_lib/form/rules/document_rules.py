"""
Rules for Brazilian taxpayer numbers (CPF and CNPJ).

Both rules optionally strip the usual punctuation before validating, so a
form may accept ``111.444.777-35`` as well as ``11144477735``.
"""

from typing import Callable, Optional

from field_validator_lib.core import constants
from field_validator_lib.form.rules.base_rule import BaseRule
from field_validator_lib.validators.documents import (
    is_valid_cpf,
    is_valid_cnpj,
    strip_mask as _strip_mask,
)


def _with_mask_stripping(
    validator: Callable[[Optional[str]], bool], strip_mask: bool
) -> Callable[[Optional[str]], bool]:
    if not strip_mask:
        return validator
    return lambda value: validator(_strip_mask(value))


class CpfRule(BaseRule):
    def __init__(self, strip_mask: Optional[bool] = None):
        self.strip_mask = (
            constants.STRIP_DOCUMENT_MASK if strip_mask is None else strip_mask
        )
        super().__init__(
            predicate=_with_mask_stripping(is_valid_cpf, self.strip_mask),
            name="cpf",
        )


class CnpjRule(BaseRule):
    def __init__(self, strip_mask: Optional[bool] = None):
        self.strip_mask = (
            constants.STRIP_DOCUMENT_MASK if strip_mask is None else strip_mask
        )
        super().__init__(
            predicate=_with_mask_stripping(is_valid_cnpj, self.strip_mask),
            name="cnpj",
        )
