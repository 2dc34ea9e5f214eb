from field_validator_lib.validators import (
    is_empty,
    is_integer,
    is_real,
    is_number,
    is_hex,
    is_alphabetic,
    is_email,
    min_length,
    max_length,
    is_valid_date,
    modulo11_check_digit,
    is_valid_cpf,
    is_valid_cnpj,
    strip_mask,
    format_cpf,
    format_cnpj,
    barcode_check_digit,
    inspect_barcode,
    is_valid_barcode,
    country_for_prefix,
)
from field_validator_lib.utils.hashing import hash_md5
from field_validator_lib.form.core.form_validator import FormValidator
from field_validator_lib.exceptions import (
    FieldValidatorError,
    InvalidDigitStringError,
    PrefixTableError,
    UnknownRuleError,
)

__all__ = [
    "is_empty",
    "is_integer",
    "is_real",
    "is_number",
    "is_hex",
    "is_alphabetic",
    "is_email",
    "min_length",
    "max_length",
    "is_valid_date",
    "modulo11_check_digit",
    "is_valid_cpf",
    "is_valid_cnpj",
    "strip_mask",
    "format_cpf",
    "format_cnpj",
    "barcode_check_digit",
    "inspect_barcode",
    "is_valid_barcode",
    "country_for_prefix",
    "hash_md5",
    "FormValidator",
    "FieldValidatorError",
    "InvalidDigitStringError",
    "PrefixTableError",
    "UnknownRuleError",
]
