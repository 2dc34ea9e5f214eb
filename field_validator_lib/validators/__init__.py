"""
Pure validation functions.

Every function here is stateless and safe to call concurrently.
"""

from field_validator_lib.validators.text import (
    is_empty,
    is_integer,
    is_real,
    is_number,
    is_hex,
    is_alphabetic,
    is_email,
    min_length,
    max_length,
)
from field_validator_lib.validators.dates import is_valid_date
from field_validator_lib.validators.documents import (
    modulo11_check_digit,
    is_valid_cpf,
    is_valid_cnpj,
    strip_mask,
    format_cpf,
    format_cnpj,
)
from field_validator_lib.validators.barcode import (
    barcode_check_digit,
    inspect_barcode,
    is_valid_barcode,
)
from field_validator_lib.validators.gs1_prefixes import country_for_prefix
