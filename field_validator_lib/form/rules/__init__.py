"""
Package that contains concrete field rule implementations.
"""

from field_validator_lib.form.rules.base_rule import BaseRule
from field_validator_lib.form.rules.required_rule import RequiredRule
from field_validator_lib.form.rules.pattern_rules import (
    IntegerRule,
    RealRule,
    NumberRule,
    HexRule,
    AlphabeticRule,
)
from field_validator_lib.form.rules.email_rule import EmailRule
from field_validator_lib.form.rules.length_rule import MinLengthRule, MaxLengthRule
from field_validator_lib.form.rules.date_rule import DateRule
from field_validator_lib.form.rules.document_rules import CpfRule, CnpjRule
from field_validator_lib.form.rules.barcode_rule import BarcodeRule
