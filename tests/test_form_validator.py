from typing import Optional

import pytest

from field_validator_lib.form.core.form_validator import FormValidator
from field_validator_lib.form.rules import (
    AlphabeticRule,
    BarcodeRule,
    CnpjRule,
    CpfRule,
    DateRule,
    EmailRule,
    HexRule,
    IntegerRule,
    MaxLengthRule,
    MinLengthRule,
    NumberRule,
    RealRule,
    RequiredRule,
)


@pytest.fixture
def validator():
    return FormValidator(
        {
            "name": [RequiredRule(), AlphabeticRule(), MaxLengthRule(40)],
            "cpf": [RequiredRule(), CpfRule(strip_mask=True)],
            "email": [EmailRule()],
            "birth_date": [RequiredRule(), DateRule("dd/MM/yyyy")],
            "age": [IntegerRule()],
        }
    )


def test_valid_form(validator):
    report = validator.validate(
        {
            "name": "Maria Souza",
            "cpf": "111.444.777-35",
            "email": "maria@example.com.br",
            "birth_date": "29/02/2000",
            "age": 24,
            "not_in_schema": "ignored",
        }
    )
    assert report.valid
    assert report.invalid_fields() == []
    assert [f.field for f in report.fields] == ["name", "cpf", "email", "birth_date", "age"]


def test_invalid_fields_are_listed(validator):
    report = validator.validate(
        {
            "name": "Maria Souza",
            "cpf": "111.444.777-36",
            "birth_date": "31/02/2000",
        }
    )
    assert not report.valid
    assert report.invalid_fields() == ["cpf", "birth_date"]


def test_missing_required_field_runs_every_rule(validator):
    result = validator.validate_field("cpf", None)
    assert not result.valid
    assert result.failed_rules == ["required", "cpf"]


def test_empty_optional_field_is_accepted(validator):
    assert validator.validate_field("email", "").valid
    assert validator.validate_field("email", None).valid


def test_non_string_values_are_converted(validator):
    result = validator.validate_field("age", 42)
    assert result.valid
    assert result.value == "42"


def test_all_failed_rules_reported(validator):
    result = validator.validate_field("name", "J0ao " * 10)
    assert result.failed_rules == ["alphabetic", "max_length:40"]


def test_unknown_field(validator):
    with pytest.raises(KeyError):
        validator.validate_field("phone", "123")


def test_rule_names():
    assert MinLengthRule(3).name == "min_length:3"
    assert MaxLengthRule(5).name == "max_length:5"
    assert DateRule("yyyy-MM-dd").name == "date:yyyy-MM-dd"
    assert DateRule().mask == "dd/MM/yyyy"


@pytest.mark.parametrize(
    "rule, accepted, refused",
    [
        (IntegerRule(), "123", "12.3"),
        (RealRule(), "12.3", "123"),
        (NumberRule(), "12.3", "12,3"),
        (HexRule(), "ff00", "fg"),
        (EmailRule(), "a@b.com", "a@b"),
        (MinLengthRule(2), "ab", "a"),
        (CnpjRule(), "11222333000181", "11222333000182"),
        (BarcodeRule(), "4006381333931", "4006381333932"),
    ],
)
def test_rules(rule, accepted, refused):
    assert rule.check(accepted)
    assert not rule.check(refused)


def test_document_rules_mask_handling():
    assert CpfRule(strip_mask=True).check("111.444.777-35")
    assert not CpfRule(strip_mask=False).check("111.444.777-35")
    assert CnpjRule(strip_mask=True).check("11.222.333/0001-81")
    assert not CpfRule(strip_mask=True).check(None)


def test_rule_interface_name_default():
    from field_validator_lib.form.core.rule_interface import FieldRuleI

    assert FieldRuleI.name is None
    assert FieldRuleI.__annotations__["name"] == Optional[str]
