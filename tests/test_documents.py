import pytest

from field_validator_lib.exceptions import FieldValidatorError, InvalidDigitStringError
from field_validator_lib.validators.documents import (
    format_cnpj,
    format_cpf,
    is_valid_cnpj,
    is_valid_cpf,
    modulo11_check_digit,
    strip_mask,
    zero_fill,
)


class TestModulo11:
    def test_uncapped_weights_reproduce_cpf_digits(self):
        assert modulo11_check_digit("111444777") == "3"
        assert modulo11_check_digit("1114447773") == "5"

    def test_cap_nine_reproduces_cnpj_digits(self):
        assert modulo11_check_digit("112223330001", 9) == "8"
        assert modulo11_check_digit("1122233300018", 9) == "1"

    def test_remainders_zero_and_one_give_zero(self):
        # sum 0 -> 11 - 0 = 11 -> 0
        assert modulo11_check_digit("0000") == "0"
        # 012345678 with weights 10..2 sums to 156, 156 % 11 == 2 -> 9
        assert modulo11_check_digit("012345678") == "9"
        # 0123456789 with weights 11..2 sums to 210, 210 % 11 == 1 -> 10 -> 0
        assert modulo11_check_digit("0123456789") == "0"

    @pytest.mark.parametrize("digits", ["", "12a4", "12 34", "-123"])
    def test_rejects_non_digits(self, digits):
        with pytest.raises(InvalidDigitStringError):
            modulo11_check_digit(digits, 9)

    def test_error_is_a_value_error(self):
        with pytest.raises(ValueError):
            modulo11_check_digit("x")
        assert issubclass(InvalidDigitStringError, FieldValidatorError)


class TestCpf:
    def test_reference_cpf(self):
        assert is_valid_cpf("11144477735")

    def test_wrong_last_digit(self):
        assert not is_valid_cpf("11144477736")

    def test_wrong_first_check_digit(self):
        assert not is_valid_cpf("11144477725")

    def test_leading_zero_restored(self):
        assert is_valid_cpf("01234567890")
        assert is_valid_cpf("1234567890")

    @pytest.mark.parametrize("cpf", [None, "", "111444777350", "111.444.777-35", "1114447773x"])
    def test_malformed_input(self, cpf):
        assert is_valid_cpf(cpf) is False

    def test_repeated_digits_follow_the_arithmetic(self):
        assert is_valid_cpf("00000000000")

    def test_pure(self):
        assert [is_valid_cpf("11144477735") for _ in range(3)] == [True] * 3


class TestCnpj:
    def test_reference_cnpj(self):
        assert is_valid_cnpj("11222333000181")

    @pytest.mark.parametrize("cnpj", ["11222333000182", "11222333000191"])
    def test_altered_digits(self, cnpj):
        assert not is_valid_cnpj(cnpj)

    @pytest.mark.parametrize(
        "cnpj", [None, "", "112223330001810", "11.222.333/0001-81", "1122233300018a"]
    )
    def test_malformed_input(self, cnpj):
        assert is_valid_cnpj(cnpj) is False

    def test_masked_input_after_strip(self):
        assert is_valid_cnpj(strip_mask("11.222.333/0001-81"))


class TestHelpers:
    def test_zero_fill(self):
        assert zero_fill("123", 6) == "000123"
        assert zero_fill("1234567", 6) == "1234567"

    def test_strip_mask(self):
        assert strip_mask("111.444.777-35") == "11144477735"
        assert strip_mask(None) == ""

    def test_format_cpf(self):
        assert format_cpf("11144477735") == "111.444.777-35"
        assert format_cpf("111.444.777-35") == "111.444.777-35"
        assert format_cpf("123") == ""

    def test_format_cnpj(self):
        assert format_cnpj("11222333000181") == "11.222.333/0001-81"
        assert format_cnpj("") == ""
