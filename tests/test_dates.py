import pytest

from field_validator_lib.validators.dates import is_valid_date, to_strptime_format


@pytest.mark.parametrize(
    "mask, expected",
    [
        ("dd/MM/yyyy", "%d/%m/%Y"),
        ("dd/MM/yy", "%d/%m/%y"),
        ("yyyy-MM-dd HH:mm:ss", "%Y-%m-%d %H:%M:%S"),
        ("%d.%m.%Y", "%d.%m.%Y"),
    ],
)
def test_mask_translation(mask, expected):
    assert to_strptime_format(mask) == expected


def test_leap_day():
    assert is_valid_date("29/02/2024", "dd/MM/yyyy")
    assert not is_valid_date("29/02/2023", "dd/MM/yyyy")


def test_no_rollover():
    assert not is_valid_date("31/04/2024", "dd/MM/yyyy")
    assert not is_valid_date("32/01/2024", "dd/MM/yyyy")


def test_other_layouts():
    assert is_valid_date("2024-02-29", "yyyy-MM-dd")
    assert is_valid_date("2024-02-29", "%Y-%m-%d")
    assert is_valid_date("2024-01-15 13:45:00", "yyyy-MM-dd HH:mm:ss")
    assert not is_valid_date("2024-01-15 25:00:00", "yyyy-MM-dd HH:mm:ss")


def test_layout_mismatch():
    assert not is_valid_date("2024-02-29", "dd/MM/yyyy")
    assert not is_valid_date("15/01/2024 extra", "dd/MM/yyyy")


@pytest.mark.parametrize("value, mask", [("", "dd/MM/yyyy"), (None, "dd/MM/yyyy"), ("15/01/2024", ""), ("15/01/2024", None)])
def test_empty_value_or_mask(value, mask):
    assert is_valid_date(value, mask) is False
