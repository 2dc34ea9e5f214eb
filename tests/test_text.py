import pytest

from field_validator_lib.validators.text import (
    is_alphabetic,
    is_email,
    is_empty,
    is_hex,
    is_integer,
    is_number,
    is_real,
    max_length,
    min_length,
)


def test_is_empty():
    assert is_empty(None)
    assert is_empty("")
    assert not is_empty(" ")


@pytest.mark.parametrize(
    "predicate",
    [is_integer, is_real, is_number, is_hex, is_alphabetic, is_email],
)
@pytest.mark.parametrize("value", [None, ""])
def test_predicates_reject_empty(predicate, value):
    assert predicate(value) is False


def test_is_integer():
    assert is_integer("0042")
    assert not is_integer("4.2")
    assert not is_integer("-4")
    assert not is_integer("42\n")


def test_is_real():
    assert is_real("3.14")
    assert is_real(".5")
    assert is_real("7.")
    assert not is_real("3")
    assert not is_real("1.2.3")


def test_is_number():
    assert is_number("3")
    assert is_number("3.5")
    assert not is_number("3,5")


def test_is_hex():
    assert is_hex("DeadBeef09")
    assert not is_hex("0xff")


def test_is_alphabetic():
    assert is_alphabetic("Joao da Silva")
    assert is_alphabetic("tab\tand\nnewline")
    assert not is_alphabetic("João")
    assert not is_alphabetic("abc1")
    assert not is_alphabetic("non\u00a0breaking")


@pytest.mark.parametrize(
    "email",
    ["jane.doe@example.com.br", "a+b@sub.example.org", "x_y@a-b.co"],
)
def test_valid_emails(email):
    assert is_email(email)


@pytest.mark.parametrize(
    "email",
    ["Jane@example.com", "jane@", "jane@localhost", "@example.com", "jane@-a.com", "ja ne@a.com"],
)
def test_invalid_emails(email):
    assert not is_email(email)


def test_length_boundaries():
    assert max_length("abc", 3)
    assert not max_length("abcd", 3)
    assert not max_length("", 3)
    assert min_length("abc", 3)
    assert not min_length("ab", 3)
    assert not min_length("", 0)
