# tests/core_test/test_types.py
import dataclasses
import re

import pytest

from condonery.exceptions import ValidationError
from condonery.types import Address, Email, Name, Phone, Tag


# ── Name ─────────────────────────────────────────────────────────

@pytest.mark.parametrize("raw", ["peter jack", "12345", "peter the 2nd", "Capital Tan",
                                 "David Roger Jackson Ray Jr 2nd"])
def test_name_valid(raw):
    assert Name(raw).value == raw


@pytest.mark.parametrize("raw", ["", " ", "^", "peter*", " leading space"])
def test_name_invalid(raw):
    with pytest.raises(ValidationError) as exc:
        Name(raw)
    assert str(exc.value) == Name.MESSAGE_CONSTRAINTS


def test_name_rejects_non_string():
    assert not Name.is_valid(None)
    with pytest.raises(ValidationError):
        Name(None)


def test_validation_error_is_value_error():
    """Callers that only know about ValueError still catch it."""
    with pytest.raises(ValueError):
        Name("")


# ── Address ──────────────────────────────────────────────────────

@pytest.mark.parametrize("raw", ["Blk 456, Den Road, #01-355", "-", "home/office 7"])
def test_address_valid(raw):
    assert str(Address(raw)) == raw


@pytest.mark.parametrize("raw", ["", " ", "\tBlk 4"])
def test_address_invalid(raw):
    with pytest.raises(ValidationError):
        Address(raw)


# ── Tag ──────────────────────────────────────────────────────────

def test_tag_valid_and_str_is_bracketed():
    assert str(Tag("pool")) == "[pool]"
    assert Tag("pool").value == "pool"


@pytest.mark.parametrize("raw", ["", "sea view", "no_underscore", "#hot"])
def test_tag_invalid(raw):
    with pytest.raises(ValidationError):
        Tag(raw)


# ── Phone ────────────────────────────────────────────────────────

@pytest.mark.parametrize("raw", ["911", "93121534", "124293842033123"])
def test_phone_valid(raw):
    assert Phone(raw).value == raw


@pytest.mark.parametrize("raw", ["", "91", "phone", "9011p041", "9312 1534"])
def test_phone_invalid(raw):
    with pytest.raises(ValidationError):
        Phone(raw)


# ── Email ────────────────────────────────────────────────────────

@pytest.mark.parametrize("raw", [
    "peterjack@example.com",
    "PeterJack_1190@example.com",
    "a1+be.d@example1.com",
    "peter_jack@very-very-long-example.com",
    "a@bc",
    "e1@e1.co",
])
def test_email_valid(raw):
    assert Email(raw).value == raw


@pytest.mark.parametrize("raw", [
    "",
    "@example.com",
    "peterjackexample.com",
    "peterjack@",
    "-peterjack@example.com",
    "peterjack-@example.com",
    "peter..jack@example.com",
    "peterjack@-example.com",
    "peterjack@example.com.",
    "peterjack@example_com",
    "a@b",
    "peter jack@example.com",
])
def test_email_invalid(raw):
    with pytest.raises(ValidationError):
        Email(raw)


# ── Value semantics ──────────────────────────────────────────────

def test_equality_is_structural_and_case_sensitive():
    assert Name("Alice") == Name("Alice")
    assert Name("Alice") != Name("alice")
    assert hash(Tag("pool")) == hash(Tag("pool"))


def test_values_of_different_types_never_equal():
    assert Name("pool") != Tag("pool")


def test_values_are_immutable():
    name = Name("Alice")
    with pytest.raises(dataclasses.FrozenInstanceError):
        name.value = "Bob"


@pytest.mark.parametrize("value_type", [Name, Address, Tag, Phone, Email])
def test_patterns_are_compiled_class_constants(value_type):
    assert isinstance(value_type.PATTERN, re.Pattern)
    assert "PATTERN" not in {f.name for f in dataclasses.fields(value_type)}
