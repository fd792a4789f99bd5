# tests/core_test/test_models.py
"""
Entity tests — Property, Client, EntityKind and the identity rules.
"""
import dataclasses

import pytest

from condonery.exceptions import NullArgumentError
from condonery.models import Client, EntityKind, Property
from condonery.types import Address, Name, Tag


# ── EntityKind ───────────────────────────────────────────────────

def test_entity_kind_from_flag():
    assert EntityKind("-p") is EntityKind.PROPERTY
    assert EntityKind("-c") is EntityKind.CLIENT


def test_entity_kind_labels():
    assert EntityKind.PROPERTY.label == "property"
    assert EntityKind.CLIENT.plural == "clients"
    assert EntityKind.PROPERTY.plural == "properties"


# ── Property ─────────────────────────────────────────────────────

def test_property_str(sunny_villa):
    assert str(sunny_villa) == (
        "Sunny Villa; Address: 123 Orchard Rd; Tags: [luxury][pool]; "
        "Interested Clients: Alice Pauline"
    )


def test_property_str_without_optional_fields(make_property):
    assert str(make_property("Garden Condo", "45 Bukit Timah Rd")) == \
        "Garden Condo; Address: 45 Bukit Timah Rd"


def test_property_converts_collections_to_frozensets():
    prop = Property(Name("Loft"), Address("1 Rd"), [Tag("a"), Tag("a")], [])
    assert prop.tags == frozenset({Tag("a")})
    assert isinstance(prop.interested_clients, frozenset)


def test_property_missing_field_raises():
    with pytest.raises(NullArgumentError) as exc:
        Property(Name("Loft"), None, frozenset(), frozenset())
    assert "address" in str(exc.value)


def test_null_argument_error_is_type_error():
    with pytest.raises(TypeError):
        Property(None, Address("1 Rd"), frozenset(), frozenset())


def test_property_is_immutable(sunny_villa):
    with pytest.raises(dataclasses.FrozenInstanceError):
        sunny_villa.name = Name("Other")


def test_property_tags_cannot_be_mutated(sunny_villa):
    with pytest.raises(AttributeError):
        sunny_villa.tags.add(Tag("new"))


def test_property_name_helpers(typical_properties):
    ocean_loft = typical_properties[1]
    assert ocean_loft.tag_names == {"luxury"}
    assert ocean_loft.interested_client_names == {"Benson Meier", "Carl Kurz"}


# ── Client ───────────────────────────────────────────────────────

def test_client_str(alice):
    assert str(alice) == (
        "Alice Pauline; Phone: 94351253; Email: alice@example.com; "
        "Address: 123, Jurong West Ave 6, #08-111; Tags: [friends]"
    )


def test_client_missing_field_raises(alice):
    with pytest.raises(NullArgumentError):
        Client(alice.name, None, alice.email, alice.address, alice.tags)


# ── Identity vs equality ─────────────────────────────────────────

def test_same_identity_only_needs_same_name(make_property):
    a = make_property("Sunny Villa", "1 Rd")
    b = make_property("Sunny Villa", "2 Rd", tags=("pool",))
    assert a.is_same_identity(b)
    assert a != b


def test_identity_is_case_sensitive(make_property):
    assert not make_property("Sunny Villa").is_same_identity(make_property("sunny villa"))


def test_property_and_client_never_share_identity(make_property, make_client):
    assert not make_property("Alice Pauline").is_same_identity(make_client("Alice Pauline"))


def test_equality_compares_every_field(make_client):
    assert make_client("Bob", phone="999") == make_client("Bob", phone="999")
    assert make_client("Bob", phone="999") != make_client("Bob", phone="998")


def test_identity_property(alice):
    assert alice.identity == Name("Alice Pauline")
