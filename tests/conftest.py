# tests/conftest.py
"""
Shared test fixtures.
Stub portfolio: three clients and three properties.
Ocean Loft names two interested clients, Garden Condo names none.
"""
import pytest

from condonery.models import Client, Portfolio, Property
from condonery.types import Address, Email, Name, Phone, Tag
from condonery.workspace import Workspace


def _tags(*values):
    return frozenset(Tag(v) for v in values)


def _names(*values):
    return frozenset(Name(v) for v in values)


def build_client(name, phone="91234567", email="someone@example.com",
                 address="1 Test Street", tags=()):
    return Client(
        name=Name(name),
        phone=Phone(phone),
        email=Email(email),
        address=Address(address),
        tags=_tags(*tags),
    )


def build_property(name, address="1 Test Road", tags=(), interested=()):
    return Property(
        name=Name(name),
        address=Address(address),
        tags=_tags(*tags),
        interested_clients=_names(*interested),
    )


# ── Client definitions ───────────────────────────────────────────
_CLIENTS = [
    ("Alice Pauline", "94351253", "alice@example.com", "123, Jurong West Ave 6, #08-111", ("friends",)),
    ("Benson Meier",  "98765432", "johnd@example.com", "311, Clementi Ave 2, #02-25",     ("owesMoney", "friends")),
    ("Carl Kurz",     "95352563", "heinz@example.com", "wall street",                     ()),
]

# ── Property definitions ─────────────────────────────────────────
_PROPERTIES = [
    ("Sunny Villa",  "123 Orchard Rd",    ("luxury", "pool"), ("Alice Pauline",)),
    ("Ocean Loft",   "8 Marina Blvd",     ("luxury",),        ("Benson Meier", "Carl Kurz")),
    ("Garden Condo", "45 Bukit Timah Rd", ("family",),        ()),
]


@pytest.fixture
def make_client():
    """Factory for clients with sensible defaults."""
    return build_client


@pytest.fixture
def make_property():
    """Factory for properties with sensible defaults."""
    return build_property


@pytest.fixture
def typical_clients():
    return [build_client(n, p, e, a, t) for n, p, e, a, t in _CLIENTS]


@pytest.fixture
def typical_properties():
    return [build_property(n, a, t, ic) for n, a, t, ic in _PROPERTIES]


@pytest.fixture
def alice(typical_clients):
    return typical_clients[0]


@pytest.fixture
def sunny_villa(typical_properties):
    return typical_properties[0]


@pytest.fixture
def stub_portfolio(typical_properties, typical_clients):
    """Fresh portfolio for each test, safe to mutate."""
    return Portfolio(typical_properties, typical_clients)


@pytest.fixture
def workspace(stub_portfolio):
    return Workspace(stub_portfolio)


@pytest.fixture
def empty_workspace():
    return Workspace()
