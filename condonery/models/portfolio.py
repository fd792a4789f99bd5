"""
    Portfolio — the property directory and the client directory together.

    This is the unit that is loaded at startup and written back to disk.
"""
from dataclasses import replace
from typing import Iterable, List, Tuple

from ..types import Name
from .client import Client
from .directory import Directory
from .entity import EntityKind
from .property import Property


class Portfolio:
    """Holds one ``Directory`` per entity kind."""

    def __init__(self, properties: Iterable[Property] = (), clients: Iterable[Client] = ()):
        self.properties: Directory[Property] = Directory(properties)
        self.clients: Directory[Client] = Directory(clients)

    def directory(self, kind: EntityKind) -> Directory:
        if kind is EntityKind.PROPERTY:
            return self.properties
        return self.clients

    def reset_data(self, other: "Portfolio") -> None:
        """Overwrite both directories with the contents of ``other``."""
        self.properties.set_all(other.properties.as_tuple())
        self.clients.set_all(other.clients.as_tuple())

    def copy(self) -> "Portfolio":
        # Entities are immutable, so copying the sequences is enough.
        return Portfolio(self.properties.as_tuple(), self.clients.as_tuple())

    def clear(self) -> None:
        self.properties.clear()
        self.clients.clear()

    def resolve_interested_clients(self, prop: Property) -> Tuple[Client, ...]:
        """Clients named by ``prop`` that still exist, in directory order."""
        return tuple(c for c in self.clients if c.name in prop.interested_clients)

    def missing_clients(self, names: Iterable[Name]) -> List[str]:
        """Those of ``names`` with no matching client, sorted."""
        return sorted(name.value for name in names if self.clients.get(name) is None)

    def rename_client_references(self, old: Name, new: Name) -> int:
        """Point every property interested in ``old`` at ``new``; returns the count."""
        renamed = 0
        for prop in self.properties.as_tuple():
            if old not in prop.interested_clients:
                continue
            updated = replace(prop, interested_clients=(prop.interested_clients - {old}) | {new})
            self.properties.replace(prop, updated)
            renamed += 1
        return renamed

    def __eq__(self, other) -> bool:
        if not isinstance(other, Portfolio):
            return False
        return self.properties == other.properties and self.clients == other.clients

    def __repr__(self) -> str:
        return f"Portfolio(properties={len(self.properties)}, clients={len(self.clients)})"
