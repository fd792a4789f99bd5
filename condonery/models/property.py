"""
    Property model — a listing in the portfolio.
"""
from dataclasses import dataclass
from typing import FrozenSet

from ..types import Address, Name, Tag
from .entity import Entity, EntityKind, require_all_non_null


@dataclass(frozen=True)
class Property(Entity):
    """
    A property listing.  Immutable: editing builds a replacement.

    Identity field:
        name
    Data fields:
        address, tags, interested_clients

    ``interested_clients`` holds client *names*; the clients themselves
    are looked up in the client directory when needed, so deleting or
    renaming a client never mutates a property.
    """
    name: Name
    address: Address
    tags: FrozenSet[Tag]
    interested_clients: FrozenSet[Name]

    KIND = EntityKind.PROPERTY

    def __post_init__(self):
        require_all_non_null(
            name=self.name,
            address=self.address,
            tags=self.tags,
            interested_clients=self.interested_clients,
        )
        object.__setattr__(self, "tags", frozenset(self.tags))
        object.__setattr__(self, "interested_clients", frozenset(self.interested_clients))

    @property
    def tag_names(self) -> FrozenSet[str]:
        return frozenset(tag.value for tag in self.tags)

    @property
    def interested_client_names(self) -> FrozenSet[str]:
        return frozenset(name.value for name in self.interested_clients)

    def __str__(self) -> str:
        text = f"{self.name}; Address: {self.address}"
        if self.tags:
            text += "; Tags: " + "".join(str(t) for t in sorted(self.tags, key=lambda t: t.value))
        if self.interested_clients:
            text += "; Interested Clients: " + ", ".join(sorted(self.interested_client_names))
        return text
