"""
    Client model — a buyer or tenant who may be interested in properties.
"""
from dataclasses import dataclass
from typing import FrozenSet

from ..types import Address, Email, Name, Phone, Tag
from .entity import Entity, EntityKind, require_all_non_null


@dataclass(frozen=True)
class Client(Entity):
    """A client record, identified by name."""
    name: Name
    phone: Phone
    email: Email
    address: Address
    tags: FrozenSet[Tag]

    KIND = EntityKind.CLIENT

    def __post_init__(self):
        require_all_non_null(
            name=self.name,
            phone=self.phone,
            email=self.email,
            address=self.address,
            tags=self.tags,
        )
        object.__setattr__(self, "tags", frozenset(self.tags))

    @property
    def tag_names(self) -> FrozenSet[str]:
        return frozenset(tag.value for tag in self.tags)

    def __str__(self) -> str:
        text = (
            f"{self.name}; Phone: {self.phone}; Email: {self.email}; "
            f"Address: {self.address}"
        )
        if self.tags:
            text += "; Tags: " + "".join(str(t) for t in sorted(self.tags, key=lambda t: t.value))
        return text
