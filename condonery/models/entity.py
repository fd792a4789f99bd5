"""
    Entity base — identity semantics shared by properties and clients.
"""
from enum import Enum

from ..exceptions import NullArgumentError
from ..types import Name


class EntityKind(Enum):
    """The two kinds of entity kept in a portfolio, keyed by CLI flag."""
    PROPERTY = "-p"
    CLIENT = "-c"

    @property
    def label(self) -> str:
        return self.name.lower()

    @property
    def plural(self) -> str:
        return "properties" if self is EntityKind.PROPERTY else "clients"


def require_all_non_null(**fields) -> None:
    """Raise ``NullArgumentError`` naming the first field that is ``None``."""
    for field_name, value in fields.items():
        if value is None:
            raise NullArgumentError(f"Missing required field: {field_name}")


class Entity:
    """
    Mixin for entities identified by their ``name``.

    ``is_same_identity`` is the weak notion of equality used for the
    uniqueness constraint; ``==`` (supplied by the dataclass) compares
    every field.
    """

    name: Name
    KIND: EntityKind

    @property
    def identity(self) -> Name:
        return self.name

    def is_same_identity(self, other) -> bool:
        if other is self:
            return True
        return isinstance(other, type(self)) and other.name == self.name
