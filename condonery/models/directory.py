"""
    Directory model — an ordered collection of entities with unique names.
"""
from typing import Callable, Generic, Iterable, Iterator, List, Optional, Tuple, TypeVar, Union

from ..exceptions import DuplicateEntityError, EntityNotFoundError
from ..types import Name
from .entity import Entity

T = TypeVar("T", bound=Entity)

Predicate = Callable[[T], bool]


def show_all(entity) -> bool:
    """Predicate that keeps every entity."""
    return True


class Directory(Generic[T]):
    """
    Ordered, mutable list of entities of one kind.

    Invariant: no two entries share an identity (``is_same_identity``).
    All mutation goes through ``add``, ``remove``, ``replace`` and
    ``set_all``, each of which re-checks the invariant.  Readers get
    tuples, never the backing list.
    """

    def __init__(self, entities: Iterable[T] = ()):
        self._entities: List[T] = []
        self.set_all(entities)

    # ── Queries ──────────────────────────────────────────────────

    def contains(self, entity: T) -> bool:
        """True if an entity with the same identity is present."""
        return any(existing.is_same_identity(entity) for existing in self._entities)

    def get(self, name: Union[Name, str]) -> Optional[T]:
        """Return the entity called ``name``, or ``None``."""
        key = name.value if isinstance(name, Name) else name
        for entity in self._entities:
            if entity.name.value == key:
                return entity
        return None

    def view(self, predicate: Predicate = show_all) -> Tuple[T, ...]:
        """
        Entities matching ``predicate``, in insertion order.

        Recomputed on every call, so it always reflects the current
        contents of the directory.
        """
        return tuple(entity for entity in self._entities if predicate(entity))

    def as_tuple(self) -> Tuple[T, ...]:
        return tuple(self._entities)

    # ── Mutation ─────────────────────────────────────────────────

    def add(self, entity: T) -> None:
        """Append ``entity``; fails if its name is already taken."""
        if self.contains(entity):
            raise DuplicateEntityError(f"'{entity.name}' already exists")
        self._entities.append(entity)

    def remove(self, target: Union[T, Name, str]) -> None:
        """Remove the entity identified by ``target`` (entity or name)."""
        index = self._index_of(target)
        if index is None:
            raise EntityNotFoundError(f"'{self._name_of(target)}' not found")
        del self._entities[index]

    def replace(self, target: Union[T, Name, str], edited: T) -> None:
        """
        Substitute ``target`` with ``edited`` at the same position.

        Raises:
            EntityNotFoundError:  ``target`` is absent.
            DuplicateEntityError: ``edited`` takes the name of a
                                  *different* entry.
        """
        index = self._index_of(target)
        if index is None:
            raise EntityNotFoundError(f"'{self._name_of(target)}' not found")

        current = self._entities[index]
        if not current.is_same_identity(edited) and self.contains(edited):
            raise DuplicateEntityError(f"'{edited.name}' already exists")
        self._entities[index] = edited

    def set_all(self, entities: Iterable[T]) -> None:
        """Replace the whole contents; the directory is untouched on failure."""
        incoming = list(entities)
        seen = set()
        for entity in incoming:
            if entity.name in seen:
                raise DuplicateEntityError(f"'{entity.name}' appears more than once")
            seen.add(entity.name)
        self._entities = incoming

    def clear(self) -> None:
        self._entities = []

    # ── Helpers ──────────────────────────────────────────────────

    def _index_of(self, target) -> Optional[int]:
        key = self._name_of(target)
        for i, entity in enumerate(self._entities):
            if entity.name.value == key:
                return i
        return None

    @staticmethod
    def _name_of(target) -> str:
        if isinstance(target, Entity):
            return target.name.value
        if isinstance(target, Name):
            return target.value
        return str(target)

    def __len__(self) -> int:
        return len(self._entities)

    def __iter__(self) -> Iterator[T]:
        return iter(tuple(self._entities))

    def __eq__(self, other) -> bool:
        if not isinstance(other, Directory):
            return False
        return self._entities == other._entities

    def __repr__(self) -> str:
        return f"Directory({len(self._entities)} entries)"
