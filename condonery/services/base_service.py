"""
    Generic base for entity predicates.

    Design Pattern: Template Method
    ─────────────────────────────────
    A predicate is built from a query (validate → store) and then applied
    to entities one at a time.  Concrete subclasses decide how the query is
    validated and how a single entity is matched.

    Genericity:
    ─────────────────────────
    ``EntityPredicate[TQuery]`` declares the query type of each predicate,
    e.g. a list of keywords or a set of tags.
"""
from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from ..models.entity import Entity

TQuery = TypeVar('TQuery')


class EntityPredicate(ABC, Generic[TQuery]):
    """
    Callable filter over entities, usable with ``Directory.view``.

    Two predicates are equal when they are of the same type and were built
    from the same query, which lets commands be compared in tests.
    """

    def __init__(self, query: TQuery):
        self._validate_query(query)
        self._query = query

    @property
    def query(self) -> TQuery:
        return self._query

    def __call__(self, entity: Entity) -> bool:
        return self._matches(entity)

    @abstractmethod
    def _validate_query(self, query: TQuery) -> None:
        """Validate the query; raise ``ValueError`` on failure."""
        ...

    @abstractmethod
    def _matches(self, entity: Entity) -> bool:
        """Return True if ``entity`` satisfies the query."""
        ...

    def __eq__(self, other) -> bool:
        return type(other) is type(self) and other._query == self._query

    def __hash__(self) -> int:
        return hash((type(self), self._query))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._query!r})"
