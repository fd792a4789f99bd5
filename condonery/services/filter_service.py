# condonery/services/filter_service.py
"""
    Tag filter — keeps entities that carry every requested tag.

    Extends ``EntityPredicate[FrozenSet[Tag]]`` (Template Method + Genericity).
"""
from typing import FrozenSet, Iterable

from ..models.entity import Entity
from ..types import Tag
from .base_service import EntityPredicate


class TagsMatchPredicate(EntityPredicate[FrozenSet[Tag]]):
    """
    Matches an entity when the requested tags are a subset of its tags.
    Tag comparison is exact (case-sensitive), like ``Tag`` equality.
    """

    def __init__(self, tags: Iterable[Tag]):
        super().__init__(frozenset(tags))

    def _validate_query(self, query: FrozenSet[Tag]) -> None:
        if not query:
            raise ValueError("At least one tag is required.")

    def _matches(self, entity: Entity) -> bool:
        return self._query <= entity.tags
