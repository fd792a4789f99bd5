# condonery/services/search_service.py
"""
    Name search — matches entities whose name contains any of the keywords.

    Extends ``EntityPredicate[Tuple[str, ...]]`` (Template Method + Genericity).
"""
from typing import Sequence, Tuple

from ..models.entity import Entity
from .base_service import EntityPredicate


def contains_word_ignore_case(sentence: str, word: str) -> bool:
    """
    True if ``word`` is one of the whitespace-separated words of
    ``sentence``, ignoring case.  A full-word match is required:
    ``"Villa"`` matches ``"Sunny Villa"`` but ``"Vil"`` does not.
    """
    target = word.strip().lower()
    if not target:
        raise ValueError("Word parameter cannot be empty")
    if len(target.split()) != 1:
        raise ValueError("Word parameter should be a single word")
    return target in (w.lower() for w in sentence.split())


class NameContainsKeywordsPredicate(EntityPredicate[Tuple[str, ...]]):
    """
    Keeps entities whose name contains at least one keyword as a word.

    Usage:
        predicate = NameContainsKeywordsPredicate(["villa", "loft"])
        matches = directory.view(predicate)
    """

    def __init__(self, keywords: Sequence[str]):
        super().__init__(tuple(keywords))

    # ── Template Method hooks ────────────────────────────────────

    def _validate_query(self, query: Tuple[str, ...]) -> None:
        if not query:
            raise ValueError("At least one keyword is required.")
        for keyword in query:
            if not keyword or not keyword.strip() or len(keyword.split()) != 1:
                raise ValueError(f"Invalid keyword: '{keyword}'.")

    def _matches(self, entity: Entity) -> bool:
        return any(contains_word_ignore_case(entity.name.value, k) for k in self._query)
