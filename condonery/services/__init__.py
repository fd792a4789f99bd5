"""
Services — entity predicates and portfolio serialization.
"""
from .base_service import EntityPredicate
from .search_service import NameContainsKeywordsPredicate, contains_word_ignore_case
from .filter_service import TagsMatchPredicate
from .serialization_service import PortfolioSerializer

__all__ = [
    'EntityPredicate',
    'NameContainsKeywordsPredicate',
    'contains_word_ignore_case',
    'TagsMatchPredicate',
    'PortfolioSerializer',
]
