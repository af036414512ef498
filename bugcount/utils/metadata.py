# bugcount/utils/metadata.py

"""
Value types shared by the counter and the pattern registry.

  - PatternMetadata: category and abbreviation for one bug type
  - FilterCriteria: the category / abbreviation / priority predicate applied
    to each finding record
"""

from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, Optional

from bugcount.utils.settings import NORMAL_PRIORITY


@dataclass(frozen=True)
class PatternMetadata:
    type: str
    category: str
    abbreviation: str
    description: Optional[str] = None


@dataclass(frozen=True)
class FilterCriteria:
    categories: FrozenSet[str] = field(default_factory=frozenset)
    abbreviations: FrozenSet[str] = field(default_factory=frozenset)
    min_priority: int = NORMAL_PRIORITY

    @property
    def needs_metadata(self) -> bool:
        """True if a category or abbreviation restriction is active."""
        return bool(self.categories or self.abbreviations)

    def accepts_pattern(self, pattern: Optional[PatternMetadata]) -> bool:
        """
        Apply the category and abbreviation filters to `pattern`.

        An unresolved pattern passes only when neither filter is active.
        """
        if pattern is None:
            return not self.needs_metadata
        if self.categories and pattern.category not in self.categories:
            return False
        if self.abbreviations and pattern.abbreviation not in self.abbreviations:
            return False
        return True

    def accepts_priority(self, priority: int) -> bool:
        return priority <= self.min_priority


def split_names(value: str) -> Iterable[str]:
    """
    Split a comma-separated list, dropping empty tokens.

    >>> list(split_names("CORRECTNESS,,STYLE"))
    ['CORRECTNESS', 'STYLE']
    """
    return (token for token in value.split(",") if token)
