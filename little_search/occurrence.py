"""
Occurrence and keyword index data structures.

An occurrence records how many times a keyword appears in one document.
The keyword index maps each keyword to its occurrences, kept in descending
order of frequency.
"""

from dataclasses import dataclass, field
from typing import Iterable, Iterator


@dataclass
class Occurrence:
    """
    A keyword's occurrence in a document.
    - document: document identifier (file name)
    - frequency: number of times the keyword appears in the document
    """

    document: str
    frequency: int = 1

    def __repr__(self) -> str:
        return f"({self.document},{self.frequency})"


@dataclass
class KeywordIndex:
    """
    Keyword index: map from keyword -> occurrences in descending frequency,
    plus the noise words that were excluded while building it and the
    documents processed, in order (including ones with no keywords).

    Each list is non-empty and ordered by non-increasing frequency; equal
    frequencies keep the order in which documents were merged.
    """

    keywords: dict[str, list[Occurrence]] = field(default_factory=dict)
    noise_words: set[str] = field(default_factory=set)
    indexed_documents: list[str] = field(default_factory=list)

    def add_noise_words(self, words: Iterable[str]) -> None:
        """Add noise words, stored lowercase."""
        self.noise_words.update(w.lower() for w in words)

    def get_occurrences(self, keyword: str) -> list[Occurrence] | None:
        """Return the ranked occurrences for a keyword, or None if not indexed."""
        return self.keywords.get(keyword)

    def documents(self) -> set[str]:
        """Return every document that contributed at least one keyword."""
        return {occ.document for occs in self.keywords.values() for occ in occs}

    def __iter__(self) -> Iterator[str]:
        return iter(self.keywords)

    def __len__(self) -> int:
        return len(self.keywords)

    def __contains__(self, keyword: str) -> bool:
        return keyword in self.keywords
