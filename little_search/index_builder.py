"""
Index builder: constructs the keyword index from a list of documents.
Counts keywords per document, then merges each document's counts into the
index, keeping every keyword's occurrences in descending order of frequency.
"""

import logging
from pathlib import Path
from typing import Callable, Iterable

from .errors import DocumentNotFound, MissingDocumentIdentifier
from .occurrence import KeywordIndex, Occurrence
from .tokenizer import (
    load_noise_words,
    normalize_noise_words,
    read_document_list,
    read_document_tokens,
    strip_punctuation,
)

logger = logging.getLogger(__name__)

TokenSource = Callable[[str], Iterable[str]]


def insert_last_occurrence(occurrences: list[Occurrence]) -> list[int]:
    """
    Move the last occurrence into place in a list ordered by descending frequency.

    occurrences[0..n-2] must already be in order. The insertion point is found
    by binary search over their frequencies. When a probe hits an equal
    frequency the search stops and the occurrence goes after the run of equal
    frequencies, so earlier documents keep their place.

    Returns the midpoints probed, in order ([] for a single-element list).
    """
    if not occurrences:
        raise ValueError("occurrences must not be empty")

    target = occurrences[-1].frequency
    frequencies = [occ.frequency for occ in occurrences[:-1]]
    midpoints: list[int] = []
    low, high = 0, len(frequencies) - 1

    while low <= high:
        mid = (low + high) // 2
        midpoints.append(mid)
        if frequencies[mid] < target:
            high = mid - 1
        elif frequencies[mid] > target:
            low = mid + 1
        else:
            low = mid + 1
            while low < len(frequencies) and frequencies[low] == target:
                low += 1
            break

    if low < len(frequencies):
        occurrences.insert(low, occurrences.pop())
    return midpoints


def count_keywords(
    document: str,
    tokens: Iterable[str],
    noise_words: Iterable[str] = frozenset(),
) -> dict[str, Occurrence]:
    """
    Count the keywords in one document's raw words.
    Noise words are compared case-insensitively.
    Returns keyword -> Occurrence(document, frequency).
    """
    if document is None:
        raise MissingDocumentIdentifier()
    noise_words = normalize_noise_words(noise_words)

    counts: dict[str, Occurrence] = {}
    for word in tokens:
        keyword = strip_punctuation(word)
        if keyword is None or keyword in noise_words:
            continue
        if keyword in counts:
            counts[keyword].frequency += 1
        else:
            counts[keyword] = Occurrence(document, 1)
    return counts


def load_keywords_from_document(
    document: str,
    noise_words: Iterable[str] = frozenset(),
    token_source: TokenSource = read_document_tokens,
) -> dict[str, Occurrence]:
    """
    Read a document through token_source and count its keywords.
    Raises MissingDocumentIdentifier for None, DocumentNotFound if it can't be read.
    """
    # checked before token_source is asked to open it
    if document is None:
        raise MissingDocumentIdentifier()
    return count_keywords(document, token_source(document), noise_words)


def merge_keywords(index: KeywordIndex, counts: dict[str, Occurrence]) -> None:
    """
    Merge one document's keyword counts into the index (in place).
    """
    for keyword, occurrence in counts.items():
        occurrences = index.keywords.get(keyword)
        if occurrences is None:
            index.keywords[keyword] = [occurrence]
        else:
            occurrences.append(occurrence)
            insert_last_occurrence(occurrences)


def build_index(
    documents: Iterable[str],
    noise_words: Iterable[str] = frozenset(),
    *,
    token_source: TokenSource = read_document_tokens,
    skip_missing: bool = False,
) -> KeywordIndex:
    """
    Build a keyword index from documents, processed in the given order.
    Documents earlier in the list win ties on equal frequency.

    If skip_missing is set, unreadable documents are logged and skipped;
    otherwise DocumentNotFound propagates and the build stops.
    Returns the index.
    """
    index = KeywordIndex()
    index.add_noise_words(noise_words)

    for document in documents:
        try:
            counts = load_keywords_from_document(document, index.noise_words, token_source)
        except DocumentNotFound as e:
            if not skip_missing:
                raise
            logger.warning("Skipping %s: %s", document, e)
            continue
        merge_keywords(index, counts)
        index.indexed_documents.append(document)
        logger.debug("Indexed %s (%d keywords)", document, len(counts))

    logger.debug("Index has %d keywords", len(index))
    return index


def build_index_from_files(
    docs_file: str | Path,
    noise_words_file: str | Path,
    *,
    base_dir: str | Path | None = None,
    skip_missing: bool = False,
) -> KeywordIndex:
    """
    Build a keyword index from a document list file and a noise word file.
    - docs_file: document names, whitespace separated (normally one per line)
    - noise_words_file: noise words, whitespace separated
    - base_dir: directory that relative document names are resolved against
    Raises NoiseWordSourceNotFound / DocumentListSourceNotFound for missing inputs.
    """
    noise_words = load_noise_words(noise_words_file)
    documents = read_document_list(docs_file)

    token_source: TokenSource = read_document_tokens
    if base_dir is not None:
        root = Path(base_dir)

        def _resolved(document: str) -> Iterable[str]:
            return read_document_tokens(root / document)

        token_source = _resolved

    return build_index(
        documents,
        noise_words,
        token_source=token_source,
        skip_missing=skip_missing,
    )
