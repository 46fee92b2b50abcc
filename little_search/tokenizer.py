"""
Keyword extraction and input readers for the search engine index.
Turns raw words into keywords (lowercase, trailing punctuation stripped,
noise words dropped) and reads documents, document lists and noise word files.
Documents are split on whitespace; HTML documents are reduced to visible text first.
"""

import warnings
from pathlib import Path
from typing import Iterable, Iterator

from bs4 import BeautifulSoup, XMLParsedAsHTMLWarning, MarkupResemblesLocatorWarning
warnings.filterwarnings("ignore", category=XMLParsedAsHTMLWarning)
warnings.filterwarnings("ignore", category=MarkupResemblesLocatorWarning)

from nltk.tokenize import WhitespaceTokenizer

from .errors import DocumentListSourceNotFound, DocumentNotFound, NoiseWordSourceNotFound

_SPLITTER = WhitespaceTokenizer()

# Nominal punctuation set. Keyword extraction strips any trailing run of
# non-letters, not only these.
PUNCTUATION = ".,?:;!"

HTML_SUFFIXES = {".html", ".htm"}


def has_punctuation(word: str) -> bool:
    """Return True if any character of word is not a letter."""
    return any(not ch.isalpha() for ch in word)


def normalize_noise_words(noise_words: Iterable[str]) -> frozenset[str]:
    """Return noise words as a lowercase set, consuming noise_words once."""
    return frozenset(w.lower() for w in noise_words)


def strip_punctuation(word: str) -> str | None:
    """
    Lowercase word and strip its trailing non-letters, or return None.

    The word is split into a leading run of letters, the run of non-letters
    after it, and whatever follows. Only a single trailing block of non-letters
    is tolerated: "Word!!" -> "word", "word?!?!" -> "word", but "can't" and
    "x1y" are rejected, as are words with no leading letters.
    """
    if word is None:
        raise ValueError("word must not be None")
    word = word.lower()

    if not has_punctuation(word):
        candidate = word
    else:
        i = 0
        while i < len(word) and word[i].isalpha():
            i += 1
        j = i
        while j < len(word) and not word[j].isalpha():
            j += 1
        if word[j:]:
            return None
        candidate = word[:i]
    return candidate or None


def get_keyword(word: str, noise_words: Iterable[str] = frozenset()) -> str | None:
    """
    Return word as a keyword, or None if it is not one.
    Keywords are words that survive strip_punctuation and are not noise words
    (compared case-insensitively).
    """
    candidate = strip_punctuation(word)
    if candidate is None or candidate in normalize_noise_words(noise_words):
        return None
    return candidate


def tokenize(text: str) -> list[str]:
    """Split text into whitespace-delimited raw words."""
    if not text:
        return []
    return _SPLITTER.tokenize(text)


def extract_text_from_html(html_content: str) -> str:
    """
    Extract visible text from HTML content, stripping tags and scripts.
    """
    soup = BeautifulSoup(html_content, "lxml")
    for element in soup(["script", "style"]):
        element.decompose()
    return soup.get_text(separator=" ", strip=True)


def read_text_file(filepath: Path) -> str:
    """
    Read a text file, handling common encodings.
    latin-1 decodes any byte sequence, so it goes last.
    """
    path = Path(filepath)
    for encoding in ("utf-8", "cp1252"):
        try:
            return path.read_text(encoding=encoding)
        except UnicodeDecodeError:
            continue
    return path.read_text(encoding="latin-1")


def read_document_tokens(document: str | Path) -> Iterator[str]:
    """
    Yield the raw words of a document, in order.
    Raises DocumentNotFound if the document cannot be read.
    """
    path = Path(document)
    try:
        content = read_text_file(path)
    except OSError as e:
        raise DocumentNotFound(str(document)) from e
    if path.suffix.lower() in HTML_SUFFIXES:
        content = extract_text_from_html(content)
    yield from tokenize(content)


def read_document_list(docs_file: str | Path) -> list[str]:
    """Return the document names listed in docs_file, in file order."""
    path = Path(docs_file)
    try:
        content = read_text_file(path)
    except OSError as e:
        raise DocumentListSourceNotFound(path) from e
    return tokenize(content)


def load_noise_words(noise_words_file: str | Path) -> set[str]:
    """Return the lowercased noise words listed in noise_words_file."""
    path = Path(noise_words_file)
    try:
        content = read_text_file(path)
    except OSError as e:
        raise NoiseWordSourceNotFound(path) from e
    return {w.lower() for w in tokenize(content)}
