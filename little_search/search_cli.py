"""
Search component for the little search engine.

- Answers "kw1 or kw2" queries over the in-memory keyword index.
- Results are documents in descending order of keyword frequency, with ties
  going to the first keyword, no duplicates, and at most TOP_N entries.

Usage (from repo root):
    python -m little_search.search_cli \
        --docs data/docs.txt \
        --noise data/noisewords.txt
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Iterable, List, Optional

from .errors import SearchEngineError
from .index_builder import build_index_from_files
from .occurrence import KeywordIndex, Occurrence

TOP_N = 5


def _take(occurrences: List[Occurrence], limit: int) -> List[str]:
    return [occ.document for occ in occurrences[:limit]]


def merge_ranked(
    first: List[Occurrence],
    second: List[Occurrence],
    limit: int = TOP_N,
) -> List[str]:
    """
    Walk two ranked occurrence lists together, higher frequency first.

    Equal frequencies take first's document, then second's. A document already
    in the result is skipped but its cursor still advances. Once one list runs
    out, the rest of the other is consumed in order.
    """
    result: List[str] = []
    seen: set[str] = set()

    def add(document: str) -> None:
        if document not in seen:
            seen.add(document)
            result.append(document)

    i = j = 0
    while (i < len(first) or j < len(second)) and len(result) < limit:
        if i >= len(first):
            add(second[j].document)
            j += 1
            continue
        if j >= len(second):
            add(first[i].document)
            i += 1
            continue

        a, b = first[i], second[j]
        if a.frequency > b.frequency and a.document not in seen:
            add(a.document)
            i += 1
        elif a.frequency < b.frequency and b.document not in seen:
            add(b.document)
            j += 1
        else:
            add(a.document)
            i += 1
            if len(result) < limit:
                add(b.document)
                j += 1
    return result


def top_search(index: KeywordIndex, kw1: str, kw2: str, limit: int = TOP_N) -> List[str]:
    """
    Search for "kw1 or kw2". Returns up to limit documents, never more than
    TOP_N; [] if neither keyword is indexed.
    """
    limit = max(0, min(limit, TOP_N))
    first = index.get_occurrences(kw1.lower())
    second = index.get_occurrences(kw2.lower())

    if first is None and second is None:
        return []
    if first is None:
        return _take(second, limit)
    if second is None:
        return _take(first, limit)
    return merge_ranked(first, second, limit)


def parse_query(raw_query: str) -> Optional[tuple[str, str]]:
    """
    Parse "kw1 kw2" or "kw1 or kw2" into a keyword pair.
    A single word is searched on its own. Returns None if the line can't be used.
    """
    words = raw_query.split()
    if len(words) == 3 and words[1].lower() == "or":
        words = [words[0], words[2]]
    if len(words) == 1:
        return words[0], words[0]
    if len(words) == 2:
        return words[0], words[1]
    return None


def run_search_loop(index: KeywordIndex, top_k: int = TOP_N) -> None:
    """
    Interactive command-line search loop.
    """
    print(f"Indexed {len(index)} keywords from {len(index.indexed_documents)} documents.")
    print('Enter queries as "kw1 or kw2". Empty line or Ctrl+C to exit.')

    while True:
        try:
            raw_query = input("query> ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            break
        if not raw_query:
            break

        query = parse_query(raw_query)
        if query is None:
            print("Queries take one or two keywords.")
            continue

        documents = top_search(index, *query, limit=top_k)
        if not documents:
            print("No documents matched the query.")
            continue

        print(f"Top {len(documents)} results:")
        for rank, document in enumerate(documents, start=1):
            print(f"{rank:2d}. {document}")


def result_count(value: str) -> int:
    """argparse type for --top: an integer from 1 to TOP_N."""
    count = int(value)
    if not 1 <= count <= TOP_N:
        raise argparse.ArgumentTypeError(f"must be between 1 and {TOP_N}")
    return count


def add_input_arguments(parser: argparse.ArgumentParser) -> None:
    """Add the index input options shared by the command-line tools."""
    parser.add_argument(
        "--docs",
        type=Path,
        default=Path("data/docs.txt"),
        help="File listing the documents to index, one per line.",
    )
    parser.add_argument(
        "--noise",
        type=Path,
        default=Path("data/noisewords.txt"),
        help="File listing noise words, one per line.",
    )
    parser.add_argument(
        "--base-dir",
        type=Path,
        default=None,
        help="Directory that relative document names are resolved against.",
    )
    parser.add_argument(
        "--skip-missing",
        action="store_true",
        help="Skip documents that can't be read instead of stopping.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log each document as it is indexed.",
    )


def load_index(args: argparse.Namespace) -> KeywordIndex:
    """Configure logging and build the index described by parsed arguments."""
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return build_index_from_files(
        args.docs,
        args.noise,
        base_dir=args.base_dir,
        skip_missing=args.skip_missing,
    )


def main(argv: Iterable[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Little search engine query CLI.")
    add_input_arguments(parser)
    parser.add_argument(
        "--top",
        type=result_count,
        default=TOP_N,
        help=f"Number of top results to show (1-{TOP_N}).",
    )
    args = parser.parse_args(list(argv) if argv is not None else None)

    try:
        index = load_index(args)
    except SearchEngineError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    run_search_loop(index, top_k=args.top)


if __name__ == "__main__":
    main()
