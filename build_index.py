"""
Build the keyword index and print analytics about it.

Usage:
    python build_index.py --docs data/docs.txt --noise data/noisewords.txt

The document list names one document file per line; the noise word file
lists one noise word per line. Both default to the data/ folder.

Output:
  - Analytics table printed to console
  - The most frequent keywords with their top-ranked documents
"""

import argparse
import sys

from little_search.errors import SearchEngineError
from little_search.search_cli import add_input_arguments, load_index


def main() -> None:
    parser = argparse.ArgumentParser(description="Build the keyword index and print analytics")
    add_input_arguments(parser)
    parser.add_argument(
        "--top",
        type=int,
        default=10,
        help="Number of most widespread keywords to list (default: 10)",
    )
    args = parser.parse_args()

    try:
        index = load_index(args)
    except SearchEngineError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    num_docs = len(index.indexed_documents)
    num_keywords = len(index)
    num_occurrences = sum(len(occs) for occs in index.keywords.values())

    print()
    print("| Metric                       | Value |")
    print("|------------------------------|-------|")
    print(f"| Number of indexed documents  | {num_docs} |")
    print(f"| Number of unique keywords    | {num_keywords} |")
    print(f"| Number of occurrences        | {num_occurrences} |")
    print(f"| Number of noise words        | {len(index.noise_words)} |")
    print()

    widespread = sorted(index.keywords.items(), key=lambda kv: (-len(kv[1]), kv[0]))
    for keyword, occurrences in widespread[: args.top]:
        print(f"{keyword}: {occurrences[:5]}")
    print()


if __name__ == "__main__":
    main()
