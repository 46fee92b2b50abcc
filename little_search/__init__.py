"""Little search engine: keyword index and two-keyword top-5 search."""

from .occurrence import Occurrence, KeywordIndex
from .index_builder import build_index, build_index_from_files, insert_last_occurrence
from .tokenizer import get_keyword
from .search_cli import top_search
