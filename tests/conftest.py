import pytest

from little_search.index_builder import build_index

NOISE_WORDS = {"is", "the"}

DOCUMENTS = {
    "doc1": "The Cat sat.",
    "doc2": "Cat cat dog!",
}


def memory_source(documents):
    """Token source that reads documents from a dict instead of disk."""
    return lambda document: documents[document].split()


@pytest.fixture
def sample_index():
    return build_index(
        ["doc1", "doc2"],
        NOISE_WORDS,
        token_source=memory_source(DOCUMENTS),
    )


@pytest.fixture
def corpus_dir(tmp_path):
    """Write a small corpus with a document list and noise word file."""
    (tmp_path / "noisewords.txt").write_text("is\nThe\na\n", encoding="utf-8")
    (tmp_path / "doc1.txt").write_text("The Cat sat.\n", encoding="utf-8")
    (tmp_path / "doc2.txt").write_text("Cat cat dog!\n", encoding="utf-8")
    (tmp_path / "page.html").write_text(
        "<html><head><title>Dog</title><script>var cat = 1;</script></head>"
        "<body><p>A dog, a dog? A dog!</p></body></html>",
        encoding="utf-8",
    )
    (tmp_path / "docs.txt").write_text("doc1.txt\ndoc2.txt\npage.html\n", encoding="utf-8")
    return tmp_path
