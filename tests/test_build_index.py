import sys

import build_index
from little_search.occurrence import Occurrence


def test_occurrence_repr():
    assert repr(Occurrence("doc1.txt", 3)) == "(doc1.txt,3)"


def test_build_index_prints_analytics(monkeypatch, capsys, corpus_dir):
    monkeypatch.setattr(sys, "argv", [
        "build_index.py",
        "--docs", str(corpus_dir / "docs.txt"),
        "--noise", str(corpus_dir / "noisewords.txt"),
        "--base-dir", str(corpus_dir),
    ])
    build_index.main()
    out = capsys.readouterr().out
    assert "| Number of indexed documents  | 3 |" in out
    assert "| Number of noise words        | 3 |" in out
    assert "cat: [(doc2.txt,2), (doc1.txt,1)]" in out


def test_build_index_counts_documents_with_only_noise_words(monkeypatch, capsys, corpus_dir):
    (corpus_dir / "noise_only.txt").write_text("The is a.\n", encoding="utf-8")
    (corpus_dir / "docs.txt").write_text("doc1.txt\nnoise_only.txt\n", encoding="utf-8")
    monkeypatch.setattr(sys, "argv", [
        "build_index.py",
        "--docs", str(corpus_dir / "docs.txt"),
        "--noise", str(corpus_dir / "noisewords.txt"),
        "--base-dir", str(corpus_dir),
    ])
    build_index.main()
    assert "| Number of indexed documents  | 2 |" in capsys.readouterr().out
