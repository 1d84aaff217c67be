"""Tests for the command-line runner."""

import json
import math
from pathlib import Path

import pandas as pd
import pytest

from textstats.nlp.analyze_corpus import analyze_corpus, main


@pytest.fixture
def corpus_dir(tmp_path: Path) -> Path:
    d = tmp_path / "corpus"
    d.mkdir()
    (d / "a.txt").write_text("the cat sat\nthe dog sat\nthe cat ran\n", encoding="utf-8")
    (d / "b.txt").write_text("a dog ran\n", encoding="utf-8")
    return d


def test_cli_writes_tables(corpus_dir: Path, tmp_path: Path) -> None:
    out = tmp_path / "out"
    meta = main([
        "--input", str(corpus_dir), "--outdir", str(out), "--topn", "5",
        "--section-size", "1", "--min-count", "1", "--keep-stopwords",
    ])

    assert meta["documents"] == 2
    assert meta["token_count"] == 12
    assert meta["tokens_per_document"] == {"a": 9, "b": 3}

    names = {p.name.split("_", 2)[-1] for p in out.iterdir()}
    assert names == {
        "wordfreq_top5.csv", "bigram_top5.csv", "trigram_top5.csv", "tfidf_top5.csv",
        "pair_counts_top5.csv", "correlations_top5.csv", "summary.json",
    }

    wordfreq = pd.read_csv(next(out.glob("*_wordfreq_top5.csv")))
    assert wordfreq.iloc[0].tolist() == ["the", 3]

    summary = json.loads(next(out.glob("*_summary.json")).read_text(encoding="utf-8"))
    assert summary["section_size"] == 1

    cors = pd.read_csv(next(out.glob("*_correlations_top5.csv")))
    assert list(cors.columns) == ["term_a", "term_b", "phi"]
    assert cors["phi"].between(-1, 1).all()


def test_cli_rejects_bad_section_size(corpus_dir: Path, tmp_path: Path) -> None:
    with pytest.raises(SystemExit):
        main(["--input", str(corpus_dir), "--outdir", str(tmp_path / "o"), "--section-size", "0", "--keep-stopwords"])


def test_cli_missing_input(tmp_path: Path) -> None:
    with pytest.raises(SystemExit):
        main(["--input", str(tmp_path / "missing"), "--keep-stopwords"])


def test_stopword_only_document_still_counts(tmp_path: Path) -> None:
    docs = [("d1", "cat dog"), ("d2", "cat"), ("d3", "the a the")]
    meta = analyze_corpus(
        docs, tmp_path, "t", ngram_ns=(2,), topn=10, section_size=1,
        min_count=1, stop_words=frozenset({"the", "a"}),
    )

    assert meta["documents"] == 3
    assert meta["tokens_before_stopwords"] == 6
    assert meta["tokens_per_document"] == {"d1": 2, "d2": 1, "d3": 0}
    assert sum(meta["tokens_per_document"].values()) == meta["token_count"] == 3

    tfidf = pd.read_csv(tmp_path / "t_tfidf_top10.csv").set_index(["document_id", "term"])
    assert tfidf.loc[("d1", "dog"), "idf"] == pytest.approx(math.log(3))
    assert tfidf.loc[("d2", "cat"), "idf"] == pytest.approx(math.log(3 / 2))
