"""Tests for corpus suppliers, Gutenberg clean-up and line sections."""

from pathlib import Path

import pytest

from textstats.etl.corpus import line_sections, load_csv_corpus, load_text_corpus, read_txt
from textstats.etl.normalizers import basic_clean, strip_gutenberg_headers
from textstats.nlp.frequency import count_terms
from textstats.nlp.tokenize import tokenize
from textstats.shared.errors import InvalidConfiguration

GUTENBERG = """The Project Gutenberg eBook of Emma
Release date: 1994
*** START OF THE PROJECT GUTENBERG EBOOK EMMA ***
CHAPTER I
Emma Woodhouse, handsome, clever, and rich
*** END OF THE PROJECT GUTENBERG EBOOK EMMA ***
License text here
"""


def test_strip_gutenberg_headers() -> None:
    assert strip_gutenberg_headers(GUTENBERG) == "CHAPTER I\nEmma Woodhouse, handsome, clever, and rich"


def test_strip_without_markers_returns_trimmed_text() -> None:
    assert strip_gutenberg_headers("  plain text \n") == "plain text"


def test_basic_clean() -> None:
    assert basic_clean("a\r\nb  \t c\r\n") == "a\nb c"
    assert basic_clean("one\ntwo\n\n\n\nthree", unwrap_lines=True) == "one two\n\nthree"


def test_load_text_corpus_directory(tmp_path: Path) -> None:
    (tmp_path / "sub").mkdir()
    (tmp_path / "b_emma.txt").write_text(GUTENBERG, encoding="utf-8")
    (tmp_path / "sub" / "a_notes.txt").write_text("some notes", encoding="utf-8")
    (tmp_path / "ignored.md").write_text("nope", encoding="utf-8")

    docs = load_text_corpus(tmp_path)
    assert [d for d, _ in docs] == ["b_emma", "a_notes"]
    assert docs[0][1].startswith("CHAPTER I")


def test_load_text_corpus_missing_path(tmp_path: Path) -> None:
    with pytest.raises(InvalidConfiguration):
        load_text_corpus(tmp_path / "nope")


def test_read_txt_falls_back_to_cp1252(tmp_path: Path) -> None:
    p = tmp_path / "old.txt"
    p.write_bytes("café — fin".encode("cp1252"))
    assert read_txt(p) == "café — fin"


def test_load_csv_corpus(tmp_path: Path) -> None:
    p = tmp_path / "reviews.csv"
    p.write_text("review_id,review\n1,A great film\n2,\n3,Dull\n", encoding="utf-8")

    docs = load_csv_corpus(p, "review_id", "review")
    assert docs == [("1", "A great film"), ("2", None), ("3", "Dull")]
    assert {t.document_id for t in tokenize(docs)} == {"1", "3"}

    with pytest.raises(InvalidConfiguration):
        load_csv_corpus(p, "id", "review")


def test_csv_row_without_id_is_dropped(tmp_path: Path) -> None:
    p = tmp_path / "reviews.csv"
    p.write_text("review_id,review\n1,great film\n,orphan review text\n007,dull\n", encoding="utf-8")

    docs = load_csv_corpus(p, "review_id", "review")
    assert docs == [("1", "great film"), (None, "orphan review text"), ("007", "dull")]

    terms = count_terms(tokenize(docs))
    assert {r.document_id for r in terms} == {"1", "007"}
    assert "orphan" not in {r.term for r in terms}


def test_read_txt_strips_utf8_bom(tmp_path: Path) -> None:
    p = tmp_path / "bom.txt"
    p.write_bytes(b"\xef\xbb\xbfCHAPTER I")
    assert read_txt(p) == "CHAPTER I"


def test_line_sections() -> None:
    text = "\n".join(f"line {i}" for i in range(5))
    sections = list(line_sections([("book", text), (None, "skip")], section_size=2))
    assert [key for key, _ in sections] == [("book", 0), ("book", 1), ("book", 2)]
    assert sections[2][1] == "line 4"


@pytest.mark.parametrize("size", [0, -3, 2.5, True])
def test_line_sections_bad_size(size) -> None:
    with pytest.raises(InvalidConfiguration):
        line_sections([("book", "x")], section_size=size)
