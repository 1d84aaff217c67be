"""Tests for term counting, totals and the document-term matrix."""

from textstats.nlp.frequency import (
    count_terms,
    document_term_matrix,
    document_totals,
    filter_stop_ngrams,
    tidy_matrix,
    tokens_per_document,
)
from textstats.nlp.records import TermCount
from textstats.nlp.tokenize import tokenize

DOCS = [
    ("emma", "Emma Woodhouse, handsome, clever, and rich, with a comfortable home"),
    ("persuasion", "Sir Walter Elliot, of Kellynch Hall, in Somersetshire, was a man who"),
    ("short", "rich rich rich"),
]


def test_totals_match_tokens_emitted() -> None:
    tokens = list(tokenize(DOCS))
    assert document_totals(count_terms(tokens)) == tokens_per_document(tokens)


def test_counts_are_unique_per_document_and_term() -> None:
    counts = count_terms(tokenize(DOCS))
    keys = [(r.document_id, r.term) for r in counts]
    assert len(keys) == len(set(keys))
    assert TermCount("short", "rich", 3) in counts
    assert all(r.count >= 1 for r in counts)


def test_first_appearance_order() -> None:
    counts = count_terms(tokenize([("d2", "b a b"), ("d1", "c")]))
    assert counts == [TermCount("d2", "b", 2), TermCount("d2", "a", 1), TermCount("d1", "c", 1)]


def test_stop_words_are_a_parameter() -> None:
    counts = count_terms(tokenize([("d", "the cat and the hat")]), stop_words={"the", "and"})
    assert counts == [TermCount("d", "cat", 1), TermCount("d", "hat", 1)]


def test_sort_breaks_ties_by_term() -> None:
    counts = count_terms(tokenize([("d", "b a b a c")]), sort=True)
    assert [(r.term, r.count) for r in counts] == [("a", 2), ("b", 2), ("c", 1)]


def test_group_by_derived_key() -> None:
    tokens = tokenize([("d", "x y x y x")])
    counts = count_terms(tokens, group_by=lambda t: t.position // 2)
    assert counts == [TermCount(0, "x", 1), TermCount(0, "y", 1),
                      TermCount(1, "x", 1), TermCount(1, "y", 1),
                      TermCount(2, "x", 1)]


def test_filter_stop_ngrams_checks_every_slot() -> None:
    grams = tokenize([("d", "the old man and the sea")], mode="ngrams", n=2)
    assert [t.term for t in filter_stop_ngrams(grams, {"the", "and"})] == ["old man"]


def test_document_term_matrix_roundtrip() -> None:
    counts = count_terms(tokenize([("b", "cat dog cat"), ("a", "dog")]))
    dtm = document_term_matrix(counts)
    assert list(dtm.index) == ["a", "b"]
    assert list(dtm.columns) == ["cat", "dog"]
    assert dtm.loc["a", "cat"] == 0
    assert dtm.loc["b", "cat"] == 2
    assert sorted(tidy_matrix(dtm)) == sorted(counts)


def test_empty_document_term_matrix() -> None:
    assert document_term_matrix([]).empty
