# usage: token stream -> per-group term counts, document totals, document-term matrix
from collections import Counter

import pandas as pd

from textstats.nlp.records import TermCount


def _document_key(token):
    return token.document_id


def count_terms(tokens, stop_words=None, group_by=None, sort=False):
    """
    Count terms per group.

    Args:
        tokens: iterable of Token records (or anything with .document_id/.term).
        stop_words: optional set of terms to drop before counting.
        group_by: callable token -> group key; defaults to the document id.
            Sections (line windows etc.) are derived by the caller.
        sort: order by count descending, ties by term, then group order.

    Returns a list of TermCount with the group key in `document_id`.
    Unsorted output lists groups, and terms within a group, in first-appearance order.
    """
    key = group_by or _document_key
    stop = stop_words or ()
    counts = {}
    for tok in tokens:
        if tok.term in stop:
            continue
        counts.setdefault(key(tok), Counter())[tok.term] += 1

    out = [TermCount(doc, term, c) for doc, counter in counts.items() for term, c in counter.items()]
    if sort:
        # stable: equal (count, term) keep group first-appearance order
        out.sort(key=lambda r: (-r.count, r.term))
    return out


def document_totals(counts):
    """Sum of counts per document id, in first-appearance order."""
    totals = {}
    for r in counts:
        totals[r.document_id] = totals.get(r.document_id, 0) + r.count
    return totals


def filter_stop_ngrams(tokens, stop_words):
    """Lazily drop n-gram tokens with a stop word in any slot."""
    stop = stop_words or ()
    return (t for t in tokens if not any(w in stop for w in t.term.split(" ")))


def document_term_matrix(counts) -> pd.DataFrame:
    """
    Cast term counts into a documents x terms count matrix.

    Rows and columns are sorted by label (as strings, so mixed id types
    still order), missing cells are 0. This is the shape topic-model
    libraries take as input.
    """
    counts = list(counts)
    if not counts:
        return pd.DataFrame(dtype="int64")
    df = pd.DataFrame(counts, columns=list(TermCount._fields))
    dtm = df.pivot_table(index="document_id", columns="term", values="count",
                         aggfunc="sum", fill_value=0)
    dtm = dtm.reindex(index=sorted(dtm.index, key=str), columns=sorted(dtm.columns))
    dtm.index.name, dtm.columns.name = "document_id", "term"
    return dtm.astype("int64")


def tidy_matrix(dtm: pd.DataFrame):
    """Back from a document-term matrix to TermCount records, zero cells dropped."""
    out = []
    for doc_id, row in dtm.iterrows():
        for term, c in row.items():
            if c:
                out.append(TermCount(doc_id, term, int(c)))
    return out


def tokens_per_document(tokens):
    """Number of tokens per document id; the counterpart of document_totals."""
    return dict(Counter(t.document_id for t in tokens))
