# usage: term counts -> tf, idf, tf-idf per (document, term)
import math

from textstats.nlp.frequency import document_totals
from textstats.nlp.records import TfIdf
from textstats.shared.errors import InvalidConfiguration


def bind_tf_idf(counts, totals=None):
    """
    Attach tf, idf and tf-idf to term counts.

    tf = count / document total, idf = ln(N / documents containing the term),
    where N is the number of documents in `totals` (computed from `counts`
    when not given). A term found in every document gets idf = tf_idf = 0.0.

    Raises InvalidConfiguration when a count's document has no positive total.
    Output keeps the input order.
    """
    counts = list(counts)
    if totals is None:
        totals = document_totals(counts)

    doc_freq = {}
    for r in counts:
        doc_freq.setdefault(r.term, set()).add(r.document_id)
    n_docs = len(totals)

    out = []
    for r in counts:
        total = totals.get(r.document_id)
        if not total or total <= 0:
            raise InvalidConfiguration(f"No positive total for document {r.document_id!r}")
        df = len(doc_freq[r.term])
        tf = r.count / total
        idf = 0.0 if df >= n_docs else math.log(n_docs / df)
        out.append(TfIdf(r.document_id, r.term, r.count, tf, idf, tf * idf))
    return out


def top_tf_idf(records, n=10):
    """Per document, the `n` highest tf-idf records (ties by term), documents in first-appearance order."""
    by_doc = {}
    for r in records:
        by_doc.setdefault(r.document_id, []).append(r)
    out = []
    for rows in by_doc.values():
        rows.sort(key=lambda r: (-r.tf_idf, r.term))
        out.extend(rows[:n])
    return out
