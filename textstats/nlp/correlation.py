"""
Pairwise co-occurrence counts and phi correlations between terms.

Both work on "groups": the document id of each record by default, or any
key a `group_by` callable derives (typically a line section). Only term
presence per group matters, never how often a term occurs inside it.

Precondition for correlation: restrict the input to reasonably frequent
terms first (`filter_min_count`). A rare term's contingency table is
mostly zeros, and nothing here drops such terms for you.
"""
import math
from collections import Counter
from itertools import combinations

import numpy as np

from textstats.nlp.records import Contingency, Cooccurrence, Correlation
from textstats.shared.errors import DegenerateInput, InvalidConfiguration


def _document_key(record):
    return record.document_id


def group_terms(records, group_by=None):
    """Map each group key (first-appearance order) to the set of terms present in it."""
    key = group_by or _document_key
    groups = {}
    for r in records:
        groups.setdefault(key(r), set()).add(r.term)
    return groups


def filter_min_count(records, min_count):
    """
    Keep records whose term occurs at least `min_count` times in `records`.

    TermCount-like records contribute their `count`; tokens contribute 1 each.
    """
    if isinstance(min_count, bool) or not isinstance(min_count, int) or min_count < 1:
        raise InvalidConfiguration(f"min_count must be an integer >= 1, got {min_count!r}")
    records = list(records)
    totals = Counter()
    for r in records:
        # NamedTuples inherit tuple.count, so look at the declared fields
        totals[r.term] += r.count if "count" in getattr(r, "_fields", ()) else 1
    return [r for r in records if totals[r.term] >= min_count]


def pairwise_count(records, group_by=None, sort=False):
    """
    Count, for each unordered pair of distinct terms, the groups holding both.

    Pairs come out as Cooccurrence(term_a, term_b, joint_count) with
    term_a < term_b, ordered by pair, or by joint_count descending when
    `sort` is set.
    """
    joint = Counter()
    for terms in group_terms(records, group_by).values():
        for a, b in combinations(sorted(terms), 2):
            joint[(a, b)] += 1

    out = [Cooccurrence(a, b, c) for (a, b), c in sorted(joint.items())]
    if sort:
        out.sort(key=lambda r: -r.joint_count)
    return out


def contingency_table(groups, term_a, term_b) -> Contingency:
    """2x2 presence table of two terms over a {group: set(terms)} mapping."""
    n11 = n10 = n01 = n00 = 0
    for terms in groups.values():
        has_a, has_b = term_a in terms, term_b in terms
        if has_a and has_b:
            n11 += 1
        elif has_a:
            n10 += 1
        elif has_b:
            n01 += 1
        else:
            n00 += 1
    return Contingency(n11, n10, n01, n00)


def phi_coefficient(table: Contingency) -> float:
    """
    phi = (n11*n00 - n10*n01) / sqrt(n1. * n0. * n.1 * n.0)

    Raises DegenerateInput when a marginal is zero, i.e. one of the terms is
    present in all groups or in none.
    """
    n11, n10, n01, n00 = table
    den = (n11 + n10) * (n01 + n00) * (n11 + n01) * (n10 + n00)
    if den == 0:
        raise DegenerateInput(f"phi undefined for contingency table {tuple(table)}")
    phi = (n11 * n00 - n10 * n01) / math.sqrt(den)
    return max(-1.0, min(1.0, phi))


def pairwise_correlation(records, group_by=None, *, min_groups=2, strict=False, sort=False, limit=None):
    """
    Phi coefficient for every unordered pair of distinct terms in `records`.

    Args:
        records: tokens or term counts; see the module docstring for the
            minimum-frequency precondition.
        group_by: callable record -> group key; defaults to the document id.
        min_groups: fewer groups than this raises DegenerateInput.
        strict: raise DegenerateInput on a pair whose phi is undefined
            instead of reporting NaN for it.
        sort: order by phi descending (NaN last) instead of by pair.
        limit: keep only the first `limit` records of the sorted order (implies
            sort). Records are built for those pairs only.

    Returns Correlation(term_a, term_b, phi) records with term_a < term_b.

    Cost: the groups x terms presence matrix and the terms x terms product are
    dense, so memory grows with the square of the vocabulary. Filter to
    frequent terms first; `limit` bounds the records, not the matrix.
    """
    if limit is not None and (isinstance(limit, bool) or not isinstance(limit, int) or limit < 0):
        raise InvalidConfiguration(f"limit must be an integer >= 0, got {limit!r}")
    groups = group_terms(records, group_by)
    if len(groups) < min_groups:
        raise DegenerateInput(f"need at least {min_groups} groups for correlation, got {len(groups)}")

    terms = sorted(set().union(*groups.values()))
    if len(terms) < 2:
        return []
    col = {t: j for j, t in enumerate(terms)}

    # groups x terms presence matrix; n11 for every pair is one product away
    x = np.zeros((len(groups), len(terms)), dtype=np.float64)
    for i, present in enumerate(groups.values()):
        x[i, [col[t] for t in present]] = 1.0
    both = x.T @ x
    n1 = x.sum(axis=0)
    n0 = len(groups) - n1

    ia, ib = np.triu_indices(len(terms), k=1)
    n11 = both[ia, ib]
    n10 = n1[ia] - n11
    n01 = n1[ib] - n11
    n00 = len(groups) - n11 - n10 - n01
    den = n1[ia] * n0[ia] * n1[ib] * n0[ib]

    degenerate = den == 0
    if strict and degenerate.any():
        k = int(np.argmax(degenerate))
        raise DegenerateInput(
            f"phi undefined for ({terms[ia[k]]!r}, {terms[ib[k]]!r}): a term is present in every group or in none"
        )
    with np.errstate(divide="ignore", invalid="ignore"):
        phi = (n11 * n00 - n10 * n01) / np.sqrt(den)
    phi[degenerate] = np.nan
    phi = np.clip(phi, -1.0, 1.0)

    if limit is not None:
        # lexsort: last key is primary; NaN last, phi descending, then pair order
        nan = np.isnan(phi)
        order = np.lexsort((ib, ia, -np.where(nan, 0.0, phi), nan))[:limit]
        return [Correlation(terms[ia[k]], terms[ib[k]], float(phi[k])) for k in order]

    out = [Correlation(terms[a], terms[b], float(p)) for a, b, p in zip(ia, ib, phi)]
    if sort:
        out.sort(key=lambda r: (math.isnan(r.phi), -r.phi if not math.isnan(r.phi) else 0.0))
    return out


def correlation_of(records, term_a, term_b):
    """Look up phi for a pair in either order; None when the pair is absent."""
    a, b = sorted((term_a, term_b))
    for r in records:
        if r.term_a == a and r.term_b == b:
            return r.phi
    return None
