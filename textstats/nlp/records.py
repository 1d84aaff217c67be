# Record types flowing through the pipeline: tokens -> counts -> tf-idf / pairs
from typing import Hashable, NamedTuple

import pandas as pd


class Token(NamedTuple):
    document_id: Hashable
    term: str
    position: int


class TermCount(NamedTuple):
    document_id: Hashable
    term: str
    count: int


class TfIdf(NamedTuple):
    document_id: Hashable
    term: str
    count: int
    tf: float
    idf: float
    tf_idf: float


class Cooccurrence(NamedTuple):
    term_a: str
    term_b: str
    joint_count: int


class Correlation(NamedTuple):
    term_a: str
    term_b: str
    phi: float


class Contingency(NamedTuple):
    """2x2 presence table over groups: n11 both, n10 only a, n01 only b, n00 neither."""
    n11: int
    n10: int
    n01: int
    n00: int


def to_frame(records, record_type=None) -> pd.DataFrame:
    """
    Turn a sequence of records into a DataFrame with one column per field.

    `record_type` supplies the columns when `records` may be empty.
    """
    records = list(records)
    if records:
        return pd.DataFrame(records, columns=list(records[0]._fields))
    columns = list(record_type._fields) if record_type is not None else []
    return pd.DataFrame(columns=columns)
