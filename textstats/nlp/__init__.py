# Core text statistics: tokenizing, counting, tf-idf, co-occurrence/correlation, lexicon joins.

from .records import Token, TermCount, TfIdf, Cooccurrence, Correlation, Contingency, to_frame
from .tokenize import tokenize, english_stopwords
from .frequency import (
    count_terms,
    document_totals,
    tokens_per_document,
    filter_stop_ngrams,
    document_term_matrix,
    tidy_matrix,
)
from .tfidf import bind_tf_idf, top_tf_idf
from .correlation import (
    group_terms,
    filter_min_count,
    pairwise_count,
    contingency_table,
    phi_coefficient,
    pairwise_correlation,
    correlation_of,
)
from .sentiment import lexicon_frame, join_lexicon, net_sentiment, load_opinion_lexicon, load_vader_lexicon

__all__ = [
    "Token",
    "TermCount",
    "TfIdf",
    "Cooccurrence",
    "Correlation",
    "Contingency",
    "to_frame",
    "tokenize",
    "english_stopwords",
    "count_terms",
    "document_totals",
    "tokens_per_document",
    "filter_stop_ngrams",
    "document_term_matrix",
    "tidy_matrix",
    "bind_tf_idf",
    "top_tf_idf",
    "group_terms",
    "filter_min_count",
    "pairwise_count",
    "contingency_table",
    "phi_coefficient",
    "pairwise_correlation",
    "correlation_of",
    "lexicon_frame",
    "join_lexicon",
    "net_sentiment",
    "load_opinion_lexicon",
    "load_vader_lexicon",
]

__version__ = "0.1.0"
