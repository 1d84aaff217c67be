"""
textstats: tidy text statistics for literary corpora.

    from textstats import tokenize, count_terms, bind_tf_idf, pairwise_correlation

Subpackages:
    etl     corpus suppliers, Gutenberg clean-up, line sections
    nlp     tokenizer, counters, tf-idf, co-occurrence/phi, lexicon joins
    shared  error types and output naming
"""
from .shared.errors import TextStatsError, InvalidConfiguration, DegenerateInput
from .etl import load_text_corpus, load_csv_corpus, line_sections, DEFAULT_SECTION_SIZE
from .nlp import *  # noqa: F401,F403
from .nlp import __all__ as _nlp_all

__all__ = [
    "TextStatsError",
    "InvalidConfiguration",
    "DegenerateInput",
    "load_text_corpus",
    "load_csv_corpus",
    "line_sections",
    "DEFAULT_SECTION_SIZE",
    *_nlp_all,
]

__version__ = "0.1.0"
