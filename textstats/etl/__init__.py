"""
Corpus suppliers and text normalizers.
Everything here ends in (document_id, raw_text) pairs for textstats.nlp.
"""
from .normalizers import strip_gutenberg_headers, basic_clean
from .corpus import (
    DEFAULT_SECTION_SIZE,
    read_txt,
    load_text_corpus,
    load_csv_corpus,
    line_sections,
)

__all__ = [
    "strip_gutenberg_headers",
    "basic_clean",
    "DEFAULT_SECTION_SIZE",
    "read_txt",
    "load_text_corpus",
    "load_csv_corpus",
    "line_sections",
]

__version__ = "0.1.0"
