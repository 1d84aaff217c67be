# usage: corpus suppliers -> (document_id, raw_text) pairs, plus line sections
from pathlib import Path

import pandas as pd

from textstats.etl.normalizers import strip_gutenberg_headers, basic_clean
from textstats.shared.errors import InvalidConfiguration

# Lines per section for co-occurrence/correlation windows. Purely a tuning
# knob: nothing about the texts dictates it.
DEFAULT_SECTION_SIZE = 10


def read_txt(p: Path) -> str:
    """
    Decode a text file read once from disk.

    A UTF-8 BOM is honoured, then strict UTF-8 is tried, then cp1252 (old
    Gutenberg and Windows dumps). Bytes cp1252 leaves undefined fall back to
    latin-1, which maps every byte.
    """
    raw = p.read_bytes()
    if raw.startswith(b"\xef\xbb\xbf"):
        return raw[3:].decode("utf-8", "replace")
    for enc in ("utf-8", "cp1252"):
        try:
            return raw.decode(enc)
        except UnicodeDecodeError:
            pass
    return raw.decode("latin-1")


def load_text_corpus(path, *, strip_gutenberg=True, unwrap_lines=False):
    """
    Load a .txt file, or every .txt file under a directory, as a corpus.

    Files are visited in sorted path order and identified by their stem.
    Returns a list of (document_id, text) pairs.
    """
    p = Path(path)
    if p.is_dir():
        paths = sorted(p.rglob("*.txt"))
    elif p.is_file():
        paths = [p]
    else:
        raise InvalidConfiguration(f"No such corpus path: {p}")

    docs = []
    for fp in paths:
        text = read_txt(fp)
        if strip_gutenberg:
            text = strip_gutenberg_headers(text)
        docs.append((fp.stem, basic_clean(text, unwrap_lines=unwrap_lines)))
    return docs


def load_csv_corpus(path, id_column: str, text_column: str):
    """
    Load a CSV (one document per row, e.g. a movie-review dump) as a corpus.

    Rows with an empty id or text cell are passed through with None in that
    slot; the tokenizer drops them. Ids are kept as the strings in the file.
    """
    # object dtype keeps ids as written ("007" stays "007", no float upcast on blanks)
    df = pd.read_csv(path, dtype={id_column: object})
    missing = [c for c in (id_column, text_column) if c not in df.columns]
    if missing:
        raise InvalidConfiguration(f"CSV {path} lacks column(s): {', '.join(missing)}")

    docs = []
    for doc_id, text in zip(df[id_column], df[text_column]):
        docs.append((None if pd.isna(doc_id) else doc_id, None if pd.isna(text) else str(text)))
    return docs


def line_sections(documents, section_size: int = DEFAULT_SECTION_SIZE):
    """
    Re-key documents as windows of `section_size` consecutive lines.

    Yields ((document_id, section_index), text) so the section id can be
    fed to the tokenizer as a document id. Line numbering counts blank
    lines too.
    """
    if isinstance(section_size, bool) or not isinstance(section_size, int) or section_size < 1:
        raise InvalidConfiguration(f"section_size must be a positive integer, got {section_size!r}")

    def _gen():
        for doc_id, text in documents:
            if doc_id is None or not isinstance(text, str):
                continue
            lines = text.splitlines()
            for start in range(0, len(lines), section_size):
                chunk = "\n".join(lines[start:start + section_size])
                yield (doc_id, start // section_size), chunk

    return _gen()
