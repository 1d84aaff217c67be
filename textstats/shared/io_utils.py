# usage: helpers for naming output tables
from pathlib import Path
import hashlib
import re


def safe_filename(name: str, maxlen: int = 120) -> str:
    """
    Turn a corpus label into something usable as an output file prefix.

    Anything outside word chars, dash and dot becomes "_", runs of "_" are
    squeezed and the result is trimmed to `maxlen`. Empty input gives
    "corpus".
    """
    s = re.sub(r"[^\w\-.]+", "_", name)
    s = re.sub(r"_+", "_", s).strip("._")
    return s[:maxlen] if s else "corpus"


def hash_stem(p: Path) -> str:
    """
    Stable tag for a corpus path: `<stem>_<6 hex chars of sha1(path)>`.

    Two corpora with the same folder name in different places get
    different tags, so their tables never overwrite each other.
    """
    stem = safe_filename(p.stem or p.name)
    h = hashlib.sha1(str(p).encode("utf-8")).hexdigest()[:6]
    return f"{stem}_{h}"
