# usage: clean-up for literary texts (Gutenberg boilerplate, whitespace)
import re

# START/END marker variants seen in Project Gutenberg plain-text files
_START_RE = re.compile(
    r"^\*{3}\s*START\s+OF\s+(?:THE\s+|THIS\s+)?PROJECT\s+GUTENBERG\s+E-?BOOK"
    r"|^\*{3}\s*START\s+OF\s+.*E-?BOOK",
    re.IGNORECASE,
)
_END_RE = re.compile(
    r"^\*{3}\s*END\s+OF\s+(?:THE\s+|THIS\s+)?PROJECT\s+GUTENBERG\s+E-?BOOK"
    r"|^\*{3}\s*END\s+OF\s+.*E-?BOOK"
    r"|^End\s+of\s+(?:the\s+)?Project\s+Gutenberg'?s?",
    re.IGNORECASE,
)


def strip_gutenberg_headers(text: str) -> str:
    """
    Return the body between the Gutenberg START and END markers.

    The first START line and the last END line win. Without markers the
    text comes back with outer whitespace trimmed; an empty body also
    falls back to the whole text.
    """
    lines = text.splitlines()
    start, end = 0, len(lines)

    for i, ln in enumerate(lines):
        if _START_RE.search(ln.strip()):
            start = i + 1
            break
    for i in range(len(lines) - 1, start - 1, -1):
        if _END_RE.search(lines[i].strip()):
            end = i
            break

    if start == 0 and end == len(lines):
        return text.strip()
    body = "\n".join(lines[start:end]).strip()
    return body if body else text.strip()


def basic_clean(text: str, unwrap_lines: bool = False) -> str:
    """
    Normalize line endings and whitespace.

    - CR/CRLF become '\n'
    - runs of spaces/tabs become one space
    - with unwrap_lines=True, soft line breaks are joined into spaces and
      blank-line runs squeezed to one paragraph break; otherwise the line
      structure is left alone so line sections stay meaningful
    """
    text = re.sub(r"\r\n?", "\n", text)
    if unwrap_lines:
        text = re.sub(r"(?<!\n)\n(?!\n)", " ", text)
        text = re.sub(r"\n\s*\n+", "\n\n", text)
    text = re.sub(r"[ \t]+", " ", text)
    return text.strip()
