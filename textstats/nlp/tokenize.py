# usage: (document_id, raw_text) pairs -> lazy stream of Token records (words, n-grams, sentences)
import nltk
from nltk.tokenize import RegexpTokenizer
from nltk.tokenize.punkt import PunktSentenceTokenizer
from nltk.util import ngrams as _ngrams

from textstats.nlp.records import Token
from textstats.shared.errors import InvalidConfiguration

MODES = ("words", "ngrams", "sentences")
DEFAULT_NGRAM_N = 2

# Word chars with internal apostrophes kept ("don't"); "_" counts as punctuation
# so Gutenberg-style _emphasis_ does not leak into terms.
_WORD_RE = r"[^\W_]+(?:['’][^\W_]+)*"
_WORDS = RegexpTokenizer(_WORD_RE)
_WORDS_AND_PUNCT = RegexpTokenizer(_WORD_RE + r"|[^\w\s]+|_+")
# Untrained Punkt parameters: no nltk data download needed
_SENTENCES = PunktSentenceTokenizer()


def english_stopwords() -> frozenset:
    """nltk's English stop-word list, fetched on first use if missing."""
    try:
        nltk.data.find("corpora/stopwords")
    except LookupError:
        nltk.download("stopwords", quiet=True)
    from nltk.corpus import stopwords
    return frozenset(stopwords.words("english"))


def _words(text, *, lowercase, strip_punct):
    tokenizer = _WORDS if strip_punct else _WORDS_AND_PUNCT
    words = tokenizer.tokenize(text)
    return [w.lower() for w in words] if lowercase else words


def _sentences(text, *, lowercase):
    out = []
    for s in _SENTENCES.tokenize(text):
        s = " ".join(s.split())
        if s:
            out.append(s.lower() if lowercase else s)
    return out


def tokenize(documents, mode="words", n=DEFAULT_NGRAM_N, *, lowercase=True, strip_punct=True):
    """
    Split documents into Token records.

    Args:
        documents: iterable of (document_id, raw_text) pairs.
        mode: "words", "ngrams" (overlapping, space-joined, size `n`) or "sentences".
        n: n-gram size, only read in "ngrams" mode.
        lowercase: case-fold terms.
        strip_punct: drop punctuation; False emits punctuation runs as tokens.
            Sentences always keep their punctuation.

    Returns a generator; parameters are checked before it is created so a bad
    configuration fails at call time. Records with a None id, or text that is
    not a non-blank string, are skipped.
    """
    if mode not in MODES:
        raise InvalidConfiguration(f"Unknown tokenizer mode {mode!r}; expected one of {', '.join(MODES)}")
    if mode == "ngrams" and (isinstance(n, bool) or not isinstance(n, int) or n < 1):
        raise InvalidConfiguration(f"n-gram size must be an integer >= 1, got {n!r}")

    def _gen():
        for doc_id, text in documents:
            if doc_id is None or not isinstance(text, str) or not text.strip():
                continue
            if mode == "sentences":
                terms = _sentences(text, lowercase=lowercase)
            else:
                terms = _words(text, lowercase=lowercase, strip_punct=strip_punct)
                if mode == "ngrams" and n > 1:
                    terms = [" ".join(g) for g in _ngrams(terms, n)]
            for pos, term in enumerate(terms):
                yield Token(doc_id, term, pos)

    return _gen()
