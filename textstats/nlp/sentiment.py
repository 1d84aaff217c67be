# usage: lexicon-based sentiment: normalize a lexicon, inner-join it on term, net scores per document
import numbers

import nltk
import pandas as pd

from textstats.nlp.records import to_frame
from textstats.shared.errors import InvalidConfiguration


def _ensure_nltk(pkg: str, locator: str):
    try:
        nltk.data.find(locator)
    except LookupError:
        nltk.download(pkg, quiet=True)


def load_opinion_lexicon() -> dict:
    """Hu & Liu opinion lexicon from nltk: term -> "positive" / "negative"."""
    _ensure_nltk("opinion_lexicon", "corpora/opinion_lexicon")
    from nltk.corpus import opinion_lexicon
    lex = {w: "negative" for w in opinion_lexicon.negative()}
    lex.update({w: "positive" for w in opinion_lexicon.positive()})
    return lex


def load_vader_lexicon() -> dict:
    """VADER valence scores from nltk: term -> signed float."""
    _ensure_nltk("vader_lexicon", "sentiment/vader_lexicon.zip")
    from nltk.sentiment import SentimentIntensityAnalyzer
    return dict(SentimentIntensityAnalyzer().lexicon)


def lexicon_frame(lexicon) -> pd.DataFrame:
    """
    Normalize a lexicon mapping into a table.

    - categorical ({term: "positive"}) -> columns term, sentiment
    - multi-label ({term: {"joy", "trust"}}) -> term, sentiment; one row per label
    - numeric scale ({term: -3}) -> term, value

    Mixed shapes raise InvalidConfiguration.
    """
    items = sorted(lexicon.items())
    if not items:
        return pd.DataFrame(columns=["term", "sentiment"])

    if all(isinstance(v, str) for _, v in items):
        return pd.DataFrame(items, columns=["term", "sentiment"])
    if all(isinstance(v, (set, frozenset, list, tuple)) for _, v in items):
        rows = [(t, lab) for t, labels in items for lab in sorted(labels)]
        return pd.DataFrame(rows, columns=["term", "sentiment"])
    if all(isinstance(v, numbers.Real) and not isinstance(v, bool) for _, v in items):
        return pd.DataFrame(items, columns=["term", "value"])
    raise InvalidConfiguration("lexicon values must be all labels, all label sets, or all numbers")


def join_lexicon(records, lexicon) -> pd.DataFrame:
    """Inner-join records (tokens, counts, tf-idf rows, ...) with a lexicon on `term`."""
    left = records if isinstance(records, pd.DataFrame) else to_frame(records)
    if "term" not in left.columns:
        left = pd.DataFrame(columns=["document_id", "term"])
    return left.merge(lexicon_frame(lexicon), on="term", how="inner")


def net_sentiment(records, lexicon) -> pd.DataFrame:
    """
    Sentiment per document id.

    Categorical lexicons give positive, negative and sentiment = positive - negative;
    numeric lexicons give the summed value; multi-label lexicons give one
    count column per label. Records carrying a `count` weigh that much,
    tokens weigh 1.
    """
    joined = join_lexicon(records, lexicon)
    if joined.empty:
        cols = ["value"] if "value" in joined.columns else ["positive", "negative", "sentiment"]
        return pd.DataFrame(columns=["document_id"] + cols)
    if "count" not in joined.columns:
        joined = joined.assign(count=1)

    if "value" in joined.columns:
        joined = joined.assign(value=joined["value"] * joined["count"])
        return joined.groupby("document_id", sort=False, as_index=False)["value"].sum()

    wide = joined.pivot_table(index="document_id", columns="sentiment", values="count",
                              aggfunc="sum", fill_value=0, sort=False)
    wide.columns.name = None
    wide = wide.reset_index()
    if set(lexicon_frame(lexicon)["sentiment"]) <= {"positive", "negative"}:
        for col in ("positive", "negative"):
            if col not in wide.columns:
                wide[col] = 0
        wide = wide[["document_id", "positive", "negative"]]
        wide = wide.assign(sentiment=wide["positive"] - wide["negative"])
    return wide
