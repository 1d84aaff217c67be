# Command-line runner: corpus -> word frequencies, n-grams, tf-idf, pair counts, phi correlations.
# usage: python -m textstats.nlp.analyze_corpus --input data/clean --outdir data/outputs [--section-size 10]

import argparse, json, math
from pathlib import Path

from textstats.etl.corpus import DEFAULT_SECTION_SIZE, load_csv_corpus, load_text_corpus, line_sections
from textstats.nlp.correlation import filter_min_count, pairwise_correlation, pairwise_count
from textstats.nlp.frequency import count_terms, document_totals, filter_stop_ngrams, tokens_per_document
from textstats.nlp.records import Correlation, Cooccurrence, TermCount, TfIdf, to_frame
from textstats.nlp.tfidf import bind_tf_idf, top_tf_idf
from textstats.nlp.tokenize import english_stopwords, tokenize
from textstats.shared.errors import TextStatsError
from textstats.shared.io_utils import hash_stem

DEFAULT_TOPN = 50
DEFAULT_MIN_COUNT = 20
NGRAM_NAMES = {2: "bigram", 3: "trigram"}


def analyze_corpus(docs, outdir: Path, tag: str, *, ngram_ns, topn, section_size, min_count, stop_words):
    """
    Run the full statistics pipeline over (document_id, text) pairs and write CSV/JSON outputs.
    Returns the summary dict that is also written to `<tag>_summary.json`.
    """
    outdir.mkdir(parents=True, exist_ok=True)

    tokens = list(tokenize(docs))
    counts = count_terms(tokens, stop_words=stop_words)
    # every tokenized document counts toward N, even one left empty by stop-word removal
    totals = dict.fromkeys(tokens_per_document(tokens), 0)
    totals.update(document_totals(counts))

    # Word frequencies over the whole corpus
    corpus_counts = count_terms(tokens, stop_words=stop_words, group_by=lambda t: "corpus", sort=True)
    to_frame(corpus_counts[:topn], TermCount).drop(columns="document_id").to_csv(
        outdir / f"{tag}_wordfreq_top{topn}.csv", index=False)

    # N-grams (stop words removed slot by slot)
    for n in ngram_ns:
        if n < 2:
            continue
        grams = filter_stop_ngrams(tokenize(docs, mode="ngrams", n=n), stop_words)
        name = NGRAM_NAMES.get(n, f"ngram_{n}")
        top = count_terms(grams, group_by=lambda t: "corpus", sort=True)[:topn]
        to_frame(top, TermCount).drop(columns="document_id").rename(columns={"term": name}).to_csv(
            outdir / f"{tag}_{name}_top{topn}.csv", index=False)

    # tf-idf, top terms per document
    tfidf = top_tf_idf(bind_tf_idf(counts, totals), n=topn)
    to_frame(tfidf, TfIdf).to_csv(outdir / f"{tag}_tfidf_top{topn}.csv", index=False)

    # Co-occurrence and correlation over line sections of frequent words
    section_tokens = [t for t in tokenize(line_sections(docs, section_size)) if t.term not in stop_words]
    frequent = filter_min_count(section_tokens, min_count)
    pairs = pairwise_count(frequent, sort=True)[:topn]
    to_frame(pairs, Cooccurrence).to_csv(outdir / f"{tag}_pair_counts_top{topn}.csv", index=False)

    try:
        cors = [c for c in pairwise_correlation(frequent, limit=topn) if not math.isnan(c.phi)]
    except TextStatsError as e:
        print(f"[WARN] correlations skipped: {e}")
        cors = []
    to_frame(cors, Correlation).to_csv(outdir / f"{tag}_correlations_top{topn}.csv", index=False)

    # all counts below are after stop-word removal, except tokens_before_stopwords
    vocab_size = len({r.term for r in counts})
    token_count = sum(totals.values())
    meta = {
        "documents": len(totals),
        "tokens_before_stopwords": len(tokens),
        "tokens_per_document": {str(k): v for k, v in totals.items()},
        "token_count": token_count,
        "vocab_size": vocab_size,
        "type_token_ratio": (vocab_size / token_count) if token_count else 0.0,
        "section_size": section_size,
        "min_count": min_count,
        "sections_with_frequent_terms": len({t.document_id for t in frequent}),
    }
    (outdir / f"{tag}_summary.json").write_text(json.dumps(meta, indent=2), encoding="utf-8")
    return meta


def main(argv=None):
    """
    CLI entrypoint: parse arguments, load the corpus (.txt file/dir or .csv) and run the analysis.
    """
    ap = argparse.ArgumentParser(description="Text statistics over a corpus: word frequencies, n-grams, tf-idf, co-occurrence, phi correlations.")
    ap.add_argument("--input", required=True, help=".txt file, directory of .txt files, or .csv (one document per row).")
    ap.add_argument("--outdir", default="data/outputs", help="Output directory for CSV/JSON.")
    ap.add_argument("--ngrams", default="2,3", help="Comma list of n-gram sizes, e.g. 2,3")
    ap.add_argument("--topn", type=int, default=DEFAULT_TOPN)
    ap.add_argument("--section-size", type=int, default=DEFAULT_SECTION_SIZE,
                    help="Lines per section for co-occurrence/correlation.")
    ap.add_argument("--min-count", type=int, default=DEFAULT_MIN_COUNT,
                    help="Minimum corpus count for a word to enter correlation.")
    ap.add_argument("--keep-stopwords", action="store_true", help="Do not remove English stop words.")
    ap.add_argument("--no-strip-gutenberg", action="store_true", help="Do not strip Project Gutenberg headers/footers.")
    ap.add_argument("--csv-id", default="id", help="Document id column for .csv input.")
    ap.add_argument("--csv-text", default="text", help="Text column for .csv input.")
    args = ap.parse_args(argv)

    ip = Path(args.input)
    if not ip.exists():
        raise SystemExit(f"Input not found: {ip}")
    try:
        ngram_ns = tuple(sorted({int(n.strip()) for n in args.ngrams.split(",") if n.strip()}))
    except ValueError:
        raise SystemExit(f"--ngrams must be a comma list of integers, got {args.ngrams!r}")

    print(f"[INFO] Loading corpus: {ip}")
    try:
        if ip.suffix.lower() == ".csv":
            docs = load_csv_corpus(ip, args.csv_id, args.csv_text)
        else:
            docs = load_text_corpus(ip, strip_gutenberg=not args.no_strip_gutenberg)
        if not docs:
            raise SystemExit("No documents found (expected .txt files or a .csv).")

        stop_words = frozenset() if args.keep_stopwords else english_stopwords()
        meta = analyze_corpus(
            docs, Path(args.outdir), hash_stem(ip),
            ngram_ns=ngram_ns, topn=args.topn, section_size=args.section_size,
            min_count=args.min_count, stop_words=stop_words,
        )
    except TextStatsError as e:
        raise SystemExit(f"Configuration error: {e}")

    print(f"[DONE] {ip.name} -> {args.outdir}")
    print(json.dumps(meta, indent=2))
    return meta


if __name__ == "__main__":
    main()
