# usage: error taxonomy shared by the tokenizer, counters and correlation code


class TextStatsError(ValueError):
    """Base class for every error raised by textstats."""


class InvalidConfiguration(TextStatsError):
    """
    Bad parameters handed to a component.

    Examples: n-gram size below 1, an unknown tokenizer mode,
    a section size below 1, a term count without a document total.
    """


class DegenerateInput(TextStatsError):
    """
    Input on which a statistic is undefined.

    Raised when a phi coefficient denominator is zero (a term present in
    all or none of the groups) in strict mode, or when there are fewer
    groups than the correlation needs.
    """
