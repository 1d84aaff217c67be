# Shared helpers: error types and output naming
from .errors import TextStatsError, InvalidConfiguration, DegenerateInput
from .io_utils import hash_stem, safe_filename

__all__ = [
    "TextStatsError",
    "InvalidConfiguration",
    "DegenerateInput",
    "hash_stem",
    "safe_filename",
]

__version__ = "0.1.0"
