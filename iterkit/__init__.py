"""Iterator adaptors and helpers that complement itertools."""

__version__ = "0.1.0"

__all__ = [
    "adaptors",
    "coalesce",
    "concat",
    "diff",
    "duplicates",
    "either_or_both",
    "exactly_one",
    "extrema",
    "flatten",
    "multi_product",
    "results",
]