"""Statement ingestion: tokenizer, amount normalizer and record mapper."""

from .amounts import MalformedAmountError, normalize_amount
from .records import map_records
from .tokenizer import tokenize

__all__ = ["MalformedAmountError", "map_records", "normalize_amount", "tokenize"]
