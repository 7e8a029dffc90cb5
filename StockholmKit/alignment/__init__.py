"""
Alignment Module
Stockholm alignment record, row/column mutations and coordinate maps
"""

from .model import Alignment
from .coords import DEFAULT_GAP_CHARS, col2seqpos, seqpos2col
from .errors import (
    StockholmError,
    ParseError,
    MissingHeader,
    MissingFooter,
    MalformedLine,
    EmptyDocument,
    AmbiguousDocument,
    DuplicateRow,
    RowNotFound,
    BadColumnIndex,
)

__all__ = [
    "Alignment",
    "DEFAULT_GAP_CHARS",
    "seqpos2col",
    "col2seqpos",
    "StockholmError",
    "ParseError",
    "MissingHeader",
    "MissingFooter",
    "MalformedLine",
    "EmptyDocument",
    "AmbiguousDocument",
    "DuplicateRow",
    "RowNotFound",
    "BadColumnIndex",
]
