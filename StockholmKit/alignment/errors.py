"""
Exceptions raised while parsing or manipulating Stockholm alignments
"""
from typing import Iterable, Optional


class StockholmError(ValueError):
    """Base class for every error raised by StockholmKit."""


# -------------------------
# Parse-time errors
# -------------------------
class ParseError(StockholmError):
    """
    Error tied to a line of the input document

    Args:
        message: Description of the problem
        line_number: 1-based line number where it was detected
    """

    def __init__(self, message: str, line_number: Optional[int] = None):
        self.line_number = line_number
        if line_number is not None:
            message = f"(At line {line_number}) {message}"
        super().__init__(message)


class MissingHeader(ParseError):
    def __init__(self, line_number: Optional[int] = None):
        super().__init__("No format header: # STOCKHOLM 1.0", line_number)


class MissingFooter(ParseError):
    def __init__(self, line_number: Optional[int] = None):
        super().__init__("No format footer: //", line_number)


class MalformedLine(ParseError):
    def __init__(self, line_number: Optional[int] = None, line: str = ""):
        self.line = line
        super().__init__(f"Malformed line: {line.strip()!r}", line_number)


class EmptyDocument(StockholmError):
    def __init__(self):
        super().__init__("No alignments found")


class AmbiguousDocument(StockholmError):
    def __init__(self, count: int):
        self.count = count
        super().__init__(f"More than one alignment found ({count})")


# -------------------------
# Mutation / query errors
# -------------------------
class DuplicateRow(StockholmError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Duplicate row name: {name}")


class RowNotFound(StockholmError, LookupError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Row not found: {name}")


class BadColumnIndex(StockholmError, IndexError):
    def __init__(self, indices: Iterable[int], columns: int):
        self.indices = list(indices)
        self.columns = columns
        bad = ",".join(str(i) for i in self.indices)
        super().__init__(f"Bad column indices: {bad} (alignment has {columns} columns)")
