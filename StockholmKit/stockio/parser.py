"""
Stockholm document parser.

Each line is classified (first match wins) and applied to the record under
construction:

    # STOCKHOLM 1.0            open a record
    //                         close the current record
    #=GF <tag> <text>          file annotation (appended)
    #=GC <tag> <text>          column annotation (concatenated)
    #=GS <name> <tag> <text>   per-sequence annotation (appended)
    #=GR <name> <tag> <text>   per-sequence column annotation (concatenated)
    <name> <text>              row data (concatenated)
    blank                      ignored
    anything else              MalformedLine (always fatal)

Structural problems (missing header/footer) are routed through a single
severity policy: fatal with ``strict``, otherwise a logged warning after which
parsing carries on.
"""
from __future__ import annotations

import logging
import re
from typing import Any, Dict, List, Optional

from StockholmKit.alignment.errors import (
    AmbiguousDocument,
    EmptyDocument,
    MalformedLine,
    MissingFooter,
    MissingHeader,
    ParseError,
    StockholmError,
)
from StockholmKit.alignment.model import Alignment
from .options import OptionsArg, ParseOptions

logger = logging.getLogger(__name__)

FORMAT_START_RE = re.compile(r"^# STOCKHOLM 1\.0")
FORMAT_END_RE = re.compile(r"^//\s*$")
GF_RE = re.compile(r"^#=GF\s+(\S+)\s+(.*?)\s*$")
GC_RE = re.compile(r"^#=GC\s+(\S+)\s+(.*?)\s*$")
GS_RE = re.compile(r"^#=GS\s+(\S+)\s+(\S+)\s+(.*?)\s*$")
GR_RE = re.compile(r"^#=GR\s+(\S+)\s+(\S+)\s+(.*?)\s*$")
SEQ_RE = re.compile(r"^\s*(\S+)\s+(\S+)\s*$")
NONWHITE_RE = re.compile(r"\S")


class _RecordBuilder:
    """Mutable record under construction; concatenated fields are kept as chunk lists."""

    def __init__(self, line_number: int):
        self.line_number = line_number
        self.gf: Dict[str, List[str]] = {}
        self.gc: Dict[str, List[str]] = {}
        self.gs: Dict[str, Dict[str, List[str]]] = {}
        self.gr: Dict[str, Dict[str, List[str]]] = {}
        self.seqdata: Dict[str, List[str]] = {}

    def add_gf(self, tag: str, text: str):
        self.gf.setdefault(tag, []).append(text)

    def add_gc(self, tag: str, text: str):
        self.gc.setdefault(tag, []).append(text)

    def add_gs(self, name: str, tag: str, text: str):
        self.gs.setdefault(tag, {}).setdefault(name, []).append(text)

    def add_gr(self, name: str, tag: str, text: str):
        self.gr.setdefault(tag, {}).setdefault(name, []).append(text)

    def add_seq(self, name: str, text: str):
        self.seqdata.setdefault(name, []).append(text)

    def build(self) -> Alignment:
        return Alignment(
            gf=self.gf,
            gc={tag: "".join(chunks) for tag, chunks in self.gc.items()},
            gs=self.gs,
            gr={tag: {name: "".join(chunks) for name, chunks in by_name.items()}
                for tag, by_name in self.gr.items()},
            seqnames=list(self.seqdata),
            seqdata={name: "".join(chunks) for name, chunks in self.seqdata.items()},
        )


class _Scanner:
    """Line-by-line state machine: NoRecord (``current is None``) / InRecord."""

    def __init__(self, options: ParseOptions):
        self.options = options
        self.records: List[Alignment] = []
        self.current: Optional[_RecordBuilder] = None

    def violation(self, exc: ParseError):
        """Severity policy for structural problems."""
        if self.options.strict:
            raise exc
        if not self.options.quiet:
            logger.warning("%s", exc)

    def open_record(self, line_number: int):
        if self.current is not None:
            self.violation(MissingFooter(line_number))
        # the unterminated record is replaced, not kept
        self.current = _RecordBuilder(line_number)

    def close_record(self, line_number: int):
        if self.current is None:
            self.violation(MissingHeader(line_number))
            return
        self._emit()

    def require_record(self, line_number: int) -> _RecordBuilder:
        if self.current is None:
            self.violation(MissingHeader(line_number))
            # recovery: NoRecord -> InRecord
            self.current = _RecordBuilder(line_number)
        return self.current

    def _emit(self):
        aln = self.current.build()
        logger.debug("alignment opened at line %d: %d rows, %d columns",
                     self.current.line_number, aln.rows(), aln.columns())
        self.records.append(aln)
        self.current = None

    def feed(self, line: str, line_number: int):
        if FORMAT_START_RE.match(line):
            self.open_record(line_number)
            return
        if FORMAT_END_RE.match(line):
            self.close_record(line_number)
            return

        match = GF_RE.match(line)
        if match:
            self.require_record(line_number).add_gf(*match.groups())
            return
        match = GC_RE.match(line)
        if match:
            self.require_record(line_number).add_gc(*match.groups())
            return
        match = GS_RE.match(line)
        if match:
            self.require_record(line_number).add_gs(*match.groups())
            return
        match = GR_RE.match(line)
        if match:
            self.require_record(line_number).add_gr(*match.groups())
            return
        match = SEQ_RE.match(line)
        if match:
            self.require_record(line_number).add_seq(*match.groups())
            return

        if NONWHITE_RE.search(line):
            raise MalformedLine(line_number, line)

    def finish(self, last_line: int) -> List[Alignment]:
        if self.current is not None:
            self.violation(MissingFooter(last_line))
            self._emit()
        return self.records


# -------------------------
# Public API
# -------------------------
def sniff(text: str) -> bool:
    """
    Quick format check: does the text start with a Stockholm header?

    Example:
        >>> sniff("# STOCKHOLM 1.0\\n//\\n")
        True
    """
    return FORMAT_START_RE.match(text) is not None


def parse_all(text: str, options: OptionsArg = None, **overrides: Any) -> List[Alignment]:
    """
    Parse every alignment in a Stockholm document

    Args:
        text: Whole document
        options: ParseOptions, a mapping with ``strict``/``quiet`` keys, or None
        **overrides: Individual option values (``strict=True``)

    Returns:
        list: Alignment records in document order

    Raises:
        MalformedLine: on any unrecognised non-blank line
        MissingHeader, MissingFooter: only with ``strict``
    """
    opts = ParseOptions.coerce(options, **overrides)
    scanner = _Scanner(opts)
    last_line = 0
    for n, line in enumerate(text.split("\n"), start=1):
        scanner.feed(line, n)
        if NONWHITE_RE.search(line):
            last_line = n
    return scanner.finish(last_line)


def parse(text: str, options: OptionsArg = None, **overrides: Any) -> Alignment:
    """Parse a document that must hold exactly one alignment."""
    records = parse_all(text, options, **overrides)
    if not records:
        raise EmptyDocument()
    if len(records) > 1:
        raise AmbiguousDocument(len(records))
    return records[0]


def validate(text: str) -> bool:
    """True if a strict parse of ``text`` succeeds."""
    try:
        parse_all(text, strict=True)
    except StockholmError as exc:
        logger.debug("validation failed: %s", exc)
        return False
    return True
