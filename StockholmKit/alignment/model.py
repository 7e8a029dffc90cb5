"""
In-memory Stockholm alignment record.

An :class:`Alignment` keeps the four Stockholm annotation classes next to the
row data::

    gf[tag]         = [line, ...]         file annotation
    gc[tag]         = "..."               column annotation
    gs[tag][name]   = [line, ...]         per-sequence annotation
    gr[tag][name]   = "..."               per-sequence, per-column annotation
    seqnames        = [name, ...]         row order
    seqdata[name]   = "..."               aligned row

``seqnames`` and ``seqdata`` are only kept in step by :meth:`add_row` and
:meth:`delete_row`; ``gs``/``gr`` may name sequences that have no row.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

import numpy as np

from . import coords
from .errors import BadColumnIndex, DuplicateRow, RowNotFound

logger = logging.getLogger(__name__)


# -------------------------
# Helpers
# -------------------------
def _as_column(index, ncols: int) -> Optional[int]:
    """``index`` as a column number, or None unless it is an integer in ``[0, ncols)``."""
    try:
        col = int(index)
    except (TypeError, ValueError, OverflowError):
        return None
    if col != index or not 0 <= col < ncols:
        return None
    return col


def _pick_columns(s: str, cols: np.ndarray) -> str:
    """Characters of ``s`` at ``cols``; positions past the end are skipped."""
    if not s or cols.size == 0:
        return ""
    chars = np.array(list(s), dtype="<U1")
    return "".join(chars[cols[cols < len(s)]].tolist())


@dataclass
class Alignment:
    gf: Dict[str, List[str]] = field(default_factory=dict)
    gc: Dict[str, str] = field(default_factory=dict)
    gs: Dict[str, Dict[str, List[str]]] = field(default_factory=dict)
    gr: Dict[str, Dict[str, str]] = field(default_factory=dict)
    seqnames: List[str] = field(default_factory=list)
    seqdata: Dict[str, str] = field(default_factory=dict)

    DEFAULT_GAP_CHARS = coords.DEFAULT_GAP_CHARS

    # -------------------------
    # Bulk constructors
    # -------------------------
    @classmethod
    def from_seq_index(cls, seqdata: Mapping[str, str],
                       names: Optional[Sequence[str]] = None) -> "Alignment":
        """
        Build an alignment from a name -> row mapping

        Args:
            seqdata: Mapping of sequence names to aligned rows
            names: Optional row order (defaults to the mapping's order);
                names missing from ``seqdata`` get an empty row

        Example:
            >>> aln = Alignment.from_seq_index({'a': 'AC-', 'b': 'ACG'})
            >>> aln.rows()
            2
        """
        aln = cls()
        for name in (names if names is not None else list(seqdata.keys())):
            aln.add_row(name, seqdata.get(name, ""))
        logger.debug("built alignment with %d rows from sequence index", aln.rows())
        return aln

    @classmethod
    def from_row_list(cls, rows: Iterable[Sequence[str]]) -> "Alignment":
        """Build an alignment from ``[(name, row), ...]``."""
        aln = cls()
        for name, data in rows:
            aln.add_row(name, data)
        return aln

    # -------------------------
    # Queries
    # -------------------------
    def rows(self) -> int:
        return len(self.seqnames)

    def columns(self) -> int:
        cols = 0
        for s in self.seqdata.values():
            cols = max(cols, len(s))
        for by_name in self.gr.values():
            for s in by_name.values():
                cols = max(cols, len(s))
        return cols

    def all_names(self) -> List[str]:
        """
        Every sequence name mentioned anywhere in the record, first-seen order:
        row order, row data, then ``#=GR`` and ``#=GS`` names.
        """
        seen: Dict[str, None] = {}
        for name in self.seqnames:
            seen.setdefault(name)
        for name in self.seqdata:
            seen.setdefault(name)
        for by_name in self.gr.values():
            for name in by_name:
                seen.setdefault(name)
        for by_name in self.gs.values():
            for name in by_name:
                seen.setdefault(name)
        return list(seen)

    def all_tags(self) -> List[str]:
        tags = set(self.gc) | set(self.gf) | set(self.gr) | set(self.gs)
        return sorted(tags)

    # -------------------------
    # Mutations
    # -------------------------
    def add_row(self, name: str, data: str = "") -> "Alignment":
        if name in self.seqdata:
            raise DuplicateRow(name)
        self.seqnames.append(name)
        self.seqdata[name] = data or ""
        return self

    def delete_row(self, name: str) -> "Alignment":
        if name not in self.seqdata:
            raise RowNotFound(name)
        self.seqnames = [n for n in self.seqnames if n != name]
        del self.seqdata[name]
        for by_name in self.gr.values():
            by_name.pop(name, None)
        for by_name in self.gs.values():
            by_name.pop(name, None)
        return self

    def copy(self) -> "Alignment":
        return Alignment(
            gf={tag: list(lines) for tag, lines in self.gf.items()},
            gc=dict(self.gc),
            gs={tag: {name: list(lines) for name, lines in by_name.items()}
                for tag, by_name in self.gs.items()},
            gr={tag: dict(by_name) for tag, by_name in self.gr.items()},
            seqnames=list(self.seqnames),
            seqdata=dict(self.seqdata),
        )

    def extract_columns(self, indices: Iterable[int]) -> "Alignment":
        """
        New alignment made of the given columns (0-indexed)

        Order and repeats in ``indices`` are kept. Column-indexed data
        (rows, ``#=GC``, ``#=GR``) is resliced; ``#=GF`` and ``#=GS`` are
        copied as they are.

        Raises:
            BadColumnIndex: if any index is not an integer in ``[0, columns())``
        """
        raw = list(indices)
        ncols = self.columns()
        picked = [_as_column(i, ncols) for i in raw]
        bad = [i for i, col in zip(raw, picked) if col is None]
        if bad:
            raise BadColumnIndex(bad, ncols)
        cols = np.asarray(picked, dtype=np.intp)
        logger.debug("extracting %d of %d columns", cols.size, ncols)

        src = self.copy()
        return Alignment(
            gf=src.gf,
            gc={tag: _pick_columns(s, cols) for tag, s in self.gc.items()},
            gs=src.gs,
            gr={tag: {name: _pick_columns(s, cols) for name, s in by_name.items()}
                for tag, by_name in self.gr.items()},
            seqnames=src.seqnames,
            seqdata={name: _pick_columns(s, cols) for name, s in self.seqdata.items()},
        )

    def extract_column_range(self, start: int, end: int) -> "Alignment":
        """Columns ``start`` .. ``end`` inclusive."""
        return self.extract_columns(range(start, end + 1))

    # -------------------------
    # Coordinates
    # -------------------------
    def _row(self, name: str) -> str:
        if name not in self.seqdata:
            raise RowNotFound(name)
        return self.seqdata[name]

    def seqpos2col(self, name: str, gap_chars: Optional[str] = None) -> List[int]:
        return coords.seqpos2col(self._row(name), gap_chars or self.DEFAULT_GAP_CHARS)

    def col2seqpos(self, name: str, gap_chars: Optional[str] = None) -> List[coords.SeqPos]:
        return coords.col2seqpos(self._row(name), gap_chars or self.DEFAULT_GAP_CHARS)

    # -------------------------
    # Serialization
    # -------------------------
    def to_string(self, options=None, **overrides) -> str:
        from StockholmKit.stockio.writer import to_stockholm

        return to_stockholm(self, options, **overrides)

    def to_fasta(self, options=None, **overrides) -> str:
        from StockholmKit.stockio.writer import to_fasta

        return to_fasta(self, options, **overrides)

    def to_row_list(self) -> List[Tuple[str, str]]:
        from StockholmKit.stockio.writer import to_row_list

        return to_row_list(self)

    def __str__(self) -> str:
        return self.to_string()
