"""
Stockholm / FASTA serialization and bulk constructors
"""
from __future__ import annotations

from typing import Any, Iterable, List, Mapping, Optional, Sequence, Tuple

from StockholmKit.alignment.model import Alignment
from .options import FastaOptions, FormatOptions, OptionsArg

HEADER = "# STOCKHOLM 1.0"
FOOTER = "//"


def _offsets(total: int, width: int) -> List[int]:
    # always at least one block, even for an empty alignment
    if width <= 0:
        return [0]
    return [0] + list(range(width, total, width))


# -------------------------
# Stockholm
# -------------------------
def to_stockholm(aln: Alignment, options: OptionsArg = None, **overrides: Any) -> str:
    """
    Render an alignment as Stockholm text

    Args:
        aln: Alignment to render
        options: FormatOptions, a mapping (``width``, ``indent_names``) or None
        **overrides: Individual option values

    Returns:
        str: Document from ``# STOCKHOLM 1.0`` to ``//``, newline terminated

    Example:
        >>> aln = Alignment.from_row_list([('a', 'AC'), ('b', 'GT')])
        >>> print(to_stockholm(aln), end='')
        # STOCKHOLM 1.0
        a AC
        b GT
        //
    """
    opts = FormatOptions.coerce(options, **overrides)
    names = aln.all_names()
    tags = aln.all_tags()
    cols = aln.columns()

    name_width = max([len(name) for name in names] + [0])
    tag_width = max([len(tag) for tag in tags] + [0])
    seq_indent = tag_width + 6 if tag_width else 0
    width = max(1, opts.width - name_width - seq_indent - 1) if opts.width else cols

    if opts.indent_names:
        def pad(text: str, w: int) -> str:
            return text.rjust(w)

        def pad_name_tag(name: str, tag: str) -> str:
            return name.rjust(name_width) + " " + tag.rjust(tag_width)
    else:
        def pad(text: str, w: int) -> str:
            return text.ljust(w)

        def pad_name_tag(name: str, tag: str) -> str:
            return (name + " " + tag).ljust(name_width + tag_width + 1)

    out = [HEADER + "\n"]

    for tag in sorted(aln.gf):
        for line in aln.gf[tag]:
            out.append(f"#=GF {pad(tag, tag_width)} {line}\n")

    for tag in sorted(aln.gs):
        for name, lines in aln.gs[tag].items():
            for line in lines:
                out.append(f"#=GS {pad_name_tag(name, tag)} {line}\n")

    gc_tags = sorted(aln.gc)
    gr_tags = sorted(aln.gr)
    gc_gutter = " " * (name_width + 2)

    blocks = []
    for offset in _offsets(cols, width):
        block = []
        for tag in gc_tags:
            chunk = aln.gc[tag][offset:offset + width]
            block.append(f"#=GC {pad(tag, tag_width)}{gc_gutter}{chunk}\n")
        for name in names:
            for tag in gr_tags:
                value = aln.gr[tag].get(name)
                if value:
                    block.append(f"#=GR {pad_name_tag(name, tag)} {value[offset:offset + width]}\n")
            chunk = aln.seqdata.get(name, "")[offset:offset + width]
            # an empty data line would not parse back
            if chunk:
                block.append(f"{pad(name, name_width + seq_indent)} {chunk}\n")
        blocks.append("".join(block))

    out.append("\n".join(blocks))
    out.append(FOOTER + "\n")
    return "".join(out)


# -------------------------
# FASTA / row list
# -------------------------
def to_fasta(aln: Alignment, options: OptionsArg = None, **overrides: Any) -> str:
    """
    Render the rows as FASTA

    Args:
        aln: Alignment to render
        options: FastaOptions, a mapping with ``width``, or None (unwrapped)
        **overrides: Individual option values

    Example:
        >>> aln = Alignment.from_row_list([('a', 'ACGT')])
        >>> print(to_fasta(aln, width=2), end='')
        >a
        AC
        GT
    """
    opts = FastaOptions.coerce(options, **overrides)
    out = []
    for name, seq in to_row_list(aln):
        out.append(f">{name}\n")
        width = opts.width or len(seq)
        for i in range(0, len(seq), width):
            out.append(seq[i:i + width] + "\n")
    return "".join(out)


def to_row_list(aln: Alignment) -> List[Tuple[str, str]]:
    """``[(name, row), ...]`` in :meth:`Alignment.all_names` order, rows with data only."""
    return [(name, aln.seqdata[name]) for name in aln.all_names() if aln.seqdata.get(name)]


# -------------------------
# Bulk constructors
# -------------------------
def from_seq_index(seqdata: Mapping[str, str],
                   names: Optional[Sequence[str]] = None) -> Alignment:
    return Alignment.from_seq_index(seqdata, names)


def from_row_list(rows: Iterable[Sequence[str]]) -> Alignment:
    return Alignment.from_row_list(rows)
