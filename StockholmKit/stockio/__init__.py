"""
Stockholm I/O Module
Parsing, serialization and configuration for Stockholm alignments
"""

from .options import ParseOptions, FormatOptions, FastaOptions
from .parser import sniff, validate, parse, parse_all
from .writer import (
    to_stockholm,
    to_fasta,
    to_row_list,
    from_seq_index,
    from_row_list,
)
from .files import read_stockholm, write_stockholm, write_fasta

__all__ = [
    "ParseOptions",
    "FormatOptions",
    "FastaOptions",
    "sniff",
    "validate",
    "parse",
    "parse_all",
    "to_stockholm",
    "to_fasta",
    "to_row_list",
    "from_seq_index",
    "from_row_list",
    "read_stockholm",
    "write_stockholm",
    "write_fasta",
]
