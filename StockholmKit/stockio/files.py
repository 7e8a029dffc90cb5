"""
File helpers around the string-based parser and writers
"""
import logging
from typing import Iterable, List, Union

from StockholmKit.alignment.model import Alignment
from .options import OptionsArg
from .parser import parse_all
from .writer import to_fasta, to_stockholm

logger = logging.getLogger(__name__)


def read_stockholm(filename: str, options: OptionsArg = None, **overrides) -> List[Alignment]:
    """
    Read every alignment from a Stockholm file

    Args:
        filename: Path to Stockholm file
        options: Parse options (see :func:`parse_all`)

    Returns:
        list: Alignment records in file order

    Example:
        >>> alignments = read_stockholm('family.sto')
    """
    with open(filename, 'r') as f:
        text = f.read()
    alignments = parse_all(text, options, **overrides)
    logger.info("read %d alignment(s) from %s", len(alignments), filename)
    return alignments


def write_stockholm(alignments: Union[Alignment, Iterable[Alignment]], filename: str,
                    options: OptionsArg = None, **overrides):
    """
    Write one or more alignments to a Stockholm file

    Example:
        >>> write_stockholm(aln, 'output.sto', width=60)
    """
    if isinstance(alignments, Alignment):
        alignments = [alignments]
    with open(filename, 'w') as f:
        for aln in alignments:
            f.write(to_stockholm(aln, options, **overrides))


def write_fasta(aln: Alignment, filename: str, options: OptionsArg = None, **overrides):
    """
    Write the rows of an alignment to a FASTA file

    Example:
        >>> write_fasta(aln, 'output.fasta', width=60)
    """
    with open(filename, 'w') as f:
        f.write(to_fasta(aln, options, **overrides))
