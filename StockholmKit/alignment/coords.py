"""
Coordinate mapping between ungapped sequence positions and alignment columns.

Both directions are computed with NumPy masks over the aligned row:

    residue mask   : True where the character is not a gap
    seqpos2col     : indices of the residue mask
    col2seqpos     : running residue count - 1, shifted by 0.5 on gap columns
"""
from typing import List, Union

import numpy as np

DEFAULT_GAP_CHARS = ".-"

SeqPos = Union[int, float]


def _residue_mask(seq: str, gap_chars: str) -> np.ndarray:
    """Boolean (L,) array, True at residue (non-gap) columns."""
    if not seq:
        return np.zeros(0, dtype=bool)
    chars = np.array(list(seq), dtype="<U1")
    gaps = np.array(list(gap_chars), dtype="<U1") if gap_chars else np.zeros(0, dtype="<U1")
    return ~np.isin(chars, gaps)


def seqpos2col(seq: str, gap_chars: str = DEFAULT_GAP_CHARS) -> List[int]:
    """
    Map each residue of an aligned row to its alignment column

    Args:
        seq: Aligned row (residues and gaps)
        gap_chars: Characters treated as gaps

    Returns:
        list: ``result[k]`` is the 0-based column of the k-th residue

    Example:
        >>> seqpos2col("A-C.G")
        [0, 2, 4]
    """
    mask = _residue_mask(seq, gap_chars)
    return [int(col) for col in np.flatnonzero(mask)]


def col2seqpos(seq: str, gap_chars: str = DEFAULT_GAP_CHARS) -> List[SeqPos]:
    """
    Map each alignment column of a row to a sequence coordinate

    Residue columns get the integer 0-based residue index. Gap columns get
    ``previous residue index + 0.5`` (an insertion point), which is ``-0.5``
    before the first residue.

    Args:
        seq: Aligned row (residues and gaps)
        gap_chars: Characters treated as gaps

    Returns:
        list: one int or float per column

    Example:
        >>> col2seqpos("-A-C")
        [-0.5, 0, 0.5, 1]
    """
    mask = _residue_mask(seq, gap_chars)
    # index of the last residue seen at or before each column
    last = np.cumsum(mask) - 1
    return [int(pos) if is_res else float(pos) + 0.5
            for pos, is_res in zip(last.tolist(), mask.tolist())]
