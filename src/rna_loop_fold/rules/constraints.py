from __future__ import annotations
from typing import Final

import numpy as np

from rna_loop_fold.structures.segments import Nucleotide
from rna_loop_fold.utils.nucleotide_utils import pair_key

# ---- Pairing rules (RNA) -----------------------------------------------------

# Canonical Watson-Crick pairs only; no G-U wobble.
# Both orientations are listed so membership checks are order-free.
_RNA_ALLOWED_PAIRS: Final[frozenset[str]] = frozenset(
    {"AU", "UA", "GC", "CG"}
)

# Boolean 4x4 lookup indexed by `Nucleotide.index` (A, C, G, U).
PAIRING_MASK: Final[np.ndarray] = np.array(
    [[pair_key(row, col) in _RNA_ALLOWED_PAIRS for col in Nucleotide] for row in Nucleotide],
    dtype=bool,
)
PAIRING_MASK.setflags(write=False)


def can_pair(base_i: str, base_j: str) -> bool:
    """
    Return True if nucleotides `base_i` and `base_j` form a canonical pair.

    Only Watson-Crick pairs (A-U, C-G) are accepted. The relation is
    symmetric: ``can_pair(a, b) == can_pair(b, a)``.

    Parameters
    ----------
    base_i, base_j : str
        `Nucleotide` members or single-character strings, case-insensitive.

    Returns
    -------
    bool
        True if (a, b) is in {AU, UA, GC, CG}; False otherwise.
    """
    if not isinstance(base_i, str) or not isinstance(base_j, str):
        return False

    if len(base_i) != 1 or len(base_j) != 1:
        return False

    return pair_key(base_i, base_j) in _RNA_ALLOWED_PAIRS


def count_pairs(strand_a, strand_b) -> int:
    """
    Count canonical pairs between two base lists aligned position by position.

    The shorter list bounds the alignment; surplus bases on the longer list
    are left unpaired.

    Parameters
    ----------
    strand_a, strand_b : Sequence[Nucleotide]
        Bases to align, index 0 against index 0.

    Returns
    -------
    int
        Number of aligned positions whose bases can pair.
    """
    n = min(len(strand_a), len(strand_b))
    if n == 0:
        return 0

    rows = np.fromiter((base.index for base in strand_a[:n]), dtype=np.intp, count=n)
    cols = np.fromiter((base.index for base in strand_b[:n]), dtype=np.intp, count=n)

    return int(np.count_nonzero(PAIRING_MASK[rows, cols]))
