from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Tuple, Union

__all__ = ["Nucleotide", "Single", "Loop", "Segment", "segment_size"]


class Nucleotide(str, Enum):
    """
    The four RNA nucleotides understood by the folding model.

    Members subclass `str`, so a base can be concatenated into pair keys
    (e.g. ``Nucleotide.A + Nucleotide.U == "AU"``) and compared to plain
    one-letter strings.
    """
    A = "A"
    C = "C"
    G = "G"
    U = "U"

    @property
    def index(self) -> int:
        """Row/column of this base in the pairing mask (A, C, G, U order)."""
        return _NUCLEOTIDE_ORDER.index(self)


_NUCLEOTIDE_ORDER: Tuple[Nucleotide, ...] = (Nucleotide.A, Nucleotide.C, Nucleotide.G, Nucleotide.U)


@dataclass(frozen=True, slots=True)
class Single:
    """
    One base that is not committed to a loop and can still be offered for pairing.

    Parameters
    ----------
    base : Nucleotide
        The nucleotide at this position.
    """
    base: Nucleotide

    @property
    def size(self) -> int:
        return 1

    @property
    def bases(self) -> Tuple[Nucleotide, ...]:
        return (self.base,)

    def as_loop(self) -> Loop:
        """
        Commit this base to a one-nucleotide loop (a bulge).

        Returns
        -------
        Loop
            A loop holding only `base`.
        """
        return Loop((self.base,))

    def to_notation(self) -> str:
        return self.base.value


@dataclass(frozen=True, slots=True)
class Loop:
    """
    A run of bases committed to an unpaired loop region.

    A loop is never paired base by base; the search consumes it as a block.

    Parameters
    ----------
    bases : Tuple[Nucleotide, ...]
        Loop nucleotides in strand order. Must hold at least one base.
    """
    bases: Tuple[Nucleotide, ...]

    def __post_init__(self) -> None:
        if not isinstance(self.bases, tuple):
            object.__setattr__(self, "bases", tuple(self.bases))
        if not self.bases:
            raise ValueError("Loop must contain at least one nucleotide.")

    @property
    def size(self) -> int:
        return len(self.bases)

    def as_loop(self) -> Loop:
        return self

    def merged_with(self, other: Loop) -> Loop:
        """Concatenate `other` onto the end of this loop."""
        return Loop(self.bases + other.bases)

    def to_notation(self) -> str:
        return "{" + "".join(base.value for base in self.bases) + "}"


Segment = Union[Single, Loop]


def segment_size(segment: Segment) -> int:
    """Number of nucleotides held by `segment` (1 for a Single)."""
    if isinstance(segment, Loop):
        return len(segment.bases)
    return 1
