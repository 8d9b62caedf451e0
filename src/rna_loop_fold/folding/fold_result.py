from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple

from rna_loop_fold.structures import RnaStructure


@dataclass(frozen=True, slots=True)
class SearchResult:
    """
    Best pairing found between two opposing arms.

    Attributes
    ----------
    arm_a : RnaStructure
        Optimized first arm, still read outward from the shared loop.
    arm_b : RnaStructure
        Optimized opposing arm.
    energy : int
        Proxy energy of the two arms (the shared loop is not included).
    """
    arm_a: RnaStructure
    arm_b: RnaStructure
    energy: int


@dataclass(frozen=True, slots=True)
class FoldResult:
    """
    Outcome of folding one structure around its major loop.

    Attributes
    ----------
    input_structure : RnaStructure
        The structure as given, before optimization.
    structure : RnaStructure
        The optimized structure in original left-to-right orientation.
    initial_energy : int
        Baseline energy of the input: the arms scored as-is plus the major loop.
    optimized_energy : int
        Energy of `structure`: the searched arm energy plus the major loop.
    """
    input_structure: RnaStructure
    structure: RnaStructure
    initial_energy: int
    optimized_energy: int

    @property
    def improvement(self) -> int:
        """How much the search lowered the energy (never negative)."""
        return self.initial_energy - self.optimized_energy

    def as_tuple(self) -> Tuple[RnaStructure, int, int]:
        return self.structure, self.initial_energy, self.optimized_energy
