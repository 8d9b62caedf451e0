from __future__ import annotations
from typing import List, Tuple

from rna_loop_fold.energies.energy_types import FreeEnergyParams
from rna_loop_fold.rules.constraints import count_pairs
from rna_loop_fold.structures import Loop, Nucleotide, RnaStructure, Single

DEFAULT_PARAMS = FreeEnergyParams()


def strand_penalty_and_singles(
    strand: RnaStructure,
    params: FreeEnergyParams = DEFAULT_PARAMS
) -> Tuple[int, List[Nucleotide]]:
    """
    Compute the unpaired penalty of a strand and collect its pairable bases.

    Parameters
    ----------
    strand : RnaStructure
        The arm to score.
    params : FreeEnergyParams, optional
        Energy coefficients, by default the unit coefficients.

    Returns
    -------
    Tuple[int, List[Nucleotide]]
        ``(penalty, singles)`` where `penalty` charges every loop nucleotide and
        every single, and `singles` lists the bases of `Single` segments in
        strand order.
    """
    penalty = 0
    singles: List[Nucleotide] = []

    for segment in strand.segments:
        if isinstance(segment, Loop):
            penalty += params.loop_base_penalty * len(segment.bases)
        elif isinstance(segment, Single):
            penalty += params.single_penalty
            singles.append(segment.base)
        else:
            raise TypeError(f"Unknown segment type: {type(segment).__name__}")

    return penalty, singles


def paired_free_energy(
    strand_a: RnaStructure,
    strand_b: RnaStructure,
    params: FreeEnergyParams = DEFAULT_PARAMS
) -> int:
    """
    Score two opposing arms with the simplified free-energy proxy.

    Loops never pair. The singles of each arm are aligned position by position
    (index 0 against index 0, both read outward from the shared loop) and every
    canonical pair refunds `bond_bonus`.

    Parameters
    ----------
    strand_a : RnaStructure
        First arm.
    strand_b : RnaStructure
        Opposing arm.
    params : FreeEnergyParams, optional
        Energy coefficients, by default the unit coefficients.

    Returns
    -------
    int
        ``penalty_a + penalty_b - bond_bonus * bonds``. Lower is more stable.
    """
    penalty_a, singles_a = strand_penalty_and_singles(strand_a, params)
    penalty_b, singles_b = strand_penalty_and_singles(strand_b, params)

    h_bonds = count_pairs(singles_a, singles_b)

    return penalty_a + penalty_b - params.bond_bonus * h_bonds


def loop_free_energy(loop: Loop, params: FreeEnergyParams = DEFAULT_PARAMS) -> int:
    """Penalty of the major loop itself."""
    return params.loop_base_penalty * len(loop.bases)
