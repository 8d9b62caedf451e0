from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class FreeEnergyParams:
    """
    Immutable coefficients of the simplified free-energy proxy.

    The proxy charges every unpaired nucleotide and refunds both sides of each
    canonical pair. With the defaults, a strand scores
    ``penalty_a + penalty_b - 2 * bonds``.

    Parameters
    ----------
    single_penalty : int
        Cost of one `Single` segment. Defaults to 1.
    loop_base_penalty : int
        Cost per nucleotide held in a `Loop` segment. Defaults to 1.
    bond_bonus : int
        Energy removed for every canonical pair between opposing singles.
        Defaults to 2, which cancels the penalty counted on both sides.

    Notes
    -----
    - Lower scores are more stable.
    - The values are unitless; this is not a calibrated thermodynamic model.
    """
    single_penalty: int = 1
    loop_base_penalty: int = 1
    bond_bonus: int = 2
