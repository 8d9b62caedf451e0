from __future__ import annotations
from dataclasses import dataclass, field
from typing import Protocol

from rna_loop_fold.energies.energy_types import FreeEnergyParams
from rna_loop_fold.energies.energy_ops import paired_free_energy, loop_free_energy
from rna_loop_fold.structures import Loop, RnaStructure


class ArmPairEnergyModelProtocol(Protocol):
    """
    Interface the arm search needs from an energy model.

    Any object exposing these two methods can drive `ArmSearchEngine`, which
    keeps the engine testable with fake models.
    """
    def score(self, arm_a: RnaStructure, arm_b: RnaStructure) -> int: ...

    def loop_energy(self, loop: Loop) -> int: ...


@dataclass(frozen=True, slots=True)
class ArmPairEnergyModel:
    """
    Concrete energy model over pairs of opposing arms.

    Attributes
    ----------
    params : FreeEnergyParams
        Coefficients of the proxy. Defaults to the unit coefficients.
    """
    params: FreeEnergyParams = field(default_factory=FreeEnergyParams)

    def score(self, arm_a: RnaStructure, arm_b: RnaStructure) -> int:
        """
        Energy of `arm_a` facing `arm_b`.

        Parameters
        ----------
        arm_a : RnaStructure
            First arm, read outward from the shared loop.
        arm_b : RnaStructure
            Opposing arm, read in the same direction.

        Returns
        -------
        int
            The proxy energy; lower is more stable.
        """
        return paired_free_energy(arm_a, arm_b, self.params)

    def loop_energy(self, loop: Loop) -> int:
        return loop_free_energy(loop, self.params)
