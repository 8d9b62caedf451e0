from rna_loop_fold.energies.energy_types import FreeEnergyParams
from rna_loop_fold.energies.energy_loader import FreeEnergyLoader
from rna_loop_fold.energies.energy_model import ArmPairEnergyModel, ArmPairEnergyModelProtocol

__all__ = [
    "FreeEnergyParams",
    "FreeEnergyLoader",
    "ArmPairEnergyModel",
    "ArmPairEnergyModelProtocol",
]
