from __future__ import annotations
from importlib.resources import files as importlib_files
from pathlib import Path
import logging

from .data.yaml_io import read_yaml
from .data.parsers import get_energy_section, get_int

from rna_loop_fold.energies.energy_types import FreeEnergyParams

logger = logging.getLogger(__name__)

DEFAULT_ENERGY_FILE = "unit_energies.yaml"


def default_energy_yaml() -> Path:
    """Path of the energy file bundled with the package."""
    return Path(str(importlib_files("rna_loop_fold") / "data" / DEFAULT_ENERGY_FILE))


class FreeEnergyLoader:
    """
    Loads the coefficients of the free-energy proxy from a YAML file.

    The file is expected to hold an ``energies`` mapping with any of
    ``single_penalty``, ``loop_base_penalty`` and ``bond_bonus``. Missing keys
    fall back to the `FreeEnergyParams` defaults.
    """
    def load(self, yaml_path: str | Path | None = None) -> FreeEnergyParams:
        """
        Load energy coefficients.

        Parameters
        ----------
        yaml_path : str | Path | None
            File to read. When None, the bundled ``unit_energies.yaml`` is used.

        Returns
        -------
        FreeEnergyParams
            The parsed, immutable coefficients.

        Raises
        ------
        ValueError
            If the file is not YAML or a coefficient is malformed.
        """
        if yaml_path is None:
            yaml_path = default_energy_yaml()

        logger.debug(f"Reading energy coefficients from {yaml_path}")
        data = read_yaml(yaml_path)
        return self._build(data)

    @staticmethod
    def _build(data) -> FreeEnergyParams:
        defaults = FreeEnergyParams()
        node = get_energy_section(data)

        return FreeEnergyParams(
            single_penalty=get_int(node, "single_penalty", defaults.single_penalty),
            loop_base_penalty=get_int(node, "loop_base_penalty", defaults.loop_base_penalty),
            bond_bonus=get_int(node, "bond_bonus", defaults.bond_bonus),
        )
