"""
Tests for the FreeEnergyLoader, which reads the energy-proxy coefficients
from YAML files.
"""
from __future__ import annotations

# --- Standard Library Imports ---
from importlib.resources import files as ir_files

# --- Third-Party Imports ---
import pytest

# --- Local Application Imports ---
import rna_loop_fold
from rna_loop_fold.energies.energy_loader import FreeEnergyLoader, default_energy_yaml
from rna_loop_fold.energies.energy_types import FreeEnergyParams


@pytest.fixture(scope="module")
def yaml_path() -> str:
    """Path of the coefficient file bundled with the package."""
    return str(ir_files(rna_loop_fold) / "data" / "unit_energies.yaml")


def test_bundled_file_holds_unit_coefficients(yaml_path):
    """The bundled file reproduces the default single/loop/bond coefficients."""
    params = FreeEnergyLoader().load(yaml_path)

    assert isinstance(params, FreeEnergyParams)
    assert params == FreeEnergyParams(single_penalty=1, loop_base_penalty=1, bond_bonus=2)


def test_load_without_path_uses_bundled_file():
    assert default_energy_yaml().name == "unit_energies.yaml"
    assert FreeEnergyLoader().load() == FreeEnergyParams()


def test_missing_keys_fall_back_to_defaults(tmp_path):
    path = tmp_path / "partial.yaml"
    path.write_text("energies:\n  bond_bonus: 4\n", encoding="utf-8")

    params = FreeEnergyLoader().load(path)

    assert params.bond_bonus == 4
    assert params.single_penalty == 1
    assert params.loop_base_penalty == 1


def test_empty_file_gives_defaults(tmp_path):
    path = tmp_path / "empty.yml"
    path.write_text("", encoding="utf-8")

    assert FreeEnergyLoader().load(path) == FreeEnergyParams()


def test_only_yaml_files_are_accepted(tmp_path):
    path = tmp_path / "energies.json"
    path.write_text("{}", encoding="utf-8")

    with pytest.raises(ValueError):
        FreeEnergyLoader().load(path)


@pytest.mark.parametrize(
    "body",
    [
        "energies:\n  single_penalty: 1.5\n",
        "energies:\n  single_penalty: yes\n",
        "energies:\n  loop_base_penalty: -1\n",
        "energies: [1, 2, 3]\n",
    ],
)
def test_malformed_coefficients_raise(tmp_path, body):
    """Floats, booleans, negative values and non-mapping sections are rejected."""
    path = tmp_path / "bad.yaml"
    path.write_text(body, encoding="utf-8")

    with pytest.raises(ValueError):
        FreeEnergyLoader().load(path)
