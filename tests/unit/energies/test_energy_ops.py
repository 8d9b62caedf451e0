"""
Unit tests for the simplified free-energy proxy.

score(a, b) = penalty_a + penalty_b - 2 * bonds, where every loop base and
every single costs 1 and bonds are counted between the singles of the two
arms, aligned index by index with loops skipped.
"""
import pytest

from rna_loop_fold.energies import ArmPairEnergyModel, FreeEnergyParams
from rna_loop_fold.energies.energy_ops import (
    loop_free_energy,
    paired_free_energy,
    strand_penalty_and_singles,
)
from rna_loop_fold.parsing import parse_sequence
from rna_loop_fold.structures import Loop, Nucleotide, RnaStructure

A, C, G, U = Nucleotide.A, Nucleotide.C, Nucleotide.G, Nucleotide.U


def s(notation: str) -> RnaStructure:
    return parse_sequence(notation)


def test_strand_penalty_counts_loop_bases_and_singles():
    penalty, singles = strand_penalty_and_singles(s("A{GGG}C{U}"))

    assert penalty == 6
    assert singles == [A, C]


@pytest.mark.parametrize(
    "arm_a, arm_b, expected",
    [
        # Four A-U pairs cancel all eight penalties.
        ("AAAA", "UUUU", 0),
        # Identical bases never pair.
        ("AA", "AA", 4),
        # The loop is charged but skipped when aligning singles: A-U pairs.
        ("{CC}A", "U", 2),
        # Singles A, C face U, G after dropping the loop: two bonds.
        ("A{G}C", "UG", 1),
        # Surplus singles on the longer arm stay unpaired.
        ("AAA", "U", 2),
        # Pairs must sit at the same index.
        ("CA", "UG", 4),
        ("", "", 0),
        ("", "{ACG}", 3),
    ],
)
def test_paired_free_energy(arm_a, arm_b, expected):
    assert paired_free_energy(s(arm_a), s(arm_b)) == expected


def test_paired_free_energy_is_symmetric_in_its_arms():
    arm_a, arm_b = s("A{G}CGU"), s("UG{AA}C")
    assert paired_free_energy(arm_a, arm_b) == paired_free_energy(arm_b, arm_a)


def test_custom_coefficients():
    """
    single=2, loop/base=3, bond=1:
    arm A {CC}A -> 3*2 + 2 = 8, arm B U -> 2, one bond -> 8 + 2 - 1 = 9.
    """
    params = FreeEnergyParams(single_penalty=2, loop_base_penalty=3, bond_bonus=1)
    assert paired_free_energy(s("{CC}A"), s("U"), params) == 9
    assert loop_free_energy(Loop((C, C)), params) == 6


def test_energy_model_dispatches_to_ops():
    model = ArmPairEnergyModel()

    assert model.params == FreeEnergyParams()
    assert model.score(s("GC"), s("CG")) == 0
    assert model.loop_energy(Loop((G, A, A, A))) == 4


def test_unknown_segment_type_is_rejected():
    with pytest.raises(TypeError):
        strand_penalty_and_singles(RnaStructure(["A"]))
