"""
Unit tests for the `Single` and `Loop` segment types.
"""
import pytest
from dataclasses import FrozenInstanceError

from rna_loop_fold.structures import Loop, Nucleotide, Single, segment_size

A, C, G, U = Nucleotide.A, Nucleotide.C, Nucleotide.G, Nucleotide.U


def test_single_as_loop_builds_one_base_loop():
    assert Single(G).as_loop() == Loop((G,))


def test_loop_as_loop_is_identity():
    loop = Loop((A, C))
    assert loop.as_loop() is loop


def test_loop_rejects_empty_bases():
    with pytest.raises(ValueError):
        Loop(())


def test_loop_coerces_list_to_tuple():
    """Loops stay hashable even when built from a list."""
    loop = Loop([A, U])
    assert loop.bases == (A, U)
    assert hash(loop) == hash(Loop((A, U)))


def test_merged_with_concatenates_in_order():
    assert Loop((A,)).merged_with(Loop((C, G))) == Loop((A, C, G))


def test_segment_sizes():
    assert segment_size(Single(A)) == 1
    assert segment_size(Loop((A, C, G))) == 3
    assert Single(A).size == 1
    assert Loop((U, U)).size == 2


def test_notation():
    assert Single(C).to_notation() == "C"
    assert Loop((G, A, A, A)).to_notation() == "{GAAA}"


def test_segments_are_frozen():
    """
    Segments are shared between search branches, so they must be immutable.
    """
    single = Single(A)
    with pytest.raises(FrozenInstanceError):
        single.base = U


def test_nucleotide_is_str_compatible():
    assert Nucleotide("A") is A
    assert A + U == "AU"
    assert [n.index for n in Nucleotide] == [0, 1, 2, 3]
