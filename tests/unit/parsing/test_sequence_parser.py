"""
Unit tests for the sequence-notation parser.

Notation: one letter per free nucleotide (case-insensitive a/c/g/u) and a
braced run per loop. These tests pin both parser modes: strict (default)
rejects any invalid character, lenient truncates a loop body at the first
invalid character and only validates the top level.
"""
import logging

import pytest

from rna_loop_fold.errors import (
    EmptyLoopError,
    InvalidTokenError,
    ParseError,
    UnterminatedLoopError,
)
from rna_loop_fold.parsing import parse_nucleotides, parse_sequence, parse_single
from rna_loop_fold.structures import Loop, Nucleotide, Single

A, C, G, U = Nucleotide.A, Nucleotide.C, Nucleotide.G, Nucleotide.U


def test_parse_sequence_builds_singles_and_loops_in_order():
    structure = parse_sequence("AAAA{CCCC}UUUU")

    assert structure.segments == (
        [Single(A)] * 4 + [Loop((C, C, C, C))] + [Single(U)] * 4
    )


def test_parse_sequence_is_case_insensitive():
    assert parse_sequence("aC{gU}") == parse_sequence("AC{GU}")
    assert parse_sequence("aC{gU}").segments == [Single(A), Single(C), Loop((G, U))]


def test_parse_empty_sequence_gives_empty_structure():
    assert parse_sequence("").is_empty


def test_adjacent_loops_stay_separate():
    structure = parse_sequence("{A}{CC}")
    assert structure.segments == [Loop((A,)), Loop((C, C))]


def test_parse_single():
    assert parse_single("g") is G
    with pytest.raises(InvalidTokenError):
        parse_single("x")


# ---------------------- Errors ----------------------
def test_invalid_top_level_token_reports_character_and_position():
    with pytest.raises(InvalidTokenError) as excinfo:
        parse_sequence("AXG")

    assert excinfo.value.token == "X"
    assert excinfo.value.position == 1


@pytest.mark.parametrize("sequence", ["A}", "A G", "AT", "A\n"])
def test_stray_characters_are_invalid_tokens(sequence):
    """Closing braces, whitespace and thymine are not part of the notation."""
    with pytest.raises(InvalidTokenError):
        parse_sequence(sequence)


def test_unterminated_loop():
    with pytest.raises(UnterminatedLoopError) as excinfo:
        parse_sequence("AA{CC")

    assert excinfo.value.position == 2


def test_empty_loop_is_rejected():
    with pytest.raises(EmptyLoopError):
        parse_sequence("A{}U")


def test_parse_errors_are_value_errors():
    """Callers that only know about ValueError still catch parse failures."""
    for bad in ("AXG", "{A", "{}"):
        with pytest.raises(ValueError):
            parse_sequence(bad)
        with pytest.raises(ParseError):
            parse_sequence(bad)


# ---------------------- Invalid loop bodies ----------------------
def test_strict_mode_rejects_invalid_character_in_loop():
    with pytest.raises(InvalidTokenError) as excinfo:
        parse_sequence("A{CXC}U")

    assert excinfo.value.token == "X"
    assert excinfo.value.position == 3


def test_strict_mode_rejects_nested_loop_opener():
    with pytest.raises(InvalidTokenError) as excinfo:
        parse_sequence("A{C{G}U")

    assert excinfo.value.token == "{"


def test_lenient_mode_truncates_loop_body(caplog):
    """
    Lenient mode drops everything from the first invalid character to the
    end of the loop body, and says so in the log.
    """
    with caplog.at_level(logging.WARNING, logger="rna_loop_fold.parsing.sequence_parser"):
        structure = parse_sequence("A{CXC}U", strict=False)

    assert structure.segments == [Single(A), Loop((C,)), Single(U)]
    assert "Dropping 2 trailing character(s)" in caplog.text


def test_lenient_mode_truncates_at_nested_opener():
    structure = parse_sequence("A{C{G}U", strict=False)
    assert structure.segments == [Single(A), Loop((C,)), Single(U)]


def test_lenient_mode_still_validates_top_level():
    with pytest.raises(InvalidTokenError):
        parse_sequence("AX{C}", strict=False)


def test_lenient_mode_rejects_loop_truncated_to_nothing():
    with pytest.raises(EmptyLoopError):
        parse_sequence("A{XC}U", strict=False)


def test_parse_nucleotides_modes():
    assert parse_nucleotides("acg") == [A, C, G]
    assert parse_nucleotides("acXg", strict=False) == [A, C]

    with pytest.raises(InvalidTokenError) as excinfo:
        parse_nucleotides("acXg", offset=10)
    assert excinfo.value.position == 12
