from __future__ import annotations
import logging
from typing import List

from rna_loop_fold.errors import EmptyLoopError, InvalidTokenError, UnterminatedLoopError
from rna_loop_fold.structures import Loop, Nucleotide, RnaStructure, Segment, Single
from rna_loop_fold.utils.nucleotide_utils import to_nucleotide

logger = logging.getLogger(__name__)

LOOP_OPEN = "{"
LOOP_CLOSE = "}"


def parse_single(token: str, position: int | None = None) -> Nucleotide:
    """
    Decode one nucleotide character.

    Parameters
    ----------
    token : str
        A single character, case-insensitive, in {a, c, g, u}.
    position : int, optional
        Index of `token` in the original text, used in error messages.

    Returns
    -------
    Nucleotide
        The decoded base.

    Raises
    ------
    InvalidTokenError
        If `token` is not a nucleotide.
    """
    base = to_nucleotide(token)
    if base is None:
        raise InvalidTokenError(token, position)

    return base


def parse_nucleotides(sequence: str, *, strict: bool = True, offset: int = 0) -> List[Nucleotide]:
    """
    Decode a run of nucleotide characters, such as a loop body.

    Parameters
    ----------
    sequence : str
        Characters to decode.
    strict : bool, optional
        If True (default), any invalid character raises. If False, decoding
        stops at the first invalid character and the rest of the run is
        dropped.
    offset : int, optional
        Index of ``sequence[0]`` in the original text, used in error messages.

    Returns
    -------
    List[Nucleotide]
        Decoded bases in order.

    Raises
    ------
    InvalidTokenError
        In strict mode, on the first character that is not a nucleotide.
    """
    bases: List[Nucleotide] = []
    for idx, token in enumerate(sequence):
        base = to_nucleotide(token)
        if base is None:
            if strict:
                raise InvalidTokenError(token, offset + idx)
            logger.warning(
                f"Dropping {len(sequence) - idx} trailing character(s) from {sequence!r} "
                f"at invalid token {token!r} (position {offset + idx})"
            )
            break
        bases.append(base)

    return bases


def parse_sequence(sequence: str, *, strict: bool = True) -> RnaStructure:
    """
    Parse sequence notation into an `RnaStructure`.

    Each nucleotide character becomes a `Single`; a braced run such as
    ``{GAAA}`` becomes one `Loop`. Braces do not nest.

    Parameters
    ----------
    sequence : str
        The notation, e.g. ``"AAAA{CCCC}UUUU"``. Case-insensitive.
    strict : bool, optional
        Controls invalid characters inside a loop body. Strict mode (default)
        rejects them. Lenient mode truncates the loop body at the first
        invalid character. Characters outside loops are always validated.

    Returns
    -------
    RnaStructure
        Segments in input order.

    Raises
    ------
    InvalidTokenError
        On a character that is not a nucleotide or a loop opener.
    UnterminatedLoopError
        On a '{' with no matching '}'.
    EmptyLoopError
        On a loop that decodes to no nucleotides.
    """
    segments: List[Segment] = []
    pos = 0

    while pos < len(sequence):
        token = sequence[pos]

        if token == LOOP_OPEN:
            close = sequence.find(LOOP_CLOSE, pos + 1)
            if close == -1:
                raise UnterminatedLoopError(pos)

            bases = parse_nucleotides(sequence[pos + 1:close], strict=strict, offset=pos + 1)
            if not bases:
                raise EmptyLoopError(pos)

            segments.append(Loop(tuple(bases)))
            pos = close + 1
        else:
            segments.append(Single(parse_single(token, pos)))
            pos += 1

    logger.debug(f"Parsed {len(segments)} segment(s) from {len(sequence)} character(s)")

    return RnaStructure(segments)
