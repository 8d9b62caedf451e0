from __future__ import annotations
from typing import Optional

__all__ = [
    "RnaFoldError",
    "ParseError",
    "InvalidTokenError",
    "UnterminatedLoopError",
    "EmptyLoopError",
    "PreconditionViolation",
    "NoMajorLoopError",
    "NoSingleToPromoteError",
]


class RnaFoldError(Exception):
    """Base class for every error raised by `rna_loop_fold`."""


# ---- Parsing -----------------------------------------------------------------

class ParseError(RnaFoldError, ValueError):
    """
    Raised when a sequence notation string cannot be turned into a structure.

    Parameters
    ----------
    message : str
        Human-readable description of the failure.
    position : int, optional
        Zero-based index in the input text where the problem was detected.
    """
    def __init__(self, message: str, position: Optional[int] = None) -> None:
        super().__init__(message)
        self.position = position


class InvalidTokenError(ParseError):
    """An input character is not a recognised nucleotide symbol."""
    def __init__(self, token: str, position: Optional[int] = None) -> None:
        where = "" if position is None else f" at position {position}"
        super().__init__(f"unexpected nucleotide token {token!r}{where}", position)
        self.token = token


class UnterminatedLoopError(ParseError):
    """A loop opened with '{' is never closed with '}'."""
    def __init__(self, position: Optional[int] = None) -> None:
        where = "" if position is None else f" (loop opened at position {position})"
        super().__init__(f"expected loop end token '}}'{where}", position)


class EmptyLoopError(ParseError):
    """A loop decodes to zero nucleotides."""
    def __init__(self, position: Optional[int] = None) -> None:
        where = "" if position is None else f" at position {position}"
        super().__init__(f"loop must contain at least one nucleotide{where}", position)


# ---- Structural preconditions ------------------------------------------------

class PreconditionViolation(RnaFoldError, RuntimeError):
    """A structural operation was called on a structure that cannot support it."""


class NoMajorLoopError(PreconditionViolation):
    """The structure has no Loop segment to fold around."""
    def __init__(self, message: str = "expected major loop: structure contains no loop segment") -> None:
        super().__init__(message)


class NoSingleToPromoteError(PreconditionViolation):
    """A bulge was requested on an arm that has no Single segment left."""
    def __init__(self, message: str = "no single nucleotide left to promote to a loop") -> None:
        super().__init__(message)
