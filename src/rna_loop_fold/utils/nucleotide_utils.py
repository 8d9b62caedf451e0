from typing import Optional

from rna_loop_fold.structures.segments import Nucleotide

_VALID_BASES = frozenset(member.value for member in Nucleotide)


def normalize_base(base_raw: str) -> str:
    """
    Upper-case a nucleotide character so lookups are case-insensitive.

    Parameters
    ----------
    base_raw : str
        Raw single-character nucleotide base.

    Returns
    -------
    str
        The upper-cased character. Non-strings and multi-character strings are
        returned unchanged so callers can reject them.
    """
    if not isinstance(base_raw, str):
        return base_raw

    if len(base_raw) != 1:
        return base_raw

    return base_raw.upper()


def to_nucleotide(base_raw: str) -> Optional[Nucleotide]:
    """
    Decode one character into a `Nucleotide`.

    Parameters
    ----------
    base_raw : str
        Single character, case-insensitive. Expected in {a, c, g, u}.

    Returns
    -------
    Nucleotide or None
        The decoded base, or `None` when the character is not a nucleotide.
    """
    if isinstance(base_raw, Nucleotide):
        return base_raw

    base_norm = normalize_base(base_raw)
    if base_norm not in _VALID_BASES:
        return None

    return Nucleotide(base_norm)


def pair_key(base_a: str, base_b: str) -> str:
    """
    Build a two-letter base-pair key such as "AU" or "GC".

    Parameters
    ----------
    base_a : str
        First nucleotide (single character or `Nucleotide`).
    base_b : str
        Second nucleotide (single character or `Nucleotide`).

    Returns
    -------
    str
        Two-character key representing the pair.
    """
    return _as_char(base_a) + _as_char(base_b)


def _as_char(base: str) -> str:
    if isinstance(base, Nucleotide):
        return base.value
    return normalize_base(base)
