from rna_loop_fold.utils.nucleotide_utils import normalize_base, to_nucleotide, pair_key

__all__ = [
    "normalize_base",
    "to_nucleotide",
    "pair_key",
]
