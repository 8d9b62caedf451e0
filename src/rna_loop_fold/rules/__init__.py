from rna_loop_fold.rules.constraints import can_pair, count_pairs, PAIRING_MASK

__all__ = [
    "can_pair",
    "count_pairs",
    "PAIRING_MASK",
]
