from rna_loop_fold.parsing.sequence_parser import parse_sequence, parse_nucleotides, parse_single

__all__ = [
    "parse_sequence",
    "parse_nucleotides",
    "parse_single",
]
