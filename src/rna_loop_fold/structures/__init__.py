from rna_loop_fold.structures.segments import Nucleotide, Single, Loop, Segment, segment_size
from rna_loop_fold.structures.rna_structure import RnaStructure

__all__ = [
    "Nucleotide",
    "Single",
    "Loop",
    "Segment",
    "segment_size",
    "RnaStructure",
]
