from rna_loop_fold.folding.fold_result import SearchResult, FoldResult
from rna_loop_fold.folding.arm_search import (
    ArmSearchConfig,
    ArmSearchEngine,
    minimize_free_energy,
    fold_sequence,
)

__all__ = [
    "SearchResult",
    "FoldResult",
    "ArmSearchConfig",
    "ArmSearchEngine",
    "minimize_free_energy",
    "fold_sequence",
]
