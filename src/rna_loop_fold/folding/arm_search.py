from __future__ import annotations
from concurrent.futures import Executor, ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import List, Optional, Tuple
import logging
import time

from rna_loop_fold.energies.energy_model import ArmPairEnergyModel, ArmPairEnergyModelProtocol
from rna_loop_fold.errors import NoSingleToPromoteError
from rna_loop_fold.folding.fold_result import FoldResult, SearchResult
from rna_loop_fold.parsing import parse_sequence
from rna_loop_fold.structures import RnaStructure

logger = logging.getLogger(__name__)

Candidate = Tuple[RnaStructure, RnaStructure]


@dataclass(slots=True)
class ArmSearchConfig:
    """
    Configuration settings for the arm pairing search.

    Attributes
    ----------
    parallel : bool
        If True, sibling candidates are evaluated on a thread pool. If False,
        they run one after another on the calling thread. Both give the same
        result.
    max_workers : Optional[int]
        Size of the thread pool. None uses the `ThreadPoolExecutor` default.
    max_parallel_depth : Optional[int]
        Deepest recursion level that still fans out to the pool. Deeper levels
        run sequentially inside their worker. None fans out at every level.
    """
    parallel: bool = True
    max_workers: Optional[int] = None
    max_parallel_depth: Optional[int] = None


@dataclass(slots=True)
class ArmSearchEngine:
    """
    Recursive search for the lowest-energy pairing between two opposing arms.

    At every level the engine weighs three candidates, in this order:

    1. the arms unchanged, aligned one segment for one;
    2. arm A with its first single committed to a bulge loop;
    3. arm B with its first single committed to a bulge loop.

    A bulge candidate is skipped when its arm has no single left. Each
    candidate consumes its leading segments with `RnaStructure.align_fronts`,
    scores them, and recurses on the tails while both are non-empty. The
    lowest energy wins; on a tie the earliest candidate wins.

    Attributes
    ----------
    energy_model : ArmPairEnergyModelProtocol
        Scores a pair of arms and the major loop.
    config : ArmSearchConfig
        Concurrency settings.
    """
    energy_model: ArmPairEnergyModelProtocol = field(default_factory=ArmPairEnergyModel)
    config: ArmSearchConfig = field(default_factory=ArmSearchConfig)

    def search(
        self,
        arm_a: RnaStructure,
        arm_b: RnaStructure,
        executor: Optional[Executor] = None
    ) -> SearchResult:
        """
        Find the best pairing between `arm_a` and `arm_b`.

        Parameters
        ----------
        arm_a : RnaStructure
            First arm, read outward from the shared loop.
        arm_b : RnaStructure
            Opposing arm, read in the same direction.
        executor : Optional[Executor]
            Pool to fan candidates out to. When None and `config.parallel` is
            set, a pool is created for the duration of the call.

        Returns
        -------
        SearchResult
            The optimized arms and their energy.
        """
        if executor is None and self.config.parallel:
            with ThreadPoolExecutor(max_workers=self.config.max_workers,
                                    thread_name_prefix="arm-search") as pool:
                return self._search(arm_a, arm_b, pool, depth=0)

        return self._search(arm_a, arm_b, executor if self.config.parallel else None, depth=0)

    def minimize(self, structure: RnaStructure) -> FoldResult:
        """
        Fold `structure` around its major loop.

        The structure is split at its major loop, the two arms are searched for
        their best pairing, and the result is put back together as
        ``reverse(arm_a') + [major loop] + arm_b'``.

        Parameters
        ----------
        structure : RnaStructure
            Parsed input. Must contain at least one `Loop`.

        Returns
        -------
        FoldResult
            Optimized structure with its baseline and optimized energies.

        Raises
        ------
        NoMajorLoopError
            If `structure` has no `Loop` segment.
        """
        start_time = time.perf_counter()

        arm_a, major_loop, arm_b = structure.split_at_major_loop()
        loop_energy = self.energy_model.loop_energy(major_loop)

        logger.info(f"Folding {structure!r} around major loop {major_loop.to_notation()}")
        logger.info(f"Arm A: {len(arm_a)} segment(s), arm B: {len(arm_b)} segment(s)")

        initial_energy = self.energy_model.score(arm_a, arm_b) + loop_energy
        logger.info(f"Baseline energy H = {initial_energy}")

        best = self.search(arm_a, arm_b)
        optimized_energy = best.energy + loop_energy

        optimized = RnaStructure(best.arm_a.reversed().segments + [major_loop] + best.arm_b.segments)

        elapsed = time.perf_counter() - start_time
        logger.info(f"Optimized energy H = {optimized_energy} ({elapsed * 1000:.1f}ms)")

        return FoldResult(
            input_structure=structure,
            structure=optimized,
            initial_energy=initial_energy,
            optimized_energy=optimized_energy,
        )

    # ---- Recursion ---------------------------------------------------------------

    def _search(
        self,
        arm_a: RnaStructure,
        arm_b: RnaStructure,
        executor: Optional[Executor],
        depth: int
    ) -> SearchResult:
        candidates = self._candidates(arm_a, arm_b)
        results = self._evaluate_all(candidates, executor, depth)

        # Strict `<` keeps the earliest candidate on equal energies.
        best = results[0]
        for result in results[1:]:
            if result.energy < best.energy:
                best = result

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                f"depth={depth} {arm_a!r} | {arm_b!r} -> "
                f"{[result.energy for result in results]} best={best.energy}"
            )

        return best

    @staticmethod
    def _candidates(arm_a: RnaStructure, arm_b: RnaStructure) -> List[Candidate]:
        candidates: List[Candidate] = [(arm_a, arm_b)]

        try:
            candidates.append((arm_a.promote_first_single_to_loop(), arm_b))
        except NoSingleToPromoteError:
            pass

        try:
            candidates.append((arm_a, arm_b.promote_first_single_to_loop()))
        except NoSingleToPromoteError:
            pass

        return candidates

    def _evaluate_all(
        self,
        candidates: List[Candidate],
        executor: Optional[Executor],
        depth: int
    ) -> List[SearchResult]:
        """
        Evaluate sibling candidates, in parallel when a pool is available.

        The first candidate runs on the calling thread while the others are
        queued. When collecting, a sibling still waiting in the queue is
        withdrawn and run here instead, so a worker only ever waits on
        siblings that are already running.
        """
        fan_out = (
            executor is not None
            and len(candidates) > 1
            and (self.config.max_parallel_depth is None or depth <= self.config.max_parallel_depth)
        )
        if not fan_out:
            return [self._evaluate(arm_a, arm_b, executor, depth) for arm_a, arm_b in candidates]

        futures = [
            executor.submit(self._evaluate, arm_a, arm_b, executor, depth)
            for arm_a, arm_b in candidates[1:]
        ]

        first_a, first_b = candidates[0]
        results = [self._evaluate(first_a, first_b, executor, depth)]

        for future, (arm_a, arm_b) in zip(futures, candidates[1:]):
            if future.cancel():
                results.append(self._evaluate(arm_a, arm_b, executor, depth))
            else:
                results.append(future.result())

        return results

    def _evaluate(
        self,
        arm_a: RnaStructure,
        arm_b: RnaStructure,
        executor: Optional[Executor],
        depth: int
    ) -> SearchResult:
        a_head, a_tail, b_head, b_tail = arm_a.align_fronts(arm_b)
        energy = self.energy_model.score(a_head, b_head)

        if not a_tail.is_empty and not b_tail.is_empty:
            tail = self._search(a_tail, b_tail, executor, depth + 1)
            energy += tail.energy
            a_head.join(tail.arm_a)
            b_head.join(tail.arm_b)
        else:
            # One arm is exhausted: the leftovers are scored as they stand.
            energy += self.energy_model.score(a_tail, b_tail)
            a_head.join(a_tail)
            b_head.join(b_tail)

        return SearchResult(arm_a=a_head, arm_b=b_head, energy=energy)


def minimize_free_energy(
    structure: RnaStructure,
    energy_model: Optional[ArmPairEnergyModelProtocol] = None,
    config: Optional[ArmSearchConfig] = None
) -> FoldResult:
    """
    Fold a parsed structure with a default or supplied engine setup.

    Parameters
    ----------
    structure : RnaStructure
        Structure containing at least one loop.
    energy_model : Optional[ArmPairEnergyModelProtocol]
        Energy model, by default the unit `ArmPairEnergyModel`.
    config : Optional[ArmSearchConfig]
        Search settings, by default parallel with the default pool size.

    Returns
    -------
    FoldResult
        Optimized structure with its baseline and optimized energies.
    """
    engine = ArmSearchEngine(
        energy_model=energy_model if energy_model is not None else ArmPairEnergyModel(),
        config=config if config is not None else ArmSearchConfig(),
    )
    return engine.minimize(structure)


def fold_sequence(
    sequence: str,
    *,
    strict: bool = True,
    energy_model: Optional[ArmPairEnergyModelProtocol] = None,
    config: Optional[ArmSearchConfig] = None
) -> FoldResult:
    """
    Parse sequence notation and fold it around its major loop.

    Parameters
    ----------
    sequence : str
        Notation such as ``"AAAA{CCCC}UUUU"``.
    strict : bool, optional
        Parser mode, see `parse_sequence`.
    energy_model : Optional[ArmPairEnergyModelProtocol]
        Energy model, by default the unit `ArmPairEnergyModel`.
    config : Optional[ArmSearchConfig]
        Search settings.

    Returns
    -------
    FoldResult
        Optimized structure with its baseline and optimized energies.
    """
    structure = parse_sequence(sequence, strict=strict)
    return minimize_free_energy(structure, energy_model=energy_model, config=config)
