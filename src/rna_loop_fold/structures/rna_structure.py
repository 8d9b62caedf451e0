from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Optional, Tuple

from rna_loop_fold.errors import NoMajorLoopError, NoSingleToPromoteError
from rna_loop_fold.structures.segments import Loop, Segment, Single

__all__ = ["RnaStructure"]


@dataclass(slots=True)
class RnaStructure:
    """
    An RNA strand read in one direction, as an ordered list of segments.

    Every segment is either a `Single` base, still free to pair, or a `Loop`
    of bases already committed to an unpaired region. Structural operations
    return new structures; only `join` mutates the receiver.

    Attributes
    ----------
    segments : List[Segment]
        Segments in strand order. May be empty (an exhausted arm).
    """
    segments: List[Segment] = field(default_factory=list)

    @classmethod
    def from_segments(cls, segments: Iterable[Segment]) -> RnaStructure:
        return cls(list(segments))

    # ---- Basic container behaviour -------------------------------------------

    def __len__(self) -> int:
        return len(self.segments)

    def __iter__(self) -> Iterator[Segment]:
        return iter(self.segments)

    def __str__(self) -> str:
        return self.to_notation()

    def __repr__(self) -> str:
        return f"RnaStructure(segments={self.to_notation()!r})"

    @property
    def is_empty(self) -> bool:
        return not self.segments

    @property
    def first(self) -> Optional[Segment]:
        return self.segments[0] if self.segments else None

    @property
    def last(self) -> Optional[Segment]:
        return self.segments[-1] if self.segments else None

    @property
    def has_loop(self) -> bool:
        return any(isinstance(segment, Loop) for segment in self.segments)

    @property
    def has_single(self) -> bool:
        return any(isinstance(segment, Single) for segment in self.segments)

    @property
    def base_count(self) -> int:
        """Total number of nucleotides across all segments."""
        return sum(segment.size for segment in self.segments)

    def copy(self) -> RnaStructure:
        return RnaStructure(list(self.segments))

    def reversed(self) -> RnaStructure:
        """A new structure with the segment order reversed (loop contents untouched)."""
        return RnaStructure(self.segments[::-1])

    def to_notation(self) -> str:
        """
        Render the structure in input notation.

        Singles are written as bare upper-case letters and loops are wrapped in
        braces, e.g. ``"AA{GCG}UU"``.
        """
        return "".join(segment.to_notation() for segment in self.segments)

    # ---- Structural operations -----------------------------------------------

    def major_loop_index(self) -> int:
        """
        Index of the major loop: the longest loop, the last one on a tie.

        Returns
        -------
        int
            Position of the major loop within `segments`.

        Raises
        ------
        NoMajorLoopError
            If the structure holds no `Loop` segment.
        """
        major_idx: Optional[int] = None
        major_len = 0
        for idx, segment in enumerate(self.segments):
            # `>=` lets a later loop of equal length take over.
            if isinstance(segment, Loop) and len(segment.bases) >= major_len:
                major_idx = idx
                major_len = len(segment.bases)

        if major_idx is None:
            raise NoMajorLoopError()

        return major_idx

    def split_at_major_loop(self) -> Tuple[RnaStructure, Loop, RnaStructure]:
        """
        Split the strand on both sides of its major loop.

        Arm A is the prefix before the loop, reversed so that index 0 of both
        arms sits next to the loop. Arm B is the suffix after the loop.

        Returns
        -------
        Tuple[RnaStructure, Loop, RnaStructure]
            ``(arm_a, major_loop, arm_b)``.

        Raises
        ------
        NoMajorLoopError
            If the structure holds no `Loop` segment.
        """
        major_idx = self.major_loop_index()
        major_loop = self.segments[major_idx]

        arm_a = RnaStructure(self.segments[:major_idx][::-1])
        arm_b = RnaStructure(self.segments[major_idx + 1:])

        return arm_a, major_loop, arm_b

    def promote_first_single_to_loop(self) -> RnaStructure:
        """
        Turn the first `Single` segment into a one-base `Loop`.

        This models a base opting out of pairing as its own bulge.

        Returns
        -------
        RnaStructure
            A new structure; the receiver is left unchanged.

        Raises
        ------
        NoSingleToPromoteError
            If the structure has no `Single` segment.
        """
        for idx, segment in enumerate(self.segments):
            if isinstance(segment, Single):
                segments = list(self.segments)
                segments[idx] = segment.as_loop()
                return RnaStructure(segments)

        raise NoSingleToPromoteError()

    def split_after_first_segment(self) -> Tuple[RnaStructure, RnaStructure]:
        """Split into ``(first segment alone, remainder)``."""
        return RnaStructure(self.segments[:1]), RnaStructure(self.segments[1:])

    def align_fronts(self, other: RnaStructure) -> Tuple[RnaStructure, RnaStructure, RnaStructure, RnaStructure]:
        """
        Consume the leading segments of two opposing arms for one pairing round.

        A side whose front is a `Loop` cannot offer a base this round: when it
        faces a `Single`, the loop passes through alone and the single is held
        back for the next round. Any other combination consumes one segment
        from each side.

        Parameters
        ----------
        other : RnaStructure
            The opposing arm.

        Returns
        -------
        Tuple[RnaStructure, RnaStructure, RnaStructure, RnaStructure]
            ``(a_head, a_tail, b_head, b_tail)`` where the heads hold the
            segments consumed this round.
        """
        front_a, front_b = self.first, other.first

        if isinstance(front_a, Loop) and isinstance(front_b, Single):
            a_head, a_tail = self.split_after_first_segment()
            return a_head, a_tail, RnaStructure(), other.copy()

        if isinstance(front_a, Single) and isinstance(front_b, Loop):
            b_head, b_tail = other.split_after_first_segment()
            return RnaStructure(), self.copy(), b_head, b_tail

        a_head, a_tail = self.split_after_first_segment()
        b_head, b_tail = other.split_after_first_segment()
        return a_head, a_tail, b_head, b_tail

    def join(self, other: RnaStructure) -> None:
        """
        Append `other`'s segments to this structure in place.

        When this structure ends in a `Loop` and `other` starts with one, the
        two are merged into a single loop instead of being left adjacent.

        Parameters
        ----------
        other : RnaStructure
            Structure whose segments are appended. It is not modified.
        """
        incoming = other.segments
        tail = self.last
        if incoming and isinstance(tail, Loop) and isinstance(incoming[0], Loop):
            self.segments[-1] = tail.merged_with(incoming[0])
            incoming = incoming[1:]

        self.segments.extend(incoming)
