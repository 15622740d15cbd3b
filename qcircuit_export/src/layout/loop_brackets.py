"""Bookkeeping for repeated regions drawn as brackets above the circuit."""

from dataclasses import dataclass
from typing import List, Tuple

from qcircuit_export.src.common.exceptions import LoopNestingError


@dataclass(frozen=True)
class LoopSpan:
    """A closed repeated region: first and last column plus iteration count."""

    start: int
    end: int
    count: int


class LoopBracketStack:
    """Pairs loop openings with their closings.

    Open regions are kept on a stack, so regions may nest. Closed regions are
    recorded flat, in the order in which they were closed.
    """

    def __init__(self) -> None:
        self._open: List[Tuple[int, int]] = []
        self._spans: List[LoopSpan] = []

    @property
    def spans(self) -> Tuple[LoopSpan, ...]:
        return tuple(self._spans)

    @property
    def open_count(self) -> int:
        return len(self._open)

    def has_spans(self) -> bool:
        return bool(self._spans)

    def open(self, start: int, count: int) -> None:
        """Start a region of ``count`` iterations at column ``start``."""
        self._open.append((start, count))

    def close(self, end: int) -> LoopSpan:
        """Close the most recently opened region at column ``end``.

        Raises:
            LoopNestingError: If no region is open
        """
        if not self._open:
            raise LoopNestingError(
                "Unable to close loop, because no loop is currently open"
            )

        start, count = self._open.pop()
        span = LoopSpan(start=start, end=end, count=count)
        self._spans.append(span)
        return span
