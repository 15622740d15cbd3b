"""Helpers for grouping bit indices into contiguous runs."""

from typing import Iterable, List, Tuple


def get_ranges(bits: Iterable[int]) -> List[Tuple[int, int]]:
    """Split bit indices into maximal runs of adjacent bits.

    The bits are sorted and de-duplicated first, so ``[2, 0, 1, 5]`` yields
    ``[(0, 2), (5, 5)]``. Each run is returned as an inclusive
    ``(first, last)`` pair.
    """
    ranges: List[Tuple[int, int]] = []
    for bit in sorted(set(bits)):
        if ranges and ranges[-1][1] + 1 == bit:
            ranges[-1] = (ranges[-1][0], bit)
        else:
            ranges.append((bit, bit))
    return ranges
