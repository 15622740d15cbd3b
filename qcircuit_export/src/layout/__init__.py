"""Layout Module
=================

Column layout for Qcircuit diagrams:

1. Occupancy grid: columns of cells and the occupancy of the newest column.
2. Reservation: deciding whether an operation fits in the newest column or
   needs a fresh one.
3. Loop brackets: pairing the start and end of repeated regions.

The resulting :class:`LatexExportState` is consumed by the emission package
to render the final LaTeX.
"""

from .occupancy_grid import OccupancyGrid
from .loop_brackets import LoopBracketStack, LoopSpan
from .export_state import LatexExportState

__all__ = [
    "LatexExportState",
    "OccupancyGrid",
    "LoopBracketStack",
    "LoopSpan",
]
