"""Layout session for exporting a circuit to Qcircuit LaTeX."""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from qcircuit_export.src.common import latex_tokens
from qcircuit_export.src.common.bit_ranges import get_ranges
from qcircuit_export.src.common.constants import DEFAULT_CONFIG, ExportConfig
from .loop_brackets import LoopBracketStack, LoopSpan
from .occupancy_grid import OccupancyGrid

logger = logging.getLogger(__name__)


class LatexExportState:
    """Builds up the cell grid of a Qcircuit diagram.

    The state owns an :class:`OccupancyGrid` and a :class:`LoopBracketStack`;
    gates and circuit operations only ever reach the grid through the
    reservation and placement methods below. Construction is a single
    sequential pass, after which :func:`render_latex` turns the state into
    LaTeX once.
    """

    def __init__(
        self, nr_qbits: int, nr_cbits: int = 0, config: ExportConfig = DEFAULT_CONFIG
    ):
        self.nr_qbits = nr_qbits
        self.nr_cbits = nr_cbits
        self.config = config
        self.grid = OccupancyGrid(nr_qbits, nr_cbits)
        self.loops = LoopBracketStack()

        self._add_init = config.add_init
        self._expand_composite = config.expand_composite
        self._controlled = False

    @property
    def total_nr_bits(self) -> int:
        return self.grid.total_nr_bits

    @property
    def add_init(self) -> bool:
        return self._add_init

    def set_add_init(self, add_init: bool) -> None:
        """Whether to draw initialization labels in front of the bit lines."""
        self._add_init = add_init

    def set_expand_composite(self, expand: bool) -> bool:
        """Set whether composite gates are drawn as their sub-gates.

        Returns the previous setting, so callers can restore it.
        """
        previous = self._expand_composite
        self._expand_composite = expand
        return previous

    def expand_composite(self) -> bool:
        return self._expand_composite

    def set_controlled(self, controlled: bool) -> bool:
        """Switch between normal and controlled drawing of gates.

        A controlled ``X`` is drawn as a target symbol instead of a boxed X.
        Returns the previous setting, so callers can restore it.
        """
        previous = self._controlled
        self._controlled = controlled
        return previous

    def is_controlled(self) -> bool:
        return self._controlled

    # Reservation and placement, delegated to the grid

    def reserve(
        self, qbits: Sequence[int], cbits: Optional[Sequence[int]] = None
    ) -> None:
        self.grid.reserve(qbits, cbits)

    def reserve_range(
        self, qbits: Sequence[int], cbits: Optional[Sequence[int]] = None
    ) -> None:
        self.grid.reserve_range(qbits, cbits)

    def reserve_all(self) -> None:
        self.grid.reserve_all()

    def claim_range(
        self, qbits: Sequence[int], cbits: Optional[Sequence[int]] = None
    ) -> None:
        self.grid.claim_range(qbits, cbits)

    def add_column(self) -> None:
        self.grid.append_column()

    def set_field(self, bit: int, contents: str) -> None:
        self.grid.write_cell(bit, contents)

    # Composite placements

    def set_measurement(
        self, qbit: int, cbit: int, basis: Optional[str] = None
    ) -> None:
        """Draw a measurement of quantum bit ``qbit`` into classical bit ``cbit``.

        When ``basis`` is given, it is shown inside the meter. The rows between
        the two bits are claimed for the classical connector.
        """
        cbit_idx = self.nr_qbits + cbit
        self.reserve_range([qbit], [cbit])
        meter = (
            latex_tokens.meter_in_basis(basis)
            if basis is not None
            else latex_tokens.METER
        )
        self.set_field(qbit, meter)
        self.set_field(cbit_idx, latex_tokens.classical_wire_to(qbit - cbit_idx))
        self.claim_range([qbit], [cbit])

    def set_reset(self, qbit: int) -> None:
        self.reserve([qbit])
        self.set_field(qbit, latex_tokens.RESET)

    def set_condition(
        self, control: Sequence[int], target: int, qbits: Sequence[int]
    ) -> None:
        """Draw the classical control of an operation on ``qbits``.

        Only the control part is drawn; the quantum operation itself has to be
        placed separately. The bits in ``control`` form a register whose value
        must equal ``target``; ``control[0]`` is its least significant bit.
        Control dots are connected to each other in row order, and the
        topmost one to the lowest row of the operation.
        """
        if not qbits:
            return

        prev_bit = max(qbits)
        rows = sorted(
            (self.nr_qbits + cbit, pos) for pos, cbit in enumerate(control)
        )
        for bit, pos in rows:
            on_one = bool(target & (1 << pos))
            self.set_field(bit, latex_tokens.classical_control(prev_bit - bit, on_one))
            prev_bit = bit

        self.claim_range(qbits, control)

    def set_barrier(self, qbits: Sequence[int]) -> None:
        """Draw a barrier over the quantum bits in ``qbits``.

        A barrier always starts a new column. Barrier spacing in qcircuit is
        not exact, so output may need manual adjustment.
        """
        self.add_column()
        for first, last in get_ranges(qbits):
            self.set_field(first, latex_tokens.barrier(last - first))

    def start_loop(self, count: int) -> None:
        """Open a repeated region of ``count`` iterations at the current column."""
        self.reserve_all()
        self.loops.open(self.grid.last_column_index, count)

    def end_loop(self) -> LoopSpan:
        """Close the region opened last by :meth:`start_loop`.

        Raises:
            LoopNestingError: If no region is open
        """
        span = self.loops.close(self.grid.last_column_index)
        logger.debug(
            "Closed loop over columns %d-%d (%d iterations)",
            span.start,
            span.end,
            span.count,
        )
        self.reserve_all()
        return span

    def add_cds(self, bit: int, count: int, label: str) -> None:
        """Place ``label`` centred over ``count`` rows below ``bit``.

        Typically used for the dots inside a repeated region. The label gets
        a column of its own.
        """
        self.reserve_all()
        self.set_field(bit, latex_tokens.cds(count, label))
        self.reserve_all()

    def code(self) -> str:
        """Render the diagram built so far as Qcircuit LaTeX."""
        from qcircuit_export.src.emission.latex_renderer import render_latex

        return render_latex(self)
