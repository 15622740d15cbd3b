"""Static loops: a body of gates executed a fixed number of times."""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from qcircuit_export.src.common.exceptions import ExportError
from .base import Gate
from .composite import Composite

if TYPE_CHECKING:
    from qcircuit_export.src.layout.export_state import LatexExportState


class Loop(Gate):
    """Executes the gates in ``body`` ``nr_iterations`` times.

    One or two iterations are drawn by repeating the body. Longer loops show
    the body twice with dots in between, under a bracket carrying the
    iteration count.
    """

    def __init__(self, label: str, nr_iterations: int, body: Composite):
        self.label = label
        self.nr_iterations = nr_iterations
        self.body = body
        self._description = f"{nr_iterations}({body.description})"

    @property
    def description(self) -> str:
        return self._description

    @property
    def nr_affected_bits(self) -> int:
        return self.body.nr_affected_bits

    def latex_checked(self, bits: Sequence[int], state: LatexExportState) -> None:
        # Nothing is drawn, so no column is reserved either
        if self.nr_iterations == 0:
            return
        super().latex_checked(bits, state)

    def latex(self, bits: Sequence[int], state: LatexExportState) -> None:
        if self.nr_iterations == 1:
            self.body.latex(bits, state)
        elif self.nr_iterations == 2:
            self.body.latex(bits, state)
            self.body.latex_checked(bits, state)
        elif self.nr_iterations > 2:
            low, high = min(bits), max(bits)

            state.start_loop(self.nr_iterations)
            self.body.latex(bits, state)
            state.add_cds(low, high - low, state.config.cds_label)
            self.body.latex_checked(bits, state)
            state.end_loop()

    def open_qasm(self, bit_names: Sequence[str], bits: Sequence[int]) -> str:
        if self.nr_iterations == 0:
            return ""
        body = self.body.open_qasm(bit_names, bits)
        return ";\n".join([body] * self.nr_iterations)

    def conditional_open_qasm(
        self, condition: str, bit_names: Sequence[str], bits: Sequence[int]
    ) -> str:
        raise ExportError(
            "Classical conditions cannot be used in conjunction with a static loop"
        )
