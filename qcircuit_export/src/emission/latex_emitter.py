"""
LaTeX emission for circuits.

This module walks the operations of a :class:`Circuit`, lets each one place
itself in a :class:`LatexExportState`, and renders the result with the
qcircuit package's markup.
"""

from __future__ import annotations

from typing import Any, Optional

from qcircuit_export.src.circuit import (
    BarrierOp,
    Circuit,
    CircuitOp,
    ConditionalGateOp,
    GateOp,
    MeasureOp,
    ResetOp,
)
from qcircuit_export.src.common.constants import DEFAULT_CONFIG, ExportConfig
from qcircuit_export.src.common.diagnostics import ProgramDiagnostics
from qcircuit_export.src.common.exceptions import ExportError
from qcircuit_export.src.layout.export_state import LatexExportState
from .latex_renderer import render_latex


class LatexEmitter:
    """Lay out a circuit column by column and render it as Qcircuit LaTeX."""

    def __init__(
        self,
        diagnostics: Optional[ProgramDiagnostics] = None,
        config: ExportConfig = DEFAULT_CONFIG,
    ) -> None:
        self.diagnostics = diagnostics or ProgramDiagnostics()
        self.diagnostics.default_stage = "emission"
        self.config = config
        self.state: Optional[LatexExportState] = None

    def emit(self, circuit: Circuit) -> str:
        """Return the LaTeX code for ``circuit``."""
        self.state = LatexExportState(circuit.nr_qbits, circuit.nr_cbits, self.config)
        for op in circuit.ops:
            self.visit(op)

        self.diagnostics.debug(
            f"Laid out {len(circuit.ops)} operation(s) in "
            f"{self.state.grid.column_count} column(s)"
        )
        return render_latex(self.state)

    def visit(self, op: CircuitOp) -> Any:
        method_name = f"visit_{type(op).__name__}"
        if hasattr(self, method_name):
            return getattr(self, method_name)(op)
        return self.generic_visit(op)

    def generic_visit(self, op: CircuitOp) -> Any:
        raise ExportError(f"Cannot draw operation {type(op).__name__}")

    def visit_GateOp(self, op: GateOp) -> None:
        op.gate.latex_checked(op.bits, self.state)

    def visit_ConditionalGateOp(self, op: ConditionalGateOp) -> None:
        state = self.state
        state.reserve_range(op.bits, op.control)
        # Keep the gate in a single column so the condition lines up with it
        expand = state.set_expand_composite(False)
        op.gate.latex(op.bits, state)
        state.set_expand_composite(expand)
        state.set_condition(op.control, op.target, op.bits)

    def visit_MeasureOp(self, op: MeasureOp) -> None:
        self.state.set_measurement(op.qbit, op.cbit, op.basis)

    def visit_ResetOp(self, op: ResetOp) -> None:
        self.state.set_reset(op.qbit)

    def visit_BarrierOp(self, op: BarrierOp) -> None:
        self.state.set_barrier(op.qbits)


def emit_latex(
    circuit: Circuit,
    config: ExportConfig = DEFAULT_CONFIG,
    diagnostics: Optional[ProgramDiagnostics] = None,
) -> str:
    """Convenience function to export a circuit to LaTeX in one call."""
    return LatexEmitter(diagnostics, config).emit(circuit)
