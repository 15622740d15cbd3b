"""
Tests for emission/latex_emitter.py - circuits drawn through the gate catalogue.
"""

from dataclasses import replace

import pytest

from qcircuit_export.src.circuit import Circuit
from qcircuit_export.src.circuit.operations import CircuitOp
from qcircuit_export.src.common.constants import DEFAULT_CONFIG
from qcircuit_export.src.common.diagnostics import DiagnosticSeverity, ProgramDiagnostics
from qcircuit_export.src.common.exceptions import ExportError
from qcircuit_export.src.emission.latex_emitter import LatexEmitter, emit_latex
from qcircuit_export.src.gates import CX, Composite, H, X


def _rows(latex):
    """Diagram rows without header and footer."""
    return latex.splitlines()[1:-1]


class TestLatexEmitter:
    """Tests for LatexEmitter."""

    def test_cnot(self):
        circuit = Circuit(2)
        circuit.add_gate(CX(), [0, 1])
        assert _rows(emit_latex(circuit)) == [
            r"    \lstick{\ket{0}} & \ctrl{1} & \qw \\",
            r"    \lstick{\ket{0}} & \targ & \qw \\",
        ]

    def test_conditional_gate(self):
        circuit = Circuit(1, 1)
        circuit.add_conditional_gate([0], 1, X(), [0])
        assert _rows(emit_latex(circuit)) == [
            r"    \lstick{\ket{0}} & \gate{X} & \qw \\",
            r"    \lstick{0} & \cctrl{-1} & \cw \\",
        ]

    def test_conditional_composite_drawn_as_block(self):
        """Test a conditional composite stays in one column."""
        bell = Composite("bell", 2)
        bell.add_gate(H(), [0])
        bell.add_gate(CX(), [0, 1])
        circuit = Circuit(2, 1)
        circuit.add_conditional_gate([0], 0, bell, [0, 1])
        assert _rows(emit_latex(circuit)) == [
            r"    \lstick{\ket{0}} & \multigate{1}{bell} & \qw \\",
            r"    \lstick{\ket{0}} & \ghost{bell} & \qw \\",
            r"    \lstick{0} & \cctrlo{-1} & \cw \\",
        ]

    def test_conditional_composite_on_non_adjacent_bits(self):
        """Test the condition covers the whole gate, which stays in one column."""
        gate = Composite("g", 2)
        gate.add_gate(H(), [0])
        gate.add_gate(X(), [0])
        gate.add_gate(H(), [1])
        circuit = Circuit(3, 1)
        circuit.add_conditional_gate([0], 1, gate, [0, 2])
        assert _rows(emit_latex(circuit)) == [
            r"    \lstick{\ket{0}} & \multigate{2}{g} & \qw \\",
            r"    \lstick{\ket{0}} & \ghost{g} & \qw \\",
            r"    \lstick{\ket{0}} & \ghost{g} & \qw \\",
            r"    \lstick{0} & \cctrl{-1} & \cw \\",
        ]

    def test_measure_reset_barrier(self):
        circuit = Circuit(2, 1)
        circuit.measure(1, 0, "Z")
        circuit.reset(0)
        circuit.barrier([0, 1])
        assert _rows(emit_latex(circuit)) == [
            r"    \lstick{\ket{0}} & \push{~\ket{0}~} \ar @{|-{}} [0,-1] & \qw \barrier{1} & \qw \\",
            r"    \lstick{\ket{0}} & \meterB{Z} & \qw & \qw \\",
            r"    \lstick{0} & \cw \cwx[-1] & \cw & \cw \\",
        ]

    def test_config_disables_init(self):
        circuit = Circuit(1)
        circuit.add_gate(H(), [0])
        config = replace(DEFAULT_CONFIG, add_init=False)
        assert _rows(emit_latex(circuit, config)) == [r"     & \gate{H} & \qw \\"]

    def test_debug_diagnostic_recorded(self):
        circuit = Circuit(1)
        circuit.add_gate(H(), [0])
        diagnostics = ProgramDiagnostics()
        LatexEmitter(diagnostics).emit(circuit)
        messages = diagnostics.get_messages(DiagnosticSeverity.DEBUG)
        assert any("1 column(s)" in message for message in messages)

    def test_unknown_operation_rejected(self):
        emitter = LatexEmitter()
        emitter.emit(Circuit(1))
        with pytest.raises(ExportError):
            emitter.visit(CircuitOp())
