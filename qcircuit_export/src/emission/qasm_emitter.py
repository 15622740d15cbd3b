"""OpenQASM 2.0 emission for circuits."""

from __future__ import annotations

from typing import Any, List, Optional

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

QASM_HEADER = 'OPENQASM 2.0;\ninclude "qelib1.inc";\n'


class QasmEmitter:
    """Translate a circuit into an OpenQASM 2.0 program, one line per operation."""

    def __init__(
        self,
        diagnostics: Optional[ProgramDiagnostics] = None,
        config: ExportConfig = DEFAULT_CONFIG,
    ) -> None:
        self.diagnostics = diagnostics or ProgramDiagnostics()
        self.diagnostics.default_stage = "emission"
        self.config = config
        self.circuit: Optional[Circuit] = None
        self.qbit_names: List[str] = []
        self.cbit_names: List[str] = []

    def emit(self, circuit: Circuit) -> str:
        self.circuit = circuit
        self.qbit_names = [
            f"{self.config.qreg_name}[{bit}]" for bit in range(circuit.nr_qbits)
        ]
        self.cbit_names = [
            f"{self.config.creg_name}[{bit}]" for bit in range(circuit.nr_cbits)
        ]

        lines = [QASM_HEADER]
        if circuit.nr_qbits > 0:
            lines.append(f"qreg {self.config.qreg_name}[{circuit.nr_qbits}];\n")
        if circuit.nr_cbits > 0:
            lines.append(f"creg {self.config.creg_name}[{circuit.nr_cbits}];\n")

        for op in circuit.ops:
            instruction = self.visit(op)
            if instruction:
                lines.append(f"{instruction};\n")

        return "".join(lines)

    def visit(self, op: CircuitOp) -> Any:
        method_name = f"visit_{type(op).__name__}"
        if hasattr(self, method_name):
            return getattr(self, method_name)(op)
        return self.generic_visit(op)

    def generic_visit(self, op: CircuitOp) -> Any:
        raise ExportError(f"Cannot export operation {type(op).__name__} to OpenQasm")

    def visit_GateOp(self, op: GateOp) -> str:
        return op.gate.open_qasm(self.qbit_names, op.bits)

    def visit_ConditionalGateOp(self, op: ConditionalGateOp) -> str:
        # OpenQASM 2.0 can only compare a complete classical register
        if list(op.control) != list(range(self.circuit.nr_cbits)):
            raise ExportError(
                "OpenQasm only supports conditions on the full classical "
                "register, in bit order"
            )
        condition = f"{self.config.creg_name} == {op.target}"
        return op.gate.conditional_open_qasm(condition, self.qbit_names, op.bits)

    def visit_MeasureOp(self, op: MeasureOp) -> str:
        qbit = self.qbit_names[op.qbit]
        cbit = self.cbit_names[op.cbit]
        measure = f"measure {qbit} -> {cbit}"
        if op.basis == "X":
            return f"h {qbit}; {measure}"
        if op.basis == "Y":
            return f"sdg {qbit}; h {qbit}; {measure}"
        return measure

    def visit_ResetOp(self, op: ResetOp) -> str:
        return f"reset {self.qbit_names[op.qbit]}"

    def visit_BarrierOp(self, op: BarrierOp) -> str:
        return "barrier " + ", ".join(self.qbit_names[bit] for bit in op.qbits)


def emit_qasm(
    circuit: Circuit,
    config: ExportConfig = DEFAULT_CONFIG,
    diagnostics: Optional[ProgramDiagnostics] = None,
) -> str:
    """Convenience function to export a circuit to OpenQASM in one call."""
    return QasmEmitter(diagnostics, config).emit(circuit)
