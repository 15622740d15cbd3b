"""Circuit container collecting operations on quantum and classical bits."""

from __future__ import annotations

from typing import List, Optional, Sequence

from qcircuit_export.src.common.constants import MEASUREMENT_BASES
from qcircuit_export.src.common.exceptions import ExportError
from qcircuit_export.src.gates.base import Gate
from .operations import (
    BarrierOp,
    CircuitOp,
    ConditionalGateOp,
    GateOp,
    MeasureOp,
    ResetOp,
)


class Circuit:
    """An ordered list of operations on ``nr_qbits`` qubits and ``nr_cbits`` bits.

    The builder methods check bit numbers against the register sizes, so the
    emitters can rely on every operation being in range.
    """

    def __init__(self, nr_qbits: int, nr_cbits: int = 0):
        if nr_qbits < 0 or nr_cbits < 0:
            raise ExportError("Register sizes cannot be negative")
        self.nr_qbits = nr_qbits
        self.nr_cbits = nr_cbits
        self.ops: List[CircuitOp] = []

    def __len__(self) -> int:
        return len(self.ops)

    def _check_qbits(self, qbits: Sequence[int]) -> None:
        for bit in qbits:
            if not 0 <= bit < self.nr_qbits:
                raise ExportError(
                    f"Quantum bit {bit} out of range, circuit has {self.nr_qbits}"
                )
        if len(set(qbits)) != len(qbits):
            raise ExportError(f"Duplicate quantum bits in {list(qbits)}")

    def _check_cbits(self, cbits: Sequence[int]) -> None:
        for bit in cbits:
            if not 0 <= bit < self.nr_cbits:
                raise ExportError(
                    f"Classical bit {bit} out of range, circuit has {self.nr_cbits}"
                )

    def _check_gate(self, gate: Gate, bits: Sequence[int]) -> None:
        if gate.nr_affected_bits != len(bits):
            raise ExportError(
                f"Gate \"{gate.description}\" operates on {gate.nr_affected_bits} "
                f"bit(s), got {len(bits)}"
            )
        self._check_qbits(bits)

    def add_op(self, op: CircuitOp) -> None:
        """Validate and append an already constructed operation."""
        if isinstance(op, GateOp):
            self._check_gate(op.gate, op.bits)
        elif isinstance(op, ConditionalGateOp):
            self._check_gate(op.gate, op.bits)
            self._check_cbits(op.control)
            if op.target < 0 or op.target >= (1 << len(op.control)):
                raise ExportError(
                    f"Condition value {op.target} does not fit in "
                    f"{len(op.control)} bit(s)"
                )
        elif isinstance(op, MeasureOp):
            self._check_qbits([op.qbit])
            self._check_cbits([op.cbit])
            if op.basis is not None and op.basis not in MEASUREMENT_BASES:
                raise ExportError(f"Unknown measurement basis \"{op.basis}\"")
        elif isinstance(op, ResetOp):
            self._check_qbits([op.qbit])
        elif isinstance(op, BarrierOp):
            self._check_qbits(op.qbits)
        else:
            raise ExportError(f"Unsupported operation {type(op).__name__}")

        self.ops.append(op)

    def add_gate(self, gate: Gate, bits: Sequence[int]) -> None:
        self.add_op(GateOp(gate, tuple(bits)))

    def add_conditional_gate(
        self, control: Sequence[int], target: int, gate: Gate, bits: Sequence[int]
    ) -> None:
        """Add ``gate`` on ``bits``, executed when ``control`` holds ``target``."""
        self.add_op(ConditionalGateOp(tuple(control), target, gate, tuple(bits)))

    def measure(self, qbit: int, cbit: int, basis: Optional[str] = None) -> None:
        self.add_op(MeasureOp(qbit, cbit, basis))

    def reset(self, qbit: int) -> None:
        self.add_op(ResetOp(qbit))

    def barrier(self, qbits: Sequence[int]) -> None:
        self.add_op(BarrierOp(tuple(qbits)))
