"""Circuit model: the operations handed to the emitters."""

from .circuit import Circuit
from .operations import (
    CircuitOp,
    GateOp,
    ConditionalGateOp,
    MeasureOp,
    ResetOp,
    BarrierOp,
)

__all__ = [
    "Circuit",
    "CircuitOp",
    "GateOp",
    "ConditionalGateOp",
    "MeasureOp",
    "ResetOp",
    "BarrierOp",
]
