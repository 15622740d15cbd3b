"""Operation records making up a circuit."""

from dataclasses import dataclass, field
from typing import Optional, Tuple

from qcircuit_export.src.gates.base import Gate


@dataclass(frozen=True)
class CircuitOp:
    """Base class for all circuit operations.

    ``line`` and ``column`` locate the operation in its source description,
    when it came from one.
    """

    line: int = field(default=0, kw_only=True)
    column: int = field(default=0, kw_only=True)


@dataclass(frozen=True)
class GateOp(CircuitOp):
    """Application of ``gate`` to quantum bits ``bits``."""

    gate: Gate
    bits: Tuple[int, ...]


@dataclass(frozen=True)
class ConditionalGateOp(CircuitOp):
    """Gate applied only when classical register ``control`` equals ``target``.

    ``control[0]`` is the least significant bit of the register.
    """

    control: Tuple[int, ...]
    target: int
    gate: Gate
    bits: Tuple[int, ...]


@dataclass(frozen=True)
class MeasureOp(CircuitOp):
    """Measurement of quantum bit ``qbit`` into classical bit ``cbit``."""

    qbit: int
    cbit: int
    basis: Optional[str] = None


@dataclass(frozen=True)
class ResetOp(CircuitOp):
    qbit: int


@dataclass(frozen=True)
class BarrierOp(CircuitOp):
    qbits: Tuple[int, ...]
