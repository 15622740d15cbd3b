"""Statements produced by parsing a circuit description.

Bit numbers are kept exactly as written; checking them against gate
definitions and register sizes is left to :class:`CircuitBuilder`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class Statement:
    """Base class for statements, carrying their source position."""

    line: int = field(default=0, kw_only=True)
    column: int = field(default=0, kw_only=True)


@dataclass
class GateApplication(Statement):
    """``NAME(args) bits``"""

    name: str
    args: List[float]
    bits: List[int]


@dataclass
class Measurement(Statement):
    """``measure(basis) qbit -> cbit``"""

    qbit: int
    cbit: int
    basis: Optional[str] = None


@dataclass
class Reset(Statement):
    qbit: int


@dataclass
class Barrier(Statement):
    qbits: List[int]


@dataclass
class Conditional(Statement):
    """``if (control == target) application``"""

    control: List[int]
    target: int
    application: GateApplication


@dataclass
class LoopBlock(Statement):
    nr_iterations: int
    body: List[Statement]


@dataclass
class GateDefinition(Statement):
    name: str
    body: List[Statement]


@dataclass
class CircuitDescription:
    """All top-level statements of one source."""

    statements: List[Statement]
    source_file: Optional[str] = None
