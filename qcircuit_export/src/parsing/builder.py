"""Build a :class:`Circuit` from parsed statements.

Gate names are resolved against user definitions first and the catalogue
second. Register sizes default to one past the highest bit mentioned.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from qcircuit_export.src.circuit import Circuit
from qcircuit_export.src.common.constants import MEASUREMENT_BASES
from qcircuit_export.src.common.diagnostics import ProgramDiagnostics
from qcircuit_export.src.common.exceptions import CircuitParseError, ExportError
from qcircuit_export.src.gates import Composite, Gate, Loop, create_gate
from qcircuit_export.src.gates.registry import lookup_gate
from .nodes import (
    Barrier,
    CircuitDescription,
    Conditional,
    GateApplication,
    GateDefinition,
    LoopBlock,
    Measurement,
    Reset,
    Statement,
)


class CircuitBuilder:
    """Resolves gate names and checks statements while building a circuit."""

    def __init__(self, diagnostics: Optional[ProgramDiagnostics] = None):
        self.diagnostics = diagnostics or ProgramDiagnostics()
        self.diagnostics.default_stage = "parsing"
        self.definitions: Dict[str, Composite] = {}
        self.source_file: Optional[str] = None
        self._loop_count = 0

    def build(
        self,
        description: CircuitDescription,
        nr_qbits: Optional[int] = None,
        nr_cbits: Optional[int] = None,
    ) -> Circuit:
        """Return the circuit for ``description``.

        Raises:
            CircuitParseError: For unknown gates, wrong argument or bit
                counts, and statements that do not fit the registers
        """
        self.source_file = description.source_file
        used_qbits, used_cbits = self._register_sizes(description.statements)
        if nr_qbits is None:
            nr_qbits = used_qbits
        if nr_cbits is None:
            nr_cbits = used_cbits

        circuit = Circuit(nr_qbits, nr_cbits)
        for stmt in description.statements:
            self._add_statement(circuit, stmt)

        self.diagnostics.info(
            f"Built circuit with {nr_qbits} qubit(s), {nr_cbits} classical "
            f"bit(s) and {len(circuit)} operation(s)",
            source_file=self.source_file,
        )
        return circuit

    def _register_sizes(self, statements: Iterable[Statement]) -> Tuple[int, int]:
        max_qbit = -1
        max_cbit = -1
        for stmt in statements:
            qbits: Sequence[int] = ()
            cbits: Sequence[int] = ()
            if isinstance(stmt, GateApplication):
                qbits = stmt.bits
            elif isinstance(stmt, Conditional):
                qbits = stmt.application.bits
                cbits = stmt.control
            elif isinstance(stmt, Measurement):
                qbits = [stmt.qbit]
                cbits = [stmt.cbit]
            elif isinstance(stmt, Reset):
                qbits = [stmt.qbit]
            elif isinstance(stmt, Barrier):
                qbits = stmt.qbits
            elif isinstance(stmt, LoopBlock):
                nested_q, nested_c = self._register_sizes(stmt.body)
                qbits = [nested_q - 1] if nested_q else ()
                cbits = [nested_c - 1] if nested_c else ()

            max_qbit = max([max_qbit, *qbits])
            max_cbit = max([max_cbit, *cbits])
        return max_qbit + 1, max_cbit + 1

    def _error(self, message: str, stmt: Statement) -> CircuitParseError:
        return CircuitParseError(message, stmt.line, stmt.column)

    def _add_statement(self, circuit: Circuit, stmt: Statement) -> None:
        try:
            if isinstance(stmt, GateApplication):
                circuit.add_gate(self._make_gate(stmt), stmt.bits)
            elif isinstance(stmt, Conditional):
                gate = self._make_gate(stmt.application)
                circuit.add_conditional_gate(
                    stmt.control, stmt.target, gate, stmt.application.bits
                )
            elif isinstance(stmt, Measurement):
                if stmt.basis is not None and stmt.basis not in MEASUREMENT_BASES:
                    raise self._error(
                        f"Unknown measurement basis \"{stmt.basis}\", expected one of "
                        f"{', '.join(MEASUREMENT_BASES)}",
                        stmt,
                    )
                circuit.measure(stmt.qbit, stmt.cbit, stmt.basis)
            elif isinstance(stmt, Reset):
                circuit.reset(stmt.qbit)
            elif isinstance(stmt, Barrier):
                circuit.barrier(stmt.qbits)
            elif isinstance(stmt, LoopBlock):
                loop, bits = self._make_loop(stmt)
                if loop is not None:
                    circuit.add_gate(loop, bits)
            elif isinstance(stmt, GateDefinition):
                self._define(stmt)
            else:
                raise self._error(
                    f"Unsupported statement {type(stmt).__name__}", stmt
                )
        except CircuitParseError:
            raise
        except ExportError as exc:
            raise self._error(str(exc), stmt) from exc

    def _make_gate(self, app: GateApplication) -> Gate:
        definition = self.definitions.get(app.name)
        if definition is not None:
            if app.args:
                raise self._error(
                    f"Gate \"{app.name}\" does not take arguments", app
                )
            gate: Gate = definition
        else:
            try:
                gate = create_gate(app.name, app.args)
            except KeyError:
                raise self._error(f"Unknown gate \"{app.name}\"", app) from None
            except ValueError as exc:
                raise self._error(str(exc), app) from None

        if gate.nr_affected_bits != len(app.bits):
            raise self._error(
                f"Invalid number of bits for \"{app.name}\" gate: expected "
                f"{gate.nr_affected_bits}, got {len(app.bits)}",
                app,
            )
        if len(set(app.bits)) != len(app.bits):
            raise self._error(f"Duplicate bits for \"{app.name}\" gate", app)
        return gate

    def _define(self, stmt: GateDefinition) -> None:
        if stmt.name in self.definitions or lookup_gate(stmt.name) is not None:
            raise self._error(f"Gate \"{stmt.name}\" is already defined", stmt)

        apps: List[GateApplication] = []
        for inner in stmt.body:
            if not isinstance(inner, GateApplication):
                raise self._error(
                    "Only gate applications are allowed in gate definitions", inner
                )
            apps.append(inner)
        if not apps:
            raise self._error(f"Gate \"{stmt.name}\" has no body", stmt)

        nr_bits = max(max(app.bits) for app in apps) + 1
        composite = Composite(stmt.name, nr_bits)
        for app in apps:
            composite.add_gate(self._make_gate(app), app.bits)

        self.definitions[stmt.name] = composite
        self.diagnostics.debug(
            f"Defined gate \"{stmt.name}\" on {nr_bits} bit(s)",
            line=stmt.line,
            column=stmt.column,
            source_file=self.source_file,
        )

    def _make_loop(self, stmt: LoopBlock) -> Tuple[Optional[Loop], List[int]]:
        """Build the loop gate for ``stmt`` and the circuit bits it spans."""
        if stmt.nr_iterations == 0:
            self.diagnostics.warning(
                "Loop with zero iterations has no effect",
                line=stmt.line,
                column=stmt.column,
                source_file=self.source_file,
            )

        parts: List[Tuple[Gate, List[int]]] = []
        for inner in stmt.body:
            if isinstance(inner, GateApplication):
                parts.append((self._make_gate(inner), inner.bits))
            elif isinstance(inner, LoopBlock):
                nested, bits = self._make_loop(inner)
                if nested is not None:
                    parts.append((nested, bits))
            else:
                raise self._error(
                    "Only gates and loops are allowed in a loop body", inner
                )
        if not parts:
            self.diagnostics.warning(
                "Ignoring loop with an empty body",
                line=stmt.line,
                column=stmt.column,
                source_file=self.source_file,
            )
            return None, []

        used = sorted({bit for _, bits in parts for bit in bits})
        index = {bit: position for position, bit in enumerate(used)}

        self._loop_count += 1
        label = f"loop{self._loop_count}"
        body = Composite(label, len(used))
        for gate, bits in parts:
            body.add_gate(gate, [index[bit] for bit in bits])
        return Loop(label, stmt.nr_iterations, body), used
