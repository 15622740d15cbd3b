"""Parse tree transformer producing circuit statements."""

from __future__ import annotations

from typing import List

from lark import Token, Transformer

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


class CircuitTransformer(Transformer):
    """Transforms the Lark parse tree into :mod:`nodes` statements."""

    @staticmethod
    def _ints(items) -> List[int]:
        return [int(item) for item in items if isinstance(item, Token)]

    @staticmethod
    def _set_position(node: Statement, token: Token) -> Statement:
        node.line = token.line
        node.column = token.column
        return node

    def start(self, items) -> CircuitDescription:
        """start: _item*"""
        return CircuitDescription(statements=list(items))

    def block(self, items) -> List[Statement]:
        """block: "{" _item* "}" """
        return list(items)

    def args(self, items) -> List[float]:
        """args: "(" [NUMBER ("," NUMBER)*] ")" """
        # An empty list yields a single None placeholder
        return [float(item) for item in items if item is not None]

    def gate_app(self, items) -> GateApplication:
        """gate_app: NAME args? INT+"""
        name = items[0]
        args: List[float] = []
        if len(items) > 1 and isinstance(items[1], list):
            args = items[1]
        node = GateApplication(
            name=str(name), args=args, bits=self._ints(items[1:])
        )
        return self._set_position(node, name)

    def measure_stmt(self, items) -> Measurement:
        """measure_stmt: "measure" INT INT [NAME]"""
        qbit, cbit, basis = items
        node = Measurement(
            qbit=int(qbit),
            cbit=int(cbit),
            basis=str(basis).upper() if basis is not None else None,
        )
        return self._set_position(node, qbit)

    def reset_stmt(self, items) -> Reset:
        """reset_stmt: "reset" INT"""
        return self._set_position(Reset(qbit=int(items[0])), items[0])

    def barrier_stmt(self, items) -> Barrier:
        """barrier_stmt: "barrier" INT+"""
        return self._set_position(Barrier(qbits=self._ints(items)), items[0])

    def cond_stmt(self, items) -> Conditional:
        """cond_stmt: "if" "(" INT+ "==" INT ")" gate_app"""
        *values, application = items
        node = Conditional(
            control=self._ints(values[:-1]),
            target=int(values[-1]),
            application=application,
        )
        return self._set_position(node, values[0])

    def loop_stmt(self, items) -> LoopBlock:
        """loop_stmt: "loop" INT block"""
        count, body = items
        return self._set_position(LoopBlock(nr_iterations=int(count), body=body), count)

    def gate_def(self, items) -> GateDefinition:
        """gate_def: "gate" NAME block"""
        name, body = items
        return self._set_position(GateDefinition(name=str(name), body=body), name)
