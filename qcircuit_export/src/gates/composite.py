"""User-defined gates built from a sequence of other gates."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Sequence, Tuple

from qcircuit_export.src.common import latex_tokens
from .base import Gate

if TYPE_CHECKING:
    from qcircuit_export.src.layout.export_state import LatexExportState


@dataclass(frozen=True)
class SubGate:
    """A gate in a composite, with bit numbers relative to the composite."""

    gate: Gate
    bits: Tuple[int, ...]


class Composite(Gate):
    """Gate made up of a sequence of more primitive gates.

    Sub-gates are added with :meth:`add_gate`. When drawn, the composite is
    either expanded into its sub-gates or shown as one block spanning its
    bits, depending on the export state's composite expansion setting.
    """

    def __init__(self, name: str, nr_bits: int):
        self.name = name
        self.nr_bits = nr_bits
        self.ops: List[SubGate] = []

    @property
    def description(self) -> str:
        return self.name

    @property
    def nr_affected_bits(self) -> int:
        return self.nr_bits

    def add_gate(self, gate: Gate, bits: Sequence[int]) -> None:
        """Append ``gate``, acting on composite bits ``bits``."""
        self.ops.append(SubGate(gate, tuple(bits)))

    def _map_bits(self, op: SubGate, bits: Sequence[int]) -> List[int]:
        return [bits[bit] for bit in op.bits]

    def _draws_as_block(self, state: LatexExportState) -> bool:
        return not state.expand_composite()

    def latex_checked(self, bits: Sequence[int], state: LatexExportState) -> None:
        if self._draws_as_block(state):
            state.reserve_range(bits)
        self.latex(bits, state)

    def latex(self, bits: Sequence[int], state: LatexExportState) -> None:
        if self._draws_as_block(state):
            # One column covering every row from the lowest to the highest bit
            first, last = min(bits), max(bits)
            state.set_field(first, latex_tokens.multigate(last - first, self.name))
            for bit in range(first + 1, last + 1):
                state.set_field(bit, latex_tokens.ghost(self.name))
            return

        for op in self.ops:
            op.gate.latex_checked(self._map_bits(op, bits), state)

    def open_qasm(self, bit_names: Sequence[str], bits: Sequence[int]) -> str:
        return "; ".join(
            op.gate.open_qasm(bit_names, self._map_bits(op, bits)) for op in self.ops
        )

    def conditional_open_qasm(
        self, condition: str, bit_names: Sequence[str], bits: Sequence[int]
    ) -> str:
        return "; ".join(
            op.gate.conditional_open_qasm(
                condition, bit_names, self._map_bits(op, bits)
            )
            for op in self.ops
        )
