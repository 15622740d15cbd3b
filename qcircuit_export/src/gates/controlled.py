"""Multi-qubit gates: controlled gates and swap."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Sequence

from qcircuit_export.src.common import latex_tokens
from qcircuit_export.src.common.exceptions import ExportError
from .base import Gate
from .composite import Composite
from .standard import RX, RY, RZ, H, S, Sdg, T, Tdg, V, Vdg, X, Y, Z

if TYPE_CHECKING:
    from qcircuit_export.src.layout.export_state import LatexExportState


class Swap(Gate):
    """Exchange of two qubits, drawn as two crosses joined by a wire."""

    @property
    def description(self) -> str:
        return "Swap"

    @property
    def nr_affected_bits(self) -> int:
        return 2

    def latex_checked(self, bits: Sequence[int], state: LatexExportState) -> None:
        state.reserve_range(bits)
        self.latex(bits, state)

    def latex(self, bits: Sequence[int], state: LatexExportState) -> None:
        b0, b1 = bits[0], bits[1]
        state.set_field(b0, latex_tokens.SWAP)
        state.set_field(b1, latex_tokens.swap_to(b0 - b1))
        state.claim_range(bits)

    def open_qasm(self, bit_names: Sequence[str], bits: Sequence[int]) -> str:
        b0, b1 = bit_names[bits[0]], bit_names[bits[1]]
        return f"cx {b0}, {b1}; cx {b1}, {b0}; cx {b0}, {b1}"


class Controlled(Gate):
    """Gate ``gate`` controlled by ``nr_controls`` qubits.

    The first ``nr_controls`` bits passed to this gate are the controls, the
    rest are handed to the wrapped gate. ``qasm_name`` is the OpenQASM
    instruction for the whole gate, or ``None`` if there is none.
    """

    def __init__(
        self, gate: Gate, nr_controls: int = 1, qasm_name: Optional[str] = None
    ):
        self.gate = gate
        self.nr_controls = nr_controls
        self.qasm_name = qasm_name
        self._description = "C" * nr_controls + gate.description

    @property
    def description(self) -> str:
        return self._description

    @property
    def nr_affected_bits(self) -> int:
        return self.nr_controls + self.gate.nr_affected_bits

    def latex_checked(self, bits: Sequence[int], state: LatexExportState) -> None:
        state.reserve_range(bits)
        self.latex(bits, state)

    def latex(self, bits: Sequence[int], state: LatexExportState) -> None:
        controls = bits[: self.nr_controls]
        targets = bits[self.nr_controls :]

        low, high = min(targets), max(targets)
        if isinstance(self.gate, Composite):
            # The block covers every row between its bits
            for bit in controls:
                if low < bit < high:
                    raise ExportError(
                        f"Control bit {bit} of \"{self.description}\" lies inside "
                        f"the block spanning bits {low} to {high}"
                    )

        # The target is drawn in its controlled form, as a single block
        controlled = state.set_controlled(True)
        expand = state.set_expand_composite(False)
        self.gate.latex(targets, state)
        state.set_expand_composite(expand)
        state.set_controlled(controlled)

        for bit in controls:
            anchor = low if bit < low else high
            state.set_field(bit, latex_tokens.quantum_control(anchor - bit))

        state.claim_range(bits)

    def open_qasm(self, bit_names: Sequence[str], bits: Sequence[int]) -> str:
        if self.qasm_name is None:
            return super().open_qasm(bit_names, bits)

        name = self.qasm_name
        params = getattr(self.gate, "params", ())
        if params:
            name += "(" + ", ".join(str(param) for param in params) + ")"
        args = ", ".join(bit_names[bit] for bit in bits)
        return f"{name} {args}"


class CX(Controlled):
    def __init__(self):
        super().__init__(X(), qasm_name="cx")


class CY(Controlled):
    def __init__(self):
        super().__init__(Y(), qasm_name="cy")


class CZ(Controlled):
    def __init__(self):
        super().__init__(Z(), qasm_name="cz")


class CH(Controlled):
    def __init__(self):
        super().__init__(H(), qasm_name="ch")


class CS(Controlled):
    def __init__(self):
        super().__init__(S())


class CSdg(Controlled):
    def __init__(self):
        super().__init__(Sdg())


class CT(Controlled):
    def __init__(self):
        super().__init__(T())


class CTdg(Controlled):
    def __init__(self):
        super().__init__(Tdg())


class CV(Controlled):
    def __init__(self):
        super().__init__(V())


class CVdg(Controlled):
    def __init__(self):
        super().__init__(Vdg())


class CRX(Controlled):
    def __init__(self, theta: float):
        super().__init__(RX(theta))


class CRY(Controlled):
    def __init__(self, theta: float):
        super().__init__(RY(theta))


class CRZ(Controlled):
    def __init__(self, lmb: float):
        super().__init__(RZ(lmb), qasm_name="crz")


class CCX(Controlled):
    def __init__(self):
        super().__init__(X(), nr_controls=2, qasm_name="ccx")


class CCZ(Controlled):
    def __init__(self):
        super().__init__(Z(), nr_controls=2)


class CSwap(Controlled):
    def __init__(self):
        super().__init__(Swap())
