"""Fixed and parametrised single-qubit gates."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Sequence, Tuple

from qcircuit_export.src.common import latex_tokens
from .base import Gate

if TYPE_CHECKING:
    from qcircuit_export.src.layout.export_state import LatexExportState


class SingleQubitGate(Gate):
    """Single-qubit gate drawn as a labelled box.

    Subclasses set ``name`` (the description), ``label`` (LaTeX inside the
    box) and ``qasm_name`` (``None`` when OpenQASM has no such gate). A gate
    with a special symbol in controlled form sets ``controlled_symbol``.
    """

    name = ""
    label = ""
    qasm_name: Optional[str] = None
    controlled_symbol: Optional[str] = None

    @property
    def description(self) -> str:
        return self.name

    @property
    def nr_affected_bits(self) -> int:
        return 1

    def latex(self, bits: Sequence[int], state: LatexExportState) -> None:
        if state.is_controlled() and self.controlled_symbol is not None:
            contents = self.controlled_symbol
        else:
            contents = latex_tokens.gate(self.label)
        state.set_field(bits[0], contents)

    def open_qasm(self, bit_names: Sequence[str], bits: Sequence[int]) -> str:
        if self.qasm_name is None:
            return super().open_qasm(bit_names, bits)
        return f"{self.qasm_name} {bit_names[bits[0]]}"


class Identity(SingleQubitGate):
    name = label = "I"
    qasm_name = "id"


class H(SingleQubitGate):
    name = label = "H"
    qasm_name = "h"


class X(SingleQubitGate):
    name = label = "X"
    qasm_name = "x"
    controlled_symbol = latex_tokens.TARGET


class Y(SingleQubitGate):
    name = label = "Y"
    qasm_name = "y"


class Z(SingleQubitGate):
    name = label = "Z"
    qasm_name = "z"
    controlled_symbol = latex_tokens.CONTROL


class S(SingleQubitGate):
    name = label = "S"
    qasm_name = "s"


class Sdg(SingleQubitGate):
    name = "S†"
    label = r"S^\dagger"
    qasm_name = "sdg"


class T(SingleQubitGate):
    name = label = "T"
    qasm_name = "t"


class Tdg(SingleQubitGate):
    name = "T†"
    label = r"T^\dagger"
    qasm_name = "tdg"


class V(SingleQubitGate):
    name = label = "V"


class Vdg(SingleQubitGate):
    name = "V†"
    label = r"V^\dagger"


def _format_params(params: Tuple[float, ...]) -> str:
    return ", ".join(f"{param:.4f}" for param in params)


class ParametrizedGate(SingleQubitGate):
    """Single-qubit gate with real parameters.

    ``label`` is the LaTeX name without parameters; the parameters are shown
    with four decimals, both in the box and in the description.
    """

    def __init__(self, *params: float):
        self.params: Tuple[float, ...] = tuple(float(param) for param in params)

    @property
    def description(self) -> str:
        return f"{self.name}({_format_params(self.params)})"

    def latex(self, bits: Sequence[int], state: LatexExportState) -> None:
        label = f"{self.label}({_format_params(self.params)})"
        state.set_field(bits[0], latex_tokens.gate(label))

    def open_qasm(self, bit_names: Sequence[str], bits: Sequence[int]) -> str:
        args = ", ".join(str(param) for param in self.params)
        return f"{self.qasm_name}({args}) {bit_names[bits[0]]}"


class RX(ParametrizedGate):
    name = "RX"
    label = "R_x"
    qasm_name = "rx"

    def __init__(self, theta: float):
        super().__init__(theta)


class RY(ParametrizedGate):
    name = "RY"
    label = "R_y"

    def __init__(self, theta: float):
        super().__init__(theta)

    def open_qasm(self, bit_names: Sequence[str], bits: Sequence[int]) -> str:
        # Not every OpenQASM backend defines ry, U3 works everywhere
        return f"u3({self.params[0]}, 0, 0) {bit_names[bits[0]]}"


class RZ(ParametrizedGate):
    name = "RZ"
    label = "R_z"
    qasm_name = "rz"

    def __init__(self, lmb: float):
        super().__init__(lmb)


class U1(ParametrizedGate):
    name = "U1"
    label = "U_1"
    qasm_name = "u1"

    def __init__(self, lmb: float):
        super().__init__(lmb)


class U2(ParametrizedGate):
    name = "U2"
    label = "U_2"
    qasm_name = "u2"

    def __init__(self, phi: float, lmb: float):
        super().__init__(phi, lmb)


class U3(ParametrizedGate):
    name = "U3"
    label = "U_3"
    qasm_name = "u3"

    def __init__(self, theta: float, phi: float, lmb: float):
        super().__init__(theta, phi, lmb)
