"""Base class for gates that can be drawn and exported."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Sequence

from qcircuit_export.src.common.exceptions import NotExportableError

if TYPE_CHECKING:
    from qcircuit_export.src.layout.export_state import LatexExportState


class Gate(ABC):
    """A quantum operation that can place itself in a diagram.

    Subclasses provide the LaTeX fragment(s) for the bits they act on and,
    where one exists, an OpenQASM instruction.
    """

    @property
    @abstractmethod
    def description(self) -> str:
        """Short human readable name, e.g. ``RX(0.5000)``."""

    @property
    @abstractmethod
    def nr_affected_bits(self) -> int:
        """Number of quantum bits this gate operates on."""

    @abstractmethod
    def latex(self, bits: Sequence[int], state: LatexExportState) -> None:
        """Write this gate's fragments for ``bits`` into the newest column."""

    def latex_checked(self, bits: Sequence[int], state: LatexExportState) -> None:
        """Reserve room for this gate, then draw it.

        The default only requires the rows of ``bits`` themselves to be free.
        Gates that draw a line between their bits must reserve the whole range
        instead.
        """
        state.reserve(bits)
        self.latex(bits, state)

    def open_qasm(self, bit_names: Sequence[str], bits: Sequence[int]) -> str:
        """OpenQASM instruction for this gate on ``bits``.

        Raises:
            NotExportableError: If the gate has no OpenQASM form
        """
        raise NotExportableError("OpenQasm", self.description)

    def conditional_open_qasm(
        self, condition: str, bit_names: Sequence[str], bits: Sequence[int]
    ) -> str:
        """OpenQASM for this gate, executed only when ``condition`` holds."""
        return f"if ({condition}) {self.open_qasm(bit_names, bits)}"

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"{self.__class__.__name__}({self.description})"
