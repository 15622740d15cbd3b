"""Qcircuit markup fragments.

The exact spelling of every token here is what the qcircuit LaTeX package
expects, including argument order and spacing, so none of them may change.
"""

QUANTUM_WIRE = r"\qw"
CLASSICAL_WIRE = r"\cw"

METER = r"\meter"
QUANTUM_INIT = r"\lstick{\ket{0}}"
CLASSICAL_INIT = r"\lstick{0}"
RESET = r"\push{~\ket{0}~} \ar @{|-{}} [0,-1]"

TARGET = r"\targ"
CONTROL = r"\control \qw"
SWAP = r"\qswap"


def header(column_spacing: str = "1em", row_spacing: str = ".7em") -> str:
    return f"\\Qcircuit @C={column_spacing} @R={row_spacing} {{\n"


FOOTER = "}\n"


def meter_in_basis(basis: str) -> str:
    return f"\\meterB{{{basis}}}"


def classical_wire_to(offset: int) -> str:
    """Classical wire with a vertical connector ``offset`` rows away."""
    return f"\\cw \\cwx[{offset}]"


def classical_control(offset: int, on_one: bool) -> str:
    """Classical control dot, filled when the condition requires a 1."""
    ctrl = r"\cctrl" if on_one else r"\cctrlo"
    return f"{ctrl}{{{offset}}}"


def quantum_control(offset: int) -> str:
    return f"\\ctrl{{{offset}}}"


def swap_to(offset: int) -> str:
    return f"\\qswap \\qwx[{offset}]"


def barrier(extent: int) -> str:
    """Wire segment with a barrier reaching ``extent`` rows further down."""
    return f"\\qw \\barrier{{{extent}}}"


def cds(count: int, label: str) -> str:
    """Label centred over ``count`` rows below the cell it is placed in."""
    return f"\\cds{{{count}}}{{{label}}}"


def gate(label: str) -> str:
    return f"\\gate{{{label}}}"


def multigate(extent: int, label: str) -> str:
    return f"\\multigate{{{extent}}}{{{label}}}"


def ghost(label: str) -> str:
    return f"\\ghost{{{label}}}"


def loop_brace(start: int, end: int, count: int) -> str:
    """Brace over columns ``start`` to ``end`` with an ``count×`` label.

    Column indices are grid columns; qcircuit's matrix coordinates are
    shifted by two, one for the initialization column and one because they
    are 1-based.
    """
    first = start + 2
    last = end + 2
    return (
        f'\\mbox{{}} \\POS"2,{first}"."2,{first}"."2,{last}"."2,{last}"'
        f"!C*+<.7em>\\frm{{^\\}}}},+U*++!D{{{count}\\times}}"
    )
