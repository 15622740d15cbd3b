"""Serialization of a finished layout into Qcircuit LaTeX."""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

from qcircuit_export.src.common import latex_tokens

if TYPE_CHECKING:
    from qcircuit_export.src.layout.export_state import LatexExportState

ROW_INDENT = "    "


def default_wire(is_quantum: bool, cell: Optional[str]) -> str:
    """Cell content to draw, falling back to a plain wire for empty cells."""
    if cell is not None:
        return cell
    return latex_tokens.QUANTUM_WIRE if is_quantum else latex_tokens.CLASSICAL_WIRE


def _render_loop_lines(state: LatexExportState) -> List[str]:
    spans = state.loops.spans
    if not spans:
        return []

    brace_line = ROW_INDENT + "& "
    prev_idx = 0
    for span in spans:
        brace_line += "& " * (span.start - prev_idx)
        brace_line += latex_tokens.loop_brace(span.start, span.end, span.count)
        prev_idx = span.start
    brace_line += "\\\\\n"

    filler_line = ROW_INDENT + "& " * state.grid.column_count + "\\\\\n"
    return [brace_line, filler_line]


def _row_label(state: LatexExportState, is_quantum: bool) -> str:
    if not state.add_init:
        return ROW_INDENT
    init = latex_tokens.QUANTUM_INIT if is_quantum else latex_tokens.CLASSICAL_INIT
    return ROW_INDENT + init


def render_latex(state: LatexExportState) -> str:
    """Render the grid of ``state`` as a Qcircuit environment.

    Brackets for repeated regions come first, then one line per bit. When the
    newest column still has something on any row, every line gets one more
    plain wire segment so the diagram ends on a clean wire.
    """
    grid = state.grid
    columns = grid.columns
    parts = [
        latex_tokens.header(state.config.column_spacing, state.config.row_spacing)
    ]
    parts.extend(_render_loop_lines(state))

    trailing_wire = grid.last_column_busy()
    for bit in range(grid.total_nr_bits):
        is_quantum = grid.is_quantum_row(bit)
        line = _row_label(state, is_quantum)
        for column in columns:
            line += " & " + default_wire(is_quantum, column[bit])
        if trailing_wire:
            line += " & " + default_wire(is_quantum, None)
        line += " \\\\\n"
        parts.append(line)

    parts.append(latex_tokens.FOOTER)
    return "".join(parts)
