"""
Tests for emission/latex_renderer.py - complete Qcircuit output.

Each scenario drives LatexExportState directly and checks the full text.
"""

from dataclasses import replace

import pytest

from qcircuit_export.src.common.constants import DEFAULT_CONFIG
from qcircuit_export.src.common.exceptions import LoopNestingError
from qcircuit_export.src.emission.latex_renderer import default_wire, render_latex
from qcircuit_export.src.layout.export_state import LatexExportState


class TestDefaultWire:
    """Tests for default_wire()."""

    def test_empty_cells(self):
        assert default_wire(True, None) == r"\qw"
        assert default_wire(False, None) == r"\cw"

    def test_content_wins(self):
        assert default_wire(True, r"\gate{H}") == r"\gate{H}"
        assert default_wire(False, r"\cctrl{-1}") == r"\cctrl{-1}"


class TestRenderLatex:
    """Full diagrams rendered from hand-built states."""

    def test_empty_state(self):
        """Test a fresh state still ends each row on a wire."""
        state = LatexExportState(1)
        assert render_latex(state) == (
            "\\Qcircuit @C=1em @R=.7em {\n"
            "    \\lstick{\\ket{0}} & \\qw \\\\\n"
            "}\n"
        )

    def test_measurement(self):
        state = LatexExportState(2, 2)
        state.set_measurement(0, 1, None)
        state.set_measurement(1, 0, "X")
        assert render_latex(state) == (
            "\\Qcircuit @C=1em @R=.7em {\n"
            "    \\lstick{\\ket{0}} & \\meter & \\qw & \\qw \\\\\n"
            "    \\lstick{\\ket{0}} & \\qw & \\meterB{X} & \\qw \\\\\n"
            "    \\lstick{0} & \\cw & \\cw \\cwx[-1] & \\cw \\\\\n"
            "    \\lstick{0} & \\cw \\cwx[-3] & \\cw & \\cw \\\\\n"
            "}\n"
        )

    def test_reset(self):
        state = LatexExportState(2, 0)
        state.set_reset(0)
        assert render_latex(state) == (
            "\\Qcircuit @C=1em @R=.7em {\n"
            "    \\lstick{\\ket{0}} & \\push{~\\ket{0}~} \\ar @{|-{}} [0,-1] & \\qw \\\\\n"
            "    \\lstick{\\ket{0}} & \\qw & \\qw \\\\\n"
            "}\n"
        )

    def test_condition(self):
        state = LatexExportState(2, 2)
        state.reserve_range([], None)
        state.set_condition([0, 1], 2, [])
        state.reserve_range([0], [0, 1])
        state.set_field(0, r"\gate{X}")
        state.set_condition([0, 1], 2, [0])
        state.reserve_range([1], [0, 1])
        state.set_field(1, r"\gate{H}")
        state.set_condition([0, 1], 1, [1])
        assert render_latex(state) == (
            "\\Qcircuit @C=1em @R=.7em {\n"
            "    \\lstick{\\ket{0}} & \\gate{X} & \\qw & \\qw \\\\\n"
            "    \\lstick{\\ket{0}} & \\qw & \\gate{H} & \\qw \\\\\n"
            "    \\lstick{0} & \\cctrlo{-2} & \\cctrl{-1} & \\cw \\\\\n"
            "    \\lstick{0} & \\cctrl{-1} & \\cctrlo{-1} & \\cw \\\\\n"
            "}\n"
        )

    def test_loop(self):
        state = LatexExportState(2)
        state.start_loop(23)
        state.reserve([0, 1])
        state.set_field(0, r"\gate{H}")
        state.set_field(1, r"\gate{X}")
        state.add_cds(0, 1, r"\leftrightarrow")
        state.reserve([0, 1])
        state.set_field(0, r"\gate{H}")
        state.set_field(1, r"\gate{X}")
        state.end_loop()
        assert render_latex(state) == (
            "\\Qcircuit @C=1em @R=.7em {\n"
            '    & \\mbox{} \\POS"2,2"."2,2"."2,4"."2,4"!C*+<.7em>\\frm{^\\}},'
            "+U*++!D{23\\times}\\\\\n"
            "    & & & & \\\\\n"
            "    \\lstick{\\ket{0}} & \\gate{H} & \\cds{1}{\\leftrightarrow} & \\gate{H} & \\qw \\\\\n"
            "    \\lstick{\\ket{0}} & \\gate{X} & \\qw & \\gate{X} & \\qw \\\\\n"
            "}\n"
        )

    def test_loop_close_without_open(self):
        state = LatexExportState(2)
        with pytest.raises(LoopNestingError):
            state.end_loop()

    def test_barrier(self):
        state = LatexExportState(3)
        for barrier_bits in ([0], [0, 2], [0, 1, 2]):
            state.reserve_range([0, 2])
            for bit in range(3):
                state.set_field(bit, r"\gate{X}")
            state.set_barrier(barrier_bits)
        assert render_latex(state) == (
            "\\Qcircuit @C=1em @R=.7em {\n"
            "    \\lstick{\\ket{0}} & \\gate{X} & \\qw \\barrier{0} & \\gate{X} & "
            "\\qw \\barrier{0} & \\gate{X} & \\qw \\barrier{2} & \\qw \\\\\n"
            "    \\lstick{\\ket{0}} & \\gate{X} & \\qw & \\gate{X} & \\qw & "
            "\\gate{X} & \\qw & \\qw \\\\\n"
            "    \\lstick{\\ket{0}} & \\gate{X} & \\qw & \\gate{X} & "
            "\\qw \\barrier{0} & \\gate{X} & \\qw & \\qw \\\\\n"
            "}\n"
        )

    def test_no_init(self):
        state = LatexExportState(1, 1)
        state.set_add_init(False)
        state.set_measurement(0, 0)
        assert render_latex(state) == (
            "\\Qcircuit @C=1em @R=.7em {\n"
            "     & \\meter & \\qw \\\\\n"
            "     & \\cw \\cwx[-1] & \\cw \\\\\n"
            "}\n"
        )

    def test_spacing_from_config(self):
        config = replace(DEFAULT_CONFIG, column_spacing="2em", row_spacing="1em")
        state = LatexExportState(1, config=config)
        assert render_latex(state).startswith("\\Qcircuit @C=2em @R=1em {\n")

    def test_trailing_wire_skipped_for_empty_last_column(self):
        state = LatexExportState(1)
        state.reserve([0])
        state.set_field(0, r"\gate{H}")
        state.reserve_all()
        assert render_latex(state).splitlines()[1] == (
            r"    \lstick{\ket{0}} & \gate{H} & \qw \\"
        )

    def test_second_loop_brace_padding(self):
        """Test later braces are padded relative to the previous start."""
        state = LatexExportState(1)
        for _ in range(2):
            state.start_loop(3)
            state.reserve([0])
            state.set_field(0, r"\gate{H}")
            state.end_loop()
        brace_line = render_latex(state).splitlines()[1]
        assert brace_line.startswith('    & \\mbox{} \\POS"2,2"')
        assert '& \\mbox{} \\POS"2,3"' in brace_line
