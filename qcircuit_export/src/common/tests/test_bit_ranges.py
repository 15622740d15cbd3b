"""
Tests for common/bit_ranges.py and common/latex_tokens.py.
"""

from qcircuit_export.src.common import latex_tokens
from qcircuit_export.src.common.bit_ranges import get_ranges


class TestGetRanges:
    """Tests for get_ranges()."""

    def test_empty(self):
        assert get_ranges([]) == []

    def test_single_run(self):
        assert get_ranges([0, 1, 2]) == [(0, 2)]

    def test_unsorted_with_gaps(self):
        """Test bits are sorted before being grouped."""
        assert get_ranges([2, 0, 1, 5]) == [(0, 2), (5, 5)]

    def test_duplicates_ignored(self):
        assert get_ranges([3, 3, 4]) == [(3, 4)]


class TestLatexTokens:
    """Tests for the qcircuit markup helpers."""

    def test_header(self):
        assert latex_tokens.header() == "\\Qcircuit @C=1em @R=.7em {\n"
        assert latex_tokens.header("2em", "1em") == "\\Qcircuit @C=2em @R=1em {\n"

    def test_controls(self):
        assert latex_tokens.classical_control(-2, False) == r"\cctrlo{-2}"
        assert latex_tokens.classical_control(-1, True) == r"\cctrl{-1}"
        assert latex_tokens.quantum_control(1) == r"\ctrl{1}"

    def test_loop_brace_shifts_columns(self):
        """Test grid columns are shifted by two in the brace coordinates."""
        brace = latex_tokens.loop_brace(0, 2, 23)
        assert brace == (
            r'\mbox{} \POS"2,2"."2,2"."2,4"."2,4"!C*+<.7em>\frm{^\}},+U*++!D{23\times}'
        )

    def test_multigate_and_ghost(self):
        assert latex_tokens.multigate(1, "U") == r"\multigate{1}{U}"
        assert latex_tokens.ghost("U") == r"\ghost{U}"
