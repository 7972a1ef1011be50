# =============================================================================
# test_memory.py - Memory Estimator Tests
# =============================================================================
# Tests for the byte cost model and the whole-program estimate.
# =============================================================================

import pytest

from hp35s_sdk.errors import MultipleLabelsError
from hp35s_sdk.program.classifier import LineCategory, classify
from hp35s_sdk.program.memory import (
    NUMERIC_COST,
    estimate_memory,
    line_cost,
    memory_breakdown,
)


class TestLineCost:
    """Test the per-line cost model."""

    @pytest.mark.parametrize("text,cost", [
        ("LBL A", 3),
        ("RTN", 3),
        ("STO A", 3),
        ("x2", 3),
        ("GTO A010", 3),
        ("42", 35),
        ("[1,2]", 35),
        ("EQN 2*X+1", 8),
        ("  EQN X  ", 4),
        ("", 0),
        ("# note", 0),
        ("FOO", 0),
    ])
    def test_cost(self, text, cost):
        assert line_cost(classify(text)) == cost

    def test_numeric_cost_constant(self):
        assert NUMERIC_COST == 35


class TestEstimate:
    """Test whole-document estimates."""

    def test_sample(self, sample):
        assert estimate_memory(sample) == 33

    def test_breakdown(self, sample):
        breakdown = memory_breakdown(sample)
        assert breakdown[LineCategory.INSTRUCTION] == 27
        assert breakdown[LineCategory.LABEL] == 3
        assert breakdown[LineCategory.RETURN] == 3
        assert LineCategory.COMMENT not in breakdown

    def test_label_and_return(self, make_doc):
        assert estimate_memory(make_doc("LBL A", "RTN")) == 6

    def test_number_line(self, make_doc):
        assert estimate_memory(make_doc("LBL A", "5", "RTN")) == 41

    def test_equation(self, make_doc):
        assert estimate_memory(make_doc("LBL A", "EQN 2*X+1", "RTN")) == 14

    def test_empty_document(self, make_doc):
        assert estimate_memory(make_doc()) == 0

    def test_comments_and_blanks_are_free(self, make_doc):
        document = make_doc("# one", "", "LBL A", "   ", "# two", "RTN")
        assert estimate_memory(document) == 6

    def test_precomputed_breakdown(self, sample):
        breakdown = memory_breakdown(sample)
        assert estimate_memory(sample, breakdown) == sum(breakdown.values())

    def test_multiple_labels(self, make_doc):
        with pytest.raises(MultipleLabelsError):
            estimate_memory(make_doc("LBL A", "RTN", "LBL B", "RTN"))

    def test_cursor_unchanged(self, sample):
        sample.set_cursor_line(7)
        estimate_memory(sample)
        assert sample.cursor_line() == 7
