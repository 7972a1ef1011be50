# =============================================================================
# test_navigator.py - Navigator Tests
# =============================================================================
# Tests for jump/goto address resolution and the one-slot jump history.
#
# Test coverage includes:
#   - GTO/XEQ forward jumps and jump back
#   - Every failure kind, with the cursor left unchanged
#   - Free-form goto and current line reporting
#   - Address parsing helpers
# =============================================================================

import pytest

from hp35s_sdk.errors import (
    EmptyOrCommentLineError,
    InvalidInstructionError,
    InvalidLineSpecError,
    LabelMismatchError,
    LabelNotFoundError,
    LineOutOfRangeError,
    MultipleLabelsError,
    NoHistoryError,
)
from hp35s_sdk.program.navigator import (
    JumpTarget,
    NavigationHistory,
    Navigator,
    format_address,
    parse_jump_instruction,
    parse_line_spec,
)


@pytest.fixture
def nav() -> Navigator:
    return Navigator()


# =============================================================================
# Parsing Tests
# =============================================================================

class TestAddressParsing:
    """Test jump instruction and line spec parsing."""

    def test_parse_gto(self):
        assert parse_jump_instruction("GTO A010") == ("GTO", JumpTarget("A", 10))

    def test_parse_xeq_with_extra_spaces(self):
        assert parse_jump_instruction("  XEQ   B123 ") == ("XEQ", JumpTarget("B", 123))

    @pytest.mark.parametrize("text", [
        "GTO A01", "GTO A0100", "GTO a010", "GTO", "XEQ B", "STO A", "GTO A010 x",
    ])
    def test_parse_rejects(self, text):
        assert parse_jump_instruction(text) is None

    def test_parse_line_spec(self):
        assert parse_line_spec("A031") == JumpTarget("A", 31)
        assert parse_line_spec("7") == JumpTarget(None, 7)

    @pytest.mark.parametrize("spec", ["", "A", "a31", "A-3", "AB12", "12A"])
    def test_parse_line_spec_rejects(self, spec):
        with pytest.raises(InvalidLineSpecError):
            parse_line_spec(spec)

    def test_format_address(self):
        assert format_address("A", 7) == "A007"
        assert str(JumpTarget("B", 120)) == "B120"


# =============================================================================
# Forward Jump Tests
# =============================================================================

class TestJumpForward:
    """Test following GTO/XEQ instructions."""

    def test_xeq(self, sample, nav):
        sample.set_cursor_line(9)
        result = nav.jump_forward(sample)
        assert sample.cursor_line() == 12
        assert result.mnemonic == "XEQ"
        assert result.target == JumpTarget("A", 9)
        assert result.buffer_line == 12

    def test_gto_backwards(self, sample, nav):
        sample.set_cursor_line(14)
        nav.jump_forward(sample)
        assert sample.cursor_line() == 5

    def test_records_history(self, sample, nav):
        sample.set_cursor_line(9)
        nav.jump_forward(sample)
        assert nav.history == NavigationHistory(buffer_line=9, label="A", program_line=7)

    def test_second_jump_overwrites_history(self, sample, nav):
        sample.set_cursor_line(9)
        nav.jump_forward(sample)
        sample.set_cursor_line(14)
        nav.jump_forward(sample)
        assert nav.history.buffer_line == 14

    def test_not_a_jump(self, sample, nav):
        sample.set_cursor_line(6)
        with pytest.raises(InvalidInstructionError):
            nav.jump_forward(sample)
        assert sample.cursor_line() == 6
        assert nav.history is None

    def test_failed_jump_clears_history(self, sample, nav):
        sample.set_cursor_line(9)
        nav.jump_forward(sample)
        sample.set_cursor_line(6)
        with pytest.raises(InvalidInstructionError):
            nav.jump_forward(sample)
        assert nav.history is None

    def test_label_mismatch(self, make_doc, nav):
        document = make_doc("LBL A", "GTO B001", cursor=2)
        with pytest.raises(LabelMismatchError) as info:
            nav.jump_forward(document)
        assert info.value.requested == "B"
        assert info.value.actual == "A"
        assert document.cursor_line() == 2

    def test_out_of_range(self, sample, nav):
        sample.set_cursor_line(9)
        sample.insert_line("GTO A099")
        sample.set_cursor_line(9)
        with pytest.raises(LineOutOfRangeError) as info:
            nav.jump_forward(sample)
        assert info.value.program_line == 99
        assert sample.cursor_line() == 9

    def test_multiple_labels(self, make_doc, nav):
        document = make_doc("LBL A", "GTO A001", "LBL B", cursor=2)
        with pytest.raises(MultipleLabelsError):
            nav.jump_forward(document)
        assert document.cursor_line() == 2

    def test_no_label(self, make_doc, nav):
        document = make_doc("RTN", "GTO A001", cursor=2)
        with pytest.raises(LabelNotFoundError):
            nav.jump_forward(document)
        assert document.cursor_line() == 2

    def test_error_location(self, make_doc, nav):
        document = make_doc("LBL A", "GTO A050", cursor=2)
        with pytest.raises(LineOutOfRangeError) as info:
            nav.jump_forward(document)
        assert info.value.location.line == 2
        assert "GTO A050" in str(info.value)


# =============================================================================
# Jump Back Tests
# =============================================================================

class TestJumpBack:
    """Test returning from a jump."""

    def test_round_trip(self, sample, nav):
        sample.set_cursor_line(9)
        nav.jump_forward(sample)
        assert nav.jump_back(sample) == "A007"
        assert sample.cursor_line() == 9

    def test_second_back_fails(self, sample, nav):
        sample.set_cursor_line(9)
        nav.jump_forward(sample)
        nav.jump_back(sample)
        with pytest.raises(NoHistoryError):
            nav.jump_back(sample)
        assert sample.cursor_line() == 9

    def test_without_jump(self, sample, nav):
        with pytest.raises(NoHistoryError):
            nav.jump_back(sample)

    def test_returns_to_latest_origin_only(self, sample, nav):
        sample.set_cursor_line(9)
        nav.jump_forward(sample)          # XEQ A009 -> line 12
        sample.set_cursor_line(14)
        nav.jump_forward(sample)          # GTO A003 -> line 5
        assert nav.jump_back(sample) == "A011"
        with pytest.raises(NoHistoryError):
            nav.jump_back(sample)


# =============================================================================
# Goto Tests
# =============================================================================

class TestGotoLine:
    """Test free-form address lookup."""

    def test_goto_with_label(self, sample, nav):
        assert nav.goto_line(sample, "A003") == 5
        assert sample.cursor_line() == 5

    def test_goto_number_only(self, sample, nav):
        assert nav.goto_line(sample, "11") == 14

    def test_goto_leaves_history_alone(self, sample, nav):
        sample.set_cursor_line(9)
        nav.jump_forward(sample)
        nav.goto_line(sample, "A001")
        assert nav.history is not None
        assert nav.jump_back(sample) == "A007"

    def test_goto_invalid_spec(self, sample, nav):
        sample.set_cursor_line(6)
        with pytest.raises(InvalidLineSpecError):
            nav.goto_line(sample, "A-1")
        assert sample.cursor_line() == 6

    def test_goto_label_mismatch(self, sample, nav):
        with pytest.raises(LabelMismatchError):
            nav.goto_line(sample, "B003")

    def test_goto_out_of_range(self, sample, nav):
        sample.set_cursor_line(6)
        with pytest.raises(LineOutOfRangeError):
            nav.goto_line(sample, "A012")
        with pytest.raises(LineOutOfRangeError):
            nav.goto_line(sample, "0")
        assert sample.cursor_line() == 6

    def test_goto_no_label(self, make_doc, nav):
        document = make_doc("x2", "yx", "RTN", cursor=3)
        with pytest.raises(LabelNotFoundError):
            nav.goto_line(document, "1")
        assert document.cursor_line() == 3

    def test_goto_multiple_labels(self, make_doc, nav):
        document = make_doc("LBL A", "x2", "LBL B", cursor=3)
        with pytest.raises(MultipleLabelsError):
            nav.goto_line(document, "2")
        assert document.cursor_line() == 3


# =============================================================================
# Report Tests
# =============================================================================

class TestReportCurrentLine:
    """Test reporting the address of the cursor line."""

    def test_report(self, sample, nav):
        sample.set_cursor_line(6)
        assert nav.report_current_line(sample) == "A004"

    def test_report_is_idempotent(self, sample, nav):
        sample.set_cursor_line(13)
        assert nav.report_current_line(sample) == nav.report_current_line(sample)
        assert sample.cursor_line() == 13

    def test_report_label_line(self, sample, nav):
        sample.set_cursor_line(2)
        assert nav.report_current_line(sample) == "A001"

    @pytest.mark.parametrize("line", [1, 4, 11])
    def test_report_blank_or_comment(self, sample, nav, line):
        sample.set_cursor_line(line)
        with pytest.raises(EmptyOrCommentLineError):
            nav.report_current_line(sample)

    def test_report_multiple_labels(self, make_doc, nav):
        with pytest.raises(MultipleLabelsError):
            nav.report_current_line(make_doc("LBL A", "LBL B"))
