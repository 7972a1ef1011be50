# =============================================================================
# test_checker.py - Program Checker Tests
# =============================================================================

from hp35s_sdk.program.checker import Severity, check_program


class TestCheckProgram:
    """Test whole-program diagnostics."""

    def test_clean_program(self, sample):
        report = check_program(sample)
        assert report.ok
        assert report.diagnostics == []

    def test_missing_label(self, make_doc):
        report = check_program(make_doc("x2", "RTN"))
        assert not report.ok
        assert str(report.errors[0]) == "error: no program label found"

    def test_extra_labels(self, make_doc):
        report = check_program(make_doc("LBL A", "RTN", "LBL B", "LBL C"))
        assert [d.location.line for d in report.errors] == [3, 4]
        assert "second label LBL B" in report.errors[0].message

    def test_jump_out_of_range(self, make_doc):
        report = check_program(make_doc("LBL A", "GTO A009"))
        assert str(report.errors[0]) == (
            "<buffer>:2: error: GTO target A009 is out of range (last line is A002)"
        )

    def test_jump_to_other_label(self, make_doc):
        report = check_program(make_doc("LBL A", "XEQ B001", "RTN"))
        assert "names label B, program label is A" in report.errors[0].message

    def test_label_only_jumps_not_checked(self, make_doc):
        assert check_program(make_doc("LBL A", "XEQ B", "RTN")).ok

    def test_unrecognized_is_warning(self, make_doc):
        report = check_program(make_doc("LBL A", "sto A", "RTN"))
        assert report.ok
        assert report.warnings[0].severity is Severity.WARNING
        assert report.warnings[0].location.line == 2
        assert "unrecognized instruction 'sto A'" in str(report.warnings[0])

    def test_code_above_label_is_warning(self, make_doc):
        report = check_program(make_doc("# header", "x2", "LBL A", "RTN"))
        assert report.ok
        assert len(report.warnings) == 1
        assert report.warnings[0].location.line == 2
        assert "'x2' is above LBL A" in report.warnings[0].message

    def test_comments_above_label_are_fine(self, sample):
        assert check_program(sample).warnings == []

    def test_collects_everything(self, make_doc):
        document = make_doc("LBL A", "FOO", "GTO A007", "LBL B")
        report = check_program(document)
        assert len(report.errors) == 2
        assert len(report.warnings) == 1
