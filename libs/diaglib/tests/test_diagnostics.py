from __future__ import annotations

import pytest

from diaglib.diagnostics import (
    Description,
    Diagnostic,
    NativeError,
    Severity,
    SimpleDiagnostic,
    Source,
    SourcePos,
    SourceRange,
    simple_warning,
    sourceless,
)


class TestSourceRange:
    def test_creation(self):
        rng = SourceRange("main.tf", SourcePos(2, 3, 10), SourcePos(2, 8, 15))
        assert rng.filename == "main.tf"
        assert rng.start.byte == 10
        assert rng.end.byte == 15

    def test_value_equality(self):
        a = SourceRange("main.tf", SourcePos(1, 1, 0), SourcePos(1, 5, 4))
        b = SourceRange("main.tf", SourcePos(1, 1, 0), SourcePos(1, 5, 4))
        assert a == b
        assert a != SourceRange("other.tf", SourcePos(1, 1, 0), SourcePos(1, 5, 4))

    def test_str_single_position(self):
        pos = SourcePos(10, 5, 120)
        assert str(SourceRange("test.tf", pos, pos)) == "test.tf:10:5"

    def test_str_span(self):
        rng = SourceRange("test.tf", SourcePos(10, 5, 120), SourcePos(11, 2, 140))
        assert str(rng) == "test.tf:10:5-11:2"

    def test_source_defaults_to_no_location(self):
        src = Source()
        assert src.subject is None
        assert src.context is None


class TestSeverity:
    def test_values_exist(self):
        assert Severity.ERROR
        assert Severity.WARNING
        assert len(Severity) == 2

    def test_str_representation(self):
        assert str(Severity.ERROR) == "Error"
        assert str(Severity.WARNING) == "Warning"

    def test_every_member_has_a_name(self):
        assert {str(member) for member in Severity} == {"Error", "Warning"}

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("Error", Severity.ERROR),
            ("warning", Severity.WARNING),
            ("WARNING", Severity.WARNING),
            ("info", None),
        ],
    )
    def test_from_name(self, name, expected):
        assert Severity.from_name(name) is expected

    def test_closed_set(self):
        with pytest.raises(ValueError):
            Severity("I")


class TestDiagnostic:
    def test_creation_minimal(self):
        diag = SimpleDiagnostic(Severity.ERROR, Description("test error"))
        assert diag.severity == Severity.ERROR
        assert diag.description.summary == "test error"
        assert diag.description.detail == ""
        assert diag.description.address == ""
        assert diag.source == Source()

    def test_creation_with_location(self):
        rng = SourceRange("test.tf", SourcePos(5, 10, 40), SourcePos(5, 12, 42))
        diag = SimpleDiagnostic(Severity.WARNING, Description("test warning"), Source(subject=rng))
        assert diag.source.subject == rng
        assert diag.source.context is None

    def test_frozen(self):
        diag = SimpleDiagnostic(Severity.ERROR, Description("test"))
        with pytest.raises(Exception):  # FrozenInstanceError
            diag.severity = Severity.WARNING

    def test_satisfies_protocol(self):
        assert isinstance(SimpleDiagnostic(Severity.ERROR, Description("x")), Diagnostic)
        assert isinstance(NativeError(ValueError("x")), Diagnostic)
        assert not isinstance("x", Diagnostic)

    def test_sourceless(self):
        diag = sourceless(Severity.ERROR, "Bad thing", "It went badly.")
        assert diag.severity == Severity.ERROR
        assert diag.description == Description("Bad thing", "It went badly.")
        assert diag.source.subject is None

    def test_simple_warning(self):
        diag = simple_warning("Deprecated attribute")
        assert diag.severity == Severity.WARNING
        assert diag.description.summary == "Deprecated attribute"
        assert diag.description.detail == ""


class TestNativeError:
    def test_is_error_without_location(self):
        cause = RuntimeError("disk on fire")
        diag = NativeError(cause)
        assert diag.severity == Severity.ERROR
        assert diag.description == Description(summary="disk on fire")
        assert diag.source.subject is None
        assert diag.err is cause
