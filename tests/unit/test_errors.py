"""Tests for diagnostics and their renderings."""

from __future__ import annotations

from enum_fields.errors import (
    Diagnostic,
    DiagnosticKind,
    MalformedDeclaration,
    MalformedFieldList,
    rust_string_literal,
)
from enum_fields.syntax import SourceLocation

LOC = SourceLocation(start_line=2, start_col=4, end_line=2, end_col=6)


class TestDiagnostic:
    def test_format_with_location(self):
        diag = Diagnostic(kind=DiagnosticKind.MALFORMED_FIELD_LIST, message="bad", location=LOC)
        assert diag.format("fields.txt") == "fields.txt:2:5: error: bad"

    def test_format_without_location(self):
        diag = Diagnostic(kind=DiagnosticKind.HYGIENE, message="oops")
        assert diag.format() == "<input>: error: oops"

    def test_compile_error(self):
        diag = MalformedDeclaration('expected "enum"', LOC).diagnostic
        assert diag.to_compile_error() == (
            '::core::compile_error! { "<declaration>:2:5: error: expected \\"enum\\"" }'
        )


class TestErrorClasses:
    def test_kind_and_source(self):
        exc = MalformedFieldList("bad", LOC)
        assert exc.diagnostic.kind == DiagnosticKind.MALFORMED_FIELD_LIST
        assert exc.diagnostic.source_name == "<fields>"
        assert exc.location == LOC
        assert str(exc) == "bad"


class TestRustStringLiteral:
    def test_escapes(self):
        assert rust_string_literal('a\\b"c\nd') == '"a\\\\b\\"c\\nd"'

    def test_control_characters(self):
        assert rust_string_literal("\x01") == '"\\u{1}"'
