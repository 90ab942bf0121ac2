"""Transform errors and the diagnostics they carry."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel

from .syntax import NO_SOURCE_LOCATION, SourceLocation
from . import constants


_ESCAPES: dict[str, str] = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\0": "\\0",
}


def rust_string_literal(text: str) -> str:
    """Quote *text* as a Rust string literal."""
    escaped = "".join(
        _ESCAPES.get(ch) or (f"\\u{{{ord(ch):x}}}" if ord(ch) < 0x20 else ch)
        for ch in text
    )
    return f'"{escaped}"'


class DiagnosticKind(str, Enum):
    MALFORMED_FIELD_LIST = "MALFORMED_FIELD_LIST"
    MALFORMED_DECLARATION = "MALFORMED_DECLARATION"
    EMPTY_FIELD_BINDING = "EMPTY_FIELD_BINDING"
    HYGIENE = "HYGIENE"


class Diagnostic(BaseModel):
    """A single error message with the span of the offending text."""

    kind: DiagnosticKind
    message: str
    location: SourceLocation = NO_SOURCE_LOCATION
    source_name: str = ""

    def format(self, path: str = "") -> str:
        """Render as ``path:line:col: error: message``."""
        name = path or self.source_name or "<input>"
        if self.location.is_unknown():
            return f"{name}: error: {self.message}"
        return (
            f"{name}:{self.location.start_line}:{self.location.start_col + 1}:"
            f" error: {self.message}"
        )

    def to_compile_error(self) -> str:
        """Render as Rust tokens that fail the build with this message."""
        return constants.COMPILE_ERROR_TEMPLATE.format(
            message=rust_string_literal(self.format())
        )

    def __str__(self) -> str:
        return self.format()


class TransformError(Exception):
    """Base for every failure of the transform; carries a Diagnostic."""

    KIND: DiagnosticKind = DiagnosticKind.MALFORMED_DECLARATION
    SOURCE_NAME: str = ""

    def __init__(
        self,
        message: str,
        location: SourceLocation = NO_SOURCE_LOCATION,
    ):
        super().__init__(message)
        self.diagnostic = Diagnostic(
            kind=self.KIND,
            message=message,
            location=location,
            source_name=self.SOURCE_NAME,
        )

    @property
    def location(self) -> SourceLocation:
        return self.diagnostic.location


class MalformedFieldList(TransformError):
    """Raised when the field-list text is not a sequence of named fields."""

    KIND = DiagnosticKind.MALFORMED_FIELD_LIST
    SOURCE_NAME = constants.FIELD_LIST_SOURCE


class MalformedDeclaration(TransformError):
    """Raised when the declaration text is not an enum declaration."""

    KIND = DiagnosticKind.MALFORMED_DECLARATION
    SOURCE_NAME = constants.DECLARATION_SOURCE


class EmptyFieldBinding(TransformError):
    """Internal fault: a requested field reached synthesis without name or type."""

    KIND = DiagnosticKind.EMPTY_FIELD_BINDING


class HygieneError(TransformError):
    """Internal fault: an identifier reached the emitter with an input origin."""

    KIND = DiagnosticKind.HYGIENE
