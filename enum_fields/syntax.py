"""Syntax model — declarations, fields, variants and generated accessors."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field, model_validator

from . import constants


class Origin(str, Enum):
    """Which input an identifier was written in."""

    FIELD_LIST = "FIELD_LIST"
    DECLARATION = "DECLARATION"
    CALL_SITE = "CALL_SITE"


class SourceLocation(BaseModel):
    """Structured source span from tree-sitter AST nodes."""

    start_line: int
    start_col: int
    end_line: int
    end_col: int

    def is_unknown(self) -> bool:
        return (
            self.start_line == 0
            and self.start_col == 0
            and self.end_line == 0
            and self.end_col == 0
        )

    def __str__(self) -> str:
        if self.is_unknown():
            return "<unknown>"
        return f"{self.start_line}:{self.start_col}-{self.end_line}:{self.end_col}"


NO_SOURCE_LOCATION = SourceLocation(start_line=0, start_col=0, end_line=0, end_col=0)


class Ident(BaseModel):
    text: str
    origin: Origin = Origin.CALL_SITE
    location: SourceLocation = NO_SOURCE_LOCATION

    @property
    def bare(self) -> str:
        """The identifier without a raw-identifier prefix."""
        return self.text.removeprefix(constants.RAW_IDENT_PREFIX)

    def __str__(self) -> str:
        return self.text


class AnnotationKind(str, Enum):
    DOCUMENTATION = "DOCUMENTATION"
    CONDITIONAL_GUARD = "CONDITIONAL_GUARD"
    OTHER = "OTHER"


class AnnotationStyle(str, Enum):
    """Shape of an attribute's meta: `#[p]`, `#[p(..)]`, `#[p = ..]` or `///`."""

    PATH = "PATH"
    LIST = "LIST"
    NAME_VALUE = "NAME_VALUE"
    DOC_COMMENT = "DOC_COMMENT"


class Annotation(BaseModel):
    """An outer attribute or doc comment, kept as its source text."""

    kind: AnnotationKind
    path: str
    style: AnnotationStyle
    text: str
    location: SourceLocation = NO_SOURCE_LOCATION

    def __str__(self) -> str:
        return self.text


class FieldDescriptor(BaseModel):
    """A requested field: `[annotations] [vis] name: Type`."""

    name: Ident
    ty: str
    visibility: str = ""
    annotations: list[Annotation] = []


class AccessorSpec(BaseModel):
    field: FieldDescriptor
    positional_index: int


class VariantField(BaseModel):
    """A field inside a variant; unnamed for tuple variants."""

    name: Ident | None = None
    ty: str
    visibility: str = ""
    annotations: list[Annotation] = []


class ShapeKind(str, Enum):
    EMPTY = "EMPTY"
    POSITIONAL = "POSITIONAL"
    NAMED = "NAMED"


class VariantShape(BaseModel):
    kind: ShapeKind
    fields: list[VariantField] = []

    @model_validator(mode="after")
    def _check_fields(self) -> "VariantShape":
        if self.kind == ShapeKind.EMPTY and self.fields:
            raise ValueError("an empty variant shape cannot carry fields")
        if self.kind == ShapeKind.POSITIONAL and any(
            f.name is not None for f in self.fields
        ):
            raise ValueError("positional fields cannot be named")
        if self.kind == ShapeKind.NAMED and any(f.name is None for f in self.fields):
            raise ValueError("named fields must carry a name")
        return self

    @classmethod
    def empty(cls) -> "VariantShape":
        return cls(kind=ShapeKind.EMPTY)

    @classmethod
    def positional(cls, fields: list[VariantField]) -> "VariantShape":
        return cls(kind=ShapeKind.POSITIONAL, fields=fields)

    @classmethod
    def named(cls, fields: list[VariantField]) -> "VariantShape":
        return cls(kind=ShapeKind.NAMED, fields=fields)


class Variant(BaseModel):
    name: Ident
    shape: VariantShape
    annotations: list[Annotation] = []
    visibility: str = ""
    discriminant: str | None = None


class GenericParamKind(str, Enum):
    LIFETIME = "LIFETIME"
    TYPE = "TYPE"
    CONST = "CONST"


class GenericParam(BaseModel):
    kind: GenericParamKind
    name: str
    declaration: str  # the parameter with its bounds, without a default
    default: str | None = None


class Generics(BaseModel):
    params: list[GenericParam] = []
    where_clause: str = ""

    def declaration_form(self) -> str:
        if not self.params:
            return ""
        parts = [
            f"{p.declaration} = {p.default}" if p.default else p.declaration
            for p in self.params
        ]
        return f"<{', '.join(parts)}>"

    def impl_form(self) -> str:
        if not self.params:
            return ""
        return f"<{', '.join(p.declaration for p in self.params)}>"

    def type_form(self) -> str:
        if not self.params:
            return ""
        return f"<{', '.join(p.name for p in self.params)}>"


class SumTypeDeclaration(BaseModel):
    name: Ident
    generics: Generics = Field(default_factory=Generics)
    visibility: str = ""
    annotations: list[Annotation] = []
    variants: list[Variant] = []


class AccessorKind(str, Enum):
    BORROW = "BORROW"
    MUTABLE = "MUTABLE"
    CONSUME = "CONSUME"


class VariantPattern(BaseModel):
    """`Self::V { name, .. }`, `Self::V { i: name, .. }` or `Self::V`."""

    variant: Ident
    kind: ShapeKind
    binding: Ident
    index: int = 0


class MatchArm(BaseModel):
    """Or-combined patterns; no patterns means the wildcard arm."""

    patterns: list[VariantPattern] = []
    body: str


class Accessor(BaseModel):
    kind: AccessorKind
    name: Ident
    field: FieldDescriptor
    receiver: str
    return_type: str
    visibility: str = ""
    annotations: list[Annotation] = []
    arms: list[MatchArm] = []


class Expansion(BaseModel):
    """Result of one transform: the rewritten declaration plus accessors."""

    fields: list[FieldDescriptor] = []
    original: SumTypeDeclaration
    declaration: SumTypeDeclaration
    accessors: list[Accessor] = []
    text: str = ""
