"""Shared builders for hand-made syntax models."""

from __future__ import annotations

import pytest

from enum_fields.syntax import (
    Annotation,
    AnnotationKind,
    AnnotationStyle,
    FieldDescriptor,
    Ident,
    Origin,
    SumTypeDeclaration,
    Variant,
    VariantField,
    VariantShape,
)


def field(name: str, ty: str, *annotations: Annotation) -> FieldDescriptor:
    return FieldDescriptor(
        name=Ident(text=name, origin=Origin.FIELD_LIST),
        ty=ty,
        annotations=list(annotations),
    )


def doc(text: str) -> Annotation:
    return Annotation(
        kind=AnnotationKind.DOCUMENTATION,
        path="doc",
        style=AnnotationStyle.DOC_COMMENT,
        text=f"/// {text}",
    )


def guard(predicate: str) -> Annotation:
    return Annotation(
        kind=AnnotationKind.CONDITIONAL_GUARD,
        path="cfg",
        style=AnnotationStyle.LIST,
        text=f"#[cfg({predicate})]",
    )


def other(text: str, path: str, style: AnnotationStyle = AnnotationStyle.LIST) -> Annotation:
    return Annotation(kind=AnnotationKind.OTHER, path=path, style=style, text=text)


def variant(name: str, shape: VariantShape) -> Variant:
    return Variant(name=Ident(text=name, origin=Origin.DECLARATION), shape=shape)


def named(*pairs: tuple[str, str]) -> VariantShape:
    return VariantShape.named(
        [VariantField(name=Ident(text=n, origin=Origin.DECLARATION), ty=t) for n, t in pairs]
    )


def positional(*types: str) -> VariantShape:
    return VariantShape.positional([VariantField(ty=t) for t in types])


def declaration(*variants: Variant, visibility: str = "") -> SumTypeDeclaration:
    return SumTypeDeclaration(
        name=Ident(text="Foo", origin=Origin.DECLARATION),
        visibility=visibility,
        variants=list(variants),
    )


@pytest.fixture
def foo() -> SumTypeDeclaration:
    """``Foo { Record { y: i32 }, Tuple(i32, i8), Unit }``"""
    return declaration(
        variant("Record", named(("y", "i32"))),
        variant("Tuple", positional("i32", "i8")),
        variant("Unit", VariantShape.empty()),
    )


@pytest.fixture
def xt() -> list[FieldDescriptor]:
    """``x: i32, t: char``"""
    return [field("x", "i32"), field("t", "char")]
