"""Variant Normalizer — injects the requested fields into every variant."""

from __future__ import annotations

import logging

from .syntax import (
    FieldDescriptor,
    ShapeKind,
    SumTypeDeclaration,
    Variant,
    VariantField,
    VariantShape,
)

logger = logging.getLogger(__name__)


def _named(field: FieldDescriptor) -> VariantField:
    return VariantField(
        name=field.name,
        ty=field.ty,
        visibility=field.visibility,
        annotations=list(field.annotations),
    )


def _unnamed(field: FieldDescriptor) -> VariantField:
    return VariantField(
        ty=field.ty,
        visibility=field.visibility,
        annotations=list(field.annotations),
    )


def inject_fields(shape: VariantShape, fields: list[FieldDescriptor]) -> VariantShape:
    """Return *shape* with *fields* prepended.

    An empty shape becomes a named one; tuple shapes receive the fields
    without their names, so they occupy positions ``0..len(fields)``.
    """
    if not fields:
        return shape
    if shape.kind == ShapeKind.EMPTY:
        return inject_fields(VariantShape.named([]), fields)
    if shape.kind == ShapeKind.POSITIONAL:
        return VariantShape.positional([_unnamed(f) for f in fields] + shape.fields)
    return VariantShape.named([_named(f) for f in fields] + shape.fields)


def normalize_variant(variant: Variant, fields: list[FieldDescriptor]) -> Variant:
    shape = inject_fields(variant.shape, fields)
    logger.debug(
        "Variant %s: %s -> %s (%d field(s))",
        variant.name,
        variant.shape.kind.value,
        shape.kind.value,
        len(shape.fields),
    )
    return variant.model_copy(update={"shape": shape})


def normalize_variants(
    declaration: SumTypeDeclaration, fields: list[FieldDescriptor]
) -> SumTypeDeclaration:
    """Return a copy of *declaration* with *fields* injected into each variant."""
    if not fields:
        return declaration
    variants = [normalize_variant(v, fields) for v in declaration.variants]
    return declaration.model_copy(update={"variants": variants})
