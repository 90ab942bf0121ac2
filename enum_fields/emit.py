"""Rust emitter — renders the rewritten enum and its accessor impl block."""

from __future__ import annotations

from .config import DEFAULT_CONFIG, TransformConfig
from .hygiene import require_call_site
from .syntax import (
    Accessor,
    Annotation,
    MatchArm,
    ShapeKind,
    SumTypeDeclaration,
    Variant,
    VariantField,
    VariantPattern,
)
from . import constants

MAX_LINE_WIDTH = 100


def _prefixed(visibility: str, rest: str) -> str:
    return f"{visibility} {rest}" if visibility else rest


def _annotation_lines(annotations: list[Annotation], indent: str) -> list[str]:
    return [
        f"{indent}{line.strip() if i else line}"
        for a in annotations
        for i, line in enumerate(a.text.splitlines())
    ]


# ── declaration ──────────────────────────────────────────────────


def render_field(field: VariantField) -> str:
    if field.name is None:
        return _prefixed(field.visibility, field.ty)
    return _prefixed(field.visibility, f"{field.name.text}: {field.ty}")


def _render_fields_inline(variant: Variant) -> str:
    fields = ", ".join(render_field(f) for f in variant.shape.fields)
    if variant.shape.kind == ShapeKind.POSITIONAL:
        return f"({fields})"
    return f" {{ {fields} }}" if fields else " {}"


def _render_fields_block(variant: Variant, indent: str, step: str) -> list[str]:
    open_, close = ("(", ")") if variant.shape.kind == ShapeKind.POSITIONAL else (" {", "}")
    inner = indent + step
    lines = [f"{indent}{_prefixed(variant.visibility, variant.name.text)}{open_}"]
    for field in variant.shape.fields:
        lines.extend(_annotation_lines(field.annotations, inner))
        lines.append(f"{inner}{render_field(field)},")
    lines.append(f"{indent}{close}")
    return lines


def render_variant(variant: Variant, indent: str, step: str) -> list[str]:
    lines = _annotation_lines(variant.annotations, indent)
    discriminant = f" = {variant.discriminant}" if variant.discriminant else ""
    if variant.shape.kind == ShapeKind.EMPTY:
        head = _prefixed(variant.visibility, variant.name.text)
        lines.append(f"{indent}{head}{discriminant},")
    elif any(f.annotations for f in variant.shape.fields):
        body = _render_fields_block(variant, indent, step)
        body[-1] += f"{discriminant},"
        lines.extend(body)
    else:
        head = _prefixed(variant.visibility, variant.name.text)
        lines.append(f"{indent}{head}{_render_fields_inline(variant)}{discriminant},")
    return lines


def render_declaration(
    declaration: SumTypeDeclaration, config: TransformConfig = DEFAULT_CONFIG
) -> str:
    generics = declaration.generics
    head = _prefixed(
        declaration.visibility,
        f"enum {declaration.name.text}{generics.declaration_form()}",
    )
    if generics.where_clause:
        head = f"{head} {generics.where_clause}"
    lines = _annotation_lines(declaration.annotations, "")
    if not declaration.variants:
        lines.append(f"{head} {{}}")
        return "\n".join(lines)
    lines.append(f"{head} {{")
    for variant in declaration.variants:
        lines.extend(render_variant(variant, config.indent, config.indent))
    lines.append("}")
    return "\n".join(lines)


# ── accessors ────────────────────────────────────────────────────


def render_pattern(pattern: VariantPattern) -> str:
    variant = require_call_site(pattern.variant)
    binding = require_call_site(pattern.binding)
    if pattern.kind == ShapeKind.NAMED:
        return f"Self::{variant} {{ {binding}, .. }}"
    if pattern.kind == ShapeKind.POSITIONAL:
        return f"Self::{variant} {{ {pattern.index}: {binding}, .. }}"
    return f"Self::{variant}"


def render_arm(arm: MatchArm, indent: str) -> list[str]:
    if not arm.patterns:
        return [f"{indent}_ => {arm.body},"]
    patterns = [render_pattern(p) for p in arm.patterns]
    line = f"{indent}{' | '.join(patterns)} => {arm.body},"
    if len(line) <= MAX_LINE_WIDTH:
        return [line]
    lines = [f"{indent}{patterns[0]}"]
    lines.extend(f"{indent}| {p}" for p in patterns[1:])
    lines[-1] += f" => {arm.body},"
    return lines


def render_accessor(
    accessor: Accessor, config: TransformConfig = DEFAULT_CONFIG
) -> list[str]:
    step = config.indent
    name = require_call_site(accessor.name)
    lines = _annotation_lines(accessor.annotations, step)
    if config.allow_unused:
        lines.append(f"{step}{constants.ALLOW_UNUSED_ATTRIBUTE}")
    signature = _prefixed(
        accessor.visibility,
        f"fn {name}({accessor.receiver}) -> {accessor.return_type} {{",
    )
    lines.append(f"{step}{signature}")
    lines.append(f"{step * 2}match self {{")
    for arm in accessor.arms:
        lines.extend(render_arm(arm, step * 3))
    lines.append(f"{step * 2}}}")
    lines.append(f"{step}}}")
    return lines


def render_impl(
    declaration: SumTypeDeclaration,
    accessors: list[Accessor],
    config: TransformConfig = DEFAULT_CONFIG,
) -> str:
    generics = declaration.generics
    head = (
        f"impl{generics.impl_form()} {declaration.name.text}{generics.type_form()}"
    )
    if generics.where_clause:
        head = f"{head} {generics.where_clause}"
    if not accessors:
        return f"{head} {{}}"
    lines = [f"{head} {{"]
    for i, accessor in enumerate(accessors):
        if i:
            lines.append("")
        lines.extend(render_accessor(accessor, config))
    lines.append("}")
    return "\n".join(lines)


def render_expansion(
    declaration: SumTypeDeclaration,
    accessors: list[Accessor],
    config: TransformConfig = DEFAULT_CONFIG,
) -> str:
    return (
        render_declaration(declaration, config)
        + "\n"
        + render_impl(declaration, accessors, config)
        + "\n"
    )
