"""Tests for the variant normalizer -- field injection per shape."""

from __future__ import annotations

from enum_fields.normalizer import inject_fields, normalize_variants
from enum_fields.syntax import ShapeKind, VariantShape
from tests.unit.conftest import field, guard, named, positional


def _types(shape: VariantShape) -> list[str]:
    return [f.ty for f in shape.fields]


def _field_names(shape: VariantShape) -> list[str | None]:
    return [f.name.text if f.name else None for f in shape.fields]


class TestInjectFields:
    def test_positional_prepends_in_order(self, xt):
        shape = inject_fields(positional("i32", "i8"), xt)
        assert shape.kind == ShapeKind.POSITIONAL
        assert _types(shape) == ["i32", "char", "i32", "i8"]
        assert _field_names(shape) == [None, None, None, None]

    def test_named_prepends_in_order(self, xt):
        shape = inject_fields(named(("y", "i32")), xt)
        assert shape.kind == ShapeKind.NAMED
        assert _field_names(shape) == ["x", "t", "y"]
        assert _types(shape) == ["i32", "char", "i32"]

    def test_empty_becomes_named(self, xt):
        shape = inject_fields(VariantShape.empty(), xt)
        assert shape.kind == ShapeKind.NAMED
        assert _field_names(shape) == ["x", "t"]

    def test_empty_positional_receives_fields(self, xt):
        shape = inject_fields(positional(), xt)
        assert shape.kind == ShapeKind.POSITIONAL
        assert _types(shape) == ["i32", "char"]

    def test_no_fields_leaves_empty_alone(self):
        shape = VariantShape.empty()
        assert inject_fields(shape, []) is shape

    def test_annotations_travel_with_injected_fields(self):
        fields = [field("x", "i32"), field("y", "i32", guard("false"))]
        shape = inject_fields(positional("i8"), fields)
        assert [a.text for a in shape.fields[1].annotations] == ["#[cfg(false)]"]
        assert shape.fields[2].annotations == []


class TestNormalizeVariants:
    def test_every_variant_gains_fields(self, foo, xt):
        decl = normalize_variants(foo, xt)
        assert [v.shape.kind for v in decl.variants] == [
            ShapeKind.NAMED,
            ShapeKind.POSITIONAL,
            ShapeKind.NAMED,
        ]
        assert _field_names(decl.variants[0].shape) == ["x", "t", "y"]
        assert _types(decl.variants[1].shape) == ["i32", "char", "i32", "i8"]
        assert _field_names(decl.variants[2].shape) == ["x", "t"]

    def test_input_not_mutated(self, foo, xt):
        normalize_variants(foo, xt)
        assert [v.shape.kind for v in foo.variants] == [
            ShapeKind.NAMED,
            ShapeKind.POSITIONAL,
            ShapeKind.EMPTY,
        ]
        assert _types(foo.variants[1].shape) == ["i32", "i8"]

    def test_zero_fields_is_a_no_op(self, foo):
        assert normalize_variants(foo, []) is foo

    def test_names_and_order_of_variants_preserved(self, foo, xt):
        decl = normalize_variants(foo, xt)
        assert [v.name.text for v in decl.variants] == ["Record", "Tuple", "Unit"]
