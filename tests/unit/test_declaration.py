"""Tests for DeclarationReader -- enum declaration text to SumTypeDeclaration."""

from __future__ import annotations

import pytest

from enum_fields.errors import MalformedDeclaration
from enum_fields.frontends.declaration import parse_declaration
from enum_fields.syntax import GenericParamKind, Origin, ShapeKind

FOO = """\
/// A foo.
#[derive(Debug)]
pub enum Foo<T: Copy> {
    Record { y: i32 },
    RecordHasGeneric { y: i32, z: T },
    Tuple(i32, i8),
    Unit,
}
"""


def _shapes(text: str) -> list[ShapeKind]:
    return [v.shape.kind for v in parse_declaration(text).variants]


class TestDeclarationHeader:
    def test_name_and_visibility(self):
        decl = parse_declaration(FOO)
        assert decl.name.text == "Foo"
        assert decl.name.origin == Origin.DECLARATION
        assert decl.visibility == "pub"

    def test_private_enum_has_no_visibility(self):
        assert parse_declaration("enum E { A }").visibility == ""

    def test_restricted_visibility(self):
        assert parse_declaration("pub(crate) enum E { A }").visibility == "pub(crate)"

    def test_outer_annotations_in_order(self):
        decl = parse_declaration(FOO)
        assert [a.text for a in decl.annotations] == ["/// A foo.", "#[derive(Debug)]"]

    def test_generics_forms(self):
        generics = parse_declaration(FOO).generics
        assert generics.declaration_form() == "<T: Copy>"
        assert generics.impl_form() == "<T: Copy>"
        assert generics.type_form() == "<T>"

    def test_lifetime_and_default(self):
        generics = parse_declaration("enum E<'a, T = u8> { A(&'a T) }").generics
        assert [p.kind for p in generics.params] == [
            GenericParamKind.LIFETIME,
            GenericParamKind.TYPE,
        ]
        assert generics.type_form() == "<'a, T>"
        assert generics.impl_form() == "<'a, T>"
        assert generics.declaration_form() == "<'a, T = u8>"

    def test_const_generic(self):
        generics = parse_declaration("enum E<const N: usize> { A([u8; N]) }").generics
        assert generics.params[0].kind == GenericParamKind.CONST
        assert generics.type_form() == "<N>"
        assert generics.impl_form() == "<const N: usize>"

    def test_where_clause(self):
        decl = parse_declaration("enum E<T> where T: Clone { A(T) }")
        assert decl.generics.where_clause == "where T: Clone"


class TestDeclarationVariants:
    def test_three_shapes(self):
        assert _shapes(FOO) == [
            ShapeKind.NAMED,
            ShapeKind.NAMED,
            ShapeKind.POSITIONAL,
            ShapeKind.EMPTY,
        ]

    def test_named_fields(self):
        variant = parse_declaration(FOO).variants[1]
        assert [f.name.text for f in variant.shape.fields] == ["y", "z"]
        assert [f.ty for f in variant.shape.fields] == ["i32", "T"]

    def test_positional_fields(self):
        variant = parse_declaration(FOO).variants[2]
        assert [f.name for f in variant.shape.fields] == [None, None]
        assert [f.ty for f in variant.shape.fields] == ["i32", "i8"]

    def test_zero_variants(self):
        decl = parse_declaration("enum EmptyEnum { }")
        assert decl.variants == []

    def test_variant_annotations(self):
        decl = parse_declaration("enum E {\n    /// first\n    #[default]\n    A,\n    B,\n}")
        assert [a.text for a in decl.variants[0].annotations] == ["/// first", "#[default]"]
        assert decl.variants[1].annotations == []

    def test_field_annotations_inside_variants(self):
        decl = parse_declaration("enum E { A { #[serde(skip)] a: u8 }, B(#[cfg(test)] u8, u16) }")
        assert decl.variants[0].shape.fields[0].annotations[0].text == "#[serde(skip)]"
        b_fields = decl.variants[1].shape.fields
        assert b_fields[0].annotations[0].text == "#[cfg(test)]"
        assert b_fields[1].annotations == []

    def test_discriminant(self):
        decl = parse_declaration("enum E { A = 1, B }")
        assert decl.variants[0].discriminant == "1"
        assert decl.variants[1].discriminant is None


class TestDeclarationErrors:
    def test_struct_rejected(self):
        with pytest.raises(MalformedDeclaration, match="found a struct"):
            parse_declaration("struct Foo { x: i32 }")

    def test_function_rejected(self):
        with pytest.raises(MalformedDeclaration, match="found a function"):
            parse_declaration("fn foo() {}")

    def test_empty_text_rejected(self):
        with pytest.raises(MalformedDeclaration, match="expected an enum"):
            parse_declaration("")

    def test_second_item_rejected(self):
        with pytest.raises(MalformedDeclaration, match="unexpected item") as info:
            parse_declaration("enum A { X }\nenum B { Y }")
        assert info.value.location.start_line == 2

    def test_syntax_error_rejected(self):
        with pytest.raises(MalformedDeclaration) as info:
            parse_declaration("enum A { X(, }")
        assert info.value.location.start_line == 1

    def test_struct_location_points_at_item(self):
        with pytest.raises(MalformedDeclaration) as info:
            parse_declaration("#[derive(Debug)]\nstruct Foo;")
        assert info.value.location.start_line == 2
        assert info.value.location.start_col == 0

    def test_trailing_doc_comment_in_variant_list_rejected(self):
        with pytest.raises(MalformedDeclaration, match="does not document anything") as info:
            parse_declaration("enum E {\n    A,\n    /// dangling\n}")
        assert info.value.location.start_line == 3
        assert info.value.location.start_col == 4

    def test_trailing_doc_comment_in_tuple_variant_rejected(self):
        with pytest.raises(MalformedDeclaration, match="does not document anything"):
            parse_declaration("enum E { A(u8, /// dangling\n) }")

    def test_trailing_doc_comment_in_record_variant_rejected(self):
        with pytest.raises(MalformedDeclaration, match="does not document anything"):
            parse_declaration("enum E { A { x: u8, /// dangling\n } }")

    def test_columns_count_characters_not_bytes(self):
        declaration = parse_declaration("enum E { /* é */ A }")
        assert declaration.variants[0].name.location.start_col == 17
