"""DeclarationReader -- enum declaration text -> SumTypeDeclaration."""

from __future__ import annotations

import logging

from ._base import BaseSyntaxReader
from ..errors import MalformedDeclaration
from ..syntax import (
    Annotation,
    GenericParam,
    GenericParamKind,
    Generics,
    Origin,
    SumTypeDeclaration,
    Variant,
    VariantField,
    VariantShape,
)
from .. import constants

logger = logging.getLogger(__name__)

_ITEM_DESCRIPTIONS: dict[str, str] = {
    "struct_item": "a struct",
    "union_item": "a union",
    "function_item": "a function",
    "impl_item": "an impl block",
    "trait_item": "a trait",
    "type_item": "a type alias",
    "mod_item": "a module",
}


class DeclarationReader(BaseSyntaxReader):
    """Reads `[attrs] [vis] enum Name<Generics> [where ...] { variants }`."""

    ORIGIN = Origin.DECLARATION
    ERROR_CLASS = MalformedDeclaration
    INPUT_KIND = "declaration"

    def read(self, text: str) -> SumTypeDeclaration:
        self._reset(text, text)
        root = self._parser.parse(text).root_node
        self._raise_on_syntax_error(root)

        annotations: list[Annotation] = []
        item = None
        for child in root.named_children:
            if child.type == constants.ATTRIBUTE_ITEM or self._is_doc_comment(child):
                if item is not None:
                    raise self._fail("unexpected attribute after the declaration", child)
                annotations.append(self._annotation(child))
            elif child.type in constants.COMMENT_TYPES:
                continue
            elif item is None:
                item = child
            else:
                raise self._fail("unexpected item after the declaration", child)

        if item is None:
            raise self._fail("expected an enum declaration", root)
        if item.type != constants.ENUM_ITEM:
            found = _ITEM_DESCRIPTIONS.get(item.type, f"`{item.type}`")
            raise self._fail(f"expected `enum`, found {found}", item)
        return self._enum(item, annotations)

    # -- enum ----------------------------------------------------------------

    def _enum(self, node, annotations: list[Annotation]) -> SumTypeDeclaration:
        name_node = node.child_by_field_name("name")
        body_node = node.child_by_field_name("body")
        if name_node is None or body_node is None:
            raise self._fail("expected `enum Name { ... }`", node)

        variants = [
            self._variant(variant_annotations, child)
            for variant_annotations, child in self._annotated_children(
                body_node, constants.ENUM_VARIANT
            )
        ]
        declaration = SumTypeDeclaration(
            name=self._ident(name_node),
            generics=self._generics(node),
            visibility=self._visibility(node),
            annotations=annotations,
            variants=variants,
        )
        logger.debug(
            "Read enum %s with %d variant(s)", declaration.name, len(variants)
        )
        return declaration

    # -- variants ------------------------------------------------------------

    def _variant(self, annotations: list[Annotation], node) -> Variant:
        name_node = node.child_by_field_name("name")
        body_node = node.child_by_field_name("body")
        value_node = node.child_by_field_name("value")
        if name_node is None:
            raise self._fail("expected a variant name", node)

        if body_node is None:
            shape = VariantShape.empty()
        elif body_node.type == constants.FIELD_DECLARATION_LIST:
            shape = VariantShape.named(self._named_fields(body_node))
        elif body_node.type == constants.ORDERED_FIELD_DECLARATION_LIST:
            shape = VariantShape.positional(self._positional_fields(body_node))
        else:
            raise self._fail(f"unexpected variant body `{body_node.type}`", body_node)

        return Variant(
            name=self._ident(name_node),
            shape=shape,
            annotations=annotations,
            visibility=self._visibility(node),
            discriminant=self._node_text(value_node) if value_node else None,
        )

    def _named_fields(self, body_node) -> list[VariantField]:
        fields = []
        for annotations, child in self._annotated_children(
            body_node, constants.FIELD_DECLARATION
        ):
            name_node = child.child_by_field_name("name")
            type_node = child.child_by_field_name("type")
            if name_node is None or type_node is None:
                raise self._fail("expected `name: Type`", child)
            fields.append(
                VariantField(
                    name=self._ident(name_node),
                    ty=self._node_text(type_node),
                    visibility=self._visibility(child),
                    annotations=annotations,
                )
            )
        return fields

    def _positional_fields(self, body_node) -> list[VariantField]:
        """Tuple fields; attributes and visibility precede each type."""
        type_spans = {
            (t.start_byte, t.end_byte) for t in body_node.children_by_field_name("type")
        }
        fields: list[VariantField] = []
        pending: list[Annotation] = []
        dangling = None
        visibility = ""
        for child in body_node.children:
            if self._is_annotation_node(child):
                pending.append(self._annotation(child))
                dangling = child if dangling is None else dangling
            elif child.type == constants.VISIBILITY_MODIFIER:
                visibility = self._node_text(child)
            elif (child.start_byte, child.end_byte) in type_spans:
                fields.append(
                    VariantField(
                        ty=self._node_text(child),
                        visibility=visibility,
                        annotations=pending,
                    )
                )
                pending, dangling, visibility = [], None, ""
        if dangling is not None:
            raise self._dangling_annotation(dangling)
        return fields

    # -- generics ------------------------------------------------------------

    def _generics(self, node) -> Generics:
        params_node = node.child_by_field_name("type_parameters")
        where_node = next(
            (c for c in node.children if c.type == constants.WHERE_CLAUSE), None
        )
        params = []
        if params_node is not None:
            params = [
                self._generic_param(child)
                for child in params_node.named_children
                if child.type != constants.ATTRIBUTE_ITEM
                and child.type not in constants.COMMENT_TYPES
            ]
        return Generics(
            params=params,
            where_clause=self._node_text(where_node) if where_node else "",
        )

    def _generic_param(self, node) -> GenericParam:
        name = self._param_name(node)
        if node.type in constants.CONST_PARAM_TYPES:
            kind = GenericParamKind.CONST
        elif node.type in constants.LIFETIME_PARAM_TYPES or name.startswith("'"):
            kind = GenericParamKind.LIFETIME
        else:
            kind = GenericParamKind.TYPE

        eq = next((c for c in node.children if c.type == "="), None)
        if eq is None:
            return GenericParam(kind=kind, name=name, declaration=self._node_text(node))
        head = self._source[node.start_byte : eq.start_byte].decode("utf-8")
        tail = self._source[eq.end_byte : node.end_byte].decode("utf-8")
        return GenericParam(
            kind=kind,
            name=name,
            declaration=head.strip(),
            default=tail.strip(),
        )

    def _param_name(self, node) -> str:
        if node.type in ("lifetime", "type_identifier", "identifier"):
            return self._node_text(node)
        name_node = node.child_by_field_name("name") or node.child_by_field_name("left")
        if name_node is None:
            name_node = node.named_children[0] if node.named_child_count else node
            if name_node is node:
                return self._node_text(node)
        return self._param_name(name_node)


def parse_declaration(text: str) -> SumTypeDeclaration:
    """Parse an enum declaration; raises ``MalformedDeclaration`` otherwise."""
    return DeclarationReader().read(text)
