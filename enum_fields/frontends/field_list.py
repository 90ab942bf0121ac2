"""FieldListReader -- `name: Type, ...` text -> FieldDescriptor list."""

from __future__ import annotations

import logging

from ._base import BaseSyntaxReader
from ..errors import MalformedFieldList
from ..syntax import FieldDescriptor, Origin
from .. import constants

logger = logging.getLogger(__name__)


class FieldListReader(BaseSyntaxReader):
    """Reads the requested field list.

    The text is parsed as the body of a synthetic struct, so only named
    fields are accepted; locations are reported relative to the field-list
    text itself.
    """

    ORIGIN = Origin.FIELD_LIST
    ERROR_CLASS = MalformedFieldList
    INPUT_KIND = "field list"

    def read(self, text: str) -> list[FieldDescriptor]:
        host = constants.FIELD_LIST_HOST_PREFIX + text + constants.FIELD_LIST_HOST_SUFFIX
        self._reset(host, text, line_offset=constants.FIELD_LIST_HOST_LINES)
        root = self._parser.parse(host).root_node
        self._raise_on_syntax_error(root)

        items = [c for c in root.named_children if c.type not in constants.COMMENT_TYPES]
        if len(items) > 1:
            raise self._fail("unexpected tokens after the field list", items[1])
        if not items or items[0].type != constants.STRUCT_ITEM:
            raise self._fail("expected `name: Type` fields", root)
        body = items[0].child_by_field_name("body")
        if body is None or body.type != constants.FIELD_DECLARATION_LIST:
            raise self._fail("expected `name: Type` fields", items[0])

        fields = [
            self._field(annotations, node)
            for annotations, node in self._annotated_children(
                body, constants.FIELD_DECLARATION
            )
        ]
        logger.debug("Read %d requested field(s)", len(fields))
        return fields

    def _field(self, annotations, node) -> FieldDescriptor:
        name_node = node.child_by_field_name("name")
        type_node = node.child_by_field_name("type")
        if name_node is None or type_node is None:
            raise self._fail("expected `name: Type`", node)
        return FieldDescriptor(
            name=self._ident(name_node),
            ty=self._node_text(type_node),
            visibility=self._visibility(node),
            annotations=annotations,
        )


def parse_field_list(text: str) -> list[FieldDescriptor]:
    """Parse a comma-separated `[annotations] name: Type` list.

    Raises ``MalformedFieldList`` on anything else.
    """
    return FieldListReader().read(text)
