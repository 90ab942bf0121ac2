"""BaseSyntaxReader — shared tree-sitter helpers for the two input readers."""

from __future__ import annotations

import logging
from typing import Iterator

from ..attributes import classify
from ..errors import TransformError
from ..parser import Parser
from ..syntax import Annotation, AnnotationStyle, Ident, Origin, SourceLocation
from .. import constants

logger = logging.getLogger(__name__)


class BaseSyntaxReader:
    """Base class for readers that turn one input text into syntax models.

    Subclasses set ``ORIGIN`` (stamped on every identifier they produce) and
    ``ERROR_CLASS`` (raised for malformed input), and call ``_reset`` with
    the exact text handed to tree-sitter before walking the tree.
    """

    ORIGIN: Origin = Origin.DECLARATION
    ERROR_CLASS: type[TransformError] = TransformError
    INPUT_KIND: str = "input"

    # ── init ─────────────────────────────────────────────────────

    def __init__(self, parser: Parser | None = None):
        self._parser = parser or Parser()
        self._source: bytes = b""
        self._rows: list[bytes] = []
        self._line_offset: int = 0
        self._last_line: int = 1
        self._last_col: int = 0

    def _reset(self, host: str, text: str, line_offset: int = 0) -> None:
        """Prepare to read *host*, of which *text* is the user-written part."""
        self._source = host.encode("utf-8")
        self._rows = self._source.split(b"\n")
        self._line_offset = line_offset
        lines = text.split("\n")
        self._last_line = len(lines)
        self._last_col = len(lines[-1])

    # ── helpers ──────────────────────────────────────────────────

    def _node_text(self, node) -> str:
        return self._source[node.start_byte : node.end_byte].decode("utf-8")

    def _point(self, point: tuple[int, int]) -> tuple[int, int]:
        line = point[0] + 1 - self._line_offset
        if line < 1:
            return 1, 0
        if line > self._last_line:
            return self._last_line, self._last_col
        return line, self._char_column(point[0], point[1])

    def _char_column(self, row: int, byte_col: int) -> int:
        """Tree-sitter columns count bytes; diagnostics count characters."""
        prefix = self._rows[row][:byte_col] if row < len(self._rows) else b""
        return len(prefix.decode("utf-8", errors="replace"))

    def _source_loc(self, node) -> SourceLocation:
        start_line, start_col = self._point(node.start_point)
        end_line, end_col = self._point(node.end_point)
        return SourceLocation(
            start_line=start_line,
            start_col=start_col,
            end_line=end_line,
            end_col=end_col,
        )

    def _ident(self, node) -> Ident:
        return Ident(
            text=self._node_text(node),
            origin=self.ORIGIN,
            location=self._source_loc(node),
        )

    def _fail(self, message: str, node=None) -> TransformError:
        location = self._source_loc(node) if node is not None else None
        logger.debug("Malformed %s: %s at %s", self.INPUT_KIND, message, location)
        if location is None:
            return self.ERROR_CLASS(message)
        return self.ERROR_CLASS(message, location)

    # ── syntax errors ────────────────────────────────────────────

    def _first_error(self, node):
        """Depth-first search for the first ERROR or MISSING node."""
        if node.is_error or node.is_missing:
            return node
        return next(
            (
                found
                for child in node.children
                if child.has_error or child.is_missing
                if (found := self._first_error(child)) is not None
            ),
            None,
        )

    def _raise_on_syntax_error(self, root) -> None:
        if not root.has_error:
            return
        bad = self._first_error(root) or root
        if bad.is_missing:
            raise self._fail(f"expected `{bad.type}`", bad)
        snippet = self._node_text(bad).strip().splitlines()
        found = snippet[0][:40] if snippet else bad.type
        raise self._fail(f"unexpected `{found}` in {self.INPUT_KIND}", bad)

    # ── annotations ──────────────────────────────────────────────

    def _is_doc_comment(self, node) -> bool:
        if node.type not in constants.COMMENT_TYPES:
            return False
        text = self._node_text(node)
        if text.startswith("///"):
            return not text.startswith("////")
        if text.startswith("/**"):
            return not text.startswith("/***") and text != "/**/"
        return False

    def _annotation(self, node) -> Annotation:
        """Build an Annotation from an ``attribute_item`` or a doc comment."""
        text = self._node_text(node).rstrip("\n")
        if node.type in constants.COMMENT_TYPES:
            path, style = constants.DOC_PATH, AnnotationStyle.DOC_COMMENT
        else:
            attribute = next(
                (c for c in node.named_children if c.type == "attribute"), None
            )
            path, style = self._attribute_meta(attribute)
        return Annotation(
            kind=classify(path, style),
            path=path,
            style=style,
            text=text,
            location=self._source_loc(node),
        )

    def _attribute_meta(self, attribute) -> tuple[str, AnnotationStyle]:
        if attribute is None or attribute.named_child_count == 0:
            return "", AnnotationStyle.PATH
        path = self._node_text(attribute.named_children[0])
        if attribute.child_by_field_name("arguments") is not None:
            return path, AnnotationStyle.LIST
        if attribute.child_by_field_name("value") is not None or any(
            c.type == "=" for c in attribute.children
        ):
            return path, AnnotationStyle.NAME_VALUE
        if any(c.type == constants.TOKEN_TREE for c in attribute.named_children):
            return path, AnnotationStyle.LIST
        return path, AnnotationStyle.PATH

    def _annotated_children(
        self, list_node, item_type: str
    ) -> Iterator[tuple[list[Annotation], object]]:
        """Yield ``(annotations, node)`` for each *item_type* child.

        Attributes and doc comments preceding an item attach to it; plain
        comments are skipped. Annotations left over after the last item are
        an error.
        """
        pending: list[Annotation] = []
        dangling = None
        for child in list_node.children:
            if self._is_annotation_node(child):
                pending.append(self._annotation(child))
                dangling = child if dangling is None else dangling
            elif child.type == item_type:
                yield pending, child
                pending, dangling = [], None
        if dangling is not None:
            raise self._dangling_annotation(dangling)

    def _is_annotation_node(self, node) -> bool:
        return node.type == constants.ATTRIBUTE_ITEM or self._is_doc_comment(node)

    def _dangling_annotation(self, node) -> TransformError:
        if node.type == constants.ATTRIBUTE_ITEM:
            return self._fail("attribute does not annotate anything", node)
        return self._fail("documentation comment does not document anything", node)

    def _visibility(self, node) -> str:
        vis = next(
            (c for c in node.children if c.type == constants.VISIBILITY_MODIFIER),
            None,
        )
        return self._node_text(vis) if vis is not None else ""
