"""Tree-sitter readers for the two transform inputs."""

from __future__ import annotations

from ._base import BaseSyntaxReader
from .declaration import DeclarationReader, parse_declaration
from .field_list import FieldListReader, parse_field_list

__all__ = [
    "BaseSyntaxReader",
    "DeclarationReader",
    "FieldListReader",
    "parse_declaration",
    "parse_field_list",
]
