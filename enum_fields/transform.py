"""Orchestrator — expand() entry point."""

from __future__ import annotations

import logging

from .accessors import synthesize_accessors
from .config import DEFAULT_CONFIG, TransformConfig
from .emit import render_expansion
from .frontends.declaration import DeclarationReader
from .frontends.field_list import FieldListReader
from .normalizer import normalize_variants
from .parser import Parser
from .syntax import Expansion

logger = logging.getLogger(__name__)


def expand(
    fields_text: str,
    declaration_text: str,
    config: TransformConfig = DEFAULT_CONFIG,
    parser: Parser | None = None,
) -> Expansion:
    """Inject the fields of *fields_text* into the enum of *declaration_text*.

    Both inputs are parsed before anything is generated; a malformed input
    raises ``MalformedFieldList`` or ``MalformedDeclaration`` and nothing is
    produced.
    """
    parser = parser or Parser()
    fields = FieldListReader(parser).read(fields_text)
    original = DeclarationReader(parser).read(declaration_text)
    logger.info(
        "Expanding enum %s: %d field(s) into %d variant(s)",
        original.name,
        len(fields),
        len(original.variants),
    )

    declaration = normalize_variants(original, fields)
    accessors = synthesize_accessors(declaration, fields, config)
    text = render_expansion(declaration, accessors, config)
    logger.info("Generated %d accessor(s) for %s", len(accessors), declaration.name)
    return Expansion(
        fields=fields,
        original=original,
        declaration=declaration,
        accessors=accessors,
        text=text,
    )
