"""Composable API functions for the field-injection transform.

Each function corresponds to a CLI workflow but is callable
programmatically without argparse.
"""

from __future__ import annotations

import logging

from .config import DEFAULT_CONFIG, TransformConfig
from .errors import TransformError
from .frontends.declaration import DeclarationReader
from .frontends.field_list import FieldListReader
from .stats import ExpansionStats
from .stats import expansion_stats as _expansion_stats
from .syntax import FieldDescriptor, SumTypeDeclaration
from .transform import expand

logger = logging.getLogger(__name__)


def parse_fields(fields_text: str) -> list[FieldDescriptor]:
    """Parse a field-list text into field descriptors.

    Args:
        fields_text: Comma-separated ``[annotations] name: Type`` entries.

    Returns:
        The descriptors, in the order written.

    Raises:
        MalformedFieldList: If the text is not a list of named fields.
    """
    return FieldListReader().read(fields_text)


def parse_declaration(declaration_text: str) -> SumTypeDeclaration:
    """Parse an enum declaration text.

    Args:
        declaration_text: The annotated ``enum`` declaration.

    Returns:
        The parsed declaration.

    Raises:
        MalformedDeclaration: If the text is not a single enum declaration.
    """
    return DeclarationReader().read(declaration_text)


def expand_fields(
    fields_text: str,
    declaration_text: str,
    config: TransformConfig = DEFAULT_CONFIG,
) -> str:
    """Rewrite the declaration and append the accessor impl block.

    Args:
        fields_text: The requested field list.
        declaration_text: The enum declaration.
        config: Code-generation options.

    Returns:
        The rewritten declaration followed by the ``impl`` block.

    Raises:
        TransformError: If either input is malformed.
    """
    return expand(fields_text, declaration_text, config).text


def expand_to_tokens(
    fields_text: str,
    declaration_text: str,
    config: TransformConfig = DEFAULT_CONFIG,
) -> str:
    """Like ``expand_fields``, but a failure yields a ``compile_error!`` invocation.

    The diagnostic replaces the whole output, so a build that includes it
    fails with the message and location of the malformed input.
    """
    try:
        return expand_fields(fields_text, declaration_text, config)
    except TransformError as exc:
        logger.warning("Expansion failed: %s", exc.diagnostic)
        return exc.diagnostic.to_compile_error() + "\n"


def accessor_names(fields_text: str, declaration_text: str) -> list[str]:
    """Names of the generated accessors, in emission order."""
    expansion = expand(fields_text, declaration_text)
    return [accessor.name.text for accessor in expansion.accessors]


def expansion_stats(
    fields_text: str,
    declaration_text: str,
    config: TransformConfig = DEFAULT_CONFIG,
) -> ExpansionStats:
    """Expand and return shape, accessor and annotation counts."""
    return _expansion_stats(expand(fields_text, declaration_text, config))
