"""Identifier Normalizer — cross-input name unification.

Field names come from the field-list text and variant names from the
declaration text.  Before they are spliced into generated code every
identifier is re-originated at the call site, so both resolve as if they had
been written in one place.  The emitter refuses identifiers that still carry
an input origin.
"""

from __future__ import annotations

from typing import Iterable

from .errors import HygieneError
from .syntax import NO_SOURCE_LOCATION, Ident, Origin
from . import constants


def call_site(ident: Ident) -> Ident:
    """Return *ident* with its origin and location dropped."""
    return Ident(text=ident.text, origin=Origin.CALL_SITE, location=NO_SOURCE_LOCATION)


def unify(idents: Iterable[Ident]) -> list[Ident]:
    return [call_site(i) for i in idents]


def require_call_site(ident: Ident) -> str:
    """Return the text of *ident*, which must have been re-originated."""
    if ident.origin != Origin.CALL_SITE:
        raise HygieneError(
            f"identifier `{ident.text}` still carries its {ident.origin.value} origin",
            ident.location,
        )
    return ident.text


def make_ident(text: str) -> Ident:
    """A call-site identifier, raw-prefixed when *text* is a keyword."""
    if text in constants.RUST_KEYWORDS and text not in constants.NON_RAW_KEYWORDS:
        text = constants.RAW_IDENT_PREFIX + text
    return Ident(text=text)


def accessor_names(field_name: Ident) -> tuple[Ident, Ident, Ident]:
    """Borrow, mutable and consuming accessor names for *field_name*.

    Derived from the bare name, so ``r#type`` yields ``r#type``,
    ``type_mut`` and ``into_type``.
    """
    bare = field_name.bare
    return (
        make_ident(bare),
        make_ident(bare + constants.MUTABLE_SUFFIX),
        make_ident(constants.CONSUMING_PREFIX + bare),
    )
