"""Accessor Synthesizer — borrow / mutable / consuming accessors per field."""

from __future__ import annotations

import logging

from .attributes import filter_annotations
from .config import DEFAULT_CONFIG, TransformConfig
from .errors import EmptyFieldBinding
from .hygiene import accessor_names, call_site
from .syntax import (
    Accessor,
    AccessorKind,
    AccessorSpec,
    FieldDescriptor,
    MatchArm,
    SumTypeDeclaration,
    VariantPattern,
)

logger = logging.getLogger(__name__)


def accessor_specs(fields: list[FieldDescriptor]) -> list[AccessorSpec]:
    """Pair each requested field with its rank, its slot in tuple variants."""
    return [AccessorSpec(field=f, positional_index=i) for i, f in enumerate(fields)]


def build_arms(
    declaration: SumTypeDeclaration,
    spec: AccessorSpec,
    config: TransformConfig = DEFAULT_CONFIG,
) -> list[MatchArm]:
    """One or-combined arm covering every variant.

    An enum without variants is uninhabited, so the accessor can never be
    called; it gets a single wildcard arm that does not return.
    """
    if not declaration.variants:
        return [MatchArm(body=config.unreachable_policy.body())]
    binding = call_site(spec.field.name)
    patterns = [
        VariantPattern(
            variant=call_site(variant.name),
            kind=variant.shape.kind,
            binding=binding,
            index=spec.positional_index,
        )
        for variant in declaration.variants
    ]
    return [MatchArm(patterns=patterns, body=binding.text)]


def synthesize_field(
    declaration: SumTypeDeclaration,
    spec: AccessorSpec,
    config: TransformConfig = DEFAULT_CONFIG,
) -> list[Accessor]:
    field = spec.field
    if not field.name.text or not field.ty.strip():
        raise EmptyFieldBinding(
            f"field #{spec.positional_index} has no name or type", field.name.location
        )

    borrow, mutable, consume = accessor_names(field.name)
    annotations = filter_annotations(field.annotations)
    arms = build_arms(declaration, spec, config)
    signatures = (
        (AccessorKind.BORROW, borrow, "&self", f"&{field.ty}"),
        (AccessorKind.MUTABLE, mutable, "&mut self", f"&mut {field.ty}"),
        (AccessorKind.CONSUME, consume, "self", field.ty),
    )
    return [
        Accessor(
            kind=kind,
            name=name,
            field=field,
            receiver=receiver,
            return_type=return_type,
            visibility=declaration.visibility,
            annotations=annotations,
            arms=arms,
        )
        for kind, name, receiver, return_type in signatures
    ]


def synthesize_accessors(
    declaration: SumTypeDeclaration,
    fields: list[FieldDescriptor],
    config: TransformConfig = DEFAULT_CONFIG,
) -> list[Accessor]:
    """Accessor triplets for *fields* over the already normalized *declaration*."""
    accessors = [
        accessor
        for spec in accessor_specs(fields)
        for accessor in synthesize_field(declaration, spec, config)
    ]
    logger.debug(
        "Synthesized %d accessor(s) over %d variant(s)",
        len(accessors),
        len(declaration.variants),
    )
    return accessors
