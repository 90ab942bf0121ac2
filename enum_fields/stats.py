"""Pure functions for computing statistics over an expansion."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field

from .attributes import is_propagated
from .syntax import Expansion, SumTypeDeclaration


def count_shapes(declaration: SumTypeDeclaration) -> dict[str, int]:
    """Return a frequency map of variant shape names.

    Empty dict for an enum without variants.
    """
    return dict(Counter(v.shape.kind.value for v in declaration.variants))


@dataclass
class ExpansionStats:
    """Size statistics for one expansion."""

    enum_name: str = ""
    variants: int = 0
    requested_fields: int = 0
    accessors: int = 0
    shapes_before: dict[str, int] = field(default_factory=dict)
    shapes_after: dict[str, int] = field(default_factory=dict)
    propagated_annotations: int = 0
    dropped_annotations: int = 0

    def report(self) -> str:
        def _shapes(counts: dict[str, int]) -> str:
            return ", ".join(f"{k.lower()}={v}" for k, v in sorted(counts.items())) or "-"

        return "\n".join(
            [
                f"═══ Expansion of {self.enum_name} ═══",
                f"  Variants: {self.variants}",
                f"  Shapes before: {_shapes(self.shapes_before)}",
                f"  Shapes after:  {_shapes(self.shapes_after)}",
                f"  Requested fields: {self.requested_fields}",
                f"  Accessors: {self.accessors}",
                f"  Annotations: {self.propagated_annotations} propagated,"
                f" {self.dropped_annotations} dropped",
            ]
        )


def expansion_stats(expansion: Expansion) -> ExpansionStats:
    annotations = [a for f in expansion.fields for a in f.annotations]
    propagated = sum(1 for a in annotations if is_propagated(a))
    return ExpansionStats(
        enum_name=expansion.declaration.name.text,
        variants=len(expansion.declaration.variants),
        requested_fields=len(expansion.fields),
        accessors=len(expansion.accessors),
        shapes_before=count_shapes(expansion.original),
        shapes_after=count_shapes(expansion.declaration),
        propagated_annotations=propagated,
        dropped_annotations=len(annotations) - propagated,
    )
