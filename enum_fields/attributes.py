"""Attribute Filter — which field annotations are copied onto accessors.

Only documentation in name-value form (``#[doc = "..."]`` or a doc comment)
and conditional-inclusion guards in list form (``#[cfg(...)]``) propagate.
Everything else is dropped without a diagnostic.  Guards are copied by
presence; their predicates are never evaluated here.
"""

from __future__ import annotations

import logging

from .syntax import Annotation, AnnotationKind, AnnotationStyle
from . import constants

logger = logging.getLogger(__name__)

_DOC_STYLES = frozenset({AnnotationStyle.NAME_VALUE, AnnotationStyle.DOC_COMMENT})


def classify(path: str, style: AnnotationStyle) -> AnnotationKind:
    """Classify an annotation structurally, by path and meta shape."""
    if path == constants.DOC_PATH and style in _DOC_STYLES:
        return AnnotationKind.DOCUMENTATION
    if path == constants.CFG_PATH and style == AnnotationStyle.LIST:
        return AnnotationKind.CONDITIONAL_GUARD
    return AnnotationKind.OTHER


def is_propagated(annotation: Annotation) -> bool:
    return classify(annotation.path, annotation.style) != AnnotationKind.OTHER


def filter_annotations(annotations: list[Annotation]) -> list[Annotation]:
    kept = [a for a in annotations if is_propagated(a)]
    dropped = len(annotations) - len(kept)
    if dropped:
        logger.debug(
            "Dropped %d annotation(s): %s",
            dropped,
            ", ".join(a.text for a in annotations if not is_propagated(a)),
        )
    return kept
