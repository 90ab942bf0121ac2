"""Transform configuration types (pure data, no business logic)."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from . import constants


class UnreachablePolicy(Enum):
    """Body of the fallback arm generated for enums without variants."""

    UNREACHABLE = "unreachable"
    LOOP = "loop"

    def body(self) -> str:
        if self is UnreachablePolicy.LOOP:
            return constants.LOOP_BODY
        return constants.UNREACHABLE_BODY


@dataclass(frozen=True)
class TransformConfig:
    """Groups code-generation options."""

    unreachable_policy: UnreachablePolicy = UnreachablePolicy.UNREACHABLE
    allow_unused: bool = True
    indent: str = constants.DEFAULT_INDENT


DEFAULT_CONFIG = TransformConfig()
