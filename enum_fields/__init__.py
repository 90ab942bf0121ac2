"""Field injection and accessor synthesis for Rust enums."""

from .transform import expand  # noqa: F401
from .api import (  # noqa: F401
    parse_fields,
    parse_declaration,
    expand_fields,
    expand_to_tokens,
    accessor_names,
    expansion_stats,
)
from .config import TransformConfig, UnreachablePolicy  # noqa: F401
from .errors import (  # noqa: F401
    Diagnostic,
    TransformError,
    MalformedFieldList,
    MalformedDeclaration,
    EmptyFieldBinding,
    HygieneError,
)
