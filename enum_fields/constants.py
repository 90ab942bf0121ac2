"""Named constants — eliminates magic strings across the codebase."""

from __future__ import annotations

GRAMMAR = "rust"

# Field lists are parsed as the body of a synthetic struct so that the
# grammar's named-field rule applies.  The header sits on its own line so
# that column offsets of the field-list text are preserved.
FIELD_LIST_HOST_PREFIX = "struct __EnumFieldsInput {\n"
FIELD_LIST_HOST_SUFFIX = "\n}\n"
FIELD_LIST_HOST_LINES = 1

FIELD_LIST_SOURCE = "<fields>"
DECLARATION_SOURCE = "<declaration>"

# Tree-sitter node types
ENUM_ITEM = "enum_item"
ENUM_VARIANT = "enum_variant"
STRUCT_ITEM = "struct_item"
ATTRIBUTE_ITEM = "attribute_item"
VISIBILITY_MODIFIER = "visibility_modifier"
FIELD_DECLARATION = "field_declaration"
FIELD_DECLARATION_LIST = "field_declaration_list"
ORDERED_FIELD_DECLARATION_LIST = "ordered_field_declaration_list"
WHERE_CLAUSE = "where_clause"
TOKEN_TREE = "token_tree"
LINE_COMMENT = "line_comment"
BLOCK_COMMENT = "block_comment"

COMMENT_TYPES = frozenset({"comment", LINE_COMMENT, BLOCK_COMMENT})

# Generic parameter node types across grammar revisions
LIFETIME_PARAM_TYPES = frozenset({"lifetime", "lifetime_parameter"})
CONST_PARAM_TYPES = frozenset({"const_parameter"})

# Attribute paths that may be propagated onto accessors
DOC_PATH = "doc"
CFG_PATH = "cfg"

ALLOW_UNUSED_ATTRIBUTE = "#[allow(unused)]"

MUTABLE_SUFFIX = "_mut"
CONSUMING_PREFIX = "into_"
RAW_IDENT_PREFIX = "r#"

UNREACHABLE_BODY = "unreachable!()"
LOOP_BODY = "loop {}"

COMPILE_ERROR_TEMPLATE = "::core::compile_error! {{ {message} }}"

DEFAULT_INDENT = "    "

# Strict and reserved keywords of Rust 2021; these need `r#` to be used as
# identifiers.
RUST_KEYWORDS: frozenset[str] = frozenset(
    {
        "as", "break", "const", "continue", "crate", "else", "enum", "extern",
        "false", "fn", "for", "if", "impl", "in", "let", "loop", "match", "mod",
        "move", "mut", "pub", "ref", "return", "self", "Self", "static",
        "struct", "super", "trait", "true", "type", "unsafe", "use", "where",
        "while", "async", "await", "dyn", "abstract", "become", "box", "do",
        "final", "macro", "override", "priv", "typeof", "unsized", "virtual",
        "yield", "try",
    }
)

# Keywords that cannot be written as raw identifiers either.
NON_RAW_KEYWORDS: frozenset[str] = frozenset({"crate", "self", "Self", "super"})
