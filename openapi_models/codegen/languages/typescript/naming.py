"""
TypeScript-specific naming checks.

Handles TypeScript reserved words and identifier rules.
"""

import re

# TypeScript reserved words
TS_RESERVED_WORDS = {
    "break",
    "case",
    "catch",
    "class",
    "const",
    "continue",
    "debugger",
    "default",
    "delete",
    "do",
    "else",
    "enum",
    "export",
    "extends",
    "false",
    "finally",
    "for",
    "function",
    "if",
    "import",
    "in",
    "instanceof",
    "new",
    "null",
    "return",
    "super",
    "switch",
    "this",
    "throw",
    "true",
    "try",
    "typeof",
    "var",
    "void",
    "while",
    "with",
}

# Names that cannot be used for a declared type
TS_BUILTIN_TYPES = {
    "any",
    "bigint",
    "boolean",
    "never",
    "number",
    "object",
    "string",
    "symbol",
    "undefined",
    "unknown",
}

_IDENTIFIER = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")


def is_valid_identifier(name: str) -> bool:
    """Check that a name can be used bare as a TypeScript identifier."""
    return bool(_IDENTIFIER.match(name)) and name not in TS_RESERVED_WORDS


def is_valid_type_name(name: str) -> bool:
    """Check that a name can be declared as an interface or enum."""
    return is_valid_identifier(name) and name not in TS_BUILTIN_TYPES


def is_valid_property_key(name: str) -> bool:
    """Property keys may be reserved words, but must otherwise be identifiers."""
    return bool(_IDENTIFIER.match(name))
