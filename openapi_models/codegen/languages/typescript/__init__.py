"""
TypeScript code generator module.

Generates exported interfaces and enums, in one file or one file per type.
"""

from .generator import TypeScriptGenerator, create_typescript_generator
from .naming import (
    TS_RESERVED_WORDS,
    is_valid_identifier,
    is_valid_property_key,
    is_valid_type_name,
)

__all__ = [
    "TypeScriptGenerator",
    "create_typescript_generator",
    "TS_RESERVED_WORDS",
    "is_valid_identifier",
    "is_valid_property_key",
    "is_valid_type_name",
]
