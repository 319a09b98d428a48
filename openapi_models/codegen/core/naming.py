"""
Naming utilities for generated declarations.

Applies the configured naming convention to raw schema identifiers
(schema names, property names and enum literals).
"""

import re
from enum import Enum
from typing import Union

from ...logging_config import get_logger

logger = get_logger(__name__)


class NamingConvention(Enum):
    """Supported naming conventions, keyed by their configuration value."""

    PASCAL_CASE = "PascalCase"  # UserName
    CAMEL_CASE = "camelCase"  # userName
    SNAKE_CASE = "snake_case"  # user_name
    AS_IS = "asIs"  # unchanged

    @classmethod
    def parse(cls, value: Union[str, "NamingConvention", None]) -> "NamingConvention":
        """
        Resolve a configuration value to a convention.

        Unknown or missing values fall back to AS_IS so conversion stays total.
        """
        if isinstance(value, cls):
            return value
        for convention in cls:
            if convention.value == value:
                return convention
        if value is not None:
            logger.debug("Unknown naming convention %r, leaving names as-is", value)
        return cls.AS_IS


_SEPARATOR_LOWER = re.compile(r"[-_]([a-z])")
_LEADING_LOWER = re.compile(r"^[a-z]")
_CASE_BOUNDARY = re.compile(r"([a-z0-9])([A-Z])")


def to_pascal_case(name: str) -> str:
    """
    Convert to PascalCase.

    A separator is only dropped when a lowercase letter follows it, so
    constant-style literals such as ``IN_PROGRESS`` keep their underscores.
    """
    name = _SEPARATOR_LOWER.sub(lambda m: m.group(1).upper(), name)
    return _LEADING_LOWER.sub(lambda m: m.group(0).upper(), name)


def to_camel_case(name: str) -> str:
    """Convert to camelCase."""
    pascal = to_pascal_case(name)
    return pascal[:1].lower() + pascal[1:]


def to_snake_case(name: str) -> str:
    """Convert to snake_case."""
    name = name.replace("-", "_")
    name = _CASE_BOUNDARY.sub(r"\1_\2", name)
    return re.sub(r"_+", "_", name.lower())


_CONVERTERS = {
    NamingConvention.PASCAL_CASE: to_pascal_case,
    NamingConvention.CAMEL_CASE: to_camel_case,
    NamingConvention.SNAKE_CASE: to_snake_case,
}


def convert_name(
    identifier: str, convention: Union[str, NamingConvention, None]
) -> str:
    """
    Apply a naming convention to an identifier.

    Args:
        identifier: Raw identifier from the schema document
        convention: NamingConvention or its configuration string

    Returns:
        Converted identifier (unchanged for asIs and unknown conventions)
    """
    converter = _CONVERTERS.get(NamingConvention.parse(convention))
    if converter is None:
        return identifier
    return converter(identifier)


def literal_to_identifier(value) -> str:
    """String form of an enum literal before conversion."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    return str(value)
