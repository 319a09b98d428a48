"""
OpenAPI model code generation.

Normalizes the schemas of an API document and emits typed declarations.
"""

from pathlib import Path
from typing import Any, Dict, Optional, Union

from .core.config import ConfigError, GeneratorConfig, OutputMode, load_config
from .core.generator import CodeGenerator, GeneratorError
from .core.output import EmitResult, emit, resolve_mode
from .core.schema import (
    EnumEntity,
    InterfaceEntity,
    NormalizedSchemas,
    normalize_schemas,
)
from .registry import (
    GeneratorRegistry,
    RegistryError,
    get_generator,
    list_supported_languages,
)


def generate(
    raw_schemas: Dict[str, Any],
    destination: Union[str, Path],
    config: Optional[GeneratorConfig] = None,
    mode: Optional[Union[str, OutputMode]] = None,
) -> EmitResult:
    """
    Normalize a raw schema map and write the generated declarations.

    Args:
        raw_schemas: Schema name to schema fragment
        destination: Output file or directory
        config: Generator configuration (defaults if omitted)
        mode: Explicit output mode overriding the configured one

    Returns:
        EmitResult with counts, mode and generated files
    """
    config = config or GeneratorConfig()
    normalized = normalize_schemas(raw_schemas, config)
    result = emit(normalized.interfaces, normalized.enums, destination, config, mode)
    result.warnings = [*normalized.warnings, *result.warnings]
    return result


def generate_from_document(
    document: Dict[str, Any],
    destination: Union[str, Path],
    config: Optional[GeneratorConfig] = None,
    mode: Optional[Union[str, OutputMode]] = None,
) -> EmitResult:
    """Generate declarations from a whole API document."""
    from ..utils import extract_schema_map

    return generate(extract_schema_map(document), destination, config, mode)


__all__ = [
    "CodeGenerator",
    "ConfigError",
    "EmitResult",
    "EnumEntity",
    "GeneratorConfig",
    "GeneratorError",
    "GeneratorRegistry",
    "InterfaceEntity",
    "NormalizedSchemas",
    "OutputMode",
    "RegistryError",
    "emit",
    "generate",
    "generate_from_document",
    "get_generator",
    "list_supported_languages",
    "load_config",
    "normalize_schemas",
    "resolve_mode",
]
