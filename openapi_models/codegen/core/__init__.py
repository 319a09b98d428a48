"""
Core code generation components.

Provides the schema normalizer, type system and output strategies used by
all language generators.
"""

from .config import (
    ConfigError,
    ConfigManager,
    DuplicatePolicy,
    GeneratorConfig,
    NamingConfig,
    OutputConfig,
    OutputMode,
    TypeMappingConfig,
    load_config,
)
from .generator import CodeGenerator, GeneratorError
from .naming import NamingConvention, convert_name
from .output import EmitResult, emit, resolve_mode
from .references import collect_references, extract_references, resolve_imports
from .schema import (
    DuplicateEntityError,
    EnumEntity,
    EnumValueDescriptor,
    InterfaceEntity,
    ModelEntity,
    NormalizedSchemas,
    PropertyDescriptor,
    SchemaNormalizer,
    normalize_schemas,
)
from .templates import TemplateEngine, TemplateError, create_template_engine
from .types import (
    ArrayType,
    PrimitiveType,
    ReferenceType,
    TypeExpr,
    TypeMapper,
    UnionType,
)

__all__ = [
    # Base generator interface
    "CodeGenerator",
    "GeneratorError",
    # Schema system - core data structures
    "InterfaceEntity",
    "EnumEntity",
    "ModelEntity",
    "PropertyDescriptor",
    "EnumValueDescriptor",
    "NormalizedSchemas",
    "SchemaNormalizer",
    "DuplicateEntityError",
    "normalize_schemas",
    # Type system
    "TypeMapper",
    "TypeExpr",
    "PrimitiveType",
    "ReferenceType",
    "ArrayType",
    "UnionType",
    "collect_references",
    "extract_references",
    "resolve_imports",
    # Naming
    "NamingConvention",
    "convert_name",
    # Configuration system
    "GeneratorConfig",
    "NamingConfig",
    "TypeMappingConfig",
    "OutputConfig",
    "OutputMode",
    "DuplicatePolicy",
    "ConfigManager",
    "ConfigError",
    "load_config",
    # Output
    "EmitResult",
    "emit",
    "resolve_mode",
    # Template system
    "TemplateEngine",
    "TemplateError",
    "create_template_engine",
]
