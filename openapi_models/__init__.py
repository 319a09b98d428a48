"""
OpenAPI Models

Generates TypeScript interfaces and enums from the schemas of an
OpenAPI or Swagger document.
"""

from .codegen import generate, generate_from_document
from .codegen.core.config import GeneratorConfig, load_config
from .codegen.core.output import EmitResult
from .codegen.core.schema import normalize_schemas
from .utils import SchemaLoaderError, extract_schema_map, load_schema_document

__version__ = "0.1.0"

__all__ = [
    "EmitResult",
    "GeneratorConfig",
    "SchemaLoaderError",
    "extract_schema_map",
    "generate",
    "generate_from_document",
    "load_config",
    "load_schema_document",
    "normalize_schemas",
]
