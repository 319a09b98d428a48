"""
TypeScript code generator implementation.

Generates exported interfaces and enums from normalized API schemas
using templates.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from ....logging_config import get_logger
from ...core.generator import CodeGenerator
from ...core.schema import EnumEntity, InterfaceEntity, ModelEntity
from .naming import is_valid_identifier, is_valid_property_key, is_valid_type_name

logger = get_logger(__name__)


class TypeScriptGenerator(CodeGenerator):
    """Code generator for TypeScript interfaces and enums."""

    @property
    def language_name(self) -> str:
        """Return the language name."""
        return "typescript"

    def get_template_directory(self) -> Path:
        """Return the TypeScript templates directory."""
        return Path(__file__).parent / "templates"

    def render_interface(self, entity: InterfaceEntity) -> str:
        """Render an exported interface."""
        context = {
            "name": entity.name,
            "description": entity.description,
            "properties": [self._property_data(prop) for prop in entity.properties],
        }
        return self.render_template("interface.ts.j2", context)

    def render_enum(self, entity: EnumEntity) -> str:
        """Render an exported enum."""
        context = {
            "name": entity.name,
            "description": entity.description,
            "values": entity.values,
        }
        return self.render_template("enum.ts.j2", context)

    def render_imports(self, names: Sequence[str]) -> str:
        """Render one named import per entity, in the given order."""
        imports = [{"name": name, "path": self.module_path(name)} for name in names]
        return self.render_template("imports.ts.j2", {"imports": imports})

    def render_header(self) -> str:
        """Render the generated-file warning header."""
        return self.render_template("header.ts.j2", {})

    def render_index(self, modules: Sequence[str]) -> str:
        """Render ``export *`` lines for each module name, in the given order."""
        paths = [self.module_path(module) for module in modules]
        return self.render_template("index.ts.j2", {"modules": paths})

    def _property_data(self, prop) -> Dict[str, Any]:
        """Template data for one property."""
        key = prop.name
        if not is_valid_property_key(key):
            key = f"'{_escape_single_quotes(key)}'"

        return {
            "key": key,
            "type": prop.type,
            "required": prop.required,
            "description": prop.description,
        }

    def validate_entities(self, entities: Sequence[ModelEntity]) -> List[str]:
        """Warn about names that will not compile as TypeScript."""
        warnings = []

        for entity in entities:
            if not is_valid_type_name(entity.name):
                warnings.append(f"'{entity.name}' is not a valid TypeScript type name")

            if isinstance(entity, EnumEntity):
                for value in entity.values:
                    if not is_valid_identifier(value.key):
                        warnings.append(
                            f"Enum member {entity.name}.{value.key} is not a valid "
                            f"TypeScript identifier"
                        )

        for warning in warnings:
            logger.warning("%s", warning)
        return warnings


def _escape_single_quotes(value: str) -> str:
    return value.replace("\\", "\\\\").replace("'", "\\'")


def create_typescript_generator(config: Optional[Any] = None) -> TypeScriptGenerator:
    """Create a TypeScript generator with default configuration."""
    return TypeScriptGenerator(config)
