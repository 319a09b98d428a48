"""
Core schema representation for code generation.

Normalizes the raw schema map of an API document into an ordered set of
named model entities that generators can work with consistently.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple, Union

from ...logging_config import get_logger
from .config import DuplicatePolicy, GeneratorConfig
from .naming import convert_name, literal_to_identifier
from .references import collect_references
from .types import PrimitiveType, TypeExpr, TypeMapper

logger = get_logger(__name__)


class DuplicateEntityError(ValueError):
    """Raised when two schemas normalize to the same entity name."""

    pass


@dataclass(frozen=True)
class PropertyDescriptor:
    """Represents a single property of an interface."""

    name: str
    type: str
    required: bool = False
    description: str = ""
    original_name: str = ""
    type_expr: TypeExpr = field(default=None, compare=False, repr=False)

    def __post_init__(self):
        """Fill in defaults derived from the other fields."""
        if not self.original_name:
            object.__setattr__(self, "original_name", self.name)
        if self.type_expr is None:
            object.__setattr__(self, "type_expr", PrimitiveType(self.type))


@dataclass(frozen=True)
class EnumValueDescriptor:
    """Represents one literal of an enumeration."""

    key: str
    value: Union[str, int, float, bool, None]
    is_string: bool


@dataclass(frozen=True)
class InterfaceEntity:
    """An object schema, generated as an interface."""

    name: str
    description: str = ""
    properties: Tuple[PropertyDescriptor, ...] = ()
    original_name: str = ""


@dataclass(frozen=True)
class EnumEntity:
    """An enumeration schema, generated as an enum."""

    name: str
    description: str = ""
    values: Tuple[EnumValueDescriptor, ...] = ()
    original_name: str = ""


ModelEntity = Union[InterfaceEntity, EnumEntity]


@dataclass
class NormalizedSchemas:
    """Result of normalizing a raw schema map."""

    interfaces: List[InterfaceEntity] = field(default_factory=list)
    enums: List[EnumEntity] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def entities(self) -> List[ModelEntity]:
        """Interfaces followed by enums, in emission order."""
        return [*self.interfaces, *self.enums]

    @property
    def names(self) -> List[str]:
        return [entity.name for entity in self.entities]


def is_enum_schema(fragment: Any) -> bool:
    return isinstance(fragment, dict) and isinstance(fragment.get("enum"), list)


def is_object_schema(fragment: Any) -> bool:
    return isinstance(fragment, dict) and (
        fragment.get("type") == "object" or "properties" in fragment
    )


class SchemaNormalizer:
    """Walks a raw schema map and builds model entities."""

    def __init__(self, config: GeneratorConfig = None):
        """Initialize normalizer with configuration."""
        self.config = config or GeneratorConfig()

    def entity_name(self, raw_name: str, fragment: Any) -> str:
        """Converted entity name for a schema, by its kind."""
        naming = self.config.naming
        if is_enum_schema(fragment):
            return convert_name(raw_name, naming.enum)
        return convert_name(raw_name, naming.interface)

    def normalize(self, raw_schemas: Dict[str, Any]) -> NormalizedSchemas:
        """
        Normalize every schema, keeping input order.

        Args:
            raw_schemas: Schema name to schema fragment

        Returns:
            NormalizedSchemas with interfaces, enums and warnings

        Raises:
            DuplicateEntityError: If two schemas share a name under the error policy
        """
        ref_names = {
            raw_name: self.entity_name(raw_name, fragment)
            for raw_name, fragment in raw_schemas.items()
            if is_enum_schema(fragment) or is_object_schema(fragment)
        }
        type_mapper = TypeMapper(
            self.config.type_mapping, ref_names, self.config.naming.interface
        )

        entities: Dict[str, ModelEntity] = {}
        warnings: List[str] = []

        for raw_name, fragment in raw_schemas.items():
            if is_enum_schema(fragment):
                entity = self._build_enum(raw_name, fragment)
            elif is_object_schema(fragment):
                entity = self._build_interface(raw_name, fragment, type_mapper)
            else:
                logger.debug("Skipping schema %s: not an object or enum", raw_name)
                continue

            if entity.name in entities:
                previous = entities[entity.name]
                message = (
                    f"Schema '{raw_name}' normalizes to '{entity.name}', "
                    f"already generated from '{previous.original_name}'"
                )
                if self.config.duplicates == DuplicatePolicy.ERROR:
                    raise DuplicateEntityError(message)
                logger.warning("%s; keeping the later definition", message)
                warnings.append(message)

            entities[entity.name] = entity

        result = NormalizedSchemas(
            interfaces=[e for e in entities.values() if isinstance(e, InterfaceEntity)],
            enums=[e for e in entities.values() if isinstance(e, EnumEntity)],
            warnings=warnings,
        )
        result.warnings.extend(self.validate(result))

        logger.info(
            "Normalized %d interfaces and %d enums",
            len(result.interfaces),
            len(result.enums),
        )
        return result

    def _build_enum(self, raw_name: str, fragment: Dict[str, Any]) -> EnumEntity:
        """Build an enum entity from an enum schema."""
        convention = self.config.naming.enum
        values = tuple(
            EnumValueDescriptor(
                key=convert_name(literal_to_identifier(literal), convention),
                value=literal,
                is_string=isinstance(literal, str),
            )
            for literal in fragment["enum"]
        )
        return EnumEntity(
            name=convert_name(raw_name, convention),
            description=_description(fragment),
            values=values,
            original_name=raw_name,
        )

    def _build_interface(
        self, raw_name: str, fragment: Dict[str, Any], type_mapper: TypeMapper
    ) -> InterfaceEntity:
        """Build an interface entity from an object schema."""
        required = fragment.get("required") or []
        required_fields = (
            {name for name in required if isinstance(name, str)}
            if isinstance(required, list)
            else set()
        )

        properties = fragment.get("properties") or {}
        if not isinstance(properties, dict):
            properties = {}

        descriptors = []
        for prop_name, prop_schema in properties.items():
            type_expr = type_mapper.map_type(prop_schema)
            descriptors.append(
                PropertyDescriptor(
                    name=convert_name(prop_name, self.config.naming.property),
                    type=type_expr.render(),
                    required=prop_name in required_fields,
                    description=_description(prop_schema),
                    original_name=prop_name,
                    type_expr=type_expr,
                )
            )

        return InterfaceEntity(
            name=convert_name(raw_name, self.config.naming.interface),
            description=_description(fragment),
            properties=tuple(descriptors),
            original_name=raw_name,
        )

    def validate(self, schemas: NormalizedSchemas) -> List[str]:
        """
        Check normalized entities for likely problems.

        Returns:
            List of warning messages (empty if no issues)
        """
        warnings = []
        known_names = set(schemas.names)
        unknown_type = self.config.type_mapping.unknown_type

        for interface in schemas.interfaces:
            if not interface.properties:
                warnings.append(f"Interface '{interface.name}' has no properties")

            for prop in interface.properties:
                if prop.type == unknown_type:
                    warnings.append(
                        f"Unknown type in {interface.name}.{prop.name}, "
                        f"using {unknown_type}"
                    )
                for missing in sorted(_dangling_references(prop.type_expr, known_names)):
                    warnings.append(
                        f"{interface.name}.{prop.name} references undeclared "
                        f"schema '{missing}'"
                    )

        return warnings


def _description(fragment: Any) -> str:
    if isinstance(fragment, dict):
        description = fragment.get("description")
        if isinstance(description, str):
            return description
    return ""


def _dangling_references(type_expr: TypeExpr, known_names) -> set:
    all_refs = collect_references(type_expr, None)
    return {name for name in all_refs if name not in known_names}


def normalize_schemas(
    raw_schemas: Dict[str, Any], config: GeneratorConfig = None
) -> NormalizedSchemas:
    """
    Convenience function to normalize a raw schema map.

    Args:
        raw_schemas: Schema name to schema fragment
        config: Generator configuration (defaults if omitted)

    Returns:
        NormalizedSchemas in input order
    """
    return SchemaNormalizer(config).normalize(raw_schemas)
