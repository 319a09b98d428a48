"""
Type system for code generation.

Resolves schema fragments to structured type expressions. Each expression
renders to the target language's type-name string, and keeps enough
structure for reference extraction to walk it without re-parsing text.
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterable, Optional, Tuple, Union

from ...logging_config import get_logger
from .config import TypeMappingConfig
from .naming import NamingConvention, convert_name

logger = get_logger(__name__)

TYPE_PLACEHOLDER = "{{type}}"


@dataclass(frozen=True)
class PrimitiveType:
    """A mapped primitive such as ``string`` or ``number``."""

    name: str

    def render(self) -> str:
        return self.name


@dataclass(frozen=True)
class ReferenceType:
    """A reference to another generated entity by its converted name."""

    name: str

    def render(self) -> str:
        return self.name


@dataclass(frozen=True)
class ArrayType:
    """An array of some item type, rendered through the array template."""

    item: "TypeExpr"
    template: str = "{{type}}[]"

    def render(self) -> str:
        inner = self.item.render()
        # "A | B[]" would bind the suffix to B only
        if isinstance(self.item, UnionType) and self.template.startswith(
            TYPE_PLACEHOLDER
        ):
            inner = f"({inner})"
        return self.template.replace(TYPE_PLACEHOLDER, inner)


@dataclass(frozen=True)
class UnionType:
    """A union of two or more type expressions."""

    members: Tuple["TypeExpr", ...]

    def render(self) -> str:
        return " | ".join(member.render() for member in self.members)


TypeExpr = Union[PrimitiveType, ReferenceType, ArrayType, UnionType]


def make_union(members: Iterable[TypeExpr]) -> TypeExpr:
    """
    Build a flattened union, dropping members that render identically.

    A single remaining member is returned unwrapped.
    """
    flat = []
    seen = set()
    for member in members:
        parts = member.members if isinstance(member, UnionType) else (member,)
        for part in parts:
            rendered = part.render()
            if rendered not in seen:
                seen.add(rendered)
                flat.append(part)

    if len(flat) == 1:
        return flat[0]
    return UnionType(tuple(flat))


def ref_schema_name(ref: Any) -> str:
    """Final path segment of a ``$ref`` pointer."""
    return str(ref).split("/")[-1]


class TypeMapper:
    """
    Maps schema fragments to type expressions.

    Resolution order, first match wins: missing fragment, ``$ref``,
    ``enum``, array, format override, primitive type table.
    """

    def __init__(
        self,
        config: Optional[TypeMappingConfig] = None,
        ref_names: Optional[Dict[str, str]] = None,
        ref_convention: NamingConvention = NamingConvention.PASCAL_CASE,
    ):
        """
        Initialize with type configuration.

        Args:
            config: Type mapping table and templates
            ref_names: Raw schema name to generated entity name
            ref_convention: Convention for references to undeclared schemas
        """
        self.config = config or TypeMappingConfig()
        self.ref_names = ref_names or {}
        self.ref_convention = ref_convention

    @property
    def unknown(self) -> PrimitiveType:
        return PrimitiveType(self.config.unknown_type)

    def map_type(self, fragment: Any) -> TypeExpr:
        """
        Map a schema fragment to a type expression.

        Args:
            fragment: Schema fragment, possibly missing or malformed

        Returns:
            Structured type expression
        """
        base_type = self._map_base_type(fragment)

        if (
            isinstance(fragment, dict)
            and fragment.get("nullable") is True
            and self.config.nullable_as_union
        ):
            return make_union([base_type, PrimitiveType(self.config.null_type)])

        return base_type

    def map_type_name(self, fragment: Any) -> str:
        """Map a schema fragment straight to its rendered type name."""
        return self.map_type(fragment).render()

    def resolve_ref(self, ref: Any) -> str:
        """Generated entity name for a ``$ref`` pointer."""
        raw_name = ref_schema_name(ref)
        if raw_name in self.ref_names:
            return self.ref_names[raw_name]

        logger.debug("Reference %s does not match a declared schema", ref)
        return convert_name(raw_name, self.ref_convention)

    def _map_base_type(self, fragment: Any) -> TypeExpr:
        """Map the type without considering nullability."""
        if not isinstance(fragment, dict):
            return self.unknown

        if "$ref" in fragment:
            return ReferenceType(self.resolve_ref(fragment["$ref"]))

        schema_type = fragment.get("type")

        if isinstance(fragment.get("enum"), list):
            if schema_type == "string" or (
                isinstance(schema_type, list) and "string" in schema_type
            ):
                return PrimitiveType(self.config.string_type)
            return PrimitiveType(self.config.number_type)

        # OpenAPI 3.1 style: "type": ["string", "null"]
        if isinstance(schema_type, list):
            if not schema_type:
                return self.unknown
            return make_union(
                self._map_base_type({**fragment, "type": member})
                for member in schema_type
            )

        if schema_type == "array":
            return ArrayType(
                self.map_type(fragment.get("items")), self.config.array_template
            )

        schema_format = fragment.get("format")
        if isinstance(schema_format, str) and schema_format in self.config.format_mapping:
            return PrimitiveType(self.config.format_mapping[schema_format])

        if not isinstance(schema_type, str):
            return self.unknown

        return PrimitiveType(self.config.types.get(schema_type, self.config.unknown_type))
