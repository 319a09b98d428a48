"""Tests for the type mapping module."""

from openapi_models.codegen.core.config import TypeMappingConfig
from openapi_models.codegen.core.types import (
    ArrayType,
    PrimitiveType,
    ReferenceType,
    TypeMapper,
    UnionType,
    make_union,
)


def _mapper(**kwargs) -> TypeMapper:
    return TypeMapper(TypeMappingConfig(**kwargs))


class TestMapTypeName:
    """Test schema fragment → TypeScript type name resolution."""

    def test_missing_fragment(self):
        assert _mapper().map_type_name(None) == "any"

    def test_string(self):
        assert _mapper().map_type_name({"type": "string"}) == "string"

    def test_integer(self):
        assert _mapper().map_type_name({"type": "integer"}) == "number"

    def test_boolean(self):
        assert _mapper().map_type_name({"type": "boolean"}) == "boolean"

    def test_unmapped_type(self):
        assert _mapper().map_type_name({"type": "file"}) == "any"

    def test_no_type(self):
        assert _mapper().map_type_name({"description": "anything"}) == "any"

    def test_ref_uses_last_segment(self):
        fragment = {"$ref": "#/components/schemas/LineItem"}
        assert _mapper().map_type_name(fragment) == "LineItem"

    def test_ref_wins_over_type(self):
        fragment = {"$ref": "#/definitions/Pet", "type": "string"}
        assert _mapper().map_type_name(fragment) == "Pet"

    def test_string_enum(self):
        assert _mapper().map_type_name({"type": "string", "enum": ["a"]}) == "string"

    def test_numeric_enum(self):
        assert _mapper().map_type_name({"type": "integer", "enum": [1, 2]}) == "number"

    def test_untyped_enum_is_numeric(self):
        assert _mapper().map_type_name({"enum": ["a", "b"]}) == "number"

    def test_null_enum_is_not_an_enum(self):
        assert _mapper().map_type_name({"type": "boolean", "enum": None}) == "boolean"

    def test_array_of_strings(self):
        fragment = {"type": "array", "items": {"type": "string"}}
        assert _mapper().map_type_name(fragment) == "string[]"

    def test_array_without_items(self):
        assert _mapper().map_type_name({"type": "array"}) == "any[]"

    def test_nested_arrays(self):
        fragment = {
            "type": "array",
            "items": {"type": "array", "items": {"$ref": "#/definitions/Cell"}},
        }
        assert _mapper().map_type_name(fragment) == "Cell[][]"

    def test_generic_array_template(self):
        mapper = _mapper(array_template="Array<{{type}}>")
        fragment = {"type": "array", "items": {"type": "integer"}}
        assert mapper.map_type_name(fragment) == "Array<number>"

    def test_format_override(self):
        assert _mapper().map_type_name({"type": "string", "format": "binary"}) == "Blob"

    def test_unconfigured_format_falls_back_to_type(self):
        assert _mapper().map_type_name({"type": "string", "format": "email"}) == "string"

    def test_custom_primitive_table(self):
        mapper = _mapper(types={"integer": "bigint"})
        assert mapper.map_type_name({"type": "integer"}) == "bigint"

    def test_custom_unknown_type(self):
        mapper = _mapper(unknown_type="unknown")
        assert mapper.map_type_name({"type": "mystery"}) == "unknown"


class TestNullable:
    def test_nullable_becomes_union(self):
        fragment = {"type": "string", "nullable": True}
        assert _mapper().map_type_name(fragment) == "string | null"

    def test_nullable_disabled(self):
        mapper = _mapper(nullable_as_union=False)
        assert mapper.map_type_name({"type": "string", "nullable": True}) == "string"

    def test_array_of_nullable_items_is_parenthesised(self):
        fragment = {
            "type": "array",
            "items": {"$ref": "#/components/schemas/Tag", "nullable": True},
        }
        assert _mapper().map_type_name(fragment) == "(Tag | null)[]"

    def test_type_list(self):
        fragment = {"type": ["integer", "null"]}
        assert _mapper().map_type_name(fragment) == "number | null"

    def test_type_list_collapses_duplicates(self):
        fragment = {"type": ["integer", "number"]}
        assert _mapper().map_type_name(fragment) == "number"


class TestStructuredTypes:
    def test_ref_is_reference_type(self):
        assert _mapper().map_type({"$ref": "#/x/Pet"}) == ReferenceType("Pet")

    def test_array_keeps_item_structure(self):
        expr = _mapper().map_type({"type": "array", "items": {"$ref": "#/x/Pet"}})
        assert isinstance(expr, ArrayType)
        assert expr.item == ReferenceType("Pet")

    def test_make_union_flattens(self):
        inner = UnionType((PrimitiveType("string"), PrimitiveType("null")))
        union = make_union([ReferenceType("Pet"), inner])
        assert union.render() == "Pet | string | null"

    def test_make_union_single_member(self):
        assert make_union([PrimitiveType("string")]) == PrimitiveType("string")


class TestRefNames:
    """References resolve to the same names entities are declared under."""

    def test_known_ref_uses_table(self):
        mapper = TypeMapper(ref_names={"line_item": "LineItem"})
        assert mapper.map_type_name({"$ref": "#/components/schemas/line_item"}) == "LineItem"

    def test_unknown_ref_is_converted(self):
        mapper = TypeMapper()
        assert mapper.map_type_name({"$ref": "#/components/schemas/line_item"}) == "LineItem"
