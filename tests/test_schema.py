"""Tests for the schema normalizer."""

import pytest

from openapi_models.codegen.core.config import (
    DuplicatePolicy,
    GeneratorConfig,
    NamingConfig,
)
from openapi_models.codegen.core.naming import NamingConvention
from openapi_models.codegen.core.schema import (
    DuplicateEntityError,
    EnumEntity,
    InterfaceEntity,
    PropertyDescriptor,
    normalize_schemas,
)


class TestInterfaces:
    def test_user_scenario(self):
        schemas = {
            "User": {
                "type": "object",
                "required": ["id"],
                "properties": {"id": {"type": "integer"}, "name": {"type": "string"}},
            }
        }
        result = normalize_schemas(schemas)

        assert result.enums == []
        (user,) = result.interfaces
        assert user.name == "User"
        assert [(p.name, p.type, p.required) for p in user.properties] == [
            ("id", "number", True),
            ("name", "string", False),
        ]

    def test_properties_without_type_object(self):
        result = normalize_schemas({"Tag": {"properties": {"label": {"type": "string"}}}})
        assert [i.name for i in result.interfaces] == ["Tag"]

    def test_object_without_properties(self):
        result = normalize_schemas({"Empty": {"type": "object"}})
        assert result.interfaces == [InterfaceEntity(name="Empty", original_name="Empty")]
        assert "Interface 'Empty' has no properties" in result.warnings

    def test_descriptions(self, shop_schemas):
        order = normalize_schemas(shop_schemas).interfaces[0]
        assert order.description == "A customer order"
        assert order.properties[0].description == "Order id"
        assert order.properties[1].description == ""

    def test_property_order_preserved(self, shop_schemas):
        order = normalize_schemas(shop_schemas).interfaces[0]
        assert [p.name for p in order.properties] == ["id", "items", "status", "placedAt"]

    def test_required_matches_raw_property_name(self):
        config = GeneratorConfig(
            naming=NamingConfig(property=NamingConvention.CAMEL_CASE)
        )
        schemas = {
            "Pet": {
                "type": "object",
                "required": ["pet_name"],
                "properties": {"pet_name": {"type": "string"}, "age": {"type": "integer"}},
            }
        }
        pet = normalize_schemas(schemas, config).interfaces[0]
        assert pet.properties[0] == PropertyDescriptor(
            name="petName", type="string", required=True, original_name="pet_name"
        )
        assert pet.properties[1].required is False

    def test_malformed_required_is_ignored(self):
        schemas = {"Pet": {"type": "object", "required": "name", "properties": {"name": {}}}}
        pet = normalize_schemas(schemas).interfaces[0]
        assert pet.properties[0].required is False
        assert pet.properties[0].type == "any"


class TestEnums:
    def test_status_scenario(self):
        result = normalize_schemas({"Status": {"enum": ["ACTIVE", "INACTIVE"]}})
        (status,) = result.enums
        assert status.name == "Status"
        assert [(v.key, v.value, v.is_string) for v in status.values] == [
            ("ACTIVE", "ACTIVE", True),
            ("INACTIVE", "INACTIVE", True),
        ]

    def test_numeric_literals(self, shop_schemas):
        priority = normalize_schemas(shop_schemas).enums[1]
        assert priority.name == "Priority"
        assert [(v.key, v.value, v.is_string) for v in priority.values] == [
            ("1", 1, False),
            ("2", 2, False),
            ("3", 3, False),
        ]

    def test_keys_use_enum_convention(self):
        result = normalize_schemas({"color": {"enum": ["dark_red", "light-blue"]}})
        assert result.enums[0].name == "Color"
        assert [v.key for v in result.enums[0].values] == ["DarkRed", "LightBlue"]

    def test_enum_takes_precedence_over_object(self):
        result = normalize_schemas({"Odd": {"type": "object", "enum": ["a"]}})
        assert result.interfaces == []
        assert isinstance(result.enums[0], EnumEntity)


class TestOrderingAndSkipping:
    def test_input_order_preserved(self, shop_schemas):
        result = normalize_schemas(shop_schemas)
        assert [i.name for i in result.interfaces] == ["Order", "LineItem", "Category"]
        assert [e.name for e in result.enums] == ["OrderStatus", "Priority"]

    def test_primitive_schema_skipped(self, shop_schemas):
        assert "Identifier" not in normalize_schemas(shop_schemas).names

    def test_non_dict_fragment_skipped(self):
        result = normalize_schemas({"Broken": "not a schema", "Ok": {"type": "object"}})
        assert result.names == ["Ok"]

    def test_empty_map(self):
        result = normalize_schemas({})
        assert result.interfaces == [] and result.enums == []


class TestReferences:
    def test_ref_to_converted_name(self):
        schemas = {
            "order": {
                "type": "object",
                "properties": {
                    "items": {
                        "type": "array",
                        "items": {"$ref": "#/components/schemas/line_item"},
                    }
                },
            },
            "line_item": {"type": "object", "properties": {"sku": {"type": "string"}}},
        }
        result = normalize_schemas(schemas)
        assert result.names == ["Order", "LineItem"]
        assert result.interfaces[0].properties[0].type == "LineItem[]"

    def test_ref_to_enum_uses_enum_convention(self):
        config = GeneratorConfig(
            naming=NamingConfig(enum=NamingConvention.AS_IS)
        )
        schemas = {
            "Order": {
                "type": "object",
                "properties": {"state": {"$ref": "#/components/schemas/order_state"}},
            },
            "order_state": {"enum": ["open"]},
        }
        result = normalize_schemas(schemas, config)
        assert result.interfaces[0].properties[0].type == "order_state"
        assert result.enums[0].name == "order_state"

    def test_dangling_reference_warns(self):
        result = normalize_schemas(
            {"Box": {"type": "object", "properties": {"id": {"$ref": "#/x/Identifier"}}}}
        )
        assert "Box.id references undeclared schema 'Identifier'" in result.warnings


class TestDuplicates:
    _SCHEMAS = {
        "user": {"type": "object", "properties": {"a": {"type": "string"}}},
        "Pet": {"type": "object", "properties": {}},
        "User": {"type": "object", "properties": {"b": {"type": "integer"}}},
    }

    def test_later_definition_wins_in_place(self):
        result = normalize_schemas(self._SCHEMAS)
        assert result.names == ["User", "Pet"]
        assert [p.name for p in result.interfaces[0].properties] == ["b"]
        assert any("normalizes to 'User'" in w for w in result.warnings)

    def test_error_policy_raises(self):
        config = GeneratorConfig(duplicates=DuplicatePolicy.ERROR)
        with pytest.raises(DuplicateEntityError, match="'user'"):
            normalize_schemas(self._SCHEMAS, config)
