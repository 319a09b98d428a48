"""Shared fixtures for the model generator tests."""

from __future__ import annotations

import json
import re
from pathlib import Path
from typing import Any

import pytest


@pytest.fixture
def shop_schemas() -> dict[str, Any]:
    """A small shop API: orders, line items, a self-referencing category."""
    return {
        "Order": {
            "type": "object",
            "description": "A customer order",
            "required": ["id", "items"],
            "properties": {
                "id": {"type": "integer", "description": "Order id"},
                "items": {
                    "type": "array",
                    "items": {"$ref": "#/components/schemas/LineItem"},
                },
                "status": {"$ref": "#/components/schemas/OrderStatus"},
                "placedAt": {"type": "string", "format": "date-time"},
            },
        },
        "LineItem": {
            "type": "object",
            "required": ["sku"],
            "properties": {
                "sku": {"type": "string"},
                "quantity": {"type": "integer"},
                "category": {"$ref": "#/components/schemas/Category"},
            },
        },
        "Category": {
            "type": "object",
            "properties": {
                "name": {"type": "string"},
                "parent": {"$ref": "#/components/schemas/Category"},
                "children": {
                    "type": "array",
                    "items": {"$ref": "#/components/schemas/Category"},
                },
            },
        },
        "OrderStatus": {
            "type": "string",
            "description": "Lifecycle of an order",
            "enum": ["PENDING", "SHIPPED", "DELIVERED"],
        },
        "Priority": {"type": "integer", "enum": [1, 2, 3]},
        "Identifier": {"type": "string"},
    }


@pytest.fixture
def openapi_file(tmp_path: Path, shop_schemas: dict[str, Any]) -> Path:
    """The shop schemas written as an OpenAPI 3 document."""
    document = {
        "openapi": "3.0.3",
        "info": {"title": "Shop", "version": "1.0.0"},
        "paths": {},
        "components": {"schemas": shop_schemas},
    }
    path = tmp_path / "openapi.json"
    path.write_text(json.dumps(document), encoding="utf-8")
    return path


_DECLARATION = re.compile(
    r"export (?P<kind>interface|enum) (?P<name>\w+) \{\n(?P<body>.*?)\n\}", re.DOTALL
)


def parse_declarations(text: str) -> dict[str, tuple[str, list[str]]]:
    """Map declared name to (kind, member lines) for generated TypeScript."""
    declarations = {}
    for match in _DECLARATION.finditer(text):
        members = [
            line.strip()
            for line in match.group("body").splitlines()
            if line.strip() and not line.strip().startswith(("/**", "*"))
        ]
        declarations[match.group("name")] = (match.group("kind"), members)
    return declarations
