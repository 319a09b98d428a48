"""
Reference extraction between generated entities.

Determines which known entities a property type depends on, so that
per-file output can import exactly what each file uses.
"""

import re
from typing import Iterable, List, Optional, Set

from .types import (
    TYPE_PLACEHOLDER,
    ArrayType,
    PrimitiveType,
    ReferenceType,
    TypeExpr,
    UnionType,
)

_GENERIC_ARRAY = re.compile(r"^(?:Readonly)?Array<(?P<inner>.+)>$", re.DOTALL)

_OPENERS = "(<[{"
_CLOSERS = ")>]}"


def collect_references(
    type_expr: TypeExpr, known_names: Optional[Iterable[str]] = None
) -> Set[str]:
    """
    Walk a type expression and collect referenced entity names.

    Args:
        type_expr: Structured type from the type mapper
        known_names: Restrict results to these names; None collects every reference

    Returns:
        Set of referenced names
    """
    known = None if known_names is None else set(known_names)

    def walk(expr: TypeExpr) -> Set[str]:
        if isinstance(expr, ReferenceType):
            if known is None or expr.name in known:
                return {expr.name}
            return set()
        if isinstance(expr, PrimitiveType):
            if known is not None and expr.name in known:
                return {expr.name}
            return set()
        if isinstance(expr, ArrayType):
            return walk(expr.item)
        if isinstance(expr, UnionType):
            found = set()
            for member in expr.members:
                found |= walk(member)
            return found
        return set()

    return walk(type_expr)


def extract_references(
    type_name: str,
    known_names: Iterable[str],
    array_template: Optional[str] = None,
) -> Set[str]:
    """
    Find known entity names inside a rendered type string.

    Handles ``T[]``, ``Array<T>``, the configured array template, unions
    and parentheses, recursing until no structure is left.

    Args:
        type_name: Rendered type, e.g. ``(LineItem | null)[]``
        known_names: Names of all generated entities
        array_template: Configured array template such as ``{{type}}[]``

    Returns:
        Set of referenced names
    """
    known = set(known_names)

    def walk(text: str) -> Set[str]:
        text = _strip_parens(text.strip())
        if not text:
            return set()

        found = set()
        if text in known:
            found.add(text)

        members = _split_union(text)
        if len(members) > 1:
            for member in members:
                found |= walk(member)
            return found

        inner = _array_item(text, array_template)
        if inner is not None:
            found |= walk(inner)
        return found

    return walk(type_name)


def resolve_imports(entity, known_names: Iterable[str]) -> List[str]:
    """
    Names an entity must import, sorted, never including itself.

    Args:
        entity: Interface or enum entity
        known_names: Names of all generated entities

    Returns:
        Alphabetically sorted list of referenced names
    """
    known = set(known_names)
    found: Set[str] = set()
    for prop in getattr(entity, "properties", ()):
        found |= collect_references(prop.type_expr, known)
    found.discard(entity.name)
    return sorted(found)


def _array_item(text: str, array_template: Optional[str]) -> Optional[str]:
    if text.endswith("[]"):
        return text[:-2]

    match = _GENERIC_ARRAY.match(text)
    if match:
        return match.group("inner")

    if array_template and TYPE_PLACEHOLDER in array_template:
        prefix, suffix = array_template.split(TYPE_PLACEHOLDER, 1)
        if (
            (prefix or suffix)
            and len(text) > len(prefix) + len(suffix)
            and text.startswith(prefix)
            and text.endswith(suffix)
        ):
            return text[len(prefix) : len(text) - len(suffix)]

    return None


def _split_union(text: str) -> List[str]:
    """Split on '|' outside of any brackets."""
    parts = []
    depth = 0
    start = 0
    for index, char in enumerate(text):
        if char in _OPENERS:
            depth += 1
        elif char in _CLOSERS:
            depth = max(depth - 1, 0)
        elif char == "|" and depth == 0:
            parts.append(text[start:index])
            start = index + 1
    parts.append(text[start:])
    return [part.strip() for part in parts]


def _strip_parens(text: str) -> str:
    """Remove parentheses wrapping the whole string."""
    while text.startswith("(") and text.endswith(")") and _closes_at_end(text):
        text = text[1:-1].strip()
    return text


def _closes_at_end(text: str) -> bool:
    depth = 0
    for index, char in enumerate(text):
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
            if depth == 0 and index != len(text) - 1:
                return False
    return depth == 0
