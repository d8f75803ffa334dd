#!/usr/bin/env python3
"""
JSON to TypeScript Interface Library

Generates TypeScript interface declarations from a sample JSON document.
Every nested object gets its own interface, named after the field holding it.
"""

from typing import Any, Dict, List, NamedTuple, Optional
import json


DEFAULT_ROOT_INTERFACE_NAME = "RootObject"

# Raised by json.loads on malformed input, propagated as-is.
ParseError = json.JSONDecodeError

PRIMITIVE_KINDS = ("boolean", "number", "string")


class InferredShape(NamedTuple):
    """One object found during traversal and the interface name assigned to it."""

    name: str
    fields: Dict[str, Any]


def generate(json_data: str, root_interface_name: str = DEFAULT_ROOT_INTERFACE_NAME) -> str:
    """
    Main entry point: Parse a JSON string and return its TypeScript interfaces.

    Args:
        json_data: A valid JSON string
        root_interface_name: Name of the top level interface, used verbatim

    Returns:
        All interface declarations, separated by a blank line

    Raises:
        ParseError: If json_data is not valid JSON
    """
    root = json.loads(json_data)

    # Nested top-level arrays are unwrapped down to their first non-array element
    while json_kind(root) == "array" and root:
        root = select_root(root)

    # Empty arrays and bare primitives have no fields to describe
    if json_kind(root) != "object":
        root = {}

    shapes = find_all_interfaces(root, root_interface_name)

    return "\n\n".join(render_interface(shape.name, shape.fields) for shape in shapes)


def select_root(value: Any) -> Any:
    """Use the first element of a top-level array as the representative sample."""
    if json_kind(value) == "array" and value:
        return value[0]
    return value


def find_all_interfaces(
    node: Dict[str, Any],
    interface_name: str,
    result: Optional[List[InferredShape]] = None,
) -> List[InferredShape]:
    """
    Collect every object that needs its own interface, parents first.

    Arrays are sampled by their first element. The sample is passed down to
    the recursive call, so the input document is left untouched.

    Args:
        node: A JSON object
        interface_name: The name assigned to node
        result: Accumulator shared by the recursive calls

    Returns:
        (name, object) pairs in discovery order
    """
    if result is None:
        result = []

    result.append(InferredShape(interface_name, node))

    for key, value in node.items():
        sample = sample_value(value)

        if json_kind(sample) == "object":
            find_all_interfaces(sample, to_pascal_case(key), result)

    return result


def sample_value(value: Any) -> Any:
    """Unwrap (possibly nested) arrays to their first element. Empty arrays yield None."""
    while json_kind(value) == "array":
        value = value[0] if value else None
    return value


def render_interface(interface_name: str, shape: Dict[str, Any]) -> str:
    """Generate the TypeScript interface for a single level JSON object."""
    lines = []

    for key, value in shape.items():
        if value is None:
            lines.append(f"  {to_camel_case(key)}?: any\n")
        else:
            lines.append(f"  {to_camel_case(key)}: {get_type(key, value)};\n")

    return f"export interface {interface_name} {{\n" + "".join(lines) + "}"


def get_type(property_name: str, property_value: Any) -> str:
    """
    Return the TypeScript type of a property value.

    e.g. string, number, string[] or CustomType[]
    """
    kind = json_kind(property_value)

    if kind in PRIMITIVE_KINDS:
        return kind
    elif kind == "array":
        if not property_value or property_value[0] is None:
            return "any[]"
        return f"{get_type(property_name, property_value[0])}[]"
    elif kind == "object":
        return to_pascal_case(property_name)
    else:
        return "any"


def json_kind(value: Any) -> str:
    """
    Classify a parsed JSON value.

    Returns one of: null, boolean, number, string, array, object
    """
    if value is None:
        return "null"
    elif isinstance(value, bool):
        return "boolean"
    elif isinstance(value, (int, float)):
        return "number"
    elif isinstance(value, str):
        return "string"
    elif isinstance(value, list):
        return "array"
    elif isinstance(value, dict):
        return "object"
    else:
        raise TypeError(f"Not a JSON value: {type(value).__name__}")


def to_pascal_case(text: str) -> str:
    """
    Capitalize a string. Kebab-cased text is converted to PascalCase.

    e.g. geographic-position -> GeographicPosition, user -> User
    """
    return "".join(_capitalize_first(segment) for segment in text.split("-"))


def to_camel_case(text: str) -> str:
    """
    Convert kebab-cased text to camelCase.

    e.g. geographic-position -> geographicPosition, user -> user
    """
    first, *rest = text.split("-")
    return first + "".join(_capitalize_first(segment) for segment in rest)


def _capitalize_first(segment: str) -> str:
    return segment[:1].upper() + segment[1:]
