"""Shape descriptors used by DataTypeValidator.

A shape is either a Primitive (string, number or boolean) or a Shape
mapping field names to nested descriptors. Plain mappings of Python types
are normalized into descriptors with build_shape().
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Union

from fieldrules.const import (
    MISSING_FIELD_MESSAGE,
    NOT_AN_OBJECT_MESSAGE,
    TYPE_MISMATCH_MESSAGE,
    UNEXPECTED_FIELD_MESSAGE,
)

__all__ = [
    "Primitive",
    "PrimitiveKind",
    "Shape",
    "ShapeDescriptor",
    "build_shape",
    "check_shape",
]


class PrimitiveKind(str, Enum):
    """Primitive value kinds a field can be declared as"""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"

    def matches(self, value: Any) -> bool:
        """Check the value's kind. Booleans are never numbers."""
        if self is PrimitiveKind.BOOLEAN:
            return isinstance(value, bool)
        if self is PrimitiveKind.NUMBER:
            return isinstance(value, int | float) and not isinstance(value, bool)
        return isinstance(value, str)


_TYPE_MARKERS: dict[Any, PrimitiveKind] = {
    str: PrimitiveKind.STRING,
    int: PrimitiveKind.NUMBER,
    float: PrimitiveKind.NUMBER,
    bool: PrimitiveKind.BOOLEAN,
}


@dataclass(frozen=True)
class Primitive:
    kind: PrimitiveKind


@dataclass(frozen=True)
class Shape:
    fields: dict[str, "ShapeDescriptor"] = field(default_factory=dict)


ShapeDescriptor = Union[Primitive, Shape]


def build_shape(fields: Mapping[str, Any]) -> Shape:
    """Normalize a field -> type mapping into a Shape.

    Args:
        fields: Mapping whose values are str, int, float, bool, a PrimitiveKind,
            an existing descriptor, or a nested mapping

    Returns:
        The equivalent Shape

    Raises:
        TypeError: If a value is not a supported type marker
    """
    if isinstance(fields, Shape):
        return fields
    if not isinstance(fields, Mapping):
        raise TypeError(f"shape must be a mapping, got {type(fields).__name__}")

    descriptors: dict[str, ShapeDescriptor] = {}
    for name, marker in fields.items():
        descriptors[name] = _build_descriptor(name, marker)
    return Shape(descriptors)


def _build_descriptor(name: str, marker: Any) -> ShapeDescriptor:
    if isinstance(marker, Primitive | Shape):
        return marker
    if isinstance(marker, PrimitiveKind):
        return Primitive(marker)
    if isinstance(marker, Mapping):
        return build_shape(marker)
    if isinstance(marker, type) and marker in _TYPE_MARKERS:
        return Primitive(_TYPE_MARKERS[marker])
    raise TypeError(f"unsupported type marker for field '{name}': {marker!r}")


def _join(path: str, name: str) -> str:
    return f"{path}.{name}" if path else name


def check_shape(shape: Shape, value: Any, path: str = "") -> list[str]:
    """Compare a value against a shape.

    Args:
        shape: Expected shape
        value: Value to inspect
        path: Dotted path of value inside the root value

    Returns:
        One message per failure. Empty list means the value matches.
    """
    if not isinstance(value, Mapping):
        return [NOT_AN_OBJECT_MESSAGE.format(path=path or "$")]

    errors: list[str] = []

    for name in value:
        if name not in shape.fields:
            errors.append(UNEXPECTED_FIELD_MESSAGE.format(path=_join(path, name)))

    for name, descriptor in shape.fields.items():
        field_path = _join(path, name)
        if name not in value:
            errors.append(MISSING_FIELD_MESSAGE.format(path=field_path))
            continue

        field_value = value[name]
        if isinstance(descriptor, Shape):
            errors.extend(check_shape(descriptor, field_value, field_path))
        elif not descriptor.kind.matches(field_value):
            errors.append(
                TYPE_MISMATCH_MESSAGE.format(path=field_path, kind=descriptor.kind.value)
            )

    return errors
