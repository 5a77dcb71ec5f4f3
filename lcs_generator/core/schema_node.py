"""Schema node model for template configuration documents.

A template ships a ``.lcsconf.schema.json`` describing the configuration
object it expects. Only a practical subset of JSON Schema is understood:

    type, description, default, enum, pattern, format, properties

Example:
    {
      "type": "object",
      "properties": {
        "app": {
          "type": "object",
          "properties": {
            "name": {"type": "string", "pattern": "^[a-z0-9-]+$"},
            "port": {"type": "integer", "default": 8080}
          }
        }
      }
    }

Parsing is permissive: anything malformed degrades to an ``unknown`` leaf
instead of raising, so a partial or newer schema never blocks configuration.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import cast


class _NoDefault:
    """Marker type for a node that declares no ``default``."""

    _instance: "_NoDefault | None" = None

    def __new__(cls) -> "_NoDefault":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NO_DEFAULT"

    def __bool__(self) -> bool:
        return False


NO_DEFAULT = _NoDefault()


class SchemaKind(Enum):
    """Declared ``type`` of a schema node."""

    STRING = "string"
    NUMBER = "number"
    INTEGER = "integer"
    BOOLEAN = "boolean"
    ARRAY = "array"
    OBJECT = "object"
    UNKNOWN = "unknown"

    @classmethod
    def from_raw(cls, raw: object) -> "SchemaKind":
        """Map a raw ``type`` value to a kind, falling back to UNKNOWN."""
        if not isinstance(raw, str):
            return cls.UNKNOWN
        try:
            return cls(raw)
        except ValueError:
            return cls.UNKNOWN


@dataclass(frozen=True)
class SchemaNode:
    """One field (leaf) or container (object) of a configuration schema.

    Attributes:
        kind: Declared type.
        description: Prompt text, if any.
        default: Declared default, or ``NO_DEFAULT``.
        enum_values: Closed set of choices (string nodes only).
        pattern: Regular expression the text value must satisfy.
        format: Semantic hint such as ``uri``.
        properties: Child nodes in declaration order (object nodes only).
    """

    kind: SchemaKind
    description: str | None = None
    default: object = NO_DEFAULT
    enum_values: tuple[str, ...] | None = None
    pattern: str | None = None
    format: str | None = None
    properties: dict[str, "SchemaNode"] | None = field(default=None)

    @property
    def has_default(self) -> bool:
        return self.default is not NO_DEFAULT

    @property
    def is_leaf(self) -> bool:
        """Only leaves produce prompts; objects with children are containers."""
        return self.kind is not SchemaKind.OBJECT or not self.properties


UNKNOWN_LEAF = SchemaNode(kind=SchemaKind.UNKNOWN)


def _parse_enum(raw: object) -> tuple[str, ...] | None:
    if not isinstance(raw, (list, tuple)) or not raw:
        return None
    return tuple(str(item) for item in cast(list[object], raw))


def _parse_properties(raw: object) -> dict[str, SchemaNode] | None:
    if not isinstance(raw, Mapping):
        return None
    return {
        str(key): parse_schema(value)
        for key, value in cast(Mapping[object, object], raw).items()
    }


def _optional_str(raw: object) -> str | None:
    return raw if isinstance(raw, str) else None


def parse_schema(raw: object) -> SchemaNode:
    """Build a ``SchemaNode`` tree from a decoded JSON/YAML document.

    Args:
        raw: Decoded schema document (usually a dict).

    Returns:
        Root node. Non-mapping input yields an ``unknown`` leaf.
    """
    if not isinstance(raw, Mapping):
        return UNKNOWN_LEAF

    data = cast(Mapping[str, object], raw)
    kind = SchemaKind.from_raw(data.get("type"))

    # The document root is often written without "type": "object".
    properties = _parse_properties(data.get("properties"))

    return SchemaNode(
        kind=kind,
        description=_optional_str(data.get("description")),
        default=data["default"] if "default" in data else NO_DEFAULT,
        enum_values=_parse_enum(data.get("enum")) if kind is SchemaKind.STRING else None,
        pattern=_optional_str(data.get("pattern")) if kind is SchemaKind.STRING else None,
        format=_optional_str(data.get("format")),
        properties=properties,
    )


def resolve_path(schema: SchemaNode, dotted_path: str) -> SchemaNode:
    """Find the node at ``dotted_path``, or an unknown leaf if it is undeclared."""
    node = schema
    for segment in dotted_path.split("."):
        children = node.properties or {}
        if segment not in children:
            return UNKNOWN_LEAF
        node = children[segment]
    return node
