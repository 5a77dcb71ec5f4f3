"""Turn flat prompt answers back into a nested configuration object.

Answers arrive keyed by dotted path (``database.port``). The result mirrors
the schema's ``properties`` shape and contains every field that either has
a schema default or was answered; nothing is null-filled.

Order of operations:
    1. seed every leaf default from the schema
    2. overlay answers, coerced to the leaf's declared kind
    3. reorder keys to follow the schema (undeclared answers last)
"""

import copy
import math
from collections.abc import Mapping
from typing import cast

from lcs_generator.core.schema_node import (
    SchemaKind,
    SchemaNode,
    resolve_path,
)

ConfigObject = dict[str, object]


class _Unanswered:
    """Marker for a prompt that was skipped or left without an answer."""

    def __repr__(self) -> str:
        return "UNANSWERED"


UNANSWERED = _Unanswered()


def set_nested_value(target: ConfigObject, path: str, value: object) -> None:
    """Write ``value`` at ``path`` inside ``target``, creating sections lazily.

    Existing sibling keys are kept; a non-mapping value sitting where a
    section is needed is replaced by a new section.
    """
    keys = path.split(".")
    current = target
    for key in keys[:-1]:
        existing = current.get(key)
        if not isinstance(existing, dict):
            existing = {}
            current[key] = existing
        current = cast(ConfigObject, existing)
    current[keys[-1]] = value


def _collect_defaults(
    schema: SchemaNode,
    prefix: str,
    acc: ConfigObject,
) -> ConfigObject:
    for key, child in (schema.properties or {}).items():
        path = f"{prefix}.{key}" if prefix else key
        if not child.is_leaf:
            acc = _collect_defaults(child, path, acc)
        elif child.has_default:
            set_nested_value(acc, path, copy.deepcopy(child.default))
    return acc


def seed_defaults(schema: SchemaNode) -> ConfigObject:
    """Nested object holding every declared leaf default of ``schema``."""
    return _collect_defaults(schema, "", {})


def _split_list(raw: str) -> list[str]:
    return [item.strip() for item in raw.split(",") if item.strip()]


def _parse_number(raw: object, integer: bool) -> object:
    if isinstance(raw, bool) or not isinstance(raw, (str, int, float)):
        return raw
    if isinstance(raw, (int, float)):
        number: int | float = raw
    else:
        text = raw.strip()
        try:
            number = int(text)
        except ValueError:
            try:
                number = float(text)
            except ValueError:
                # rejected upstream by the prompt validator
                return raw
    if isinstance(number, float) and not math.isfinite(number):
        # nan/inf have no JSON form
        return raw
    if integer and isinstance(number, float) and number.is_integer():
        return int(number)
    return number


def coerce_value(raw: object, node: SchemaNode) -> object:
    """Coerce a raw answer to the kind declared by ``node``.

    A missing answer (``UNANSWERED``) yields the node's default verbatim,
    or ``UNANSWERED`` when the node has none.
    """
    if raw is UNANSWERED:
        return node.default if node.has_default else UNANSWERED

    kind = node.kind
    if kind is SchemaKind.ARRAY:
        if isinstance(raw, str):
            return _split_list(raw)
        if isinstance(raw, (list, tuple)):
            return [str(item) for item in cast(list[object], raw)]
        return raw
    if kind in (SchemaKind.NUMBER, SchemaKind.INTEGER):
        return _parse_number(raw, integer=kind is SchemaKind.INTEGER)
    if kind is SchemaKind.BOOLEAN:
        return bool(raw)
    # string, unknown and objects without declared properties
    return raw


def _in_schema_order(config: ConfigObject, schema: SchemaNode) -> ConfigObject:
    """Copy of ``config`` with keys in declared property order; undeclared keys last."""
    ordered: ConfigObject = {}
    for key, child in (schema.properties or {}).items():
        if key not in config:
            continue
        value = config[key]
        if isinstance(value, dict) and not child.is_leaf:
            value = _in_schema_order(cast(ConfigObject, value), child)
        ordered[key] = value
    for key, value in config.items():
        ordered.setdefault(key, value)
    return ordered


def materialize(
    flat_answers: Mapping[str, object],
    schema: SchemaNode,
) -> ConfigObject:
    """Build the nested configuration object from flat answers.

    Args:
        flat_answers: Dotted path -> raw answer. Suppressed prompts are
            simply absent; ``None`` and ``UNANSWERED`` count as no answer.
        schema: Schema the prompts were derived from.

    Returns:
        Fresh nested dict in schema property order; inputs are not modified.
    """
    config = seed_defaults(schema)

    for path, raw in flat_answers.items():
        if raw is None or raw is UNANSWERED:
            continue
        value = coerce_value(raw, resolve_path(schema, path))
        if value is UNANSWERED:
            continue
        set_nested_value(config, path, copy.deepcopy(value))

    return _in_schema_order(config, schema)
