"""Derive interactive prompts from a template configuration schema.

Each schema leaf becomes one ``PromptDescriptor``. Nested objects are
flattened into dotted paths (``database.host``) and their prompts are
labelled with the section they belong to (``[DATABASE] Host name``).

Question kind selection:
    string + enum   -> select (closed choice)
    string          -> text (pattern / uri validation)
    number/integer  -> number
    boolean         -> confirm
    array           -> text, comma-separated
    anything else   -> text, JSON-encoded default
"""

import json
import math
import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass, replace
from enum import Enum
from urllib.parse import urlparse

from lcs_generator.core.schema_node import SchemaKind, SchemaNode

Validator = Callable[[str], bool | str]
Condition = Callable[[Mapping[str, object]], bool]

# Friendlier wording for patterns templates commonly use. Each message is
# shown for the exact same accept/reject set as the generic pattern check.
WELL_KNOWN_PATTERN_MESSAGES: dict[str, str] = {
    r"^[0-9]{12}$": "AWS Account ID must be exactly 12 digits",
    r"^[a-z0-9-]+$": "Must contain only lowercase letters, numbers, and hyphens",
    r"^#[0-9a-fA-F]{6}$": "Must be a valid hex color (e.g., #FF5733)",
}

URI_FORMAT = "uri"
SECTION_SEPARATOR = " > "


class QuestionKind(Enum):
    """How a prompt is presented to the operator."""

    SELECT = "select"
    TEXT = "text"
    NUMBER = "number"
    CONFIRM = "confirm"


@dataclass(frozen=True)
class PromptDescriptor:
    """One interactive question.

    Attributes:
        path: Dotted key from the document root; joins prompts to answers.
        question_kind: Presentation of the question.
        label: Message shown to the operator.
        initial_value: Pre-filled value (select: index into ``choices``).
        choices: Options for select questions.
        validator: Returns True or a rejection message for a raw answer.
        condition: Asked only when this returns True for the answers so far.
    """

    path: str
    question_kind: QuestionKind
    label: str
    initial_value: object = None
    choices: tuple[str, ...] = ()
    validator: Validator | None = None
    condition: Condition | None = None

    def validate(self, raw: str) -> bool | str:
        if self.validator is None:
            return True
        return self.validator(raw)

    def is_active(self, answers: Mapping[str, object]) -> bool:
        return self.condition is None or self.condition(answers)


# ---------------------------------------------------------------------------
# Validators
# ---------------------------------------------------------------------------


def pattern_validator(pattern: str) -> Validator:
    """Validator accepting text where ``pattern`` matches anywhere."""
    message = WELL_KNOWN_PATTERN_MESSAGES.get(
        pattern, f"Value must match pattern: {pattern}",
    )
    try:
        regex = re.compile(pattern)
    except re.error:
        def _reject(_value: str) -> bool | str:
            return f"Schema pattern is not a valid regular expression: {pattern}"
        return _reject

    def _validate(value: str) -> bool | str:
        return True if regex.search(value) else message

    return _validate


def is_absolute_url(value: str) -> bool:
    """True for text that parses as an absolute URL (has a scheme)."""
    try:
        parsed = urlparse(value.strip())
    except ValueError:
        return False
    if not parsed.scheme or not re.match(r"^[A-Za-z][A-Za-z0-9+.-]*$", parsed.scheme):
        return False
    if any(ch.isspace() for ch in parsed.netloc):
        return False
    return bool(parsed.netloc or parsed.path)


def uri_validator(value: str) -> bool | str:
    return True if is_absolute_url(value) else "Please enter a valid URL"


def _number_validator(integer: bool) -> Validator:
    def _validate(value: str) -> bool | str:
        text = str(value).strip()
        try:
            number = float(text)
        except ValueError:
            return "Please enter a number"
        if not math.isfinite(number):
            return "Please enter a number"
        if integer and not number.is_integer():
            return "Please enter a whole number"
        return True

    return _validate


# ---------------------------------------------------------------------------
# Leaf conversion
# ---------------------------------------------------------------------------


def _text_validator(node: SchemaNode) -> Validator | None:
    if node.pattern:
        return pattern_validator(node.pattern)
    if node.format == URI_FORMAT:
        return uri_validator
    return None


def _select_initial(node: SchemaNode) -> int:
    choices = node.enum_values or ()
    if node.has_default and str(node.default) in choices:
        return choices.index(str(node.default))
    return 0


def _array_initial(default: object) -> str:
    if isinstance(default, (list, tuple)):
        return ", ".join(str(item) for item in default)
    return str(default)


def leaf_to_prompt(path: str, node: SchemaNode) -> PromptDescriptor:
    """Convert one schema leaf into a prompt (no section label applied)."""
    message = node.description or f"Enter value for {path}:"
    kind = node.kind

    if kind is SchemaKind.STRING and node.enum_values:
        return PromptDescriptor(
            path=path,
            question_kind=QuestionKind.SELECT,
            label=message,
            initial_value=_select_initial(node),
            choices=node.enum_values,
        )

    if kind is SchemaKind.STRING:
        return PromptDescriptor(
            path=path,
            question_kind=QuestionKind.TEXT,
            label=message,
            initial_value=node.default if node.has_default and node.default else "",
            validator=_text_validator(node),
        )

    if kind in (SchemaKind.NUMBER, SchemaKind.INTEGER):
        return PromptDescriptor(
            path=path,
            question_kind=QuestionKind.NUMBER,
            label=message,
            initial_value=node.default if node.has_default and node.default else 0,
            validator=_number_validator(integer=kind is SchemaKind.INTEGER),
        )

    if kind is SchemaKind.BOOLEAN:
        return PromptDescriptor(
            path=path,
            question_kind=QuestionKind.CONFIRM,
            label=message,
            initial_value=bool(node.default) if node.has_default else True,
        )

    if kind is SchemaKind.ARRAY:
        base = node.description or f"Enter values for {path}"
        return PromptDescriptor(
            path=path,
            question_kind=QuestionKind.TEXT,
            label=f"{base} (comma-separated):",
            initial_value=_array_initial(node.default) if node.has_default and node.default else "",
        )

    # unknown kinds and objects without declared properties
    return PromptDescriptor(
        path=path,
        question_kind=QuestionKind.TEXT,
        label=message,
        initial_value=json.dumps(node.default) if node.has_default and node.default else "",
    )


def section_label(prefix: str) -> str:
    """``database.replica`` -> ``[DATABASE > REPLICA]``."""
    return "[" + SECTION_SEPARATOR.join(s.upper() for s in prefix.split(".")) + "]"


def _with_section(prompt: PromptDescriptor, prefix: str) -> PromptDescriptor:
    return replace(prompt, label=f"{section_label(prefix)} {prompt.label}")


def derive_prompts(schema: SchemaNode, prefix: str = "") -> list[PromptDescriptor]:
    """Walk ``schema`` depth-first and return one prompt per leaf.

    Args:
        schema: Root node (its ``properties`` are the top-level fields).
        prefix: Dotted path of ``schema`` itself; empty for the root.

    Returns:
        Prompts in declared property order.
    """
    prompts: list[PromptDescriptor] = []
    for key, child in (schema.properties or {}).items():
        path = f"{prefix}.{key}" if prefix else key

        if not child.is_leaf:
            prompts.extend(derive_prompts(child, path))
            continue

        prompt = leaf_to_prompt(path, child)
        if prefix:
            prompt = _with_section(prompt, prefix)
        prompts.append(prompt)

    return prompts
