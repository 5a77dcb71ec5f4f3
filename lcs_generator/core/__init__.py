"""Schema-driven configuration engine.

Two pure entry points:
    derive_prompts: schema -> ordered prompt descriptors
    materialize: flat answers + schema -> nested configuration object
"""

from .prompt_deriver import PromptDescriptor, QuestionKind, derive_prompts
from .response_materializer import UNANSWERED, coerce_value, materialize, seed_defaults
from .schema_node import NO_DEFAULT, SchemaKind, SchemaNode, parse_schema, resolve_path

__all__ = [
    "NO_DEFAULT",
    "UNANSWERED",
    "PromptDescriptor",
    "QuestionKind",
    "SchemaKind",
    "SchemaNode",
    "coerce_value",
    "derive_prompts",
    "materialize",
    "parse_schema",
    "resolve_path",
    "seed_defaults",
]
