"""
create-lcs

Scaffold a Lambda Container Service project from a template repository,
including schema-driven configuration of the template.
"""

__version__ = "0.1.0"

from lcs_generator.core import derive_prompts, materialize, parse_schema

__all__ = [
    "derive_prompts",
    "materialize",
    "parse_schema",
]
