#!/usr/bin/env python3
"""
Show the questions a configuration schema produces, without asking them.

Usage:
    create-lcs preview .lcsconf.schema.json
"""

import argparse
import sys
from pathlib import Path

from lcs_generator.core.prompt_deriver import PromptDescriptor, QuestionKind, derive_prompts
from lcs_generator.helpers.helpers_logging import (
    Colors,
    print_error,
    print_header,
    print_success,
)
from lcs_generator.scaffolding.copy_ops import SCHEMA_FILE
from lcs_generator.scaffolding.lcs_config import load_schema_file


def format_prompt(index: int, prompt: PromptDescriptor) -> list[str]:
    """Lines describing one prompt."""
    lines = [
        f"{index}. {prompt.path}: {prompt.label} "
        f"{Colors.DIM}(type: {prompt.question_kind.value}){Colors.RESET}"
    ]
    if prompt.question_kind is QuestionKind.SELECT:
        lines.append(f"   Choices: {', '.join(prompt.choices)}")
    if prompt.initial_value not in (None, ""):
        lines.append(f"   Default: {prompt.initial_value}")
    if prompt.validator is not None:
        lines.append("   Has validation")
    return lines


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the preview command."""
    parser = argparse.ArgumentParser(
        prog="create-lcs preview",
        description="List the prompts derived from a configuration schema",
    )
    parser.add_argument(
        "schema",
        nargs="?",
        type=Path,
        default=Path(SCHEMA_FILE),
        help=f"Schema file (.json, .yaml). Default: {SCHEMA_FILE}",
    )
    args = parser.parse_args(argv)

    try:
        schema = load_schema_file(args.schema)
    except (OSError, ValueError) as e:
        print_error(f"Could not load schema {args.schema}: {e}")
        return 1

    print_success("Schema loaded successfully!")
    if schema.description:
        print(f"Description: {schema.description}")

    prompts = derive_prompts(schema)
    print_header(f"\nGenerated {len(prompts)} prompts:")
    for index, prompt in enumerate(prompts, 1):
        for line in format_prompt(index, prompt):
            print(line)
        print()
    return 0


if __name__ == "__main__":
    sys.exit(main())
