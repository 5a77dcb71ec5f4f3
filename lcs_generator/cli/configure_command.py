#!/usr/bin/env python3
"""
Configure an existing project from a configuration schema.

Runs only the schema-driven part of ``create-lcs create``: derive the
questions from the schema, ask them, and write the nested result.

Usage:
    create-lcs configure                          # ./.lcsconf.schema.json -> ./.lcsconf.json
    create-lcs configure path/to/schema.json --output config.json
    create-lcs configure schema.yaml --dry-run    # print instead of writing
"""

import argparse
import sys
from pathlib import Path

from lcs_generator.core.errors import PromptCancelled
from lcs_generator.helpers.helpers_logging import (
    print_dry_run,
    print_error,
    print_success,
    print_warning,
)
from lcs_generator.helpers.prompt_runner import PromptSession
from lcs_generator.scaffolding.copy_ops import SCHEMA_FILE
from lcs_generator.scaffolding.lcs_config import (
    CONFIG_FILE,
    collect_config,
    dump_config,
    load_schema_file,
    write_config_file,
)


def run_configure(
    schema_path: Path,
    output_path: Path,
    session: PromptSession,
    dry_run: bool = False,
) -> int:
    """Ask the schema's questions and write (or print) the configuration."""
    try:
        schema = load_schema_file(schema_path)
    except (OSError, ValueError) as e:
        print_error(f"Could not load schema {schema_path}: {e}")
        return 1

    config = collect_config(schema, session)
    if config is None:
        return 0

    if dry_run:
        print_dry_run(f"Would write {output_path}:")
        print(dump_config(config), end="")
        return 0

    try:
        write_config_file(output_path, config)
    except OSError as e:
        print_error(f"Could not write {output_path}: {e}")
        return 1
    print_success(f"Generated {output_path} with your configuration.")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the configure command."""
    parser = argparse.ArgumentParser(
        prog="create-lcs configure",
        description="Generate a configuration file from a configuration schema",
    )
    parser.add_argument(
        "schema",
        nargs="?",
        type=Path,
        default=Path(SCHEMA_FILE),
        help=f"Schema file (.json, .yaml). Default: {SCHEMA_FILE}",
    )
    parser.add_argument(
        "-o", "--output",
        type=Path,
        default=Path(CONFIG_FILE),
        help=f"Where to write the configuration. Default: {CONFIG_FILE}",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the configuration instead of writing it",
    )
    args = parser.parse_args(argv)

    try:
        return run_configure(args.schema, args.output, PromptSession(), dry_run=args.dry_run)
    except PromptCancelled:
        print_warning("Cancelled by user")
        return 130


if __name__ == "__main__":
    sys.exit(main())
