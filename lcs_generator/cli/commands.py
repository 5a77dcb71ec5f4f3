#!/usr/bin/env python3
"""create-lcs - Main Entry Point.

Scaffold Lambda Container Service projects from template repositories.

Usage:
    create-lcs [command] [options]

Commands:
    create      Create a new project from a template (default)
    configure   Generate a configuration file from a configuration schema
    preview     List the prompts a configuration schema produces
    help        Show this help message

Running ``create-lcs`` with no command (or only options such as
``--dry-run``) runs ``create``.
"""

from __future__ import annotations

import importlib
import sys
from collections.abc import Callable

import click

from lcs_generator.core.errors import ConfigError, PromptCancelled
from lcs_generator.helpers.helpers_logging import print_error

DEFAULT_COMMAND = "create"

# Subcommands, each an argparse ``main(argv) -> int``
COMMANDS: dict[str, dict[str, str]] = {
    "create": {
        "module": "lcs_generator.cli.create_command",
        "description": "Create a new project from a template (default)",
    },
    "configure": {
        "module": "lcs_generator.cli.configure_command",
        "description": "Generate a configuration file from a configuration schema",
    },
    "preview": {
        "module": "lcs_generator.cli.preview_command",
        "description": "List the prompts a configuration schema produces",
    },
}

_HELP_ARGS = ("help", "--help", "-h")


def print_help() -> None:
    """Print help message with all available commands."""
    print(__doc__)
    print("📦 Commands:")
    for cmd, info in COMMANDS.items():
        print(f"  {cmd:12} - {info['description']}")
    print("\n💡 Tip: Run 'create-lcs <command> --help' for command options")


def _load_command(command: str) -> Callable[[list[str]], int]:
    module = importlib.import_module(COMMANDS[command]["module"])
    return module.main


def execute_command(command: str, extra_args: list[str]) -> int:
    """Run a registered subcommand with its remaining arguments."""
    if command not in COMMANDS:
        print_error(f"Unknown command: {command}")
        print("\nRun 'create-lcs help' to see available commands.")
        return 1

    try:
        return _load_command(command)(extra_args)
    except SystemExit as exc:
        # argparse exits on --help and on usage errors
        return exc.code if isinstance(exc.code, int) else 0


@click.group(invoke_without_command=True)
@click.pass_context
def _click_cli(ctx: click.Context) -> int:
    """Top-level create-lcs command group with passthrough command registration."""
    if ctx.invoked_subcommand is not None:
        return 0
    return execute_command(DEFAULT_COMMAND, [])


def _register_passthrough_command(command_name: str, description: str) -> None:
    """Register a passthrough click command; the subcommand parses its own options."""

    @click.command(
        name=command_name,
        help=description,
        context_settings={
            "allow_extra_args": True,
            "ignore_unknown_options": True,
        },
        add_help_option=False,
    )
    @click.pass_context
    def _cmd(ctx: click.Context) -> int:
        return execute_command(command_name, list(ctx.args))

    _click_cli.add_command(_cmd)


def _register_commands() -> None:
    for cmd, info in COMMANDS.items():
        _register_passthrough_command(cmd, info["description"])

    @click.command(name="help", help="Show help message")
    def _help_cmd() -> int:
        print_help()
        return 0

    _click_cli.add_command(_help_cmd)


_register_commands()


def _normalize_args(args: list[str]) -> list[str]:
    """Route option-only invocations (``create-lcs --dry-run``) to the default command."""
    if args and args[0].startswith("-") and args[0] not in _HELP_ARGS:
        return [DEFAULT_COMMAND, *args]
    return args


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    args = list(sys.argv[1:] if argv is None else argv)

    if args and args[0] in _HELP_ARGS:
        print_help()
        return 0

    try:
        result = _click_cli.main(
            args=_normalize_args(args),
            prog_name="create-lcs",
            standalone_mode=False,
        )
    except (click.Abort, PromptCancelled):
        print("\n⚠️  Cancelled by user")
        return 130
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except ConfigError as exc:
        print_error(str(exc))
        return 1

    return 0 if result is None else int(result)


if __name__ == "__main__":
    sys.exit(main())
