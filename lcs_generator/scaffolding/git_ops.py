"""Process helpers: cloning the template and running template setup."""

import shutil
import subprocess
from pathlib import Path

from lcs_generator.core.errors import CommandError
from lcs_generator.helpers.helpers_logging import (
    print_dry_run,
    print_info,
    print_success,
)


def run_command(cmd: list[str], cwd: Path | None = None) -> None:
    """Run ``cmd`` with inherited stdio and wait for it.

    Raises:
        CommandError: The executable is missing or exits non-zero.
    """
    try:
        result = subprocess.run(cmd, cwd=cwd, check=False)
    except FileNotFoundError as e:
        raise CommandError(cmd, None, f"{cmd[0]} not found: {e}") from e

    if result.returncode != 0:
        raise CommandError(
            cmd,
            result.returncode,
            f"Command failed with exit code {result.returncode}: {' '.join(cmd)}",
        )


def reset_temp_dir(temp_dir: Path, dry_run: bool = False) -> None:
    """Ensure ``temp_dir`` does not exist so a fresh clone can land there."""
    if dry_run:
        print_dry_run(f"Would clean up temporary directory {temp_dir}")
        return
    if temp_dir.exists():
        shutil.rmtree(temp_dir)


def remove_temp_dir(temp_dir: Path) -> None:
    """Delete the temporary clone; a missing directory is fine."""
    shutil.rmtree(temp_dir, ignore_errors=True)


def clone_template(url: str, temp_dir: Path, dry_run: bool = False) -> None:
    """``git clone url temp_dir``.

    Raises:
        CommandError: git is missing or the clone failed.
    """
    print_info(f"Cloning template repository from {url}...")
    if dry_run:
        print_dry_run(f"Would clone template repository from {url} to {temp_dir}")
        return

    try:
        run_command(["git", "clone", url, str(temp_dir)])
    except CommandError as e:
        if e.returncode is None:
            raise
        raise CommandError(
            e.command, e.returncode, f"git clone failed with code {e.returncode}",
        ) from e
    print_success("Cloning complete.")
