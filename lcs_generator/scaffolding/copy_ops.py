"""Copy a cloned template into the new project directory."""

import shutil
from dataclasses import dataclass
from pathlib import Path

from lcs_generator.helpers.helpers_logging import (
    print_dry_run,
    print_info,
    print_success,
    print_warning,
)

# Matched with startswith(): dist/ and dist-types/ are both build output.
EXCLUDED_PREFIXES: tuple[str, ...] = (
    "node_modules",
    "dist",
    ".vscode",
    "TEMPLATE_",
    "README.md",
    "todo.md",
)
EXCLUDED_SUFFIXES: tuple[str, ...] = (".example",)

# Template configuration files; handled by lcs_config.
SETUP_SH = "setup.sh"
SETUP_JS = "setup.js"
SCHEMA_FILE = ".lcsconf.schema.json"
EXCLUDED_NAMES: tuple[str, ...] = (".git", SETUP_SH, SETUP_JS, SCHEMA_FILE)


@dataclass(frozen=True)
class OriginalDocs:
    """Which template docs were preserved under ORIGINAL_* names."""

    readme: bool = False
    todo: bool = False


def is_copied(name: str) -> bool:
    """True if a top-level template entry belongs in the new project."""
    if name in EXCLUDED_NAMES:
        return False
    if name.endswith(EXCLUDED_SUFFIXES):
        return False
    return not name.startswith(EXCLUDED_PREFIXES)


def filter_template_entries(names: list[str]) -> list[str]:
    """Keep the entries that ``copy_template`` copies, in the given order."""
    return [name for name in names if is_copied(name)]


def _copy_entry(source: Path, destination: Path) -> None:
    if source.is_dir():
        shutil.copytree(source, destination, dirs_exist_ok=True)
    else:
        shutil.copy2(source, destination)


def copy_template(temp_dir: Path, project_path: Path, dry_run: bool = False) -> list[str]:
    """Copy the filtered top-level entries of ``temp_dir`` into ``project_path``.

    Returns:
        Names of the entries copied (or that would be copied in dry-run).
    """
    print_info(f"Copying template files to {project_path}...")
    if dry_run:
        print_dry_run(f"Would create project directory {project_path}")
    else:
        project_path.mkdir(parents=True, exist_ok=True)

    if not temp_dir.is_dir():
        if dry_run:
            print_dry_run(f"Would copy filtered template entries from {temp_dir}")
        else:
            print_warning(f"Template directory not found: {temp_dir}")
        return []

    copied: list[str] = []
    for name in filter_template_entries(sorted(p.name for p in temp_dir.iterdir())):
        source = temp_dir / name
        destination = project_path / name
        if dry_run:
            print_dry_run(f"Would copy {source} to {destination}")
        else:
            _copy_entry(source, destination)
            print_success(f"Copied {name}")
        copied.append(name)
    return copied


def preserve_original_docs(
    temp_dir: Path,
    project_path: Path,
    dry_run: bool = False,
) -> OriginalDocs:
    """Keep the template README.md / todo.md as ORIGINAL_README.md / ORIGINAL_todo.md."""
    print_info("Checking for existing README.md and todo.md files from template...")
    found: dict[str, bool] = {}
    for source_name, target_name in (
        ("README.md", "ORIGINAL_README.md"),
        ("todo.md", "ORIGINAL_todo.md"),
    ):
        source = temp_dir / source_name
        found[source_name] = source.exists()
        if not source.exists():
            continue
        if dry_run:
            print_dry_run(f"Would rename template {source_name} to {target_name}")
            continue
        shutil.copy2(source, project_path / target_name)
        print_success(f"Renamed template {source_name} to {target_name}")

    return OriginalDocs(readme=found["README.md"], todo=found["todo.md"])
