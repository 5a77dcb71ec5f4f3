"""Template configuration: schema-driven prompts -> .lcsconf.json.

A template opts in by shipping all three of:

    setup.sh               template-side setup script
    setup.js               template-side setup script
    .lcsconf.schema.json   schema of the configuration it expects

The schema is turned into prompts, the answers are materialized into a
nested object, the object is written as ``.lcsconf.json`` (2-space JSON,
schema key order) and the template's setup command is run.
"""

import json
import shutil
from dataclasses import dataclass
from pathlib import Path

import yaml

from lcs_generator.core.errors import CommandError
from lcs_generator.core.prompt_deriver import derive_prompts
from lcs_generator.core.response_materializer import ConfigObject, materialize
from lcs_generator.core.schema_node import SchemaNode, parse_schema
from lcs_generator.helpers.helpers_logging import (
    print_dry_run,
    print_header,
    print_info,
    print_success,
    print_warning,
)
from lcs_generator.helpers.prompt_runner import PromptSession

from .copy_ops import SCHEMA_FILE, SETUP_JS, SETUP_SH
from .git_ops import run_command

CONFIG_FILE = ".lcsconf.json"


@dataclass(frozen=True)
class SetupFiles:
    """Presence of the template configuration files."""

    setup_sh: bool
    setup_js: bool
    schema: bool

    @property
    def complete(self) -> bool:
        return self.setup_sh and self.setup_js and self.schema

    @property
    def partial(self) -> bool:
        return not self.complete and (self.setup_sh or self.setup_js or self.schema)

    def found(self) -> list[str]:
        names = [(SETUP_SH, self.setup_sh), (SETUP_JS, self.setup_js), (SCHEMA_FILE, self.schema)]
        return [name for name, present in names if present]


def detect_setup_files(temp_dir: Path) -> SetupFiles:
    return SetupFiles(
        setup_sh=(temp_dir / SETUP_SH).exists(),
        setup_js=(temp_dir / SETUP_JS).exists(),
        schema=(temp_dir / SCHEMA_FILE).exists(),
    )


def load_schema_file(path: Path) -> SchemaNode:
    """Read a schema document (.json, or .yaml/.yml) into a ``SchemaNode``.

    Raises:
        OSError: The file cannot be read.
        ValueError: The file is not valid JSON/YAML.
    """
    text = path.read_text(encoding="utf-8")
    if path.suffix in (".yaml", ".yml"):
        try:
            raw: object = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {path}: {e}") from e
    else:
        try:
            raw = json.loads(text)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {path}: {e}") from e
    return parse_schema(raw)


def dump_config(config: ConfigObject) -> str:
    """Serialize exactly as downstream tooling expects: 2-space JSON.

    Raises:
        ValueError: ``config`` holds NaN or infinity.
    """
    return json.dumps(config, indent=2, ensure_ascii=False, allow_nan=False) + "\n"


def write_config_file(path: Path, config: ConfigObject) -> None:
    path.write_text(dump_config(config), encoding="utf-8")


def collect_config(schema: SchemaNode, session: PromptSession) -> ConfigObject | None:
    """Ask the schema's questions and materialize the answers.

    Returns:
        The configuration object, or None when the schema has no leaves.
    """
    questions = derive_prompts(schema)
    if not questions:
        print_info("No configuration questions found in schema.")
        return None

    print_header("\nTemplate Configuration:")
    print_info("Please provide the following configuration details for this template:")
    answers = session.run(questions)
    return materialize(answers, schema)


def _copy_setup_files(temp_dir: Path, project_path: Path) -> None:
    for name in (SETUP_SH, SETUP_JS, SCHEMA_FILE):
        shutil.copy2(temp_dir / name, project_path / name)


def configure_template(
    temp_dir: Path,
    project_path: Path,
    session: PromptSession,
    setup_command: tuple[str, ...] = ("pnpm", "setup"),
    dry_run: bool = False,
) -> ConfigObject | None:
    """Run the template configuration step if the template supports it.

    Returns:
        The written configuration, or None when nothing was written.
    """
    print_info("Checking for LCS configuration setup files...")
    files = detect_setup_files(temp_dir)

    if files.partial:
        print_warning(
            f"Partial LCS setup files detected. Expected {SETUP_SH}, {SETUP_JS}, and {SCHEMA_FILE}"
        )
        for name in files.found():
            print_info(f"Found: {name}")
        return None
    if not files.complete:
        return None

    print_info("Detected LCS configuration setup files. Setting up configuration...")
    if dry_run:
        print_dry_run(
            "Would set up LCS configuration with schema-based prompts and run "
            + " ".join(setup_command)
        )
        return None

    _copy_setup_files(temp_dir, project_path)

    print_info("Parsing configuration schema...")
    schema = load_schema_file(temp_dir / SCHEMA_FILE)
    config = collect_config(schema, session)
    if config is None:
        return None

    write_config_file(project_path / CONFIG_FILE, config)
    print_success(f"Generated {CONFIG_FILE} with your configuration.")

    print_info("Running template setup...")
    try:
        run_command(list(setup_command), cwd=project_path)
        print_success("Template setup completed successfully.")
    except CommandError as e:
        print_warning(f"Template setup failed: {e}")
        print_info(
            f'You may need to run "{" ".join(setup_command)}" manually in your project directory.'
        )

    return config
