"""Project scaffolding steps for create-lcs.

Each step is sequential and accepts ``dry_run`` to narrate instead of
mutating anything.

Public API:
    clone_template: git clone the selected template
    copy_template: copy the filtered template tree
    preserve_original_docs: keep template README.md/todo.md as ORIGINAL_*
    configure_template: schema-driven prompts -> .lcsconf.json
    patch_package_json: set the package name
    rewrite_workflows: substitute workflow placeholders
    write_docs: generate README.md and todo.md
"""

from .copy_ops import (
    OriginalDocs,
    copy_template,
    filter_template_entries,
    preserve_original_docs,
)
from .docs_ops import build_readme, build_todo, write_docs
from .git_ops import clone_template, remove_temp_dir, reset_temp_dir, run_command
from .lcs_config import (
    CONFIG_FILE,
    collect_config,
    configure_template,
    detect_setup_files,
    dump_config,
    load_schema_file,
    write_config_file,
)
from .manifest_ops import patch_package_json
from .workflow_ops import render_workflow, rewrite_workflows

__all__ = [
    "CONFIG_FILE",
    "OriginalDocs",
    "build_readme",
    "build_todo",
    "clone_template",
    "collect_config",
    "configure_template",
    "copy_template",
    "detect_setup_files",
    "dump_config",
    "filter_template_entries",
    "load_schema_file",
    "patch_package_json",
    "preserve_original_docs",
    "remove_temp_dir",
    "render_workflow",
    "reset_temp_dir",
    "rewrite_workflows",
    "run_command",
    "write_config_file",
    "write_docs",
]
