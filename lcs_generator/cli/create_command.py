#!/usr/bin/env python3
"""
Create a new Lambda Container Service project from a template repository.

Usage:
    create-lcs create
    create-lcs create --dry-run
    create-lcs create --template https://github.com/acme/lcs-template.git --yes

Steps (each one aborts the run on failure):
    1. Ask the onboarding questions
    2. Clone the template into a temporary directory
    3. Copy the filtered template files into the project directory
    4. Preserve the template README.md / todo.md as ORIGINAL_*
    5. Configure the template from its .lcsconf.schema.json (if shipped)
    6. Patch package.json and the GitHub Actions workflows
    7. Generate README.md and todo.md
"""

import argparse
import sys
from pathlib import Path

from lcs_generator.core.errors import CommandError, ConfigError, PromptCancelled
from lcs_generator.core.onboarding import OnboardingAnswers, build_onboarding_prompts
from lcs_generator.helpers.cli_config import CliConfig, load_cli_config
from lcs_generator.helpers.helpers_logging import (
    print_error,
    print_header,
    print_info,
    print_success,
    print_warning,
)
from lcs_generator.helpers.prompt_runner import PromptSession
from lcs_generator.scaffolding import (
    clone_template,
    configure_template,
    copy_template,
    patch_package_json,
    preserve_original_docs,
    remove_temp_dir,
    reset_temp_dir,
    rewrite_workflows,
    write_docs,
)


def print_summary(answers: OnboardingAnswers) -> None:
    """Echo the onboarding answers before asking for confirmation."""
    print_header("\nCreating project with the following details:")
    print_info(f"Project Directory: {answers.project_dir}")
    print_info(f"Service Name: {answers.service_name}")
    if answers.has_aws_credentials:
        print_info(f"AWS Region: {answers.aws_region or ''}")
        print_info(f"AWS Role ARN: {answers.aws_role_arn or ''}")
    else:
        print_info("AWS credentials details will be added to todo.md")
    if answers.has_ecr_details:
        print_info(f"ECR Repository Name: {answers.ecr_repo_name or ''}")
    else:
        print_info("ECR repository name will be added to todo.md")


def ask_onboarding(
    settings: CliConfig,
    session: PromptSession,
    template_override: str | None = None,
) -> OnboardingAnswers:
    """Run the onboarding questions; ``template_override`` skips the template choice."""
    prompts = build_onboarding_prompts(
        settings.templates,
        settings.default_project_dir,
        settings.default_service_name,
    )
    if template_override:
        prompts = [p for p in prompts if p.path != "template"]

    answers = session.run(prompts)
    if template_override:
        answers["template"] = template_override
    return OnboardingAnswers.from_answers(answers, settings.templates)


def scaffold_project(
    answers: OnboardingAnswers,
    settings: CliConfig,
    session: PromptSession,
    project_path: Path,
    dry_run: bool = False,
) -> None:
    """Clone, copy, configure and patch. The temp clone is always removed.

    Raises:
        CommandError: git clone failed.
        OSError: A file system step failed.
        ValueError: The template schema or package.json is not valid JSON.
    """
    temp_dir = settings.temp_dir
    try:
        reset_temp_dir(temp_dir, dry_run=dry_run)
        clone_template(answers.template_url, temp_dir, dry_run=dry_run)
        copy_template(temp_dir, project_path, dry_run=dry_run)
        originals = preserve_original_docs(temp_dir, project_path, dry_run=dry_run)
        configure_template(
            temp_dir,
            project_path,
            session,
            setup_command=settings.setup_command,
            dry_run=dry_run,
        )
        patch_package_json(project_path, answers.service_name, dry_run=dry_run)
        rewrite_workflows(project_path, answers, dry_run=dry_run)
        write_docs(project_path, answers, originals, dry_run=dry_run)
    finally:
        if not dry_run:
            remove_temp_dir(temp_dir)
            print_info("Cleaned up temporary directory.")


def run_create(
    settings: CliConfig,
    session: PromptSession,
    dry_run: bool = False,
    assume_yes: bool = False,
    template_override: str | None = None,
    cwd: Path | None = None,
) -> int:
    """Interactive project creation. Returns a process exit code."""
    print_header("Welcome to create-lcs!")
    if dry_run:
        print_warning("Running in dry-run mode. No files will be created or modified.")

    answers = ask_onboarding(settings, session, template_override)
    print_summary(answers)

    if not assume_yes and not session.confirm("Proceed with project creation?", True):
        print_info("Project creation cancelled.")
        return 0

    project_path = (cwd or Path.cwd()) / answers.project_dir
    try:
        scaffold_project(answers, settings, session, project_path, dry_run=dry_run)
    except (CommandError, OSError, ValueError) as e:
        print_error(f"Error during project creation: {e}")
        return 1

    print_success("\nProject setup complete!")
    print_info(
        f"Next steps: cd {answers.project_dir}, review files, "
        "create GitHub repository, push code."
    )
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the create command."""
    parser = argparse.ArgumentParser(
        prog="create-lcs create",
        description="Create a new Lambda Container Service project from a template",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Narrate every step without creating or modifying files",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="Settings file (default: ./.create-lcs.yaml or $CREATE_LCS_CONFIG)",
    )
    parser.add_argument(
        "--template",
        help="Template clone URL or configured title (skips the template question)",
    )
    parser.add_argument(
        "-y", "--yes",
        action="store_true",
        help="Do not ask for confirmation before creating the project",
    )
    args = parser.parse_args(argv)

    try:
        settings = load_cli_config(args.config)
    except ConfigError as e:
        print_error(str(e))
        return 1

    try:
        return run_create(
            settings,
            PromptSession(),
            dry_run=args.dry_run,
            assume_yes=args.yes,
            template_override=args.template,
        )
    except PromptCancelled:
        print_warning("Cancelled by user")
        return 130


if __name__ == "__main__":
    sys.exit(main())
