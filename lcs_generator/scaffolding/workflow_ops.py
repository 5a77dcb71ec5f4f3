"""Placeholder substitution in GitHub Actions workflow files.

Templates ship workflows containing these tokens:

    YOUR_SERVICE_NAME_PLACEHOLDER
    YOUR_AWS_REGION_PLACEHOLDER
    YOUR_AWS_ROLE_ARN_PLACEHOLDER
    YOUR_ECR_REPO_NAME_PLACEHOLDER

Tokens without an answer are left in place and a TODO comment pointing to
todo.md is prepended to the file instead.
"""

from pathlib import Path

from lcs_generator.core.onboarding import OnboardingAnswers
from lcs_generator.helpers.helpers_logging import (
    print_dry_run,
    print_info,
    print_success,
    print_warning,
)

SERVICE_NAME_TOKEN = "YOUR_SERVICE_NAME_PLACEHOLDER"
AWS_REGION_TOKEN = "YOUR_AWS_REGION_PLACEHOLDER"
AWS_ROLE_ARN_TOKEN = "YOUR_AWS_ROLE_ARN_PLACEHOLDER"
ECR_REPO_NAME_TOKEN = "YOUR_ECR_REPO_NAME_PLACEHOLDER"

AWS_TODO_COMMENT = "# TODO: Configure AWS credentials (region, role ARN or secrets) - see todo.md\n"
ECR_TODO_COMMENT = "# TODO: Configure ECR repository name - see todo.md\n"

WORKFLOW_SUFFIXES = (".yml", ".yaml")


def render_workflow(content: str, answers: OnboardingAnswers) -> str:
    """Return ``content`` with the onboarding answers substituted."""
    content = content.replace(SERVICE_NAME_TOKEN, answers.service_name)

    if answers.aws_configured:
        content = content.replace(AWS_REGION_TOKEN, answers.aws_region or "")
        content = content.replace(AWS_ROLE_ARN_TOKEN, answers.aws_role_arn or "")
    elif not answers.has_aws_credentials:
        content = AWS_TODO_COMMENT + content

    if answers.ecr_configured:
        content = content.replace(ECR_REPO_NAME_TOKEN, answers.ecr_repo_name or "")
    elif not answers.has_ecr_details:
        content = ECR_TODO_COMMENT + content

    return content


def rewrite_workflows(
    project_path: Path,
    answers: OnboardingAnswers,
    dry_run: bool = False,
) -> list[str]:
    """Rewrite every workflow under ``.github/workflows``.

    Returns:
        File names that were (or would be) modified.
    """
    print_info("Modifying GitHub Actions workflow files...")
    workflows_dir = project_path / ".github" / "workflows"
    if not workflows_dir.is_dir():
        if dry_run:
            print_dry_run(f"Would modify GitHub Actions workflow files in {workflows_dir}")
        else:
            print_warning(".github/workflows directory not found in template.")
        return []

    modified: list[str] = []
    for workflow in sorted(workflows_dir.iterdir()):
        if not workflow.name.endswith(WORKFLOW_SUFFIXES):
            continue
        if dry_run:
            print_dry_run(f"Would modify GitHub Actions workflow file {workflow}")
        else:
            content = workflow.read_text(encoding="utf-8")
            workflow.write_text(render_workflow(content, answers), encoding="utf-8")
            print_success(f"Modified {workflow.name}")
        modified.append(workflow.name)
    return modified
