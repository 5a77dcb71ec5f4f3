"""README.md and todo.md generation for the new project."""

from pathlib import Path

from lcs_generator.core.onboarding import OnboardingAnswers
from lcs_generator.helpers.helpers_logging import (
    print_dry_run,
    print_info,
    print_success,
)

from .copy_ops import OriginalDocs


def needs_todo(answers: OnboardingAnswers, originals: OriginalDocs) -> bool:
    """todo.md is written when details are missing or the template had one."""
    return not answers.has_aws_credentials or not answers.has_ecr_details or originals.todo


def build_todo(answers: OnboardingAnswers, originals: OriginalDocs) -> str:
    """Generate todo.md content.

    Args:
        answers: Onboarding answers.
        originals: Which template docs were preserved.

    Returns:
        Markdown text (no trailing newline).
    """
    lines = [
        "# To-Do List for Your New Lambda Container Service Project",
        "",
        "This file outlines the steps you need to take to complete the setup of your project.",
        "",
    ]

    if originals.todo:
        lines += [
            "> **Note:** The original todo.md from the template has been preserved as "
            "[ORIGINAL_todo.md](./ORIGINAL_todo.md). You may want to review it for "
            "template-specific instructions.",
            "",
        ]

    if not answers.has_aws_credentials:
        lines += [
            "## Configure AWS Credentials for GitHub Actions",
            "",
            "You need to configure AWS credentials for your GitHub Actions workflow. "
            "The recommended approach is using IAM roles with OIDC. Follow these steps:",
            "",
            "1.  **Create an IAM Role:** In your AWS account, create an IAM role that your "
            "GitHub Actions workflow can assume. This role should have permissions to build "
            "and push Docker images to ECR and potentially deploy your Lambda function.",
            "2.  **Configure Trust Relationship:** Configure the trust relationship for the "
            "IAM role to allow the GitHub OIDC provider to assume the role. You will need "
            "your GitHub organization and repository name.",
            "3.  **Update GitHub Actions Workflow:** Update the GitHub Actions workflow file "
            "(`.github/workflows/main.yml` or similar) with the correct AWS region and the "
            "ARN of the IAM role you created.",
            "",
            "Alternatively, you can use AWS access key ID and secret access key stored as "
            "GitHub secrets, but this is less secure.",
            "",
        ]

    if not answers.has_ecr_details:
        lines += [
            "## Set up Amazon Elastic Container Registry (ECR)",
            "",
            "You need an ECR repository to store your Docker image. Follow these steps:",
            "",
            "1.  **Create an ECR Repository:** In your AWS account, create a new ECR "
            "repository. Note the repository name.",
            "2.  **Update GitHub Actions Workflow:** Update the GitHub Actions workflow file "
            "(`.github/workflows/main.yml` or similar) with your ECR repository name.",
            "",
        ]

    if originals.todo and answers.has_aws_credentials and answers.has_ecr_details:
        lines += [
            "## Project Setup Complete",
            "",
            "All required AWS credentials and ECR details have been configured. "
            "Your project should be ready to deploy!",
            "",
            "Please review the original template todo.md file (linked above) for any "
            "template-specific setup steps that may still be required.",
            "",
        ]

    return "\n".join(lines)


def build_readme(answers: OnboardingAnswers, originals: OriginalDocs) -> str:
    """Generate README.md content for the new project."""
    lines = [
        f"# {answers.service_name}",
        "",
        "This is your new Lambda Container Service project.",
        "",
    ]

    if originals.readme:
        lines += [
            "> **Note:** The original README.md from the template has been preserved as "
            "[ORIGINAL_README.md](./ORIGINAL_README.md). You may want to review it for "
            "template-specific information and instructions.",
            "",
        ]

    lines += ["## AWS Setup", ""]
    if answers.has_aws_credentials:
        lines += [
            f"AWS Region: {answers.aws_region or ''}",
            f"AWS IAM Role ARN for OIDC: {answers.aws_role_arn or ''}",
            "",
            "These details are configured in your GitHub Actions workflow files "
            "(`.github/workflows/`). Ensure the IAM role has the necessary permissions and "
            "the trust relationship is correctly configured for your GitHub repository.",
        ]
    else:
        lines += [
            "AWS credentials details were not provided during setup.",
            "Please refer to the `todo.md` file for detailed instructions on configuring "
            "AWS credentials (IAM role with OIDC is recommended) for your GitHub Actions workflow.",
        ]

    lines += ["", "## ECR Setup", ""]
    if answers.has_ecr_details:
        lines += [
            f"ECR Repository Name: {answers.ecr_repo_name or ''}",
            "",
            "This ECR repository name is configured in your GitHub Actions workflow files "
            "(`.github/workflows/`). Ensure this repository exists in your AWS account.",
        ]
    else:
        lines += [
            "ECR repository name was not provided during setup.",
            "Please refer to the `todo.md` file for detailed instructions on creating an "
            "ECR repository.",
        ]

    lines += [
        "",
        "## Getting Started",
        "",
        f"1. Navigate to your project directory: `cd {answers.project_dir}`",
        "2. Review the generated files, especially the GitHub Actions workflow(s) in "
        "`.github/workflows/`.",
        "3. Create a new GitHub repository and push your code.",
        "4. If you did not provide all AWS/ECR details during setup, follow the "
        "instructions in `todo.md`.",
        "5. Configure necessary GitHub secrets (e.g., `AWS_ROLE_ARN` if using OIDC, or "
        "`AWS_ACCESS_KEY_ID` and `AWS_SECRET_ACCESS_KEY` if not using OIDC).",
        "6. Trigger your GitHub Actions workflow to build and deploy your Lambda "
        "container service.",
        "",
    ]
    return "\n".join(lines)


def write_docs(
    project_path: Path,
    answers: OnboardingAnswers,
    originals: OriginalDocs,
    dry_run: bool = False,
) -> None:
    """Write todo.md (when needed) and README.md into the project."""
    if needs_todo(answers, originals):
        todo_path = project_path / "todo.md"
        if dry_run:
            print_dry_run(f"Would create todo.md at {todo_path} with setup instructions.")
        else:
            todo_path.write_text(build_todo(answers, originals), encoding="utf-8")
            print_success("Created todo.md with instructions.")

    print_info("Generating README.md...")
    readme_path = project_path / "README.md"
    if dry_run:
        print_dry_run(
            f"Would generate README.md at {readme_path} with project details and instructions."
        )
        return
    readme_path.write_text(build_readme(answers, originals), encoding="utf-8")
    print_success("Generated README.md.")
