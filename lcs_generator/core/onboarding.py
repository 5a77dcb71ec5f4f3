"""Fixed onboarding questions asked before any template is cloned.

Some questions only make sense after an earlier answer: the AWS region is
asked only if the operator already has credentials, the role ARN only if a
region was given, and the ECR repository name only if the operator has one.
Those follow-ups carry a ``condition`` over the answers collected so far;
when it is false the session skips the question and its key is absent.
"""

from collections.abc import Mapping
from dataclasses import dataclass

from lcs_generator.core.prompt_deriver import Condition, PromptDescriptor, QuestionKind

DEFAULT_TEMPLATES: tuple[tuple[str, str], ...] = (
    (
        "phenixcoder/lambda-container-service",
        "https://github.com/phenixcoder/lambda-container-service.git",
    ),
    (
        "phenixcoder/lambda-container-service-nest",
        "https://github.com/phenixcoder/lambda-container-service-nest.git",
    ),
)

DEFAULT_PROJECT_DIR = "my-lcs-service"
DEFAULT_SERVICE_NAME = "my-service"


def _answered(key: str) -> Condition:
    def _condition(answers: Mapping[str, object]) -> bool:
        return bool(answers.get(key))
    return _condition


def build_onboarding_prompts(
    templates: tuple[tuple[str, str], ...] = DEFAULT_TEMPLATES,
    default_project_dir: str = DEFAULT_PROJECT_DIR,
    default_service_name: str = DEFAULT_SERVICE_NAME,
) -> list[PromptDescriptor]:
    """Return the onboarding questions in the order they are asked.

    Args:
        templates: ``(title, clone_url)`` pairs offered for selection.
        default_project_dir: Pre-filled project directory.
        default_service_name: Pre-filled service name.
    """
    return [
        PromptDescriptor(
            path="template",
            question_kind=QuestionKind.SELECT,
            label="Which template would you like to use?",
            initial_value=0,
            choices=tuple(title for title, _url in templates),
        ),
        PromptDescriptor(
            path="projectDir",
            question_kind=QuestionKind.TEXT,
            label="Where would you like to create your lambda-container-service project?",
            initial_value=default_project_dir,
        ),
        PromptDescriptor(
            path="serviceName",
            question_kind=QuestionKind.TEXT,
            label="What is the name of your service?",
            initial_value=default_service_name,
        ),
        PromptDescriptor(
            path="hasAwsCredentials",
            question_kind=QuestionKind.CONFIRM,
            label=(
                "Do you already have your AWS credentials details "
                "(Region, IAM Role ARN or Access Keys) for GitHub Actions?"
            ),
            initial_value=True,
        ),
        PromptDescriptor(
            path="awsRegion",
            question_kind=QuestionKind.TEXT,
            label="What is your AWS Region?",
            initial_value="",
            condition=_answered("hasAwsCredentials"),
        ),
        PromptDescriptor(
            path="awsRoleArn",
            question_kind=QuestionKind.TEXT,
            label="What is your AWS IAM Role ARN for OIDC authentication?",
            initial_value="",
            condition=_answered("awsRegion"),
        ),
        PromptDescriptor(
            path="hasEcrDetails",
            question_kind=QuestionKind.CONFIRM,
            label="Do you already have your ECR repository name?",
            initial_value=True,
        ),
        PromptDescriptor(
            path="ecrRepoName",
            question_kind=QuestionKind.TEXT,
            label="What is your ECR repository name?",
            initial_value="",
            condition=_answered("hasEcrDetails"),
        ),
    ]


def _optional_text(value: object) -> str | None:
    if value is None:
        return None
    return str(value)


@dataclass(frozen=True)
class OnboardingAnswers:
    """Typed view of the onboarding answers.

    Attributes:
        template_url: Clone URL of the selected template.
        project_dir: Directory (relative to cwd) to create.
        service_name: Name written into package.json and workflows.
        has_aws_credentials: Operator already has AWS details.
        aws_region: Region, None when the question was skipped.
        aws_role_arn: Role ARN, None when the question was skipped.
        has_ecr_details: Operator already has an ECR repository.
        ecr_repo_name: Repository name, None when skipped.
    """

    template_url: str
    project_dir: str
    service_name: str
    has_aws_credentials: bool
    aws_region: str | None
    aws_role_arn: str | None
    has_ecr_details: bool
    ecr_repo_name: str | None

    @property
    def aws_configured(self) -> bool:
        return bool(self.has_aws_credentials and self.aws_region and self.aws_role_arn)

    @property
    def ecr_configured(self) -> bool:
        return bool(self.has_ecr_details and self.ecr_repo_name)

    @classmethod
    def from_answers(
        cls,
        answers: Mapping[str, object],
        templates: tuple[tuple[str, str], ...] = DEFAULT_TEMPLATES,
    ) -> "OnboardingAnswers":
        """Build from the flat answers of ``build_onboarding_prompts``.

        The ``template`` answer may be a template title or a clone URL.
        """
        selected = str(answers.get("template") or templates[0][0])
        urls = dict(templates)
        template_url = urls.get(selected, selected)

        return cls(
            template_url=template_url,
            project_dir=str(answers.get("projectDir") or DEFAULT_PROJECT_DIR),
            service_name=str(answers.get("serviceName") or DEFAULT_SERVICE_NAME),
            has_aws_credentials=bool(answers.get("hasAwsCredentials")),
            aws_region=_optional_text(answers.get("awsRegion")),
            aws_role_arn=_optional_text(answers.get("awsRoleArn")),
            has_ecr_details=bool(answers.get("hasEcrDetails")),
            ecr_repo_name=_optional_text(answers.get("ecrRepoName")),
        )
