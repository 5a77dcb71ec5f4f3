"""End-to-end tests for ``create-lcs create`` with git replaced by a fixture."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path
from unittest.mock import patch

import pytest

from lcs_generator.cli import create_command
from lcs_generator.cli.create_command import run_create
from lcs_generator.core.errors import CommandError, PromptCancelled
from lcs_generator.helpers.cli_config import CliConfig
from lcs_generator.helpers.prompt_runner import PromptSession
from lcs_generator.scaffolding.workflow_ops import AWS_TODO_COMMENT

# template, projectDir, serviceName, hasAwsCredentials, hasEcrDetails, ecrRepoName
ONBOARDING = ["", "svc", "orders", "n", "y", "orders-repo"]


@pytest.fixture
def settings(tmp_path: Path) -> CliConfig:
    return CliConfig(temp_dir=tmp_path / "clone")


@pytest.fixture
def workdir(tmp_path: Path) -> Path:
    path = tmp_path / "work"
    path.mkdir()
    return path


def _fake_clone(make_template: Callable[..., Path], with_setup: bool = False):
    def _clone(url: str, temp_dir: Path, dry_run: bool = False) -> None:
        make_template(root=temp_dir, with_setup=with_setup)
    return _clone


class TestRunCreate:
    """Full project creation flow."""

    def test_creates_project(
        self,
        settings: CliConfig,
        workdir: Path,
        make_template: Callable[..., Path],
        scripted_session: Callable[[list[str]], PromptSession],
    ) -> None:
        session = scripted_session([*ONBOARDING, ""])

        with patch.object(
            create_command, "clone_template", side_effect=_fake_clone(make_template),
        ) as mock_clone:
            result = run_create(settings, session, cwd=workdir)

        assert result == 0
        mock_clone.assert_called_once()
        assert mock_clone.call_args.args[0] == (
            "https://github.com/phenixcoder/lambda-container-service.git"
        )

        project = workdir / "svc"
        assert json.loads((project / "package.json").read_text())["name"] == "orders"
        workflow = (project / ".github" / "workflows" / "deploy.yml").read_text()
        assert workflow.startswith(AWS_TODO_COMMENT)
        assert "ECR_REPO: orders-repo" in workflow
        assert "SERVICE: orders" in workflow
        assert (project / "README.md").read_text().startswith("# orders")
        assert (project / "todo.md").exists()
        assert (project / "ORIGINAL_README.md").exists()
        assert not (project / ".git").exists()
        assert not settings.temp_dir.exists()

    def test_template_configuration_is_written(
        self,
        settings: CliConfig,
        workdir: Path,
        make_template: Callable[..., Path],
        scripted_session: Callable[[list[str]], PromptSession],
    ) -> None:
        # confirm, then app.name, app.port, region, debug
        session = scripted_session([*ONBOARDING, "y", "orders-api", "", "", ""])

        with patch.object(
            create_command,
            "clone_template",
            side_effect=_fake_clone(make_template, with_setup=True),
        ), patch("lcs_generator.scaffolding.lcs_config.run_command") as mock_setup:
            result = run_create(settings, session, cwd=workdir)

        assert result == 0
        config = json.loads((workdir / "svc" / ".lcsconf.json").read_text())
        assert config["app"] == {"port": 8080, "name": "orders-api"}
        mock_setup.assert_called_once_with(["pnpm", "setup"], cwd=workdir / "svc")

    def test_declining_creates_nothing(
        self,
        settings: CliConfig,
        workdir: Path,
        scripted_session: Callable[[list[str]], PromptSession],
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        session = scripted_session([*ONBOARDING, "n"])

        with patch.object(create_command, "clone_template") as mock_clone:
            result = run_create(settings, session, cwd=workdir)

        assert result == 0
        mock_clone.assert_not_called()
        assert not (workdir / "svc").exists()
        assert "Project creation cancelled." in capsys.readouterr().out

    def test_clone_failure_cleans_up(
        self,
        settings: CliConfig,
        workdir: Path,
        scripted_session: Callable[[list[str]], PromptSession],
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        def _failing_clone(url: str, temp_dir: Path, dry_run: bool = False) -> None:
            temp_dir.mkdir(parents=True)
            raise CommandError(["git", "clone", url], 128, "git clone failed with code 128")

        session = scripted_session(ONBOARDING)
        with patch.object(create_command, "clone_template", side_effect=_failing_clone):
            result = run_create(settings, session, assume_yes=True, cwd=workdir)

        assert result == 1
        assert "Error during project creation: git clone failed with code 128" in (
            capsys.readouterr().out
        )
        assert not settings.temp_dir.exists()

    def test_dry_run_touches_nothing(
        self,
        settings: CliConfig,
        workdir: Path,
        scripted_session: Callable[[list[str]], PromptSession],
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        session = scripted_session(ONBOARDING)

        with patch("lcs_generator.scaffolding.git_ops.subprocess.run") as mock_run:
            result = run_create(settings, session, dry_run=True, assume_yes=True, cwd=workdir)

        assert result == 0
        mock_run.assert_not_called()
        assert list(workdir.iterdir()) == []
        output = capsys.readouterr().out
        assert "dry-run mode" in output
        assert "Dry run: Would clone template repository" in output

    def test_template_override_skips_selection(
        self,
        settings: CliConfig,
        workdir: Path,
        make_template: Callable[..., Path],
        scripted_session: Callable[[list[str]], PromptSession],
    ) -> None:
        session = scripted_session(ONBOARDING[1:])

        with patch.object(
            create_command, "clone_template", side_effect=_fake_clone(make_template),
        ) as mock_clone:
            result = run_create(
                settings,
                session,
                assume_yes=True,
                template_override="https://git.example.com/acme/tpl.git",
                cwd=workdir,
            )

        assert result == 0
        assert mock_clone.call_args.args[0] == "https://git.example.com/acme/tpl.git"


class TestCreateMain:
    """Argument handling around run_create."""

    def test_config_error_exits_one(
        self,
        tmp_path: Path,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        result = create_command.main(["--config", str(tmp_path / "missing.yaml")])
        assert result == 1
        assert "Config file not found" in capsys.readouterr().out

    def test_cancel_exits_130(
        self,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        monkeypatch.chdir(tmp_path)
        monkeypatch.delenv("CREATE_LCS_CONFIG", raising=False)
        with patch.object(create_command, "run_create", side_effect=PromptCancelled("x")):
            result = create_command.main([])
        assert result == 130
        assert "Cancelled by user" in capsys.readouterr().out

    def test_flags_are_forwarded(
        self,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.chdir(tmp_path)
        monkeypatch.delenv("CREATE_LCS_CONFIG", raising=False)
        with patch.object(create_command, "run_create", return_value=0) as mock_run:
            assert create_command.main(["--dry-run", "-y", "--template", "acme"]) == 0
        kwargs = mock_run.call_args.kwargs
        assert kwargs == {"dry_run": True, "assume_yes": True, "template_override": "acme"}
