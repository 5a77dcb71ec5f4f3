"""Shared fixtures for the create-lcs test suite.

``scripted_session`` replaces the terminal with a list of canned answers,
and ``make_template`` lays out a cloned template repository on disk so the
scaffolding steps can run against real files without git.
"""

from __future__ import annotations

import copy
import json
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

from lcs_generator.helpers.prompt_runner import PromptSession

SessionFactory = Callable[[list[str]], PromptSession]
TemplateFactory = Callable[..., Path]

SAMPLE_SCHEMA: dict[str, object] = {
    "type": "object",
    "properties": {
        "app": {
            "type": "object",
            "properties": {
                "name": {
                    "type": "string",
                    "description": "Application name",
                    "pattern": "^[a-z0-9-]+$",
                },
                "port": {"type": "integer", "default": 8080},
            },
        },
        "region": {
            "type": "string",
            "enum": ["us-east-1", "eu-west-1"],
            "default": "eu-west-1",
        },
        "debug": {"type": "boolean", "default": False},
    },
}

SAMPLE_WORKFLOW = """name: deploy
env:
  SERVICE: YOUR_SERVICE_NAME_PLACEHOLDER
  AWS_REGION: YOUR_AWS_REGION_PLACEHOLDER
  ROLE: YOUR_AWS_ROLE_ARN_PLACEHOLDER
  ECR_REPO: YOUR_ECR_REPO_NAME_PLACEHOLDER
"""


class ScriptedInput:
    """Callable standing in for ``input()``; records every prompt shown."""

    def __init__(self, answers: list[str]) -> None:
        self._answers: Iterator[str] = iter(answers)
        self.prompts: list[str] = []

    def __call__(self, prompt: str) -> str:
        self.prompts.append(prompt)
        try:
            return next(self._answers)
        except StopIteration:
            raise EOFError from None


@pytest.fixture
def scripted_session() -> SessionFactory:
    """Factory: ``scripted_session(["a", "y"])`` -> PromptSession."""

    def _make(answers: list[str]) -> PromptSession:
        return PromptSession(input_func=ScriptedInput(answers), output=lambda _msg: None)

    return _make


@pytest.fixture
def make_template(tmp_path: Path) -> TemplateFactory:
    """Factory writing a template checkout; returns its directory."""

    def _make(
        root: Path | None = None,
        with_setup: bool = False,
        schema: dict[str, object] | None = None,
        with_docs: bool = True,
    ) -> Path:
        template = root or tmp_path / "template"
        template.mkdir(parents=True, exist_ok=True)
        (template / ".git").mkdir(exist_ok=True)
        (template / ".git" / "HEAD").write_text("ref: refs/heads/main\n")
        (template / "src").mkdir(exist_ok=True)
        (template / "src" / "index.ts").write_text("export const handler = 1;\n")
        (template / "node_modules").mkdir(exist_ok=True)
        (template / "dist").mkdir(exist_ok=True)
        (template / ".env.example").write_text("KEY=\n")
        (template / "TEMPLATE_NOTES.md").write_text("internal\n")
        (template / ".gitignore").write_text("node_modules\n")
        (template / "package.json").write_text(
            json.dumps({"name": "lambda-container-service", "version": "1.0.0"}, indent=2)
        )
        workflows = template / ".github" / "workflows"
        workflows.mkdir(parents=True, exist_ok=True)
        (workflows / "deploy.yml").write_text(SAMPLE_WORKFLOW)
        if with_docs:
            (template / "README.md").write_text("# Template readme\n")
            (template / "todo.md").write_text("- template todo\n")
        if with_setup:
            (template / "setup.sh").write_text("#!/bin/sh\n")
            (template / "setup.js").write_text("console.log('setup');\n")
            (template / ".lcsconf.schema.json").write_text(
                json.dumps(schema if schema is not None else SAMPLE_SCHEMA)
            )
        return template

    return _make


@pytest.fixture
def sample_schema() -> dict[str, object]:
    """Decoded configuration schema with one nested section."""
    return copy.deepcopy(SAMPLE_SCHEMA)
