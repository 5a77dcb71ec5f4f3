"""Tests for the interactive PromptSession."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from lcs_generator.core.errors import PromptCancelled
from lcs_generator.core.prompt_deriver import PromptDescriptor, QuestionKind, derive_prompts
from lcs_generator.core.schema_node import parse_schema
from lcs_generator.helpers.prompt_runner import PromptSession


def _text(path: str, **kwargs: object) -> PromptDescriptor:
    return PromptDescriptor(path=path, question_kind=QuestionKind.TEXT, label=path, **kwargs)  # type: ignore[arg-type]


class TestSelect:
    """Numbered choice questions."""

    def _prompt(self) -> PromptDescriptor:
        return PromptDescriptor(
            path="region",
            question_kind=QuestionKind.SELECT,
            label="Region",
            initial_value=1,
            choices=("us-east-1", "eu-west-1", "ap-south-1"),
        )

    def test_empty_answer_takes_initial_choice(
        self,
        scripted_session: Callable[[list[str]], PromptSession],
    ) -> None:
        assert scripted_session([""]).ask(self._prompt()) == "eu-west-1"

    def test_number_selects_choice(
        self,
        scripted_session: Callable[[list[str]], PromptSession],
    ) -> None:
        assert scripted_session(["3"]).ask(self._prompt()) == "ap-south-1"

    def test_out_of_range_reprompts(
        self,
        scripted_session: Callable[[list[str]], PromptSession],
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        assert scripted_session(["9", "x", "1"]).ask(self._prompt()) == "us-east-1"
        assert "between 1 and 3" in capsys.readouterr().out


class TestText:
    """Free text and number questions."""

    def test_empty_answer_keeps_initial(
        self,
        scripted_session: Callable[[list[str]], PromptSession],
    ) -> None:
        assert scripted_session([""]).ask(_text("name", initial_value="svc")) == "svc"

    def test_empty_answer_without_initial_is_empty_string(
        self,
        scripted_session: Callable[[list[str]], PromptSession],
    ) -> None:
        assert scripted_session([""]).ask(_text("name")) == ""

    def test_answer_is_stripped(
        self,
        scripted_session: Callable[[list[str]], PromptSession],
    ) -> None:
        assert scripted_session(["  hello  "]).ask(_text("name")) == "hello"

    def test_rejected_answer_reprompts_with_message(
        self,
        scripted_session: Callable[[list[str]], PromptSession],
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        schema = parse_schema({
            "properties": {"account": {"type": "string", "pattern": "^[0-9]{12}$"}},
        })
        prompt = derive_prompts(schema)[0]

        answer = scripted_session(["123", "123456789012"]).ask(prompt)

        assert answer == "123456789012"
        assert "AWS Account ID must be exactly 12 digits" in capsys.readouterr().out

    def test_number_prompt_returns_raw_text(
        self,
        scripted_session: Callable[[list[str]], PromptSession],
    ) -> None:
        prompt = derive_prompts(parse_schema({"properties": {"port": {"type": "integer"}}}))[0]
        assert scripted_session(["abc", "8080"]).ask(prompt) == "8080"


class TestConfirm:
    """Yes/no questions."""

    @pytest.mark.parametrize(
        ("answers", "default", "expected"),
        [
            ([""], True, True),
            ([""], False, False),
            (["y"], False, True),
            (["YES"], False, True),
            (["n"], True, False),
            (["maybe", "no"], True, False),
        ],
    )
    def test_confirm(
        self,
        scripted_session: Callable[[list[str]], PromptSession],
        answers: list[str],
        default: bool,
        expected: bool,
    ) -> None:
        assert scripted_session(answers).confirm("Continue?", default) is expected


class TestRun:
    """Whole question sequences."""

    def test_inactive_prompts_are_absent(
        self,
        scripted_session: Callable[[list[str]], PromptSession],
    ) -> None:
        prompts = [
            PromptDescriptor(path="enabled", question_kind=QuestionKind.CONFIRM, label="On?"),
            _text("detail", condition=lambda answers: bool(answers.get("enabled"))),
            _text("after"),
        ]

        answers = scripted_session(["n", "last"]).run(prompts)

        assert answers == {"enabled": False, "after": "last"}

    def test_eof_cancels_session(
        self,
        scripted_session: Callable[[list[str]], PromptSession],
    ) -> None:
        with pytest.raises(PromptCancelled):
            scripted_session(["only one"]).run([_text("a"), _text("b")])

    def test_keyboard_interrupt_cancels_session(self) -> None:
        def _interrupt(_prompt: str) -> str:
            raise KeyboardInterrupt

        session = PromptSession(input_func=_interrupt, output=lambda _msg: None)
        with pytest.raises(PromptCancelled, match="Cancelled by user"):
            session.ask(_text("a"))
