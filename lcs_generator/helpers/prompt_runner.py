"""Terminal session that asks a sequence of ``PromptDescriptor`` questions.

The session walks the descriptors in order. A descriptor whose ``condition``
is false for the answers gathered so far is skipped entirely: its path does
not appear in the returned mapping.

Answers are returned raw (text for text/number prompts, the chosen value for
select prompts, a bool for confirm prompts); type coercion is the
materializer's job.
"""

from collections.abc import Callable, Iterable

from lcs_generator.core.errors import PromptCancelled
from lcs_generator.core.prompt_deriver import PromptDescriptor, QuestionKind
from lcs_generator.helpers.helpers_logging import Colors, print_info, print_warning

InputFunc = Callable[[str], str]
OutputFunc = Callable[[str], None]

_YES = ("y", "yes")
_NO = ("n", "no")


class PromptSession:
    """Ask prompts on a terminal (or any injected input/output pair)."""

    def __init__(
        self,
        input_func: InputFunc = input,
        output: OutputFunc = print,
    ) -> None:
        self._input = input_func
        self._output = output

    def _read(self, prompt: str) -> str:
        try:
            return self._input(prompt).strip()
        except (EOFError, KeyboardInterrupt) as exc:
            raise PromptCancelled("Cancelled by user") from exc

    # ------------------------------------------------------------------
    # Question kinds
    # ------------------------------------------------------------------

    def _ask_select(self, prompt: PromptDescriptor) -> object:
        choices = prompt.choices
        if not choices:
            print_warning(f"No choices available for: {prompt.label}")
            return None

        initial = prompt.initial_value if isinstance(prompt.initial_value, int) else 0
        if not 0 <= initial < len(choices):
            initial = 0

        print_info(f"\n{prompt.label}")
        for i, choice in enumerate(choices, 1):
            marker = f" {Colors.DIM}(default){Colors.RESET}" if i - 1 == initial else ""
            self._output(f"  {i}. {choice}{marker}")

        while True:
            answer = self._read(f"Select (1-{len(choices)}) [{initial + 1}]: ")
            if not answer:
                return choices[initial]
            try:
                idx = int(answer) - 1
            except ValueError:
                idx = -1
            if 0 <= idx < len(choices):
                return choices[idx]
            print_warning(f"Please enter a number between 1 and {len(choices)}")

    def _ask_text(self, prompt: PromptDescriptor) -> object:
        initial = prompt.initial_value
        hint = f" ({initial})" if initial not in (None, "") else ""
        while True:
            answer = self._read(f"{prompt.label}{hint} ")
            if not answer:
                if initial in (None, ""):
                    answer = ""
                else:
                    return initial
            verdict = prompt.validate(answer)
            if verdict is True:
                return answer
            print_warning(str(verdict))

    def _ask_confirm(self, prompt: PromptDescriptor) -> bool:
        return self.confirm(prompt.label, bool(prompt.initial_value))

    def confirm(self, message: str, default: bool = True) -> bool:
        """Ask a yes/no question; an empty answer takes ``default``."""
        suffix = "[Y/n]" if default else "[y/N]"
        while True:
            answer = self._read(f"{message} {suffix} ").lower()
            if not answer:
                return default
            if answer in _YES:
                return True
            if answer in _NO:
                return False
            print_warning("Please answer y or n")

    def ask(self, prompt: PromptDescriptor) -> object:
        """Ask a single prompt and return the raw answer."""
        kind = prompt.question_kind
        if kind is QuestionKind.SELECT:
            return self._ask_select(prompt)
        if kind is QuestionKind.CONFIRM:
            return self._ask_confirm(prompt)
        # text and number prompts share the same input loop
        return self._ask_text(prompt)

    def run(self, prompts: Iterable[PromptDescriptor]) -> dict[str, object]:
        """Ask every active prompt in order.

        Returns:
            Dotted path -> raw answer, for the prompts that were asked.

        Raises:
            PromptCancelled: The operator pressed Ctrl-C or closed stdin.
        """
        answers: dict[str, object] = {}
        for prompt in prompts:
            if not prompt.is_active(answers):
                continue
            answers[prompt.path] = self.ask(prompt)
        return answers
