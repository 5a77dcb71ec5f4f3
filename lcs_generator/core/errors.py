"""Exception types shared by the create-lcs CLI."""


class LcsError(Exception):
    """Base class for create-lcs failures."""


class ConfigError(LcsError):
    """Raised when the CLI configuration file cannot be loaded."""


class CommandError(LcsError):
    """Raised when an external command exits non-zero or cannot be started.

    Attributes:
        command: The argv that was executed.
        returncode: Exit code, or None when the executable was not found.
    """

    def __init__(self, command: list[str], returncode: int | None, message: str) -> None:
        super().__init__(message)
        self.command = command
        self.returncode = returncode


class PromptCancelled(LcsError):
    """Raised when the operator aborts an interactive session (Ctrl-C / EOF)."""
