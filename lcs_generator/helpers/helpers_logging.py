"""Console output helpers for the create-lcs CLI."""


class Colors:
    """ANSI color codes for terminal output."""
    HEADER = '\033[95m'
    CYAN = '\033[96m'
    GREEN = '\033[92m'
    YELLOW = '\033[93m'
    RED = '\033[91m'
    MAGENTA = '\033[35m'
    RESET = '\033[0m'
    BOLD = '\033[1m'
    DIM = '\033[2m'


def print_header(msg: str) -> None:
    """Print a section header."""
    print(f"{Colors.HEADER}{Colors.BOLD}{msg}{Colors.RESET}")


def print_info(msg: str) -> None:
    """Print an info message."""
    print(f"{Colors.CYAN}{msg}{Colors.RESET}")


def print_success(msg: str) -> None:
    """Print a success message."""
    print(f"{Colors.GREEN}✓ {msg}{Colors.RESET}")


def print_warning(msg: str) -> None:
    """Print a warning message."""
    print(f"{Colors.YELLOW}⚠️  {msg}{Colors.RESET}")


def print_error(msg: str) -> None:
    """Print an error message."""
    print(f"{Colors.RED}❌ {msg}{Colors.RESET}")


def print_dry_run(msg: str) -> None:
    """Print what a mutating step would have done."""
    print(f"{Colors.MAGENTA}Dry run: {msg}{Colors.RESET}")
