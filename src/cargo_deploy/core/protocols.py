"""Protocol definitions for dependency injection.

This module defines Protocol-based abstractions for every external dependency
of the deploy workflow. Protocols use structural typing (duck typing with type
hints) which means any class implementing these methods satisfies the Protocol
without explicit inheritance.

Benefits:
- Easy to mock in tests (just implement the methods)
- No inheritance required (more Pythonic)
- Type-safe with mypy/pyright
- Clear interface contracts
"""

from dataclasses import dataclass
from typing import Protocol, Dict, Any, Optional, List, Union
from pathlib import Path


class Logger(Protocol):
    """Abstraction for logging operations.

    Replaces direct print() statements throughout the codebase.
    Enables structured logging and testability.
    """

    def info(self, message: str) -> None:
        """Log informational message."""
        ...

    def warning(self, message: str) -> None:
        """Log warning message."""
        ...

    def error(self, message: str) -> None:
        """Log error message."""
        ...

    def debug(self, message: str) -> None:
        """Log debug message."""
        ...


class FileSystemService(Protocol):
    """Abstraction for filesystem operations.

    Wraps Path and file I/O operations so the config store and the key
    lookup can be tested without touching the real filesystem.
    """

    def exists(self, path: Union[str, Path]) -> bool:
        """Check if path exists."""
        ...

    def read_file(self, path: Union[str, Path]) -> str:
        """Read entire file as string."""
        ...

    def write_file(self, path: Union[str, Path], content: str) -> None:
        """Write string content to file."""
        ...


@dataclass
class ProcessResult:
    """Outcome of a finished external command.

    Attributes:
        returncode: Exit status of the process
        stdout: Captured stdout (None unless capture was requested)
        stderr: Captured stderr (None unless capture was requested)
    """
    returncode: int
    stdout: Optional[str] = None
    stderr: Optional[str] = None


class ProcessExecutor(Protocol):
    """Abstraction for process execution.

    Wraps subprocess.run to enable testing without spawning real processes.
    Every call blocks until the child exits.

    stdout/stderr accept the same values as subprocess.run (None to inherit
    the terminal, subprocess.DEVNULL to discard). capture_output=True
    overrides both and returns the text in the ProcessResult.

    Raises:
        OSError: If the executable cannot be started (e.g. not on PATH)
    """

    def run(
        self,
        cmd: List[str],
        stdout: Optional[Any] = None,
        stderr: Optional[Any] = None,
        capture_output: bool = False,
        cwd: Optional[str] = None,
    ) -> ProcessResult:
        """Execute command, wait for it, and return its result."""
        ...


class EnvironmentProvider(Protocol):
    """Abstraction for environment access.

    Wraps os.environ so tests can control HOME without changing the
    real process environment.
    """

    def get_environ(self) -> Dict[str, str]:
        """Get copy of environment variables."""
        ...


class ConfigLoader(Protocol):
    """Abstraction for configuration file codecs.

    One implementation per on-disk format (JSON, YAML). Parsing failures
    surface as the codec's own exception type (json.JSONDecodeError,
    yaml.YAMLError); callers translate them.
    """

    def loads(self, content: str) -> Any:
        """Parse document text into Python data."""
        ...

    def dumps(self, data: Dict[str, Any]) -> str:
        """Serialize a mapping into document text."""
        ...


class Prompter(Protocol):
    """Abstraction for interactive questions on the terminal."""

    def ask(self, message: str) -> str:
        """Show message and return the line typed by the user.

        Raises:
            EOFError: If stdin is closed
        """
        ...
