"""Production implementations of dependency injection protocols.

This module provides real implementations that wrap actual external dependencies
(filesystem, subprocess, environment, terminal input). These are used in
production code.

For testing, use mocks or test doubles instead of these implementations.
"""

import json
import os
import subprocess
import sys
import yaml
from pathlib import Path
from typing import Dict, Any, Optional, List, Union

from cargo_deploy.core.protocols import ProcessResult


class ConsoleLogger:
    """Production logger that prints to console (stdout/stderr).

    Debug messages are only shown when verbose is enabled.
    """

    def __init__(self, verbose: bool = False):
        self.verbose = verbose

    def info(self, message: str) -> None:
        """Print info message to stdout."""
        print(message)

    def warning(self, message: str) -> None:
        """Print warning message to stdout."""
        print(f"Warning: {message}")

    def error(self, message: str) -> None:
        """Print error message to stderr."""
        print(f"Error: {message}", file=sys.stderr)

    def debug(self, message: str) -> None:
        """Print debug message to stdout."""
        if self.verbose:
            print(f"Debug: {message}")


class RealFileSystemService:
    """Production filesystem service using real pathlib operations."""

    def exists(self, path: Union[str, Path]) -> bool:
        """Check if path exists."""
        return Path(path).exists()

    def read_file(self, path: Union[str, Path]) -> str:
        """Read entire file as string."""
        with open(path, 'r') as f:
            return f.read()

    def write_file(self, path: Union[str, Path], content: str) -> None:
        """Write string content to file."""
        with open(path, 'w') as f:
            f.write(content)


class SubprocessExecutor:
    """Production process executor using real subprocess.run."""

    def run(
        self,
        cmd: List[str],
        stdout: Optional[Any] = None,
        stderr: Optional[Any] = None,
        capture_output: bool = False,
        cwd: Optional[str] = None,
    ) -> ProcessResult:
        """Execute command and wait for it to finish."""
        if capture_output:
            completed = subprocess.run(cmd, capture_output=True, text=True, cwd=cwd)
        else:
            completed = subprocess.run(cmd, stdout=stdout, stderr=stderr, cwd=cwd)
        return ProcessResult(
            returncode=completed.returncode,
            stdout=completed.stdout if capture_output else None,
            stderr=completed.stderr if capture_output else None,
        )


class SystemEnvironmentProvider:
    """Production environment provider using real os module."""

    def get_environ(self) -> Dict[str, str]:
        """Get copy of environment variables."""
        return dict(os.environ)


class JsonConfigLoader:
    """Config codec for .json files (pretty-printed, 2-space indent)."""

    def loads(self, content: str) -> Any:
        return json.loads(content)

    def dumps(self, data: Dict[str, Any]) -> str:
        return json.dumps(data, indent=2) + "\n"


class YamlConfigLoader:
    """Config codec for .yaml/.yml files using PyYAML's safe loader."""

    def loads(self, content: str) -> Any:
        return yaml.safe_load(content)

    def dumps(self, data: Dict[str, Any]) -> str:
        return yaml.safe_dump(data, default_flow_style=False, sort_keys=False)


class ConsolePrompter:
    """Production prompter reading answers from stdin."""

    def ask(self, message: str) -> str:
        return input(message)
