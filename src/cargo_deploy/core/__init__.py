"""Core dependency injection infrastructure for cargo-deploy.

This module provides Protocol-based abstractions that enable dependency injection
and testability throughout the codebase. All external dependencies (filesystem,
subprocess, environment, terminal input) are abstracted via Protocols with
production implementations.

Design:
- Protocol-based abstractions (typing.Protocol) for structural typing
- Production implementations for real-world use
- Easy mocking for unit tests
- Clean separation of concerns
"""

from cargo_deploy.core.protocols import (
    Logger,
    FileSystemService,
    ProcessExecutor,
    ProcessResult,
    EnvironmentProvider,
    ConfigLoader,
    Prompter,
)

from cargo_deploy.core.implementations import (
    ConsoleLogger,
    RealFileSystemService,
    SubprocessExecutor,
    SystemEnvironmentProvider,
    JsonConfigLoader,
    YamlConfigLoader,
    ConsolePrompter,
)

__all__ = [
    # Protocols
    "Logger",
    "FileSystemService",
    "ProcessExecutor",
    "ProcessResult",
    "EnvironmentProvider",
    "ConfigLoader",
    "Prompter",
    # Implementations
    "ConsoleLogger",
    "RealFileSystemService",
    "SubprocessExecutor",
    "SystemEnvironmentProvider",
    "JsonConfigLoader",
    "YamlConfigLoader",
    "ConsolePrompter",
]
