"""Deploy config file management (cargo_deploy.json)"""
from dataclasses import dataclass, asdict, fields
from pathlib import Path
from typing import Dict, Optional, Any

import yaml

from cargo_deploy.core.protocols import FileSystemService, ConfigLoader, Logger
from cargo_deploy.core.implementations import JsonConfigLoader, YamlConfigLoader
from cargo_deploy.deploy.exceptions import (
    ConfigReadError,
    ConfigParseError,
    ConfigWriteError,
)

# Constants
CONFIG_FILE = 'cargo_deploy.json'
DEFAULT_TARGET_ARCH = 'aarch64-unknown-linux-gnu'
DEFAULT_TARGET_DEST = '/home/raspberry/bin'


@dataclass
class DeploymentConfig:
    """Persisted deploy settings.

    Attributes:
        target_arch: Instruction set of the remote device, for cross compiling
        target_dest: Remote folder the executable is copied into
        target_name: Hostname/IP of the remote device
        target_user: Login name on the remote device
    """
    target_arch: Optional[str] = None
    target_dest: Optional[str] = None
    target_name: Optional[str] = None
    target_user: Optional[str] = None

    @classmethod
    def default(cls) -> 'DeploymentConfig':
        """Record written when no config file exists yet."""
        return cls(
            target_arch=DEFAULT_TARGET_ARCH,
            target_dest=DEFAULT_TARGET_DEST,
        )

    @property
    def target_host(self) -> Optional[str]:
        """Alias for target_name (the file key is kept as target_name)."""
        return self.target_name

    @target_host.setter
    def target_host(self, value: Optional[str]) -> None:
        self.target_name = value

    def set_user(self, user: str) -> None:
        """Set the remote user and reset the destination to their ~/bin.

        Any custom target_dest is overwritten.
        """
        self.target_user = user
        self.target_dest = f"/home/{user}/bin"

    def resolved_arch(self) -> str:
        return self.target_arch or DEFAULT_TARGET_ARCH

    def resolved_dest(self) -> str:
        return self.target_dest or DEFAULT_TARGET_DEST

    def to_dict(self) -> Dict[str, Optional[str]]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Any) -> 'DeploymentConfig':
        """Build a record from parsed file data.

        Missing keys read as None and unknown keys are ignored.

        Raises:
            ValueError: If data is not a mapping or a value is not a string/None
        """
        if not isinstance(data, dict):
            raise ValueError(f"expected an object, got {type(data).__name__}")

        values = {}
        for field in fields(cls):
            value = data.get(field.name)
            if value is not None and not isinstance(value, str):
                raise ValueError(
                    f"'{field.name}' must be a string or null, got {type(value).__name__}"
                )
            values[field.name] = value
        return cls(**values)


def loader_for(path: str) -> ConfigLoader:
    """Pick the codec from the file suffix (.yaml/.yml → YAML, else JSON)."""
    if Path(path).suffix.lower() in ('.yaml', '.yml'):
        return YamlConfigLoader()
    return JsonConfigLoader()


class ConfigStore:
    """Loads, creates and saves the deploy config file.

    Args:
        filesystem: Filesystem operations abstraction
        logger: Logging abstraction
        path: Config file path, relative to the invocation directory
        loader: Codec override (default: chosen from the path suffix)
    """

    def __init__(
        self,
        filesystem: FileSystemService,
        logger: Logger,
        path: str = CONFIG_FILE,
        loader: Optional[ConfigLoader] = None
    ):
        self.fs = filesystem
        self.log = logger
        self.path = path
        self.loader = loader or loader_for(path)

    def load(self) -> DeploymentConfig:
        """Read and parse the existing config file.

        Raises:
            ConfigReadError: If the file cannot be read
            ConfigParseError: If the contents are not a valid deploy config
        """
        try:
            content = self.fs.read_file(self.path)
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigReadError(f"Failed to read {self.path}: {e}") from e

        try:
            data = self.loader.loads(content)
            return DeploymentConfig.from_dict(data)
        except (ValueError, yaml.YAMLError) as e:
            # json.JSONDecodeError is a ValueError
            raise ConfigParseError(f"Invalid config in {self.path}: {e}") from e

    def load_or_create(self) -> DeploymentConfig:
        """Load the config file, or write and return the defaults if absent."""
        if self.fs.exists(self.path):
            return self.load()

        config = DeploymentConfig.default()
        self.save(config)
        self.log.info(f"Created new deploy config file: {self.path}")
        return config

    def save(self, config: DeploymentConfig) -> None:
        """Serialize the whole record and overwrite the config file.

        Raises:
            ConfigWriteError: If the file cannot be written
        """
        content = self.loader.dumps(config.to_dict())
        try:
            self.fs.write_file(self.path, content)
        except OSError as e:
            raise ConfigWriteError(f"Failed to write {self.path}: {e}") from e
        self.log.debug(f"Saved deploy config to {self.path}")

