"""
RemoteProvisioner - create the destination directory on the device.
"""

from cargo_deploy.core.protocols import ProcessExecutor, Logger
from .base import SshTarget
from .exceptions import RemoteProvisionError


class RemoteProvisioner:
    """Runs `mkdir -p` on the device over SSH."""

    def __init__(self, process_executor: ProcessExecutor, logger: Logger):
        self.process = process_executor
        self.log = logger

    def _ssh_cmd(self, target: SshTarget, command: str) -> list[str]:
        """Build SSH command. The remote command is not quoted so $HOME and ~ expand."""
        return [
            "ssh",
            target.connection_string,
            command
        ]

    def ensure_directory(self, target: SshTarget, path: str) -> None:
        """
        Create path (and parents) on the device; no error if it exists.

        Raises:
            RemoteProvisionError: On any non-zero exit (connection or
                permission problems are not told apart)
        """
        cmd = self._ssh_cmd(target, f"mkdir -p {path}")
        self.log.debug(f"Running: {' '.join(cmd)}")
        try:
            result = self.process.run(cmd)
        except OSError as e:
            raise RemoteProvisionError(f"Failed to run ssh: {e}") from e

        if result.returncode != 0:
            raise RemoteProvisionError(
                f"Failed to create remote directory {path} on {target.connection_string}"
            )
