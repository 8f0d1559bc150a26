"""
Remote target description and the Deployer protocol.

The tool deploys to exactly one device per project. SshTarget is recomputed
from the config on every run and never persisted.
"""

from typing import Protocol, runtime_checkable
from dataclasses import dataclass


@dataclass(frozen=True)
class SshTarget:
    """
    Remote device reachable over SSH.

    Attributes:
        user: Login name on the device (e.g., "pi")
        host: Hostname or IP (e.g., "raspberrypi.local" or "192.168.1.42")
    """
    user: str
    host: str

    @property
    def connection_string(self) -> str:
        """`user@host`, as passed to ssh, scp and ssh-copy-id."""
        return f"{self.user}@{self.host}"

    def __str__(self) -> str:
        return self.connection_string


@runtime_checkable
class Deployer(Protocol):
    """
    Final step of a deployment: puts the built executable on the device.

    DeploymentRunner only calls copy() after the destination directory has
    been created, and treats any TransferError as the end of the run.

    Implementations:
        - ScpDeployer: single-file copy with scp
    """

    def copy(self, local_path: str, target: SshTarget, remote_dir: str) -> None:
        """
        Copy a local file into remote_dir on the target.

        Raises:
            TransferError: If the copy fails

        Postconditions:
            - remote_dir/<basename of local_path> holds the artifact
        """
        ...
