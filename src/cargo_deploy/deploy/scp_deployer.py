"""
ScpDeployer - copy the built executable to the device with scp.
"""

import subprocess

from cargo_deploy.core.protocols import ProcessExecutor, Logger
from .base import SshTarget
from .exceptions import TransferError


class ScpDeployer:
    """
    Single-file transfer via scp.

    scp's progress output is discarded; its errors still reach stderr.
    """

    def __init__(self, process_executor: ProcessExecutor, logger: Logger):
        self.process = process_executor
        self.log = logger

    def copy(self, local_path: str, target: SshTarget, remote_dir: str) -> None:
        """
        Copy local_path into remote_dir on the device.

        Raises:
            TransferError: If scp fails or cannot be started
        """
        self.log.info(f"Uploading to {target.connection_string}:{remote_dir}...")

        cmd = ["scp", local_path, f"{target.connection_string}:{remote_dir}"]
        self.log.debug(f"Running: {' '.join(cmd)}")
        try:
            result = self.process.run(cmd, stdout=subprocess.DEVNULL)
        except OSError as e:
            raise TransferError(f"Failed to run SCP file transfer utility: {e}") from e

        if result.returncode != 0:
            raise TransferError(
                f"SCP file transfer failed. Check your connection to {target.host}"
            )
