"""
TrustBootstrapper - make sure `ssh user@host` works without a password.

Strategy: probe → (on failure) per-device ed25519 key → ssh-copy-id
"""

import subprocess

from cargo_deploy import __version__, DIST_NAME
from cargo_deploy.core.protocols import (
    ProcessExecutor,
    FileSystemService,
    EnvironmentProvider,
    Logger
)
from cargo_deploy.utils.hostname import sanitize_hostname
from .base import SshTarget
from .exceptions import (
    HomeDirectoryUnknownError,
    KeyGenerationError,
    KeyInstallError,
)

PROBE_TIMEOUT_SECONDS = 5


class TrustBootstrapper:
    """
    Sets up passwordless SSH to a single device.

    Idempotent: against an already-trusted host only the probe runs, and an
    existing key at the per-device path is reused instead of regenerated.
    """

    def __init__(
        self,
        process_executor: ProcessExecutor,
        filesystem: FileSystemService,
        env_provider: EnvironmentProvider,
        logger: Logger
    ):
        self.process = process_executor
        self.fs = filesystem
        self.env = env_provider
        self.log = logger

    def _probe_cmd(self, target: SshTarget) -> list[str]:
        """Build the non-interactive connectivity check."""
        return [
            "ssh",
            "-o", "BatchMode=yes",  # Fail immediately if password needed
            "-o", f"ConnectTimeout={PROBE_TIMEOUT_SECONDS}",
            target.connection_string,
            "echo connected"
        ]

    def is_trusted(self, target: SshTarget) -> bool:
        """
        Run a remote no-op without any prompt.

        Returns:
            True if the command succeeded, False otherwise (including when
            ssh itself cannot be started)
        """
        cmd = self._probe_cmd(target)
        self.log.debug(f"Running: {' '.join(cmd)}")
        try:
            result = self.process.run(
                cmd,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL
            )
        except OSError as e:
            self.log.debug(f"ssh could not be started: {e}")
            return False
        return result.returncode == 0

    def key_path(self, target: SshTarget) -> str:
        """
        Per-device private key path: ~/.ssh/id_ed25519_<user>_<host>.

        Raises:
            HomeDirectoryUnknownError: If HOME (or USERPROFILE) is not set
        """
        environ = self.env.get_environ()
        home = environ.get("HOME") or environ.get("USERPROFILE")
        if not home:
            raise HomeDirectoryUnknownError(
                "HOME environment variable not set. "
                "Cannot locate '$HOME/.ssh/' on your machine."
            )
        return f"{home}/.ssh/id_ed25519_{target.user}_{sanitize_hostname(target.host)}"

    def _generate_key(self, key_path: str) -> None:
        comment = f"Key generated by {DIST_NAME}, Version: {__version__}"
        cmd = ["ssh-keygen", "-t", "ed25519", "-f", key_path, "-N", "", "-C", comment]
        self.log.debug(f"Running: {' '.join(cmd)}")
        try:
            result = self.process.run(cmd)
        except OSError as e:
            raise KeyGenerationError(f"Failed to generate SSH key: {e}") from e

        if result.returncode != 0:
            raise KeyGenerationError("SSH key generation failed")

    def _install_key(self, key_path: str, target: SshTarget) -> None:
        # Inherits the terminal: ssh-copy-id asks for the device password here
        cmd = ["ssh-copy-id", "-i", key_path, target.connection_string]
        self.log.debug(f"Running: {' '.join(cmd)}")
        try:
            result = self.process.run(cmd)
        except OSError as e:
            raise KeyInstallError(f"Failed to run ssh-copy-id: {e}") from e

        if result.returncode != 0:
            raise KeyInstallError(f"ssh-copy-id failed for {target.connection_string}")

    def ensure_trust(self, target: SshTarget) -> None:
        """
        Make non-interactive SSH to target work.

        Steps:
            1. Probe with BatchMode (return if it works)
            2. Compute the per-device key path
            3. ssh-keygen if no key exists there
            4. ssh-copy-id (prompts for the password once)

        Raises:
            HomeDirectoryUnknownError: If the home directory is unknown
            KeyGenerationError: If ssh-keygen fails
            KeyInstallError: If ssh-copy-id fails
        """
        self.log.info("Checking SSH connectivity...")
        if self.is_trusted(target):
            return

        self.log.info(f"No SSH key configured for {target.connection_string}.")
        key_path = self.key_path(target)

        if not self.fs.exists(key_path):
            self.log.info("No SSH key found on your machine. Generating one...")
            self._generate_key(key_path)

        self._install_key(key_path, target)
