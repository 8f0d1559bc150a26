"""Unit tests for TrustBootstrapper.

Every external tool goes through a mocked ProcessExecutor, so the tests
count exactly which ssh/ssh-keygen/ssh-copy-id invocations happen.
"""

import subprocess
import pytest
from unittest.mock import Mock

from cargo_deploy import __version__
from cargo_deploy.core.protocols import (
    ProcessExecutor,
    ProcessResult,
    FileSystemService,
    EnvironmentProvider,
    Logger
)
from cargo_deploy.deploy.base import SshTarget
from cargo_deploy.deploy.exceptions import (
    HomeDirectoryUnknownError,
    KeyGenerationError,
    KeyInstallError,
)
from cargo_deploy.deploy.ssh_trust import TrustBootstrapper


KEY_PATH = "/home/dev/.ssh/id_ed25519_alice_pi_local"


def create_mock_process(returncodes=None):
    """Create mock ProcessExecutor answering per tool name (default: success)."""
    process = Mock(spec=ProcessExecutor)
    returncodes = returncodes or {}

    def mock_run(cmd, **kwargs):
        code = returncodes.get(cmd[0], 0)
        if isinstance(code, Exception):
            raise code
        return ProcessResult(returncode=code)

    process.run.side_effect = mock_run
    return process


def tools_called(process):
    return [c.args[0][0] for c in process.run.call_args_list]


class TestTrustBootstrapper:
    """Test ensure_trust() step by step."""

    def setup_method(self):
        self.fs = Mock(spec=FileSystemService)
        self.fs.exists.return_value = False
        self.env = Mock(spec=EnvironmentProvider)
        self.env.get_environ.return_value = {"HOME": "/home/dev"}
        self.logger = Mock(spec=Logger)
        self.target = SshTarget(user="alice", host="pi.local")

    def create(self, process):
        return TrustBootstrapper(process, self.fs, self.env, self.logger)

    def test_probe_success_is_a_no_op(self):
        process = create_mock_process({"ssh": 0})

        self.create(process).ensure_trust(self.target)

        assert process.run.call_count == 1
        assert tools_called(process) == ["ssh"]
        self.fs.exists.assert_not_called()
        self.env.get_environ.assert_not_called()

    def test_probe_command_is_non_interactive(self):
        process = create_mock_process({"ssh": 0})

        self.create(process).ensure_trust(self.target)

        call = process.run.call_args
        assert call.args[0] == [
            "ssh", "-o", "BatchMode=yes", "-o", "ConnectTimeout=5",
            "alice@pi.local", "echo connected"
        ]
        assert call.kwargs["stdout"] is subprocess.DEVNULL
        assert call.kwargs["stderr"] is subprocess.DEVNULL

    def test_probe_failure_generates_and_installs_key(self):
        process = create_mock_process({"ssh": 255})

        self.create(process).ensure_trust(self.target)

        assert tools_called(process) == ["ssh", "ssh-keygen", "ssh-copy-id"]
        keygen = process.run.call_args_list[1].args[0]
        assert keygen == [
            "ssh-keygen", "-t", "ed25519", "-f", KEY_PATH, "-N", "",
            "-C", f"Key generated by cargo-deploy, Version: {__version__}"
        ]
        install = process.run.call_args_list[2].args[0]
        assert install == ["ssh-copy-id", "-i", KEY_PATH, "alice@pi.local"]

    def test_existing_key_skips_generation_but_installs(self):
        process = create_mock_process({"ssh": 255})
        self.fs.exists.side_effect = lambda p: p == KEY_PATH

        self.create(process).ensure_trust(self.target)

        assert tools_called(process) == ["ssh", "ssh-copy-id"]
        self.fs.exists.assert_called_once_with(KEY_PATH)

    def test_ssh_missing_counts_as_failed_probe(self):
        process = create_mock_process({"ssh": FileNotFoundError("ssh")})

        self.create(process).ensure_trust(self.target)

        assert tools_called(process) == ["ssh", "ssh-keygen", "ssh-copy-id"]

    def test_missing_home_raises(self):
        process = create_mock_process({"ssh": 255})
        self.env.get_environ.return_value = {}

        with pytest.raises(HomeDirectoryUnknownError, match="HOME"):
            self.create(process).ensure_trust(self.target)

        assert tools_called(process) == ["ssh"]

    def test_userprofile_used_when_home_unset(self):
        process = create_mock_process({"ssh": 255})
        self.env.get_environ.return_value = {"USERPROFILE": "C:/Users/dev"}

        self.create(process).ensure_trust(self.target)

        install = process.run.call_args_list[-1].args[0]
        assert install[2] == "C:/Users/dev/.ssh/id_ed25519_alice_pi_local"

    def test_keygen_failure_raises_and_skips_install(self):
        process = create_mock_process({"ssh": 255, "ssh-keygen": 1})

        with pytest.raises(KeyGenerationError):
            self.create(process).ensure_trust(self.target)

        assert "ssh-copy-id" not in tools_called(process)

    def test_keygen_not_installed_raises(self):
        process = create_mock_process({"ssh": 255, "ssh-keygen": FileNotFoundError("ssh-keygen")})

        with pytest.raises(KeyGenerationError):
            self.create(process).ensure_trust(self.target)

    def test_install_failure_raises(self):
        process = create_mock_process({"ssh": 255, "ssh-copy-id": 1})

        with pytest.raises(KeyInstallError, match="alice@pi.local"):
            self.create(process).ensure_trust(self.target)

    def test_install_inherits_terminal_for_password_prompt(self):
        process = create_mock_process({"ssh": 255})

        self.create(process).ensure_trust(self.target)

        assert process.run.call_args_list[-1].kwargs == {}


class TestKeyPath:
    """Test the deterministic key path."""

    def setup_method(self):
        self.env = Mock(spec=EnvironmentProvider)
        self.env.get_environ.return_value = {"HOME": "/home/dev"}
        self.trust = TrustBootstrapper(
            Mock(spec=ProcessExecutor), Mock(spec=FileSystemService), self.env, Mock(spec=Logger)
        )

    def test_ip_address_is_sanitized(self):
        path = self.trust.key_path(SshTarget("pi", "192.168.1.42"))

        assert path == "/home/dev/.ssh/id_ed25519_pi_192_168_1_42"

    def test_same_target_same_path(self):
        target = SshTarget("pi", "raspberrypi.local")

        assert self.trust.key_path(target) == self.trust.key_path(target)

    def test_user_is_part_of_path(self):
        assert (self.trust.key_path(SshTarget("a", "h"))
                != self.trust.key_path(SshTarget("b", "h")))
