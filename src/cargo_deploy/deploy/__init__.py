"""
Remote device subsystem.

Steps that talk to the device over SSH:
    - TrustBootstrapper: passwordless SSH setup (probe, ssh-keygen, ssh-copy-id)
    - RemoteProvisioner: mkdir -p of the destination
    - ScpDeployer: scp of the built executable

Public API:
    - SshTarget: user@host value
    - Deployer: Protocol interface for transfers
    - DeploymentError and its subclasses: Exceptions
"""

from .base import SshTarget, Deployer
from .exceptions import (
    DeploymentError,
    ConfigError,
    ConfigReadError,
    ConfigParseError,
    ConfigWriteError,
    MissingConfigError,
    HomeDirectoryUnknownError,
    KeyGenerationError,
    KeyInstallError,
    BuildError,
    MetadataError,
    NoBinaryTargetError,
    AmbiguousProjectError,
    RemoteProvisionError,
    TransferError,
)
from .ssh_trust import TrustBootstrapper
from .provisioner import RemoteProvisioner
from .scp_deployer import ScpDeployer

__all__ = [
    # Protocol and types
    "SshTarget",
    "Deployer",

    # Exceptions
    "DeploymentError",
    "ConfigError",
    "ConfigReadError",
    "ConfigParseError",
    "ConfigWriteError",
    "MissingConfigError",
    "HomeDirectoryUnknownError",
    "KeyGenerationError",
    "KeyInstallError",
    "BuildError",
    "MetadataError",
    "NoBinaryTargetError",
    "AmbiguousProjectError",
    "RemoteProvisionError",
    "TransferError",

    # Implementations
    "TrustBootstrapper",
    "RemoteProvisioner",
    "ScpDeployer",
]
