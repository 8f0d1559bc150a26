"""
Deployment exceptions.

Every failure in the deploy workflow is terminal: nothing here is caught and
retried. Each exception carries an actionable, human-readable message naming
the step that failed, and all of them derive from DeploymentError so the
command layer has a single handler.
"""


class DeploymentError(Exception):
    """
    Raised when deployment fails at any step.

    Examples:
        - Config file unreadable or malformed
        - Cross build failed
        - SSH key could not be installed
        - scp transfer failed
    """
    pass


class ConfigError(DeploymentError):
    """Base class for problems with the deploy config file."""
    pass


class ConfigReadError(ConfigError):
    """Config file exists but could not be read."""
    pass


class ConfigParseError(ConfigError):
    """Config file contents are not a valid deploy config."""
    pass


class ConfigWriteError(ConfigError):
    """Config file could not be written."""
    pass


class MissingConfigError(ConfigError):
    """A required setting is missing and could not be prompted for."""
    pass


class HomeDirectoryUnknownError(DeploymentError):
    """Neither HOME nor USERPROFILE is set, so ~/.ssh cannot be located."""
    pass


class KeyGenerationError(DeploymentError):
    """ssh-keygen failed to create the deploy key pair."""
    pass


class KeyInstallError(DeploymentError):
    """ssh-copy-id failed to install the public key on the device."""
    pass


class BuildError(DeploymentError):
    """The cross build exited non-zero or could not be started."""
    pass


class MetadataError(DeploymentError):
    """
    Project metadata could not be used to find the artifact name.

    Raised directly when `cargo metadata` fails or prints invalid JSON.
    """
    pass


class NoBinaryTargetError(MetadataError):
    """The root package has no binary target."""
    pass


class AmbiguousProjectError(MetadataError):
    """No root package could be resolved (e.g. the top of a virtual workspace)."""
    pass


class RemoteProvisionError(DeploymentError):
    """Creating the destination directory on the device failed."""
    pass


class TransferError(DeploymentError):
    """Copying the artifact to the device failed."""
    pass
