"""Deployment workflow with dependency injection.

All steps are injected collaborators, so the whole sequence can be unit
tested without a terminal, a filesystem, or any subprocess.
"""

from cargo_deploy.core.protocols import Logger, Prompter
from cargo_deploy.deploy.base import SshTarget, Deployer
from cargo_deploy.deploy.exceptions import MissingConfigError
from cargo_deploy.deploy.provisioner import RemoteProvisioner
from cargo_deploy.deploy.ssh_trust import TrustBootstrapper
from cargo_deploy.utils.build_helper import CrossBuilder, artifact_path
from cargo_deploy.utils.config import ConfigStore, DeploymentConfig

HOST_PROMPT = "Enter remote hostname/IP : "
USER_PROMPT = "Enter remote username : "


class DeploymentRunner:
    """Runs config → build → trust → mkdir → copy, stopping at the first error.

    Nothing is rolled back: a finished build stays in target/ even when the
    transfer later fails.

    Args:
        config_store: Loads and persists the deploy config
        builder: Cross build and artifact name lookup
        trust: Passwordless SSH setup
        provisioner: Remote directory creation
        deployer: Artifact transfer
        prompter: Terminal questions for missing settings
        logger: Logging abstraction
    """

    def __init__(
        self,
        config_store: ConfigStore,
        builder: CrossBuilder,
        trust: TrustBootstrapper,
        provisioner: RemoteProvisioner,
        deployer: Deployer,
        prompter: Prompter,
        logger: Logger
    ):
        self.config_store = config_store
        self.builder = builder
        self.trust = trust
        self.provisioner = provisioner
        self.deployer = deployer
        self.prompter = prompter
        self.log = logger

    def _ask(self, message: str, setting: str) -> str:
        try:
            return self.prompter.ask(message).strip()
        except EOFError as e:
            raise MissingConfigError(
                f"No value entered for {setting}. "
                f"Set it in {self.config_store.path} or run interactively."
            ) from e

    def prepare_config(self) -> DeploymentConfig:
        """Load the config and prompt for the host and user if missing.

        Filling in the user also resets target_dest to /home/<user>/bin.
        The file is rewritten once if anything was prompted for.
        """
        config = self.config_store.load_or_create()
        need_save = False

        if config.target_name is None:
            config.target_name = self._ask(HOST_PROMPT, "target_name")
            need_save = True

        if config.target_user is None:
            config.set_user(self._ask(USER_PROMPT, "target_user"))
            need_save = True

        if need_save:
            self.config_store.save(config)

        return config

    def run(self, release_mode: bool = True) -> DeploymentConfig:
        """Deploy the project to the configured device.

        Args:
            release_mode: Build the release profile (False → debug)

        Returns:
            The config used for this deployment

        Raises:
            DeploymentError: From whichever step failed first
        """
        config = self.prepare_config()

        target_arch = config.resolved_arch()
        self.builder.build(target_arch, release_mode)
        artifact_name = self.builder.resolve_artifact_name()
        local_path = artifact_path(target_arch, release_mode, artifact_name)

        target = SshTarget(user=config.target_user, host=config.target_name)
        self.trust.ensure_trust(target)

        target_dest = config.resolved_dest()
        self.provisioner.ensure_directory(target, target_dest)

        self.deployer.copy(local_path, target, target_dest)

        self.log.info("Deployment complete.")
        return config
