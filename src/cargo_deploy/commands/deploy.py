"""Deploy command - build, set up SSH, and copy the executable to the device"""
from cargo_deploy.core import (
    ConsoleLogger,
    RealFileSystemService,
    SubprocessExecutor,
    SystemEnvironmentProvider,
    ConsolePrompter,
)
from cargo_deploy.deploy import (
    DeploymentError,
    TrustBootstrapper,
    RemoteProvisioner,
    ScpDeployer,
)
from cargo_deploy.utils.build_helper import CrossBuilder
from cargo_deploy.utils.config import ConfigStore, CONFIG_FILE
from cargo_deploy.utils.runner import DeploymentRunner


def setup_parser(parser):
    """Setup argument parser for deploy command"""
    parser.add_argument(
        '--debug',
        action='store_true',
        help='Build and deploy the debug profile (default: release)'
    )
    parser.add_argument(
        '--config',
        default=CONFIG_FILE,
        help=f'Deploy config file, .json or .yaml (default: {CONFIG_FILE})'
    )
    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Print every external command before running it'
    )


def create_runner(args) -> DeploymentRunner:
    """Wire the production runner with real dependencies"""
    logger = ConsoleLogger(verbose=args.verbose)
    filesystem = RealFileSystemService()
    process = SubprocessExecutor()

    return DeploymentRunner(
        config_store=ConfigStore(filesystem, logger, path=args.config),
        builder=CrossBuilder(process, logger),
        trust=TrustBootstrapper(process, filesystem, SystemEnvironmentProvider(), logger),
        provisioner=RemoteProvisioner(process, logger),
        deployer=ScpDeployer(process, logger),
        prompter=ConsolePrompter(),
        logger=logger
    )


def execute(args, runner=None):
    """Execute deploy command"""
    if runner is None:
        runner = create_runner(args)

    try:
        runner.run(release_mode=not args.debug)
    except DeploymentError as e:
        runner.log.error(str(e))
        return 1

    return 0
