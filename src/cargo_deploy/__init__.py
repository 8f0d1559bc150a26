"""
cargo-deploy - cross-build a Rust binary and push it to a device over SSH

Builds the project with `cross`, sets up passwordless SSH on first use, and
copies the executable into a directory on the device.
"""
import argparse
import sys

__version__ = "0.1.0"
DIST_NAME = "cargo-deploy"


def main(argv=None):
    """Main CLI entry point"""
    from cargo_deploy.commands import deploy

    parser = argparse.ArgumentParser(
        prog='cargo-deploy',
        description='Cross-build the current Cargo project and copy it to a remote device',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog='''
Examples:
  cargo deploy                      # Release build, deploy to configured device
  cargo deploy --debug              # Debug build
  cargo deploy --config pi.yaml     # Use another config file
  cargo deploy -v                   # Show every command being run

Settings are kept in cargo_deploy.json in the current directory.
        '''
    )
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    deploy.setup_parser(parser)

    if argv is None:
        argv = sys.argv[1:]
    # cargo runs `cargo-deploy deploy ...` for `cargo deploy ...`
    if argv and argv[0] == 'deploy':
        argv = argv[1:]

    args = parser.parse_args(argv)

    try:
        sys.exit(deploy.execute(args))
    except KeyboardInterrupt:
        print("\n\nInterrupted by user")
        sys.exit(130)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        import traceback
        traceback.print_exc()
        sys.exit(1)
