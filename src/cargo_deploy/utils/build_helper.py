"""Cross compilation and artifact discovery"""
import json
import os
from typing import Any, Dict, Optional

from cargo_deploy.core.protocols import ProcessExecutor, Logger
from cargo_deploy.deploy.exceptions import (
    BuildError,
    MetadataError,
    NoBinaryTargetError,
    AmbiguousProjectError,
)


def profile_name(release_mode: bool) -> str:
    return "release" if release_mode else "debug"


def artifact_path(target_arch: str, release_mode: bool, artifact_name: str) -> str:
    """
    Location of the built executable.

    Example:
        artifact_path("aarch64-unknown-linux-gnu", True, "blinky")
        -> "target/aarch64-unknown-linux-gnu/release/blinky"
    """
    return f"target/{target_arch}/{profile_name(release_mode)}/{artifact_name}"


def find_root_package(metadata: Dict[str, Any]) -> Optional[Dict[str, Any]]:
    """
    Return the package cargo treats as the current one.

    With a dependency graph present this is the package whose id is
    resolve.root, i.e. the crate of the working directory (a workspace member
    included). Without one (--no-deps output) it falls back to the package
    whose manifest is <workspace_root>/Cargo.toml.

    None when there is no such package, e.g. at the top of a virtual
    workspace.
    """
    resolve = metadata.get('resolve')
    if resolve is not None:
        root_id = resolve.get('root')
        if root_id is None:
            return None
        for package in metadata.get('packages') or []:
            if package.get('id') == root_id:
                return package
        return None

    workspace_root = metadata.get('workspace_root')
    if not workspace_root:
        return None

    root_manifest = os.path.normpath(os.path.join(workspace_root, 'Cargo.toml'))
    for package in metadata.get('packages') or []:
        manifest_path = package.get('manifest_path')
        if manifest_path and os.path.normpath(manifest_path) == root_manifest:
            return package
    return None


class CrossBuilder:
    """Builds the project with `cross` and finds the binary it produces.

    Args:
        process_executor: Subprocess execution abstraction
        logger: Logging abstraction
        build_tool: Cross-compiling cargo wrapper (default: cross)
        cargo: Cargo executable used for the metadata query
    """

    def __init__(
        self,
        process_executor: ProcessExecutor,
        logger: Logger,
        build_tool: str = "cross",
        cargo: str = "cargo"
    ):
        self.process = process_executor
        self.log = logger
        self.build_tool = build_tool
        self.cargo = cargo

    def build(self, target_arch: str, release_mode: bool) -> None:
        """
        Cross-compile for target_arch. Build output goes straight to the terminal.

        Raises:
            BuildError: If the build tool is missing or exits non-zero
        """
        self.log.info(f"Building ({profile_name(release_mode)}) for {target_arch}...")

        cmd = [self.build_tool, 'build', '--target', target_arch]
        if release_mode:
            cmd.append('--release')

        self.log.debug(f"Running: {' '.join(cmd)}")
        try:
            result = self.process.run(cmd)
        except OSError as e:
            raise BuildError(f"Failed to run {self.build_tool} build: {e}") from e

        if result.returncode != 0:
            raise BuildError("Build failed")

    def resolve_artifact_name(self) -> str:
        """
        Name of the first binary target of the root package.

        Raises:
            MetadataError: If `cargo metadata` fails or prints invalid JSON
            AmbiguousProjectError: If there is no root package
            NoBinaryTargetError: If the root package has no bin target
        """
        cmd = [self.cargo, 'metadata', '--format-version', '1']
        self.log.debug(f"Running: {' '.join(cmd)}")
        try:
            result = self.process.run(cmd, capture_output=True)
        except OSError as e:
            raise MetadataError(f"Failed to get cargo metadata: {e}") from e

        if result.returncode != 0:
            detail = (result.stderr or '').strip()
            raise MetadataError(
                "Failed to get cargo metadata" + (f":\n{detail}" if detail else "")
            )

        try:
            metadata = json.loads(result.stdout or '')
        except ValueError as e:
            raise MetadataError(f"Invalid JSON from cargo metadata: {e}") from e

        if not isinstance(metadata, dict):
            raise MetadataError("Invalid JSON from cargo metadata: expected an object")

        package = find_root_package(metadata)
        if package is None:
            raise AmbiguousProjectError(
                "No root package found. Run from a package directory, not the root of a virtual workspace."
            )

        for target in package.get('targets') or []:
            if 'bin' in (target.get('kind') or []):
                return target['name']

        raise NoBinaryTargetError(
            f"No binary target found in package '{package.get('name', '?')}'"
        )
