"""Builds a plugin for several engine versions and packages each release."""

from __future__ import annotations

import subprocess
from dataclasses import dataclass

from pluginrelease.executor import SubprocessExecutor
from pluginrelease.filehandler import (
    bat_file_path,
    combine_output_dir,
    copy_docs,
    create_config_folder_with_ini,
    delete_subfolder,
    full_path_in_exec_dir,
    path_exists,
    plugin_name,
    remove_directory,
)
from pluginrelease.model import PLUGIN_CONFIGURATION_INI_FILE_NAME, CmdInput, Config

_UNNEEDED_FOLDERS = ("Binaries", "Build", "Intermediate", "Saved")
_BANNER = "======================================"


class BuildError(RuntimeError):
    """Raised when a build script is missing or a build fails."""


@dataclass
class PluginBuilder:
    """Builds, cleans and archives plugin releases described by a config."""

    config: Config
    runner: SubprocessExecutor

    def build_all(self, cmd_input: CmdInput, exec_path: str) -> list[str]:
        """Build the plugin for every requested engine version.

        Returns the release folders in build order. Raises BuildError on the
        first version whose build script is missing or whose build fails.
        """
        name = plugin_name(self.config.plugin_path)
        releases = []
        for raw_version in self.collect_versions(cmd_input.engine_versions):
            version = raw_version.strip()
            if not version:
                continue
            output_dir = combine_output_dir(name, version, self.config.output_base_directory)
            self._build_version(version, output_dir)
            self._post_process(output_dir, exec_path, cmd_input)
            releases.append(output_dir)
        return releases

    def collect_versions(self, engine_versions: str) -> list[str]:
        """Split the comma-separated version list."""
        return engine_versions.split(",")

    def unneeded_folders(self) -> list[str]:
        """Return the folders removed from every release."""
        return list(_UNNEEDED_FOLDERS)

    def build_script_path(self, version: str) -> str:
        """Return the build script for ``version``; raise BuildError if absent."""
        path = bat_file_path(
            self.config.engine_base_directory, version, self.config.build_script_path
        )
        if not path_exists(path):
            print("Build script not found for engine version", version, ":", path)
            raise BuildError(f"build script not found for engine version {version}: {path}")
        return path

    def _build_version(self, version: str, output_dir: str) -> None:
        script = self.build_script_path(version)

        print(_BANNER)
        print("Building for UE version", version)
        print("Output to:", output_dir)
        print(_BANNER)

        try:
            self.runner.build(script, self.config.plugin_path, output_dir)
        except (OSError, subprocess.SubprocessError) as error:
            print("Build failed for", version, ":", error)
            remove_directory(self.config.output_base_directory)
            raise BuildError(f"build failed for {version}: {error}") from error

    def _post_process(self, output_dir: str, exec_path: str, cmd_input: CmdInput) -> None:
        for folder in self.unneeded_folders():
            delete_subfolder(output_dir, folder)

        docs_path = self.config.docs_path
        if docs_path and not cmd_input.skip_docs:
            try:
                self._add_documentation(output_dir, exec_path, docs_path)
            except (OSError, ValueError):
                return

        try:
            self.runner.zip(output_dir)
        except (OSError, subprocess.SubprocessError) as error:
            print("⚠️ Failed to zip using PowerShell:", error)

    def _add_documentation(self, release_dir: str, exec_path: str, docs_path: str) -> None:
        source_ini = full_path_in_exec_dir(exec_path, PLUGIN_CONFIGURATION_INI_FILE_NAME)
        create_config_folder_with_ini(release_dir, source_ini)
        copy_docs(release_dir, docs_path, source_ini)