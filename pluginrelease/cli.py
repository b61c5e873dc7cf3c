"""Command line entry point for building plugin releases."""

from __future__ import annotations

import argparse
import os
import re
import sys

from pluginrelease.builder import BuildError, PluginBuilder
from pluginrelease.executor import UnsupportedPlatformError, new_executor
from pluginrelease.filehandler import (
    create_config,
    full_path_in_exec_dir,
    is_file,
    path_exists,
    paths_equal,
)
from pluginrelease.model import CONFIG_FILE, CmdInput, Config

_VERSIONS_PATTERN = re.compile(r"\d+\.\d+(,\d+\.\d+)*", re.ASCII)

_DESCRIPTION = """Build Unreal plugins in batch to various Unreal Engine versions.

REQUIRES a config.json file next to the executable, which must contain:
  - engineBaseDirectory: the folder that contains the UE_5.1, UE_5.2 etc folders
  - buildScriptPath: the path to the RunUAT file within the engine dir
  - outputBaseDirectory: the path to the folder that will contain the built content
  - pluginPath: the path to the .uplugin file to be built
  - docsPath: (optional) the path to the pdf documentation

If documentation is enabled, a FilterPlugin.ini file must also exist next to the executable.
It should contain the expected internal documentation path like so:

  [FilterPlugin]
  /Documentation/My_Documentation.pdf"""


def validate_engine_versions(engine_versions: str) -> bool:
    """Tell whether the versions are comma-separated MAJOR.MINOR values."""
    if not engine_versions:
        print("Missing required flag: --engine-versions is required.")
        return False
    if not _VERSIONS_PATTERN.fullmatch(engine_versions):
        print(
            "Spelling error in unreal engine versions. "
            "Must be MAJOR.MINOR e.g. 5.6, separated by commas."
        )
        return False
    return True


def is_plugin_location_valid(plugin_path: str) -> bool:
    """Tell whether the plugin path names an existing file."""
    if not plugin_path:
        print("--plugin-location is mandatory.")
        return False
    if not path_exists(plugin_path):
        print("Plugin file not found:", plugin_path)
        return False
    if not is_file(plugin_path):
        print("Plugin location needs to point to a file, not a directory.")
        return False
    return True


def is_config_valid(config: Config) -> bool:
    """Check the paths of a config.

    The build script path is relative to each engine folder, so only its
    presence is checked here.
    """
    return (
        path_exists(config.engine_base_directory)
        and path_exists(config.output_base_directory)
        and not paths_equal(config.engine_base_directory, config.output_base_directory)
        and is_plugin_location_valid(config.plugin_path)
        and config.build_script_path != ""
    )


def load_and_validate_config(config_path: str) -> Config:
    """Read and check the config file.

    Raises OSError if it cannot be read and ValueError if it is malformed or
    names invalid paths.
    """
    try:
        config = create_config(config_path)
    except (OSError, ValueError):
        print("Failed to load config file")
        raise
    if not is_config_valid(config):
        print("The config file contains invalid path.")
        raise ValueError("invalid config")
    return config


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="unreal-plugin-release",
        description=_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--engine-versions",
        default="",
        help="Comma-separated list of Unreal engine versions",
    )
    parser.add_argument(
        "--skip-docs",
        action="store_true",
        help="Omit copying documentation",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the command and return its exit status."""
    args = _parser().parse_args(argv)
    cmd_input = CmdInput(engine_versions=args.engine_versions, skip_docs=args.skip_docs)

    if not validate_engine_versions(cmd_input.engine_versions):
        return 1

    exec_path = os.path.abspath(sys.argv[0])
    try:
        config = load_and_validate_config(full_path_in_exec_dir(exec_path, CONFIG_FILE))
    except (OSError, ValueError):
        return 1

    try:
        PluginBuilder(config, new_executor()).build_all(cmd_input, exec_path)
    except UnsupportedPlatformError as error:
        print(error)
        return 1
    except BuildError:
        return 1

    print("✅ All builds completed successfully.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())