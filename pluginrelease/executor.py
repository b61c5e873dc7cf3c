"""Running the engine build script and the archiver as subprocesses."""

from __future__ import annotations

import abc
import subprocess
import sys


class UnsupportedPlatformError(RuntimeError):
    """Raised when no executor exists for the current platform."""


class SubprocessExecutor(abc.ABC):
    """Runs the external commands that build and package a plugin."""

    @abc.abstractmethod
    def build(self, build_script_path: str, plugin_location: str, output_dir: str) -> None:
        """Build the plugin into ``output_dir``; raise on failure."""

    @abc.abstractmethod
    def zip(self, source_dir: str) -> None:
        """Archive ``source_dir`` into ``source_dir.zip``; raise on failure."""


class WindowsExecutor(SubprocessExecutor):
    """Calls the build batch file through cmd and archives with PowerShell."""

    def builder_command(self, build_script_path: str, plugin_location: str, output_dir: str) -> list[str]:
        """Return the command line that runs the build script."""
        return [
            "cmd",
            "/C",
            build_script_path,
            "BuildPlugin",
            f"-Plugin={plugin_location}",
            f"-Package={output_dir}",
            "-Rocket",
        ]

    def zip_command(self, source_dir: str) -> list[str]:
        """Return the command line that archives the release folder."""
        script = (
            f'Compress-Archive -Path "{source_dir}\\*" '
            f'-DestinationPath "{source_dir}.zip" -Force'
        )
        return ["powershell", "-Command", script]

    def build(self, build_script_path: str, plugin_location: str, output_dir: str) -> None:
        _run(self.builder_command(build_script_path, plugin_location, output_dir))

    def zip(self, source_dir: str) -> None:
        _run(self.zip_command(source_dir))


def _run(command: list[str]) -> None:
    # Output goes straight to this process's stdout and stderr.
    subprocess.run(command, check=True)


def new_executor(platform: str | None = None) -> SubprocessExecutor:
    """Return the executor for ``platform`` (the running one by default)."""
    name = sys.platform if platform is None else platform
    if name in ("windows", "win32"):
        return WindowsExecutor()
    if name == "darwin" or name.startswith("linux"):
        raise UnsupportedPlatformError(f"no build executor is available for {name}")
    raise UnsupportedPlatformError(f"unsupported OS: {name}")