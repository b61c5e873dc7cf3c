"""File operations: reading the config, building paths, copying and deleting."""

from __future__ import annotations

import json
import ntpath
import os
import shutil
from pathlib import Path
from typing import Union

from pluginrelease.model import (
    CONFIG_DIRECTORY_NAME,
    PLUGIN_CONFIGURATION_INI_FILE_NAME,
    Config,
)

PathLike = Union[str, "os.PathLike[str]"]


def create_config(path: PathLike) -> Config:
    """Read the JSON config file at ``path``.

    Raises OSError if the file cannot be read and ValueError if it does not
    hold a valid config object.
    """
    with open(path, encoding="utf-8") as handle:
        text = handle.read()
    data, _ = json.JSONDecoder().raw_decode(text.lstrip())
    return Config.from_mapping(data)


def full_path_in_exec_dir(exe_path: PathLike, filename: str) -> str:
    """Return the path of ``filename`` next to the executable."""
    return os.path.join(os.path.dirname(os.fspath(exe_path)), filename)


def path_exists(path: PathLike) -> bool:
    """Tell whether the path exists."""
    return os.path.exists(path)


def paths_equal(p1: PathLike, p2: PathLike) -> bool:
    """Tell whether two paths resolve to the same absolute path."""
    try:
        return os.path.abspath(os.path.normpath(p1)) == os.path.abspath(os.path.normpath(p2))
    except (OSError, ValueError):
        return False


def is_file(path: PathLike) -> bool:
    """Tell whether the path exists and is not a directory."""
    return os.path.exists(path) and not os.path.isdir(path)


def plugin_name(plugin_location: PathLike) -> str:
    """Return the plugin file's name without its extension."""
    location = os.fspath(plugin_location)
    base = os.path.basename(location.rstrip(os.sep + (os.altsep or "")))
    tail = location.rsplit(os.sep, 1)[-1]
    if os.altsep:
        tail = tail.rsplit(os.altsep, 1)[-1]
    dot = tail.rfind(".")
    extension = tail[dot:] if dot >= 0 else ""
    if extension and base.endswith(extension):
        return base[: -len(extension)]
    return base


def combine_output_dir(plugin_name: str, version: str, output_dir: PathLike) -> str:
    """Return the release folder for one plugin and engine version."""
    return os.path.join(os.fspath(output_dir), f"{plugin_name}_{version}")


def bat_file_path(engine_base_dir: PathLike, version: str, build_script_path: str) -> str:
    """Return the build script path inside the engine folder of ``version``."""
    return os.path.join(os.fspath(engine_base_dir), f"UE_{version}", build_script_path)


def _remove_all(path: str) -> None:
    if os.path.isdir(path) and not os.path.islink(path):
        shutil.rmtree(path)
    else:
        try:
            os.remove(path)
        except FileNotFoundError:
            pass


def remove_directory(path: PathLike) -> bool:
    """Delete a directory tree unless the path is dangerous to delete.

    Returns True when the path was deleted or was already absent.
    """
    target = os.fspath(path)
    if is_dangerous_path(target):
        print("Output directory is dangerous to delete.")
        return False
    try:
        _remove_all(target)
    except OSError as error:
        print("Failed to remove output directory", error)
        return False
    return True


def is_dangerous_path(path: PathLike) -> bool:
    """Tell whether the path is a drive root or lies under a Windows folder."""
    lower = ntpath.normpath(os.fspath(path)).lower()
    drive, _ = ntpath.splitdrive(lower)
    if lower == ntpath.join(drive, "\\"):
        return True
    return "\\windows" in lower


def delete_subfolder(base_dir: PathLike, dir_to_delete: str) -> None:
    """Delete one subfolder of ``base_dir``, warning on failure."""
    full_path = os.path.join(os.fspath(base_dir), dir_to_delete)
    try:
        _remove_all(full_path)
    except OSError as error:
        print("⚠️ Failed to delete:", full_path, "->", error)


def create_config_folder_with_ini(release_dir: PathLike, source_ini_path: PathLike) -> str:
    """Create the release's Config folder and copy the INI file into it.

    Returns the path of the copied INI file.
    """
    config_dir = os.path.join(os.fspath(release_dir), CONFIG_DIRECTORY_NAME)
    try:
        os.makedirs(config_dir, exist_ok=True)
    except OSError as error:
        print("⚠️ Failed to create Config dir:", error)
        raise
    dest_ini = os.path.join(config_dir, PLUGIN_CONFIGURATION_INI_FILE_NAME)
    try:
        copy_file(source_ini_path, dest_ini)
    except OSError as error:
        print("⚠️ Failed to copy INI file:", error)
        raise
    return dest_ini


def copy_docs(release_dir: PathLike, docs_path: PathLike, filter_plugin_file_path: PathLike) -> str:
    """Copy the documentation to the path named on the INI file's second line.

    Returns the destination path. Raises ValueError if the INI file has no
    second line and OSError if reading or copying fails.
    """
    text = Path(filter_plugin_file_path).read_text(encoding="utf-8")
    lines = text.strip().split("\n")
    if len(lines) < 2:
        raise ValueError("FilterPlugin.ini must contain a second line for the doc path")

    relative_doc_path = lines[1].strip()
    if relative_doc_path.startswith("/"):
        relative_doc_path = relative_doc_path[1:]
    target_doc_path = os.path.join(os.fspath(release_dir), relative_doc_path)

    os.makedirs(os.path.dirname(target_doc_path), exist_ok=True)
    copy_file(docs_path, target_doc_path)
    return target_doc_path


def copy_file(src: PathLike, dest: PathLike) -> None:
    """Copy the contents of ``src`` to ``dest``, replacing it."""
    with open(src, "rb") as source, open(dest, "wb") as destination:
        shutil.copyfileobj(source, destination)