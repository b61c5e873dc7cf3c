"""Configuration and command-line input models, plus shared file names."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import Any

CONFIG_FILE = "config.json"
CONFIG_DIRECTORY_NAME = "Config"
PLUGIN_CONFIGURATION_INI_FILE_NAME = "FilterPlugin.ini"

_JSON_KEYS = {
    "engine_base_directory": "engineBaseDirectory",
    "build_script_path": "buildScriptPath",
    "output_base_directory": "outputBaseDirectory",
    "plugin_path": "pluginPath",
    "docs_path": "docsPath",
}
_FIELDS_BY_FOLDED_KEY = {key.lower(): name for name, key in _JSON_KEYS.items()}


@dataclass
class Config:
    """Settings read from the JSON configuration file."""

    engine_base_directory: str = ""
    build_script_path: str = ""
    output_base_directory: str = ""
    plugin_path: str = ""
    docs_path: str = ""

    @classmethod
    def from_mapping(cls, data: Any) -> Config:
        """Build a config from a decoded JSON object.

        Keys match case-insensitively, unknown keys are ignored, missing or
        null values stay empty. Raises ValueError for a non-object or a
        non-string value.
        """
        if not isinstance(data, Mapping):
            raise ValueError("config must be a JSON object")
        values: dict[str, str] = {}
        for key, value in data.items():
            name = _FIELDS_BY_FOLDED_KEY.get(str(key).lower())
            if name is None or value is None:
                continue
            if not isinstance(value, str):
                raise ValueError(f"config value for {key!r} must be a string")
            values[name] = value
        return cls(**values)

    def to_mapping(self) -> dict[str, str]:
        """Return the config as a JSON-ready dict with the file's key names."""
        return {_JSON_KEYS[f.name]: getattr(self, f.name) for f in fields(self)}


@dataclass
class CmdInput:
    """Options given on the command line."""

    engine_versions: str = ""
    skip_docs: bool = False