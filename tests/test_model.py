import pytest

from pluginrelease.model import CmdInput, Config


def test_round_trip_through_mapping():
    config = Config(
        engine_base_directory="engine",
        build_script_path="RunUAT.bat",
        output_base_directory="out",
        plugin_path="MyPlugin.uplugin",
        docs_path="docs.pdf",
    )
    assert Config.from_mapping(config.to_mapping()) == config


def test_to_mapping_uses_json_key_names():
    mapping = Config(engine_base_directory="engine", build_script_path="RunUAT.bat").to_mapping()
    assert mapping["engineBaseDirectory"] == "engine"
    assert mapping["buildScriptPath"] == "RunUAT.bat"
    assert set(mapping) == {
        "engineBaseDirectory",
        "buildScriptPath",
        "outputBaseDirectory",
        "pluginPath",
        "docsPath",
    }


def test_missing_keys_default_to_empty():
    config = Config.from_mapping({"pluginPath": "MyPlugin.uplugin"})
    assert config.plugin_path == "MyPlugin.uplugin"
    assert config.docs_path == ""
    assert config.engine_base_directory == ""


def test_keys_match_case_insensitively_and_unknown_keys_are_ignored():
    config = Config.from_mapping({"PLUGINPATH": "p", "somethingElse": 3})
    assert config == Config(plugin_path="p")


def test_null_value_stays_empty():
    assert Config.from_mapping({"docsPath": None}).docs_path == ""


def test_non_string_value_raises():
    with pytest.raises(ValueError):
        Config.from_mapping({"pluginPath": 5})


def test_non_object_raises():
    with pytest.raises(ValueError):
        Config.from_mapping(["pluginPath"])


def test_cmd_input_defaults():
    cmd_input = CmdInput()
    assert cmd_input.engine_versions == ""
    assert cmd_input.skip_docs is False