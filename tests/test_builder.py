import os
import subprocess

import pytest

from pluginrelease.builder import BuildError, PluginBuilder
from pluginrelease.executor import SubprocessExecutor
from pluginrelease.model import CmdInput, Config

FILTER_PLUGIN_TEXT = "[FilterPlugin]\n/Docs/My_Docs.pdf\n"


class FakeExecutor(SubprocessExecutor):
    """Creates folders as a real build would, and an empty archive."""

    def __init__(self):
        self.builds = []
        self.zips = []

    def build(self, build_script_path, plugin_location, output_dir):
        self.builds.append((build_script_path, plugin_location, output_dir))
        for folder in ("Source", "Intermediate", "Binaries", "Build", "Content", "Resources"):
            os.makedirs(os.path.join(output_dir, folder), exist_ok=True)

    def zip(self, source_dir):
        self.zips.append(source_dir)
        with open(source_dir + ".zip", "wb"):
            pass


class FailingBuildExecutor(FakeExecutor):
    def build(self, build_script_path, plugin_location, output_dir):
        raise subprocess.CalledProcessError(1, ["cmd"])


class FailingZipExecutor(FakeExecutor):
    def zip(self, source_dir):
        raise subprocess.CalledProcessError(2, ["powershell"])


def _make_file(path, content=b""):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(content)
    return path


@pytest.fixture
def layout(tmp_path):
    engine = tmp_path / "Engine"
    engine.mkdir()
    output = tmp_path / "Output"
    output.mkdir()
    uplugin = _make_file(tmp_path / "MyPlugin.uplugin")
    _make_file(engine / "UE_5.4" / "RunUAT.bat")
    docs = _make_file(tmp_path / "fixtures" / "testing.pdf", b"%PDF-1.4 test")
    _make_file(tmp_path / "FilterPlugin.ini", FILTER_PLUGIN_TEXT.encode())
    config = Config(
        engine_base_directory=str(engine),
        build_script_path="RunUAT.bat",
        output_base_directory=str(output),
        plugin_path=str(uplugin),
        docs_path=str(docs),
    )
    return {
        "config": config,
        "exec_path": str(tmp_path / "script.exe"),
        "release": output / "MyPlugin_5.4",
        "output": output,
        "tmp": tmp_path,
    }


def test_unneeded_folders():
    builder = PluginBuilder(Config(), FakeExecutor())
    assert sorted(builder.unneeded_folders()) == ["Binaries", "Build", "Intermediate", "Saved"]


def test_collect_versions():
    builder = PluginBuilder(Config(), FakeExecutor())
    assert builder.collect_versions("5.3,5.4,5.5") == ["5.3", "5.4", "5.5"]


def test_build_script_path(tmp_path):
    engine = tmp_path / "Engine"
    _make_file(engine / "UE_5.4" / "RunUAT.bat")
    config = Config(engine_base_directory=str(engine), build_script_path="RunUAT.bat")
    builder = PluginBuilder(config, FakeExecutor())
    expected = os.path.join(str(engine), "UE_5.4", "RunUAT.bat")
    assert builder.build_script_path("5.4") == expected


def test_build_script_path_missing_raises(tmp_path):
    config = Config(engine_base_directory=str(tmp_path), build_script_path="RunUAT.bat")
    builder = PluginBuilder(config, FakeExecutor())
    with pytest.raises(BuildError):
        builder.build_script_path("5.4")


def test_build_plugin(layout):
    executor = FakeExecutor()
    builder = PluginBuilder(layout["config"], executor)

    releases = builder.build_all(CmdInput("5.4", False), layout["exec_path"])

    release = layout["release"]
    assert releases == [str(release)]
    assert not (release / "Binaries").exists()
    assert not (release / "Intermediate").exists()
    assert not (release / "Build").exists()
    assert (release / "Source").is_dir()
    assert (release / "Resources").is_dir()
    assert (release / "Content").is_dir()
    assert (release / "Docs" / "My_Docs.pdf").read_bytes() == b"%PDF-1.4 test"
    assert (release / "Config" / "FilterPlugin.ini").read_text() == FILTER_PLUGIN_TEXT
    assert (layout["output"] / "MyPlugin_5.4.zip").is_file()


def test_build_passes_script_plugin_and_output(layout):
    executor = FakeExecutor()
    builder = PluginBuilder(layout["config"], executor)
    builder.build_all(CmdInput("5.4", False), layout["exec_path"])
    config = layout["config"]
    script = os.path.join(config.engine_base_directory, "UE_5.4", "RunUAT.bat")
    assert executor.builds == [(script, config.plugin_path, str(layout["release"]))]


def test_skip_docs_leaves_out_documentation(layout):
    executor = FakeExecutor()
    builder = PluginBuilder(layout["config"], executor)
    builder.build_all(CmdInput("5.4", True), layout["exec_path"])
    release = layout["release"]
    assert not (release / "Docs").exists()
    assert not (release / "Config").exists()
    assert executor.zips == [str(release)]


def test_blank_versions_are_skipped(layout):
    executor = FakeExecutor()
    builder = PluginBuilder(layout["config"], executor)
    releases = builder.build_all(CmdInput(" 5.4 ,,", True), layout["exec_path"])
    assert releases == [str(layout["release"])]
    assert len(executor.builds) == 1


def test_missing_filter_plugin_skips_zip(layout):
    (layout["tmp"] / "FilterPlugin.ini").unlink()
    executor = FakeExecutor()
    builder = PluginBuilder(layout["config"], executor)
    builder.build_all(CmdInput("5.4", False), layout["exec_path"])
    assert executor.zips == []
    assert not (layout["output"] / "MyPlugin_5.4.zip").exists()


def test_failed_build_raises_and_removes_output(layout):
    builder = PluginBuilder(layout["config"], FailingBuildExecutor())
    with pytest.raises(BuildError):
        builder.build_all(CmdInput("5.4", False), layout["exec_path"])
    assert not layout["output"].exists()


def test_failed_zip_only_warns(layout, capsys):
    builder = PluginBuilder(layout["config"], FailingZipExecutor())
    releases = builder.build_all(CmdInput("5.4", True), layout["exec_path"])
    assert releases == [str(layout["release"])]
    assert "Failed to zip using PowerShell" in capsys.readouterr().out