# pluginrelease

Build an Unreal Engine plugin for several engine versions in one go, strip
the folders a release does not need, optionally add the documentation, and
zip each result.

## Installation

```
pip install .
```

## Setup

The command reads a `config.json` file from the folder of the program that
was started, that is the directory of `sys.argv[0]`. With the installed
`pluginrelease` launcher, that is the folder the launcher lives in. The file
looks like this:

```json
{
  "engineBaseDirectory": "C:\\Program Files\\Epic Games",
  "buildScriptPath": "Engine\\Build\\BatchFiles\\RunUAT.bat",
  "outputBaseDirectory": "D:\\Releases",
  "pluginPath": "D:\\Projects\\MyPlugin\\MyPlugin.uplugin",
  "docsPath": "D:\\Projects\\MyPlugin\\Manual.pdf"
}
```

- `engineBaseDirectory`: the folder that holds `UE_5.1`, `UE_5.2` and so on.
  It must exist.
- `buildScriptPath`: the path to `RunUAT` inside each engine folder. It must
  not be empty. It is checked per version, as
  `<engineBaseDirectory>/UE_<version>/<buildScriptPath>`.
- `outputBaseDirectory`: where the built plugins go. It must exist and must
  not be the same folder as the engine base directory.
- `pluginPath`: the `.uplugin` file to build. It must be an existing file.
- `docsPath`: optional, a PDF to ship with the plugin.

Key names are matched without regard to case, unknown keys are ignored, and
every value must be a string.

If documentation is enabled, put a `FilterPlugin.ini` file next to the
`config.json`. Its second line gives the path of the documentation inside the
plugin:

```
[FilterPlugin]
/Docs/My_Docs.pdf
```

## Usage

```
pluginrelease --engine-versions 5.4,5.5
pluginrelease --engine-versions 5.6 --skip-docs
```

`--engine-versions` is required. Versions must be written as `MAJOR.MINOR`
and separated by commas, with no spaces.

For every version the tool:

1. Checks that the build script exists for that version, then runs
   `RunUAT BuildPlugin -Plugin=<pluginPath> -Package=<release folder> -Rocket`,
   where the release folder is `<outputBaseDirectory>/<PluginName>_<version>`.
2. Removes `Binaries`, `Build`, `Intermediate` and `Saved` from the result.
3. If `docsPath` is set and `--skip-docs` is not given, copies
   `FilterPlugin.ini` into the release's `Config/` folder and the PDF to the
   path named on the file's second line. If this step fails, the release is
   left unzipped.
4. Zips the folder next to itself as `<PluginName>_<version>.zip` with
   PowerShell's `Compress-Archive`. A failed zip prints a warning and the
   run goes on.

The command exits with status 1 if the arguments or the config are invalid,
if a build script is missing, or if a build fails. When a build fails, the
whole output base directory is deleted first, unless it is a drive root or
lies under a `\windows` folder.

## Using it from Python

```python
from pluginrelease.builder import PluginBuilder
from pluginrelease.executor import new_executor
from pluginrelease.filehandler import create_config
from pluginrelease.model import CmdInput

config = create_config("config.json")
builder = PluginBuilder(config, new_executor())
releases = builder.build_all(CmdInput(engine_versions="5.4,5.5"), "C:\\Tools\\run.exe")
```

`build_all` returns the release folders it produced and raises
`pluginrelease.builder.BuildError` when a build script is missing or a build
fails. `pluginrelease.cli.load_and_validate_config` reads and checks a config
the way the command does.

The external commands are run through a `SubprocessExecutor`, which has two
methods, `build(build_script_path, plugin_location, output_dir)` and
`zip(source_dir)`. Pass your own subclass to `PluginBuilder` to build or
archive in a different way.

## Limitations

Only `WindowsExecutor` is provided; it runs the build through `cmd` and
archives with PowerShell. On macOS and Linux, `new_executor` raises
`UnsupportedPlatformError` and the command reports the platform as
unsupported. To build there, write a `SubprocessExecutor` subclass and use
`PluginBuilder` from Python.

## Running the tests

```
pip install .[test]
pytest
```