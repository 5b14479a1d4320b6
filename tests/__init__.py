"""pyutils test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.
- integration/  : Real interactions with the filesystem.
- e2e/          : The ``pyutils`` command line, driven through Click's CliRunner.

General guidance
- Keep unit fast and deterministic; in-memory streams stand in for the console.
- Integration uses pytest's ``tmp_path`` for every file it touches.
- Property-based tests live with the layer they exercise and use @pytest.mark.property.
- Markers: unit, integration, e2e, property
"""
