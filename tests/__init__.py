"""EMPDEPT test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.
- contract/     : Behavior every FixtureStore implementation must honor.
- e2e/          : The command line, invoked through click's CliRunner.
- helpers/      : Shared utilities (no tests here).

General guidance
- Keep tests fast and deterministic; all data is in memory.
- Property-based tests live with the layer they exercise and use @pytest.mark.property.
- Markers: unit, contract, e2e, property
"""
