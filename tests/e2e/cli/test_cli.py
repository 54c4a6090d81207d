"""End-to-end tests for the `empdept` command line.

These tests invoke the real command tree: listing, running and showing the
tutorial scenarios, printing the fixture tables, verbosity flags, logger-level
overrides and the flight recorder.
"""

import re
from pathlib import Path

import pytest

from empdept.adapters.fixture_store import InMemoryFixtureStore
from empdept.bootstrap import AppContainer
from empdept.entrypoints.cli import main
from empdept.entrypoints.cli.main import empdept
from empdept.service_layer.runner import ScenarioRunner
from empdept.service_layer.scenarios import Scenario

# pylint: disable=unused-argument

LOG_PATH = "flight_recorder.log"


def invoke(runner, args, **env):
    """Invoke the CLI with a wide console and a local flight recorder file."""
    env = {"COLUMNS": "200", "EMPDEPT_LOG_PATH": LOG_PATH, **env}
    return runner.invoke(empdept, args, env=env)


def read_log(path: str = LOG_PATH) -> str:
    """Return the flight recorder file contents."""
    return Path(path).read_text(encoding="utf-8")


def assert_in_output(pattern: str, output: str) -> None:
    """Assert that a regex pattern is found in the output string."""
    if not re.search(pattern, output, re.MULTILINE):
        raise AssertionError(f"Pattern '{pattern}' not found in output:\n{output}")


def assert_not_in_output(pattern: str, output: str) -> None:
    """Assert that a regex pattern is NOT found in the output string."""
    if re.search(pattern, output, re.MULTILINE):
        raise AssertionError(f"Pattern '{pattern}' found in output:\n{output}")


# --- Top-level group ---


def test_help_lists_subcommands(runner, fs):
    """--help names both subcommands."""
    result = invoke(runner, ["--help"])
    assert result.exit_code == 0
    assert_in_output(r"scenarios", result.output)
    assert_in_output(r"tables", result.output)


def test_version(runner, fs):
    """--version reports the package version."""
    result = invoke(runner, ["--version"])
    assert result.exit_code == 0
    assert "0.1.0" in result.output


# --- scenarios ---


def test_scenarios_list(runner, fs):
    """list prints every scenario with its SQL."""
    result = invoke(runner, ["scenarios", "list"])
    assert result.exit_code == 0
    for name in ("salesmen", "salary_grades", "above_department_average"):
        assert name in result.stdout
    assert "SELECT * FROM EMP WHERE JOB = 'SALESMAN'" in result.stdout


def test_scenarios_run_all_pass(runner, fs):
    """run exits 0 and reports every scenario as passed."""
    result = invoke(runner, ["scenarios", "run"])
    assert result.exit_code == 0
    assert result.stdout.count("PASS") == 10
    assert "All 10 scenarios passed." in result.stderr
    assert "scenarios passed" not in result.stdout


def test_scenarios_run_selected(runner, fs):
    """run NAMES runs only the named scenarios."""
    result = invoke(runner, ["scenarios", "run", "salesmen", "salary_grades"])
    assert result.exit_code == 0
    assert result.stdout.count("PASS") == 2
    assert "All 2 scenarios passed." in result.stderr


def test_scenarios_run_unknown_name(runner, fs):
    """An unknown name is a usage error and nothing runs."""
    result = invoke(runner, ["scenarios", "run", "salesmen", "nope"])
    assert result.exit_code == 2
    assert "No scenario named 'nope'" in result.output
    assert "PASS" not in result.stdout


def test_scenarios_run_reports_failures(broken_app, runner, fs):
    """Failures and errors are reported and make the command exit 1."""
    result = invoke(runner, ["scenarios", "run"])
    assert result.exit_code == 1
    assert "PASS" in result.stdout
    assert "FAIL" in result.stdout
    assert "ERROR" in result.stdout
    assert "2 of 3 scenarios failed." in result.stderr


def test_scenarios_show(runner, fs):
    """show prints the title, the SQL and the result rows."""
    result = invoke(runner, ["scenarios", "show", "employees_with_commission"])
    assert result.exit_code == 0
    assert "Employees earning a commission" in result.stdout
    assert "SELECT ENAME, COMM FROM EMP WHERE COMM IS NOT NULL" in result.stdout
    assert_in_output(r"ALLEN\s.*300", result.stdout)
    assert_in_output(r"WARD\s.*500", result.stdout)
    assert "2 row(s)" in result.stdout
    assert "Expectation for employees_with_commission holds." in result.stderr


def test_scenarios_show_scalar_results(runner, fs):
    """Scenarios returning plain values render in a single column."""
    result = invoke(runner, ["scenarios", "show", "above_department_average"])
    assert result.exit_code == 0
    assert "VALUE" in result.stdout
    assert "ALLEN" in result.stdout
    assert "WARD" not in result.stdout


def test_scenarios_show_failing(broken_app, runner, fs):
    """show exits 1 when the expectation does not hold."""
    result = invoke(runner, ["scenarios", "show", "fails"])
    assert result.exit_code == 1
    assert "expected ALLEN, got nobody" in result.stderr


def test_scenarios_show_erroring_query(broken_app, runner, fs):
    """A query that raises is reported as an error line, not a crash."""
    result = invoke(runner, ["scenarios", "show", "errors"])
    assert result.exit_code == 1
    assert not isinstance(result.exception, KeyError)
    assert "Scenario errors raised an error: KeyError" in result.stderr
    assert "row(s)" not in result.stdout


def test_scenarios_show_runs_query_once(runner, fs, monkeypatch):
    """The query behind show runs a single time."""
    calls = []

    def query(store):
        calls.append(store)
        return [1]

    counted = Scenario("counted", "Counted", "SELECT 1", query, lambda r: None)
    store = InMemoryFixtureStore()
    app = AppContainer(store, ScenarioRunner(store, {"counted": counted}))
    monkeypatch.setattr(main, "bootstrap", lambda: app)

    result = invoke(runner, ["scenarios", "show", "counted"])
    assert result.exit_code == 0
    assert calls == [store]


def test_scenarios_show_unknown(runner, fs):
    """show rejects an unknown name."""
    result = invoke(runner, ["scenarios", "show", "nope"])
    assert result.exit_code == 2
    assert "No scenario named 'nope'" in result.output


# --- tables ---


def test_tables_prints_all_three(runner, fs):
    """Without arguments every fixture table is printed."""
    result = invoke(runner, ["tables"])
    assert result.exit_code == 0
    for title in ("EMP", "DEPT", "SALGRADE"):
        assert title in result.stdout
    assert "KING" in result.stdout
    assert "OPERATIONS" in result.stdout
    assert "NULL" in result.stdout


def test_tables_selected(runner, fs):
    """Table names are case-insensitive and limit the output."""
    result = invoke(runner, ["tables", "DEPT"])
    assert result.exit_code == 0
    assert "ACCOUNTING" in result.stdout
    assert "KING" not in result.stdout
    assert "4 row(s)" in result.stdout


def test_tables_unknown(runner, fs):
    """Only emp, dept and salgrade exist."""
    result = invoke(runner, ["tables", "bonus"])
    assert result.exit_code == 2


# --- Logging ---


def test_default_hides_info(runner, fs):
    """Default verbosity is WARNING, so the runner's INFO lines are hidden."""
    result = invoke(runner, ["scenarios", "run"])
    assert result.exit_code == 0
    assert_not_in_output(r"Running 10 scenario\(s\)", result.output)


def test_verbose_shows_info(runner, fs):
    """-v shows INFO but not DEBUG."""
    result = invoke(runner, ["-v", "scenarios", "run"])
    assert result.exit_code == 0
    assert_in_output(r"Running 10 scenario\(s\)", result.output)
    assert_not_in_output(r"Running scenario salesmen", result.output)


def test_vv_shows_debug(runner, fs):
    """-vv shows the per-scenario DEBUG lines."""
    result = invoke(runner, ["-vv", "scenarios", "run", "salesmen"])
    assert result.exit_code == 0
    assert_in_output(r"Running scenario salesmen", result.output)


def test_quiet_suppresses_warning(broken_app, runner, fs):
    """-q hides the WARNING for a failing scenario but keeps the ERROR."""
    result = invoke(runner, ["-q", "scenarios", "run"])
    assert result.exit_code == 1
    assert_not_in_output(r"Scenario fails failed", result.stderr)
    assert_in_output(r"Scenario errors raised an error", result.stderr)


@pytest.mark.parametrize(
    "env, cli_args",
    [
        ({}, ["-vv", "-L", "empdept.service_layer=INFO"]),
        ({"EMPDEPT_LOGGER_LEVELS": "empdept.service_layer=INFO"}, ["-vv"]),
    ],
    ids=["cli-flag", "env-var"],
)
def test_logger_level_silences_debug(runner, fs, env, cli_args):
    """Logger-level overrides silence DEBUG lines while keeping INFO."""
    result = invoke(runner, cli_args + ["scenarios", "run", "salesmen"], **env)
    assert result.exit_code == 0
    assert_not_in_output(r"Running scenario salesmen", result.output)
    assert_in_output(r"Running 1 scenario\(s\)", result.output)


def test_invalid_logger_level(runner, fs):
    """A malformed -L value is a usage error."""
    result = invoke(runner, ["-L", "empdept=LOUD", "tables"])
    assert result.exit_code == 2
    assert "Invalid log level" in result.output


# --- Flight recorder ---


def test_flight_recorder_flushes_on_failure(broken_app, runner, fs):
    """A failing scenario writes the buffered DEBUG history to the log file."""
    result = invoke(runner, ["scenarios", "run"])
    assert result.exit_code == 1
    content = read_log()
    assert_in_output(r"DEBUG .*Running scenario passes", content)
    assert_in_output(r"WARNING .*Scenario fails failed: expected ALLEN", content)


def test_flight_recorder_force_flush(runner, fs):
    """--force-flush writes the buffer on a clean exit."""
    result = invoke(runner, ["--force-flush", "scenarios", "run", "salesmen"])
    assert result.exit_code == 0
    assert_in_output(r"Scenario salesmen passed", read_log())


def test_flight_recorder_can_be_disabled(broken_app, runner, fs):
    """--no-flight-recorder never creates the log file."""
    result = invoke(runner, ["--no-flight-recorder", "scenarios", "run"])
    assert result.exit_code == 1
    assert not Path(LOG_PATH).exists()


def test_log_path_option_overrides_env(runner, fs):
    """--log-path wins over EMPDEPT_LOG_PATH."""
    result = invoke(
        runner, ["--log-path", "other.log", "--force-flush", "tables", "dept"]
    )
    assert result.exit_code == 0
    assert Path("other.log").exists()
    assert not Path(LOG_PATH).exists()


def test_startup_logging(runner, fs):
    """The startup summary and diagnostics land in the flight recorder."""
    result = invoke(runner, ["--force-flush", "tables", "salgrade"])
    assert result.exit_code == 0
    content = read_log()
    assert_in_output(r"EMPDEPT \d+\.\d+\.\d+", content)
    assert_in_output(r"console=WARNING", content)
    assert_in_output(r"flight-recorder=ON", content)
    assert_in_output(r"Python: \d+\.\d+", content)
    assert_in_output(r"PID: \d+", content)
    assert_in_output(r"Click: \S+, Rich: \S+", content)
    assert_in_output(r"Handlers: \['RichHandler', 'MemoryHandler'\]", content)
    assert_in_output(
        r"Flight recorder: path=flight_recorder\.log, capacity=2000, "
        r"flush_on_close=True",
        content,
    )
    assert_in_output(r"Per-logger overrides: {'click_extra': 'WARNING'}", content)
