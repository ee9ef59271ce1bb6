import pytest

from gridpath.config import Settings, configure_logging, resolve_settings


def test_defaults():
    s = resolve_settings(argv=[], env={})
    assert s == Settings(cell_size=20, step_ms=10, log_level="INFO")
    assert s.path_step_ms == 20


def test_env_values():
    s = resolve_settings(argv=[], env={"GRIDPATH_CELL_SIZE": "16",
                                       "GRIDPATH_STEP_MS": "4",
                                       "GRIDPATH_LOG_LEVEL": "debug"})
    assert s == Settings(cell_size=16, step_ms=4, log_level="DEBUG")


def test_cli_overrides_env():
    s = resolve_settings(argv=["--step-ms=25", "--ignored", "--other=1"],
                         env={"GRIDPATH_STEP_MS": "4"})
    assert s.step_ms == 25
    assert s.path_step_ms == 50


@pytest.mark.parametrize("argv", [
    ["--cell-size=abc"],
    ["--cell-size=2"],
    ["--step-ms=-1"],
    ["--log-level=LOUD"],
])
def test_invalid_values(argv):
    with pytest.raises(ValueError):
        resolve_settings(argv=argv, env={})


def test_configure_logging_rejects_unknown_level():
    with pytest.raises(ValueError):
        configure_logging("chatty")
