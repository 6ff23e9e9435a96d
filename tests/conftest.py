import pytest

from solid_principles.application.runner import ExampleRunner
from solid_principles.registry import ExampleRegistry, register_builtin_examples


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep user configuration out of the tests."""
    for var in (
        "SOLID_CONFIG_FILE",
        "SOLID_LOG_LEVEL",
        "SOLID_LOG_DESTINATION",
        "SOLID_LOG_FILE",
        "SOLID_OUTPUT_FORMAT",
    ):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def registry():
    """A fresh registry holding the bundled examples."""
    registry = ExampleRegistry()
    register_builtin_examples(registry)
    return registry


@pytest.fixture
def empty_registry():
    return ExampleRegistry()


@pytest.fixture
def runner(registry):
    return ExampleRunner(registry)


@pytest.fixture
def printed_lines(capsys):
    """Return the lines written to stdout so far."""
    def _read():
        return capsys.readouterr().out.splitlines()
    return _read
