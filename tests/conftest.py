import pytest

from tcpping_connect import cli

ENV_VARS = ("TCPPING_TIMEOUT", "TCPPING_TIMEOUT_SEC", "TCPPING_DEBUG", "LOG_LEVEL")


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch, tmp_path):
    """Isolate every test from the caller's environment and parsed args."""
    for name in ENV_VARS:
        # setenv first so a value loaded by a test is removed on teardown
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.setenv("TCPPING_CONFIG_DIR", str(tmp_path / "config"))
    monkeypatch.setattr(cli, "_args", None)
