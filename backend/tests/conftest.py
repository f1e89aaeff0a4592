"""Shared test fixtures and configuration for stackmodel tests."""
import pytest

from stackmodel.config import reset_config


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Run every test against default settings.

    Points STACKMODEL_SETTINGS at a file that does not exist so a
    stackmodel.settings.yaml in the working directory is never picked up,
    and clears the process-wide settings before and after the test.
    """
    monkeypatch.setenv("STACKMODEL_SETTINGS", str(tmp_path / "absent.settings.yaml"))
    reset_config()
    yield
    reset_config()
