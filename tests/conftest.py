"""
Global pytest configuration and fixtures.
"""

import pytest


@pytest.fixture(autouse=True)
def isolate_credentials_environment(monkeypatch):
    """Start every test without a credentials directory or resolver config.

    monkeypatch restores the original values after the test, so nothing set
    by one case leaks into the next.
    """
    monkeypatch.delenv("CREDENTIALS_DIRECTORY", raising=False)
    monkeypatch.delenv("CREDRESOLVER_CONFIG", raising=False)


@pytest.fixture
def credentials_dir(tmp_path, monkeypatch):
    """A temporary credentials directory exported as CREDENTIALS_DIRECTORY."""
    cred_dir = tmp_path / "credentials"
    cred_dir.mkdir()
    monkeypatch.setenv("CREDENTIALS_DIRECTORY", str(cred_dir))
    return cred_dir
