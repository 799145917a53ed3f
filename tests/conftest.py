"""
Shared fixtures.
"""

import pytest

from posix_time.core.config import reset_config


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point config lookup at an empty temp dir so user config never leaks in."""
    config_path = tmp_path / "config.yaml"
    monkeypatch.setenv("POSIX_TIME_CONFIG", str(config_path))
    reset_config()
    yield config_path
    reset_config()
