import os

import pytest

from swingsynth.utils.config import Config

# Qt tests run without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture
def config_dir(tmp_path, monkeypatch):
    """Point Config at a temp directory and reset the singleton."""
    app_dir = tmp_path / ".swingsynth"
    monkeypatch.setattr(Config, "_APP_DIR", app_dir)
    monkeypatch.setattr(Config, "_CONFIG_FILE", app_dir / "config.json")
    monkeypatch.setattr(Config, "_instance", None)
    return app_dir
