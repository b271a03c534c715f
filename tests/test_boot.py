from __future__ import annotations

import logging
import os

import pytest

import valirator.core.localization as localization
from valirator import EnvInvalidException, boot, config
from valirator.utils.env_utils import get_bool_env
from valirator.utils.logging import get_log_file_path


@pytest.fixture
def restore_logging():
    root = logging.getLogger()
    level = root.level
    handlers = list(root.handlers)
    yield
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


def test_boot_uses_custom_log_file_name(tmp_path, monkeypatch, restore_logging):
    monkeypatch.setenv("LOG_DIR", str(tmp_path / "log"))
    monkeypatch.delenv("LOG_FILE_NAME", raising=False)

    boot(log_file_name="module_x.log")

    path = get_log_file_path()
    assert path is not None
    assert path.name == "module_x.log"
    assert path.parent == tmp_path / "log"
    assert path.exists()


def test_boot_loads_env_file_into_config(tmp_path, monkeypatch, restore_logging):
    env_file = tmp_path / ".env.testing"
    env_file.write_text("VALIRATOR_DEFAULT_MESSAGE=is not acceptable\n")
    monkeypatch.setenv("LOG_DIR", str(tmp_path / "log"))
    monkeypatch.delenv("VALIRATOR_DEFAULT_MESSAGE", raising=False)
    original_path = localization._LOCALE_PATH

    try:
        boot(env_file_name=str(env_file), locale="de", locale_path=str(tmp_path))
        assert config.DEFAULT_MESSAGE == "is not acceptable"
        assert localization.get_locale() == "de"
    finally:
        os.environ.pop("VALIRATOR_DEFAULT_MESSAGE", None)
        config.load_settings()
        localization.set_locale_path(original_path)
        localization.set_locale("en")

    assert config.DEFAULT_MESSAGE == "is invalid"


@pytest.mark.parametrize("value, expected", [("true", True), ("0", False), ("Yes", True), ("", True)])
def test_get_bool_env(monkeypatch, value, expected):
    monkeypatch.setenv("VALIRATOR_FLAG", value)

    assert get_bool_env("VALIRATOR_FLAG", True) is expected


def test_get_bool_env_rejects_garbage(monkeypatch):
    monkeypatch.setenv("VALIRATOR_FLAG", "maybe")

    with pytest.raises(EnvInvalidException):
        get_bool_env("VALIRATOR_FLAG", False)
