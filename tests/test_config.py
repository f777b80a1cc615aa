import logging
import pytest

from currency_converter.config import Config, configure_logging
from currency_converter.menu.exceptions import ConfigurationError


def test_validate_accepts_standard_levels(monkeypatch):
    for level in ("DEBUG", "INFO", "WARNING", "ERROR"):
        monkeypatch.setattr(Config, "LOG_LEVEL", level)
        Config.validate()


def test_validate_rejects_unknown_level(monkeypatch):
    monkeypatch.setattr(Config, "LOG_LEVEL", "CHATTY")
    with pytest.raises(ConfigurationError):
        Config.validate()


def test_configure_logging_writes_to_file(tmp_path):
    log_file = tmp_path / "converter.log"
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    try:
        configure_logging("INFO", str(log_file))
        logging.getLogger("currency_converter.test").info("rate changed")
        for handler in root.handlers:
            handler.flush()
        assert "INFO - rate changed" in log_file.read_text()
    finally:
        for handler in root.handlers:
            handler.close()
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)


@pytest.mark.parametrize("value,expected", [
    ("0", False), ("false", False), ("no", False), ("OFF", False),
    ("1", True), ("yes", True),
])
def test_color_flag_from_environment(monkeypatch, value, expected):
    import importlib
    from currency_converter import config

    monkeypatch.setenv("CONVERTER_COLOR", value)
    try:
        importlib.reload(config)
        assert config.Config.USE_COLOR is expected
    finally:
        monkeypatch.undo()
        importlib.reload(config)
