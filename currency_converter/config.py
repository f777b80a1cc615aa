import os
import logging
from typing import Optional
from dotenv import load_dotenv

from currency_converter.menu.exceptions import ConfigurationError

load_dotenv()

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() not in ("0", "false", "no", "off")


class Config:
    LOG_LEVEL: str = os.getenv("CONVERTER_LOG_LEVEL", "WARNING").upper()
    LOG_FILE: Optional[str] = os.getenv("CONVERTER_LOG_FILE") or None
    USE_COLOR: bool = _env_flag("CONVERTER_COLOR", "1")

    @classmethod
    def validate(cls):
        if not isinstance(logging.getLevelName(cls.LOG_LEVEL), int):
            raise ConfigurationError(f"Invalid CONVERTER_LOG_LEVEL: {cls.LOG_LEVEL}")


def configure_logging(level: Optional[str] = None, log_file: Optional[str] = None) -> None:
    """Configure root logging. Records never go to stdout, which belongs to the menu."""
    level = level or Config.LOG_LEVEL
    log_file = log_file or Config.LOG_FILE
    if log_file:
        handlers = [logging.FileHandler(log_file)]
    else:
        handlers = [logging.NullHandler()]
    logging.basicConfig(level=level, format=LOG_FORMAT, handlers=handlers, force=True)
    logger.debug(f"Logging configured (level={level}, file={log_file})")
