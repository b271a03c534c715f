import logging
import os
from typing import Optional

from dotenv import load_dotenv

from valirator.exceptions.common_exceptions import EnvInvalidException

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off")


def configure_env(env_file_name: Optional[str] = None) -> None:
    """
    Load environment variables from a dotenv file.

    Args:
        env_file_name: Optional environment file name. If None, tries `.env.<ENV>` and then `.env`.
    """
    if env_file_name is not None:
        load_dotenv(env_file_name, override=True)
        return

    environment = os.getenv("ENV", "debug")

    for env_file in [f".env.{environment}", ".env"]:
        if load_dotenv(env_file, override=True):
            logging.debug(f"Loaded {env_file} file successfully")
            break


def get_bool_env(env_name: str, default: bool) -> bool:
    value = os.getenv(env_name)
    if value is None or value.strip() == "":
        return default

    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False

    raise EnvInvalidException(env_name, value, supported_values=[*_TRUE_VALUES, *_FALSE_VALUES])
