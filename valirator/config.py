import os

from valirator.utils.env_utils import get_bool_env

# Message used when neither the schema nor the registry provides one
DEFAULT_MESSAGE = os.getenv("VALIRATOR_DEFAULT_MESSAGE", "is invalid")

# Look string message templates up in the localization catalogue first
LOCALIZE_MESSAGES = get_bool_env("VALIRATOR_LOCALIZE_MESSAGES", True)

# Log the duration of every validate() call at DEBUG level
TIME_VALIDATIONS = get_bool_env("VALIRATOR_TIME_VALIDATIONS", True)


def load_settings() -> None:
    """Re-read the settings above from the environment (e.g. after a dotenv file was loaded)."""
    global DEFAULT_MESSAGE, LOCALIZE_MESSAGES, TIME_VALIDATIONS

    DEFAULT_MESSAGE = os.getenv("VALIRATOR_DEFAULT_MESSAGE", "is invalid")
    LOCALIZE_MESSAGES = get_bool_env("VALIRATOR_LOCALIZE_MESSAGES", True)
    TIME_VALIDATIONS = get_bool_env("VALIRATOR_TIME_VALIDATIONS", True)
