from typing import Optional

from valirator import config
from valirator.core.localization import set_locale, set_locale_path
from valirator.utils.env_utils import configure_env
from valirator.utils.logging import setup_logging


def boot(*,
    env_file_name: Optional[str] = None,
    log_file_name: Optional[str] = None,
    locale: Optional[str] = None,
    locale_path: Optional[str] = None,
) -> None:
    """
    Prepare valirator inside an application.
    - Loads environment variables from dotenv files
    - Sets up logging
    - Re-reads `valirator.config` from the environment
    - Optionally points localization at a catalogue directory and selects a locale

    Validation works without calling this; it only wires the ambient configuration.
    """
    configure_env(env_file_name)
    setup_logging(log_file_name)
    config.load_settings()

    if locale_path is not None:
        set_locale_path(locale_path)
    if locale is not None:
        set_locale(locale)
