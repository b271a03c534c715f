import logging
import os
from pathlib import Path

_logging_configured = False
_log_file_path: Path | None = None


def setup_logging(log_file_name: str | None = None):
    """
    Setup logging for applications using valirator.

    The log file lives in `LOG_DIR` (default: `./log`) and is named after
    `log_file_name`, `LOG_FILE_NAME` or `valirator.log`. Level comes from `LOG_LEVEL`.
    """
    global _logging_configured, _log_file_path

    log_dir = Path(os.getenv('LOG_DIR', os.path.join(os.getcwd(), 'log')))
    file_name = log_file_name if log_file_name else os.getenv('LOG_FILE_NAME', 'valirator.log')
    log_file = log_dir / file_name

    # If already configured and path matches, skip reconfiguration
    if _logging_configured and _log_file_path == log_file:
        return

    log_dir.mkdir(parents=True, exist_ok=True)

    root_logger = logging.getLogger()
    root_logger.setLevel(os.getenv('LOG_LEVEL', 'INFO').upper())

    # Drop handlers installed by a previous call to avoid duplicates
    for handler in list(root_logger.handlers):
        if getattr(handler, '_valirator_handler', False):
            root_logger.removeHandler(handler)
            handler.close()

    file_handler = logging.FileHandler(str(log_file), mode='a')
    file_handler.setFormatter(logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s'))
    file_handler._valirator_handler = True
    root_logger.addHandler(file_handler)

    if os.getenv('ENV') == 'debug':
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(logging.Formatter('%(levelname)s - %(name)s - %(message)s'))
        console_handler._valirator_handler = True
        root_logger.addHandler(console_handler)

    _log_file_path = log_file
    _logging_configured = True
    logging.info(f"Logging configured, writing to {log_file}")


def get_log_file_path() -> Path | None:
    return _log_file_path
