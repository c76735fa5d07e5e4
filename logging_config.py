"""Logging setup for the last event status package.

The modules only create loggers through `get_logger`; nothing here installs
handlers on import. Applications embedding the package call
`setup_logging()` once at startup, which picks up `config.LOG_LEVEL` and
`config.LOG_FILE` by default.
"""

import logging
import os

import config

_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_ROOT_LOGGER = "last_event_status"
_configured = False


def setup_logging(level=config.LOG_LEVEL, log_file=config.LOG_FILE):
    """Configure the package logger once.

    The LAST_EVENT_STATUS_LOG_LEVEL environment variable wins over `level`.
    """
    global _configured
    if _configured:
        return

    log_level = getattr(logging, level.upper(), logging.INFO)
    env_level = os.getenv("LAST_EVENT_STATUS_LOG_LEVEL")
    if env_level:
        log_level = getattr(logging, env_level.upper(), log_level)

    root = logging.getLogger(_ROOT_LOGGER)
    root.setLevel(log_level)
    root.handlers.clear()

    formatter = logging.Formatter(_LOG_FORMAT)

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(formatter)
    root.addHandler(stream_handler)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, encoding="utf-8")
            file_handler.setFormatter(formatter)
            root.addHandler(file_handler)
        except OSError:
            root.warning(
                "Could not open log file %s, logging to stdout only",
                log_file)

    _configured = True


def get_logger(name):
    if name == _ROOT_LOGGER or name.startswith(_ROOT_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{_ROOT_LOGGER}.{name}")
