# rabat_landmarks/core/logging.py
"""
Logging configuration for the API process.
"""
import logging
import sys

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# このハンドラ名で登録したものだけを付け替える（pytestのcaplogなど他のハンドラは残す）．
_HANDLER_NAME = 'rabat_landmarks.console'


def setup_logging(level: int | str = logging.INFO) -> None:
    """Install a single stdout handler on the root logger."""
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())

    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        if handler.get_name() == _HANDLER_NAME:
            root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.set_name(_HANDLER_NAME)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))

    root_logger.setLevel(level)
    root_logger.addHandler(console_handler)
