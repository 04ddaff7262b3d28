"""
Logging setup for the settings layer.
A Qt handler can forward records to any slot, e.g. a log view.
"""

import logging
import sys
from typing import Callable, Optional

from PyQt6.QtCore import QObject, pyqtSignal

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class QtLogHandler(logging.Handler, QObject):
    """
    Custom logging handler that emits a Qt signal with the log message.
    This allows safe logging from worker threads to a Qt consumer.
    """
    log_updated = pyqtSignal(str)

    def __init__(self, *args, **kwargs):
        logging.Handler.__init__(self, *args, **kwargs)
        QObject.__init__(self)

    def emit(self, record):
        """
        Emit the log message as a formatted string via Qt signal.
        """
        msg = self.format(record)
        self.log_updated.emit(msg)


# Global reference to the Qt handler for retrieval
_qt_handler = None


def setup_logging(log_slot: Optional[Callable[[str], None]] = None, level: int = logging.INFO) -> logging.Logger:
    """
    Configures the root logger with a console handler and, when a slot
    is given, the custom Qt handler.

    Args:
        log_slot: Qt slot (function) to receive formatted log messages
        level: Root logger level

    Returns:
        Configured logger instance
    """
    global _qt_handler

    logger = logging.getLogger()
    logger.setLevel(level)

    # Clear existing handlers to avoid duplicates
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    formatter = logging.Formatter(LOG_FORMAT)

    if log_slot is not None:
        _qt_handler = QtLogHandler()
        _qt_handler.setFormatter(formatter)
        _qt_handler.log_updated.connect(log_slot)
        logger.addHandler(_qt_handler)
    else:
        _qt_handler = None

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    logger.debug("Logging system initialized")
    return logger


def get_log_handler() -> Optional[QtLogHandler]:
    """
    Returns the global Qt log handler, if one was installed.
    """
    return _qt_handler
