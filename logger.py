"""
Logging for tablespy.

curses owns the terminal while a table is open, so records go to a file in
the config directory; the stream handler is only attached on request.
"""

import logging
from pathlib import Path

import config_paths

TABLESPY = 'tablespy'


class Singleton(type):
    _instances = {}

    def __call__(cls, *args, **kwargs):
        if cls not in cls._instances:
            cls._instances[cls] = super().__call__(*args, **kwargs)
        return cls._instances[cls]


class Logger(metaclass=Singleton):
    """A singleton logger class for setting up logging handlers."""

    def __init__(self, log_path=None):
        """Create the file and stream handlers shared by every logger.

        Args:
            log_path (str, optional): Log file location. Defaults to config_paths.LOG_PATH.
        """
        log_path = Path(log_path or config_paths.LOG_PATH)
        try:
            log_path.parent.mkdir(parents=True, exist_ok=True)
            self.logging_file_handler = logging.FileHandler(log_path, delay=True)
        except OSError:
            # read-only home: keep running without a log file
            self.logging_file_handler = logging.NullHandler()

        self.logging_stream_handler = logging.StreamHandler()

        formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
        self.logging_file_handler.setFormatter(formatter)
        self.logging_stream_handler.setFormatter(formatter)

    def setup_logger(self, logger_name=None, enable_stream_handler=False):
        """Set up a logger with the given name and return it.

        Args:
            logger_name (str, optional): Name of the logger. Defaults to None.
            enable_stream_handler (bool): Also log to stderr. Defaults to False.

        Returns:
            logging.Logger: The configured logger.
        """
        if not logger_name:
            logger_name = TABLESPY
        else:
            logger_name = TABLESPY + '.' + logger_name

        logger = logging.getLogger(logger_name)
        logger.setLevel(logging.INFO)
        logger.propagate = False

        if self.logging_file_handler not in logger.handlers:
            logger.addHandler(self.logging_file_handler)
        if enable_stream_handler and self.logging_stream_handler not in logger.handlers:
            logger.addHandler(self.logging_stream_handler)

        return logger
