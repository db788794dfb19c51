"""Logging tools for Wallstitch."""

import logging
import os

DEBUG = False
LOGGING = False
G_LOGGER = logging.getLogger("default")
CONSOLE_HANDLER = None
FILE_HANDLER = None


def enable_debug():
    """Print INFO level messages to the console."""
    global DEBUG, CONSOLE_HANDLER
    DEBUG = True
    G_LOGGER.setLevel(logging.INFO)
    if CONSOLE_HANDLER is None:
        CONSOLE_HANDLER = logging.StreamHandler()
        G_LOGGER.addHandler(CONSOLE_HANDLER)


def enable_file_logging(log_dir):
    """Write the log into 'log_dir/log' in addition to the console."""
    global LOGGING, FILE_HANDLER
    enable_debug()
    LOGGING = True
    if FILE_HANDLER is None:
        os.makedirs(log_dir, exist_ok=True)
        FILE_HANDLER = logging.FileHandler(os.path.join(log_dir, "log"),
                                           mode="w")
        G_LOGGER.addHandler(FILE_HANDLER)


def custom_exception_handler(exceptiontype, value, tb_var):
    """Log uncaught exceptions."""
    G_LOGGER.exception("Uncaught exception type: %s", str(exceptiontype))
    G_LOGGER.exception("Exception: %s", str(value))
    G_LOGGER.exception(str(tb_var))
