"""
utils/__init__.py - Shared Helpers

Logger construction used by every stage of the pipeline.
"""

import os
import logging

LOG_DIRECTORY = "Logs"
LOG_LEVEL = logging.INFO


def set_log_options(directory=None, level=None):
    """
    Change where and at which level new loggers write.

    Args:
        directory: Folder for the per-logger .log files
        level: Logging level name ("DEBUG", "INFO", ...) or number
    """
    global LOG_DIRECTORY, LOG_LEVEL
    if directory:
        LOG_DIRECTORY = directory
    if level is not None:
        LOG_LEVEL = logging.getLevelName(level) if isinstance(level, str) else level


def get_logger(name, filename=None):
    """
    Return a named logger writing to <LOG_DIRECTORY>/<filename or name>.log
    and to stderr. Handlers are attached only the first time a name is seen.
    """
    logger = logging.getLogger(name)
    logger.setLevel(LOG_LEVEL)
    if logger.handlers:
        return logger

    if not os.path.exists(LOG_DIRECTORY):
        os.makedirs(LOG_DIRECTORY)
    fh = logging.FileHandler(
        os.path.join(LOG_DIRECTORY, f"{filename if filename else name}.log"))
    fh.setLevel(logging.DEBUG)
    # StreamHandler defaults to stderr, stdout carries the results only
    ch = logging.StreamHandler()
    ch.setLevel(logging.INFO)
    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    fh.setFormatter(formatter)
    ch.setFormatter(formatter)
    logger.addHandler(fh)
    logger.addHandler(ch)
    return logger
