import logging
import os


def get_logger(name: str = "scalar_aad") -> logging.Logger:
    """
    Return a package logger.

    The first call installs a handler on the package root and sets its level
    from the SCALAR_AAD_LOG_LEVEL environment variable (default WARNING).
    Later calls leave the level alone, so a level set by the caller sticks.
    Child loggers ("scalar_aad.engine", ...) share that handler.
    """
    root = logging.getLogger("scalar_aad")
    if not root.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter('[%(asctime)s][%(levelname)s][%(name)s] %(message)s')
        handler.setFormatter(formatter)
        root.addHandler(handler)
        level_name = os.getenv("SCALAR_AAD_LOG_LEVEL", "WARNING").upper()
        root.setLevel(getattr(logging, level_name, logging.WARNING))
    return logging.getLogger(name)
