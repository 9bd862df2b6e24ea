from __future__ import annotations

import logging

PACKAGE_LOGGER = "paretoswarm"
CONSOLE_FORMAT = "%(asctime)s %(levelname)s %(threadName)s %(message)s"


def configure_paretoswarm_logging(*, level: int = logging.INFO) -> logging.Logger:
    """Send paretoswarm records (generation progress, evaluation timeouts) to stderr.

    Called by the command line entry point. Applications that set up their
    own handlers keep them: nothing is attached in that case. The thread
    name is part of every line so evaluation workers can be told apart.
    """
    pkg_logger = logging.getLogger(PACKAGE_LOGGER)
    if logging.getLogger().handlers or pkg_logger.handlers:
        return pkg_logger

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    pkg_logger.addHandler(handler)
    pkg_logger.setLevel(level)
    pkg_logger.propagate = False
    return pkg_logger


__all__ = ["configure_paretoswarm_logging"]
