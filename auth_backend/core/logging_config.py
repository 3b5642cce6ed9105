"""
Logging setup for the application.

``setup_logging`` attaches a console handler to the root logger the first
time it is called. Later calls only adjust the level, so repeated
``create_application`` calls (tests, reloaders) do not duplicate output.
"""
# Standard library imports
import logging


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO") -> None:
    """
    Configure the root logger
    
    Args:
        level: Logging level name (e.g. "DEBUG", "INFO"), case insensitive.
            Unknown names fall back to INFO.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    
    if root_logger.handlers:
        return
    
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    root_logger.addHandler(handler)
