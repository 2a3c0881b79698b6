"""
Logging Configuration
Sets up the loggers for the skadis packages.
"""
import logging
import sys
from typing import Optional

# Top-level packages that log through this configuration
_NAMESPACES = ("skadis", "skadis_io", "skadis_bridge")


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> None:
    """
    Configures the loggers for the 'skadis', 'skadis_io' and 'skadis_bridge' namespaces.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path to save logs to a file.
    """
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    # 1. Console Handler (stdout)
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)

    # 2. File Handler (Optional)
    file_handler = None
    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)

    for name in _NAMESPACES:
        logger = logging.getLogger(name)
        logger.setLevel(level)

        # Check if handlers already exist to avoid duplicate logs on repeated setup
        if logger.hasHandlers():
            logger.handlers.clear()

        logger.addHandler(console_handler)
        if file_handler is not None:
            logger.addHandler(file_handler)

    logging.getLogger("skadis").info("Logging initialized.")
