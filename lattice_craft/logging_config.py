# lattice_craft/logging_config.py
"""
Package logger setup.

Modules log through logging.getLogger(__name__), so everything lands under
the 'lattice_craft' logger. Generators report graph sizes at DEBUG;
exploration reports failed designs at WARNING.
"""

import logging
import sys
from typing import Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATEFMT = '%H:%M:%S'


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Send 'lattice_craft' log records to stdout (and optionally a file).

    Safe to call repeatedly: previous handlers are replaced, not stacked.
    """
    logger = logging.getLogger("lattice_craft")
    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT)
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger
