"""Logging configuration for RescuEdge."""

import logging
import logging.config
from typing import Any, Dict

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level: str = "INFO") -> None:
    """Configure console logging for the ``rescuedge`` package.

    Logs go to stderr; stdout carries only the startup banner.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """
    level = str(level).upper()
    config: Dict[str, Any] = {
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {
            'standard': {
                'format': LOG_FORMAT,
                'datefmt': '%Y-%m-%d %H:%M:%S'
            }
        },
        'handlers': {
            'console': {
                'class': 'logging.StreamHandler',
                'level': level,
                'formatter': 'standard',
                'stream': 'ext://sys.stderr'
            }
        },
        'loggers': {
            'rescuedge': {
                'level': level,
                'handlers': ['console'],
                'propagate': False
            }
        }
    }
    logging.config.dictConfig(config)
    logging.getLogger(__name__).debug("Logging configured - Level: %s", level)
