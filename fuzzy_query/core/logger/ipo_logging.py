# Path: fuzzy_query/core/logger/ipo_logging.py
"""
IPO-Aware Logging for fuzzy_query

Input-Process-Output separated logging for fuzzy query building.

Every logger handed out by this module lives under the package root
logger, so an application can route or silence fuzzy_query output
without touching its own handlers:
- fuzzy_query.input.*   (term preparation, CLI arguments)
- fuzzy_query.process.* (registry, score builder, composer)
- fuzzy_query.output.*  (SQL rendering, execution)
"""

import logging
import sys
from pathlib import Path
from typing import Optional

from ...constants import LOGGER_ROOT


class IPOFilter(logging.Filter):
    """Filter logs by IPO layer prefix."""

    def __init__(self, layer: str):
        """
        Initialize filter for specific IPO layer.

        Args:
            layer: 'input', 'process', or 'output'
        """
        super().__init__()
        self.layer = layer
        self.prefix = f'{LOGGER_ROOT}.{layer}'

    def filter(self, record: logging.LogRecord) -> bool:
        """Filter records by logger name prefix."""
        return record.name.startswith(self.prefix)


def setup_ipo_logging(
    log_dir: Optional[Path] = None,
    log_level: str = 'INFO',
    console_output: bool = True
) -> logging.Logger:
    """
    Set up IPO-aware logging for fuzzy_query.

    When log_dir is given, creates separate log files for:
    - input_activity.log (INPUT layer)
    - process_activity.log (PROCESS layer)
    - output_activity.log (OUTPUT layer)
    - full_activity.log (all activities combined)

    Handlers are attached to the package root logger only; the
    application's root logger is left alone.

    Args:
        log_dir: Directory for log files, or None for console only
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        console_output: Whether to also output to console

    Returns:
        The configured package root logger

    Example:
        setup_ipo_logging(
            log_dir=Path('/var/log/fuzzy_query'),
            log_level='DEBUG',
            console_output=False
        )
    """
    package_logger = logging.getLogger(LOGGER_ROOT)
    package_logger.setLevel(getattr(logging, log_level.upper()))

    # Clear handlers from a previous setup call
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(
        '[%(asctime)s] [%(levelname)s] %(name)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    if log_dir is not None:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)

        # Full activity log (everything)
        full_handler = logging.FileHandler(log_dir / 'full_activity.log')
        full_handler.setLevel(logging.DEBUG)
        full_handler.setFormatter(formatter)
        package_logger.addHandler(full_handler)

        for layer in ('input', 'process', 'output'):
            layer_handler = logging.FileHandler(log_dir / f'{layer}_activity.log')
            layer_handler.setLevel(logging.DEBUG)
            layer_handler.setFormatter(formatter)
            layer_handler.addFilter(IPOFilter(layer))
            package_logger.addHandler(layer_handler)

    if console_output:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(getattr(logging, log_level.upper()))
        # Simpler format for console
        console_handler.setFormatter(logging.Formatter(
            '[%(levelname)s] %(name)s - %(message)s'
        ))
        package_logger.addHandler(console_handler)

    return package_logger


def get_input_logger(name: str) -> logging.Logger:
    """
    Get logger for INPUT layer.

    Args:
        name: Logger name (e.g., 'search_term', 'cli')

    Returns:
        Logger configured for INPUT layer

    Example:
        logger = get_input_logger('search_term')
        logger.debug("Normalized search term")
    """
    return logging.getLogger(f'{LOGGER_ROOT}.input.{name}')


def get_process_logger(name: str) -> logging.Logger:
    """
    Get logger for PROCESS layer (matching engine).

    Args:
        name: Logger name (e.g., 'matcher.registry', 'matcher.composer')

    Returns:
        Logger configured for PROCESS layer
    """
    return logging.getLogger(f'{LOGGER_ROOT}.process.{name}')


def get_output_logger(name: str) -> logging.Logger:
    """
    Get logger for OUTPUT layer.

    Args:
        name: Logger name (e.g., 'fuzzy_query')

    Returns:
        Logger configured for OUTPUT layer
    """
    return logging.getLogger(f'{LOGGER_ROOT}.output.{name}')


__all__ = [
    'IPOFilter',
    'setup_ipo_logging',
    'get_input_logger',
    'get_process_logger',
    'get_output_logger',
]
