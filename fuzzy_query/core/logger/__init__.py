# Path: fuzzy_query/core/logger/__init__.py
"""
fuzzy_query Logger Package

IPO-aware logging for fuzzy query building.

Provides separate log streams for:
- INPUT layer (search term preparation, CLI arguments)
- PROCESS layer (matchers, score building, condition composition)
- OUTPUT layer (SQL rendering and execution)
"""

from .ipo_logging import (
    setup_ipo_logging,
    get_input_logger,
    get_process_logger,
    get_output_logger,
)

__all__ = [
    'setup_ipo_logging',
    'get_input_logger',
    'get_process_logger',
    'get_output_logger',
]
