# Path: fuzzy_query/core/__init__.py
"""
fuzzy_query Core Package

Core utilities shared by the query layers.

Submodules:
    - logger: IPO-aware logging system
"""

from .logger import (
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
