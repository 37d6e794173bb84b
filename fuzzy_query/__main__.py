# Path: fuzzy_query/__main__.py
"""Allow running as python -m fuzzy_query."""

import sys

from .main import main


sys.exit(main())
