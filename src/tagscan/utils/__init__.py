"""Utility modules for tagscan.

Provides:
- logger: get_logger for namespaced logging
- text: fold_case for length-preserving case folding
"""

from tagscan.utils.logger import get_logger
from tagscan.utils.text import fold_case

__all__ = [
    "fold_case",
    "get_logger",
]
