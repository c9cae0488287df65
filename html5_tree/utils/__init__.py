"""
Utility modules for html5-tree.
"""

from html5_tree.utils.config import Config
from html5_tree.utils.logging import setup_logging, log_exception, PerformanceLogger

__all__ = [
    'Config',
    'setup_logging',
    'log_exception',
    'PerformanceLogger',
]
