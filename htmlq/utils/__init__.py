"""
Utility modules for htmlq.
"""

from htmlq.utils.config import Config, get_config, reset_config
from htmlq.utils.logging import setup_logging, get_default_log_file, log_exception, PerformanceLogger

__all__ = [
    'Config',
    'get_config',
    'reset_config',
    'setup_logging',
    'get_default_log_file',
    'log_exception',
    'PerformanceLogger',
]
