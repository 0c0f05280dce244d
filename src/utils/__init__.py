"""
Utility modules.
"""

from .logging import setup_logging, log_config
from .config import BenchmarkConfig, load_config, config_from_dict

__all__ = [
    'setup_logging',
    'log_config',
    'BenchmarkConfig',
    'load_config',
    'config_from_dict',
]
