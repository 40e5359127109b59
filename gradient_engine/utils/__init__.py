"""
Utility modules for the gradient engine.
"""

# Import key utilities for easy access
from gradient_engine.utils.config import Config
from gradient_engine.utils.logging import setup_logging, log_exception

__all__ = ['Config', 'setup_logging', 'log_exception']
