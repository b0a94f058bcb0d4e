"""
Utilities shared across the kpoints package.
"""

from .logger import setup_logger

__all__ = ['setup_logger']
