"""
Utility helpers for the EDS converter.
"""

from .logger import setup_logger

__all__ = ["setup_logger"]
