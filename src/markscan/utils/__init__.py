"""Utility modules for markscan.

Provides:
- logger: get_logger for logging
"""

from markscan.utils.logger import get_logger

__all__ = ["get_logger"]
