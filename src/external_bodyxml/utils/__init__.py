"""Utility modules for external-bodyxml.

Provides:
- logger: get_logger for namespaced logging
"""

from external_bodyxml.utils.logger import get_logger

__all__ = ["get_logger"]
