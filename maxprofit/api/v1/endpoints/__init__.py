"""
API v1 endpoints.
"""

from . import profit

__all__ = ["profit"]
