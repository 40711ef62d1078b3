"""
Backend services for DevConnector.
"""

from . import profile_service

__all__ = [
    "profile_service",
]
