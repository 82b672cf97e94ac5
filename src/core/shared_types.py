"""
Type definitions used across layers
"""

from enum import StrEnum


class ErrorKind(StrEnum):
    """Tag carried by every error the library reports (also sent to API clients)."""

    INVALID_QUERY = "InvalidQuery"
    INVALID_ID = "InvalidId"
    INVALID_BODY = "InvalidBody"
    NOT_FOUND = "NotFound"
