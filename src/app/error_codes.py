"""
Error codes returned by use cases.

The API layer maps each code to an HTTP status in ``src/api/error.py``.
"""

from enum import Enum


class ErrorCode(str, Enum):
    INVALID_INPUT = "INVALID_INPUT"
    UNAUTHORIZED = "UNAUTHORIZED"
    FORBIDDEN = "FORBIDDEN"
    CONFLICT = "CONFLICT"
    NOT_FOUND = "NOT_FOUND"
    CAPACITY_EXHAUSTED = "CAPACITY_EXHAUSTED"
    INTERNAL_ERROR = "INTERNAL_ERROR"
