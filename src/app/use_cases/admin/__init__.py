"""Admin use cases for system maintenance operations."""

from .sweep_expired_sessions_use_case import (
    SweepExpiredSessionsUseCase,
    SweepExpiredSessionsResponse,
)

__all__ = [
    "SweepExpiredSessionsUseCase",
    "SweepExpiredSessionsResponse",
]
