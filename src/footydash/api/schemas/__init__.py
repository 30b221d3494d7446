"""Pydantic models for API I/O."""

from .envelope import ErrorResponse, FplResponse, QuotaResponse, StatsResponse

__all__ = [
    "ErrorResponse",
    "FplResponse",
    "QuotaResponse",
    "StatsResponse",
]
