"""
Shared observability helpers (logging, privacy utilities, etc.).

Both the UI and the suggestion service import from this package so log lines
share one JSON shape and never carry raw user keywords.
"""

from .privacy import hash_payload
from .telemetry import (
    RequestContextToken,
    bind_request_context,
    configure_logging,
    current_request_id,
    new_request_id,
    reset_request_context,
)

__all__ = [
    "hash_payload",
    "RequestContextToken",
    "bind_request_context",
    "configure_logging",
    "current_request_id",
    "new_request_id",
    "reset_request_context",
]
