"""
Logging bootstrap utilities shared by the UI and the suggestion service.

`configure_logging` installs JSON logging (with service name and request IDs)
using environment-driven configuration. Each username search binds its own
request ID so every log line emitted during the provider call can be
correlated.
"""

from __future__ import annotations

import logging
import os
from contextvars import ContextVar, Token
from uuid import uuid4

from pythonjsonlogger.json import JsonFormatter

RequestContextToken = Token

_logging_configured = False
_request_id_ctx_var: ContextVar[str | None] = ContextVar("request_id", default=None)


def configure_logging(service_name: str) -> None:
    """
    Configure JSON logging for the process.

    Args:
        service_name: Logical service identifier attached to every record.
    """

    global _logging_configured
    if _logging_configured:
        return

    service_label = os.getenv("LOG_SERVICE_NAME", service_name)
    level_name = os.getenv("LOG_LEVEL", "INFO").strip().upper() or "INFO"

    formatter = JsonFormatter(
        "%(asctime)s %(levelname)s %(name)s %(message)s %(service_name)s %(request_id)s"
    )
    handler = logging.StreamHandler()
    handler.setFormatter(formatter)
    handler.addFilter(_RequestContextLogFilter(service_label))

    logging.basicConfig(level=getattr(logging, level_name, logging.INFO), handlers=[handler], force=True)
    _logging_configured = True


def new_request_id() -> str:
    """Generate a request ID for one username search."""

    return os.getenv("REQUEST_ID_PREFIX", "") + str(uuid4())


def current_request_id() -> str | None:
    return _request_id_ctx_var.get()


def bind_request_context(request_id: str | None) -> RequestContextToken:
    """
    Store the active request ID in a ContextVar so log records can include it.
    """

    return _request_id_ctx_var.set(request_id)


def reset_request_context(token: RequestContextToken | None) -> None:
    """Reset the ContextVar token emitted by `bind_request_context`."""

    if token is not None:
        _request_id_ctx_var.reset(token)


class _RequestContextLogFilter(logging.Filter):
    def __init__(self, service_name: str) -> None:
        super().__init__()
        self._service_name = service_name

    def filter(self, record: logging.LogRecord) -> bool:  # noqa: D401
        record.service_name = self._service_name
        record.request_id = _request_id_ctx_var.get()
        return True
