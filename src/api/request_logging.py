"""Structured logging for the invoice API

Every record is written as one JSON object. The middleware binds the request
id and owner to a context variable, so use case and audit records emitted
while a request runs carry the same request id as its access line.
"""

import json
import logging
import sys
import time
import uuid
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, Optional

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from src.api.identity import OWNER_HEADER

SERVICE_NAME = "invoice-service"
REQUEST_ID_HEADER = "X-Request-ID"

# Fields copied from a record into the payload when present
LOG_FIELDS = (
    "request_id",
    "owner_id",
    "method",
    "path",
    "status_code",
    "latency_ms",
    "action",
    "entity_type",
    "entity_id",
    "details",
)

_request_context: ContextVar[Optional[Dict[str, Any]]] = ContextVar("request_context", default=None)


class RequestContextFilter(logging.Filter):
    """Stamps the current request's id and owner onto each record"""

    def filter(self, record: logging.LogRecord) -> bool:
        for key, value in (_request_context.get() or {}).items():
            if getattr(record, key, None) is None:
                setattr(record, key, value)
        return True


class JsonFormatter(logging.Formatter):

    def __init__(self, service: str = SERVICE_NAME, fields: Iterable[str] = LOG_FIELDS):
        super().__init__()
        self.service = service
        self.fields = tuple(fields)

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "service": self.service,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for key in self.fields:
            value = getattr(record, key, None)
            if value is not None:
                payload[key] = value

        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)

        return json.dumps(payload, default=str)


def configure_logging(level: str = "INFO", service: str = SERVICE_NAME) -> None:
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JsonFormatter(service))
    handler.addFilter(RequestContextFilter())
    logging.basicConfig(level=level, handlers=[handler], force=True)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    One access record per request with status and latency

    Paths in quiet_paths (health checks) are served without an access record.
    """

    def __init__(self, app, logger_name: str = "invoicing.access", quiet_paths: Iterable[str] = ("/health",)):
        super().__init__(app)
        self.logger = logging.getLogger(logger_name)
        self.quiet_paths = frozenset(quiet_paths)

    async def dispatch(self, request: Request, call_next) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        request.state.request_id = request_id
        token = _request_context.set(
            {"request_id": request_id, "owner_id": request.headers.get(OWNER_HEADER)}
        )
        extra = {"method": request.method, "path": request.url.path}
        start = time.perf_counter()
        try:
            try:
                response = await call_next(request)
            except Exception:
                extra["latency_ms"] = round((time.perf_counter() - start) * 1000, 2)
                self.logger.exception("Unhandled error", extra=extra)
                raise

            if request.url.path not in self.quiet_paths:
                extra["status_code"] = response.status_code
                extra["latency_ms"] = round((time.perf_counter() - start) * 1000, 2)
                self.logger.info(f"{request.method} {request.url.path} {response.status_code}", extra=extra)
        finally:
            _request_context.reset(token)

        response.headers[REQUEST_ID_HEADER] = request_id
        return response
