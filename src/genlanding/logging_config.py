"""Structured logging for the GenLanding service.

Locally every record is written to stdout as one JSON object; outside ``dev``
the Cloud Logging client takes over. Each HTTP request binds a trace id so
the Gemini call, the decode step and any failure it raises can be grouped
in the log viewer.
"""

from __future__ import annotations

import json
import logging
import sys
import uuid
from contextvars import ContextVar
from datetime import datetime, timezone

from google.cloud import logging as cloud_logging

TRACE_HEADER = "x-cloud-trace-context"
TRACE_FIELD = "logging.googleapis.com/trace"

trace_id_var: ContextVar[str | None] = ContextVar("genlanding_trace_id", default=None)

# Attributes every LogRecord carries; anything else came in through ``extra``.
_RESERVED_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", None, None))
) | {"message", "asctime", "taskName"}

# SDK and transport loggers that drown out generation logs at DEBUG.
_QUIET_LOGGERS = ("google", "google_genai", "httpx", "httpcore")


class StructuredFormatter(logging.Formatter):
    """Render a record, its ``extra`` fields and the bound trace as JSON."""

    def format(self, record: logging.LogRecord) -> str:
        log_obj = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc)
            .isoformat()
            .replace("+00:00", "Z"),
            "severity": record.levelname,
            "message": record.getMessage(),
            "logger": record.name,
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        trace_id = trace_id_var.get()
        if trace_id:
            log_obj[TRACE_FIELD] = trace_id

        for key, value in vars(record).items():
            if key not in _RESERVED_ATTRS and not key.startswith("_"):
                log_obj[key] = value

        if record.exc_info:
            log_obj["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_obj, default=str, ensure_ascii=False)


def setup_logging(
    *,
    environment: str = "dev",
    project_id: str | None = None,
    use_cloud_logging: bool = True,
) -> None:
    """Configure logging for the API process.

    Args:
        environment: Environment name (dev, staging, prod)
        project_id: GCP project ID for Cloud Logging
        use_cloud_logging: Whether to hand records to the Cloud Logging client
    """
    log_level = logging.DEBUG if environment == "dev" else logging.INFO

    if use_cloud_logging and project_id and environment != "dev":
        client = cloud_logging.Client(project=project_id)
        client.setup_logging(log_level=log_level)
    else:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(StructuredFormatter())
        logging.basicConfig(level=log_level, handlers=[handler])

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def trace_from_header(header: str | None, project_id: str | None = None) -> str:
    """Derive the trace id for a request.

    ``X-Cloud-Trace-Context`` looks like ``TRACE_ID/SPAN_ID;o=1``; only the
    trace part is kept. Requests without the header get a fresh id. With a
    project id the value is qualified as ``projects/<id>/traces/<trace>``,
    the form Cloud Logging groups by.
    """
    trace = (header or "").split("/", 1)[0].split(";", 1)[0].strip()
    if not trace:
        trace = uuid.uuid4().hex
    if project_id:
        return f"projects/{project_id}/traces/{trace}"
    return trace


def set_trace_id(trace_id: str | None) -> None:
    trace_id_var.set(trace_id)


def get_trace_id() -> str | None:
    return trace_id_var.get()


__all__ = [
    "StructuredFormatter",
    "TRACE_HEADER",
    "get_trace_id",
    "set_trace_id",
    "setup_logging",
    "trace_from_header",
]
