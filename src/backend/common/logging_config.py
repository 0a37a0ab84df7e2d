# SPDX-FileCopyrightText: 2025 robot-visual-perception
#
# SPDX-License-Identifier: MIT
import json
import logging
import os
from datetime import datetime, timezone
from typing import Any
from opentelemetry import trace, _logs
from opentelemetry.exporter.otlp.proto.http._log_exporter import OTLPLogExporter
from opentelemetry.sdk._logs import LoggerProvider, LoggingHandler
from opentelemetry.sdk._logs.export import BatchLogRecordProcessor
from opentelemetry.sdk.resources import Resource

from common.telemetry import otlp_endpoint, resolve_environment, service_resource


_configured = False
# Attributes every LogRecord carries; anything else came in through `extra=`
_STANDARD_FIELDS: set[str] = set(
    logging.LogRecord("", logging.INFO, "", 0, "", None, None).__dict__
) | {"message", "asctime", "taskName"}


def _span_fields() -> dict[str, str]:
    span_ctx = trace.get_current_span().get_span_context()
    if not (span_ctx and span_ctx.is_valid):
        return {}
    return {
        "trace_id": format(span_ctx.trace_id, "032x"),
        "span_id": format(span_ctx.span_id, "016x"),
    }


def _timestamp(record: logging.LogRecord) -> str:
    return datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat()


class _ServiceFormatter(logging.Formatter):
    def __init__(self, service_name: str, environment: str) -> None:
        super().__init__()
        self.service_name = service_name
        self.environment = environment

    @staticmethod
    def _extras(record: logging.LogRecord, known: dict[str, Any]) -> dict[str, Any]:
        return {
            key: value
            for key, value in record.__dict__.items()
            if key not in _STANDARD_FIELDS and key not in known
        }


class JsonFormatter(_ServiceFormatter):
    """One JSON object per log line."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": _timestamp(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "service": self.service_name,
            "environment": self.environment,
        }
        payload.update(_span_fields())
        payload.update(self._extras(record, payload))

        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)

        return json.dumps(payload, ensure_ascii=True, default=str)


class PrettyFormatter(_ServiceFormatter):
    """Single-line formatter for reading logs in a terminal."""

    def format(self, record: logging.LogRecord) -> str:
        extras: dict[str, Any] = {
            "service": self.service_name,
            "env": self.environment,
        }
        extras.update(_span_fields())
        extras.update(self._extras(record, extras))

        line = " ".join(
            [
                _timestamp(record),
                f"{record.levelname:<7}",
                f"[{record.name}]",
                record.getMessage(),
                " ".join(f"{k}={v}" for k, v in extras.items()),
            ]
        )
        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line


def _logger_provider(resource: Resource) -> LoggerProvider:
    provider = LoggerProvider(resource=resource)
    endpoint = otlp_endpoint("logs")
    if endpoint:
        try:
            provider.add_log_record_processor(
                BatchLogRecordProcessor(OTLPLogExporter(endpoint=endpoint))
            )
        except Exception as err:  # pragma: no cover
            logging.getLogger(__name__).warning(
                "OTLP exporter setup failed; console logging only",
                extra={"error": str(err)},
            )
    return provider


def configure_logging(
    service_name: str,
    service_version: str | None = None,
    environment: str | None = None,
) -> None:
    """
    Route all logging through a single console handler plus OpenTelemetry.

    Reads LOG_LEVEL, LOG_FORMAT ("json" or "pretty"), ENVIRONMENT and the
    OTEL_EXPORTER_OTLP_LOGS_ENDPOINT / OTEL_EXPORTER_OTLP_ENDPOINT variables.
    Calling this more than once is a no-op.
    """
    global _configured
    if _configured:
        return

    log_level = getattr(logging, os.getenv("LOG_LEVEL", "INFO").upper(), logging.INFO)
    env = resolve_environment(environment)

    logger_provider = _logger_provider(
        service_resource(service_name, service_version, env)
    )
    _logs.set_logger_provider(logger_provider)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level)
    pretty = os.getenv("LOG_FORMAT", "json").lower() == "pretty"
    formatter_cls = PrettyFormatter if pretty else JsonFormatter
    console_handler.setFormatter(formatter_cls(service_name, env))

    root = logging.getLogger()
    root.setLevel(log_level)
    root.handlers.clear()
    root.addHandler(console_handler)
    root.addHandler(LoggingHandler(level=log_level, logger_provider=logger_provider))

    _configured = True
