# SPDX-FileCopyrightText: 2025 robot-visual-perception
#
# SPDX-License-Identifier: MIT
import logging
from typing import Optional

from opentelemetry import metrics
from opentelemetry.exporter.otlp.proto.http.metric_exporter import OTLPMetricExporter
from opentelemetry.sdk.metrics import MeterProvider
from opentelemetry.sdk.metrics.export import MetricReader, PeriodicExportingMetricReader

from common.telemetry import otlp_endpoint, resolve_environment, service_resource


EXPORT_INTERVAL_MS = 5000

_meter: Optional[metrics.Meter] = None


def _readers() -> list[MetricReader]:
    endpoint = otlp_endpoint("metrics")
    if not endpoint:
        return []
    try:
        return [
            PeriodicExportingMetricReader(
                OTLPMetricExporter(endpoint=endpoint),
                export_interval_millis=EXPORT_INTERVAL_MS,
            )
        ]
    except Exception as err:  # pragma: no cover
        logging.getLogger(__name__).warning(
            "OTLP metrics exporter setup failed; metrics disabled",
            extra={"error": str(err)},
        )
        return []


def configure_metrics(
    service_name: str,
    service_version: str,
    environment: str | None = None,
) -> metrics.Meter:
    """
    Install the global MeterProvider once and return the service Meter.

    Without an OTLP endpoint the provider has no readers, so instruments
    still work but nothing leaves the process.

    Args:
        service_name: Name of the service (e.g., "farewell")
        service_version: Version of the service
        environment: Deployment environment, defaults to $ENVIRONMENT
    """
    global _meter
    if _meter is None:
        resource = service_resource(
            service_name, service_version, resolve_environment(environment)
        )
        metrics.set_meter_provider(
            MeterProvider(resource=resource, metric_readers=_readers())
        )
        _meter = metrics.get_meter(service_name, service_version)
    return _meter
