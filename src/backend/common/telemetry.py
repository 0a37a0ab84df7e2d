# SPDX-FileCopyrightText: 2025 robot-visual-perception
#
# SPDX-License-Identifier: MIT
"""Pieces shared by the OpenTelemetry log and metric setup."""

import os
from typing import Literal, Optional

from opentelemetry.sdk.resources import Resource
from opentelemetry.semconv.resource import ResourceAttributes


def service_resource(
    service_name: str,
    service_version: Optional[str],
    environment: str,
) -> Resource:
    """Resource attributes attached to every exported log record and metric."""
    return Resource.create(
        {
            ResourceAttributes.SERVICE_NAME: service_name,
            ResourceAttributes.SERVICE_VERSION: service_version or "unknown",
            ResourceAttributes.DEPLOYMENT_ENVIRONMENT: environment,
        }
    )


def resolve_environment(environment: Optional[str]) -> str:
    return environment if environment is not None else os.getenv(
        "ENVIRONMENT", "development"
    )


def otlp_endpoint(signal: Literal["logs", "metrics"]) -> Optional[str]:
    """OTLP endpoint for one signal, falling back to the shared endpoint.

    None means nothing should be exported.
    """
    return (
        os.getenv(f"OTEL_EXPORTER_OTLP_{signal.upper()}_ENDPOINT")
        or os.getenv("OTEL_EXPORTER_OTLP_ENDPOINT")
        or None
    )
