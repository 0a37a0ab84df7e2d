# SPDX-FileCopyrightText: 2025 robot-visual-perception
#
# SPDX-License-Identifier: MIT

"""Farewell service main entrypoint."""

# Necessary for running stuff before other imports
# ruff: noqa: E402

from common import __version__
from common.config import config
from common.logging_config import configure_logging
from common.metrics import configure_metrics

# Initialize logging early
configure_logging(
    service_name=config.SERVICE_NAME,
    service_version=__version__,
    environment=config.ENVIRONMENT,
)

from fastapi import FastAPI

from farewell.routes import router


def create_app() -> FastAPI:
    """FastAPI factory for the farewell service."""
    # Docs and schema routes are disabled so the catch-all sees every path
    app = FastAPI(
        title="Farewell Service",
        version=__version__,
        description="Answers every request with a fixed HTML page",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    meter = configure_metrics(
        config.SERVICE_NAME, __version__, environment=config.ENVIRONMENT
    )
    app.state.request_counter = meter.create_counter(
        "farewell.requests",
        unit="1",
        description="Requests answered by the responder",
    )

    app.include_router(router)
    return app


app = create_app()
