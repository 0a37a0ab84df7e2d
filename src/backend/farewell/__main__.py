# SPDX-FileCopyrightText: 2025 robot-visual-perception
#
# SPDX-License-Identifier: MIT

"""CLI entry point for the farewell service on its fixed port."""

import logging
import sys

import uvicorn

from common.config import config
from common.port_utils import BindError, bind_listener

logger = logging.getLogger("farewell")


def run_server(host: str, port: int) -> None:
    """Bind host:port and serve until the process is terminated.

    Exits with status 1 if the listener cannot be bound.
    """
    # Importing the app configures logging, so the bind error below is formatted too
    from farewell.main import app

    try:
        sock = bind_listener(host, port)
    except BindError as err:
        logger.error(str(err), extra={"host": err.host, "port": err.port})
        sys.exit(1)

    logger.info(f"Server starting on :{port}")

    bound_host = sock.getsockname()[0]
    server = uvicorn.Server(
        uvicorn.Config(app, host=bound_host, port=port, log_config=None)
    )
    try:
        server.run(sockets=[sock])
    finally:
        sock.close()


def main() -> None:
    """Start the farewell service."""
    run_server(config.HOST, config.PORT)


if __name__ == "__main__":
    main()
