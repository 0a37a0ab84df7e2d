# SPDX-FileCopyrightText: 2025 robot-visual-perception
#
# SPDX-License-Identifier: MIT
import os


RESPONSE_BODY = "<html><body><h1>Goodbye Cruel World</h1></body></html>"


class Config:
    """Application configuration."""

    SERVICE_NAME: str = "farewell"

    # Fixed listener address, "" is every interface (IPv4 and IPv6)
    HOST: str = ""
    PORT: int = 8080

    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")


config = Config()
