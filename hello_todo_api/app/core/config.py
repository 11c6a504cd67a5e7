"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields, so the
service starts without any configuration at all.  Tests construct
their own ``Settings`` instances and pass them to ``create_app``.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Hello Todo API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # Prefix under which the hello/todos/big routes are mounted.  Empty
    # by default so the routes live at the root (``/hello``, ``/todos``).
    api_prefix: str = os.getenv("API_PREFIX", "")

    # Number of random bytes generated for ``GET /big``.  The response
    # body is twice as long because every byte is hex encoded.
    big_payload_bytes: int = int(os.getenv("BIG_PAYLOAD_BYTES", "1000000"))

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8080"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Because the dataclass
# computes values at class definition time, environment variables should
# be set before importing this module.
settings = Settings()
