"""
Application package initializer.

The service is split into a handful of small pieces: ``core`` holds
configuration, logging and the random byte generator, ``services``
holds the in‑memory todo collection, ``schemas`` the request and
response models, and ``api/v1/endpoints`` one router per route group.
"""

from .main import app  # noqa: F401
