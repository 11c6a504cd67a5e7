"""
Pseudo‑random byte generation for the ``/big`` endpoint.

``RandomByteGenerator`` draws one byte at a time from a private
``random.Random`` instance that is seeded exactly once from the
current time.  This is a non‑cryptographic generator: it exists to
produce a large, cheap response body and must not be used for keys,
tokens or anything else security related (use ``secrets`` for that).

A single generator is constructed by ``create_app`` and shared by all
requests through ``app.state``.
"""

from __future__ import annotations

import logging
import random
import threading
import time
from typing import Optional, Protocol


logger = logging.getLogger(__name__)


class ByteGenerator(Protocol):
    """Anything that can produce ``count`` bytes of data."""

    def generate(self, count: int) -> bytes:
        ...


class RandomByteGenerator:
    """Time‑seeded, per‑byte pseudo‑random generator."""

    def __init__(self, seed: Optional[int] = None) -> None:
        self._random = random.Random()
        self._seed_lock = threading.Lock()
        self._seeded = False
        self.seed(seed)

    @property
    def seeded(self) -> bool:
        return self._seeded

    def seed(self, value: Optional[int] = None) -> None:
        """Seed the underlying source once.

        Later calls are ignored so that concurrent first use can never
        reseed a generator that is already producing data.  When
        ``value`` is omitted the seed is derived from the current time.
        """
        with self._seed_lock:
            if self._seeded:
                return
            if value is None:
                value = time.time_ns()
            self._random.seed(value)
            self._seeded = True
            logger.debug("Random byte generator seeded")

    def generate(self, count: int) -> bytes:
        """Return ``count`` bytes, each drawn uniformly from [0, 255].

        Raises
        ------
        ValueError
            If ``count`` is negative.
        """
        if count < 0:
            raise ValueError("count must be non-negative")
        getrandbits = self._random.getrandbits
        data = bytearray()
        for _ in range(count):
            data.append(getrandbits(8))
        return bytes(data)


def hex_encode(data: bytes) -> str:
    """Encode ``data`` as lowercase hexadecimal, two characters per byte."""
    return data.hex()
