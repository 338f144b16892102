from __future__ import annotations

from threading import Lock
import zlib


class KeyedLock:
    """Fixed pool of locks; every key always maps to the same lock."""

    def __init__(self, stripes: int = 64):
        if stripes <= 0:
            raise ValueError("stripes must be positive.")
        self._locks = [Lock() for _ in range(stripes)]

    def for_key(self, key: str) -> Lock:
        index = zlib.crc32(key.encode("utf-8")) % len(self._locks)
        return self._locks[index]
