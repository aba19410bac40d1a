"""In-memory token store."""

from __future__ import annotations

import math
import threading
import time
from typing import Callable, Optional

from codeverify.core.exceptions import TokenNotFoundError


class MemoryTokenStore:
    """进程内 TokenStore，用于测试和本地开发

    过期在读取时惰性判断，时钟可注入以便测试过期。
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._lock = threading.Lock()
        self._clock = clock
        self._entries: dict[str, tuple[str, float]] = {}

    def _live(self, key: str) -> Optional[tuple[str, float]]:
        entry = self._entries.get(key)
        if entry is None:
            return None
        if entry[1] <= self._clock():
            del self._entries[key]
            return None
        return entry

    def set(self, key: str, value: str, ttl: int) -> None:
        with self._lock:
            self._entries[key] = (value, self._clock() + ttl)

    def set_if_absent(self, key: str, value: str, ttl: int) -> bool:
        with self._lock:
            if self._live(key) is not None:
                return False
            self._entries[key] = (value, self._clock() + ttl)
            return True

    def exists(self, key: str) -> bool:
        with self._lock:
            return self._live(key) is not None

    def get(self, key: str) -> str:
        with self._lock:
            entry = self._live(key)
            if entry is None:
                raise TokenNotFoundError(key)
            return entry[0]

    def delete(self, key: str) -> bool:
        with self._lock:
            live = self._live(key) is not None
            self._entries.pop(key, None)
            return live

    def ttl(self, key: str) -> Optional[int]:
        with self._lock:
            entry = self._live(key)
            if entry is None:
                return None
            return math.ceil(entry[1] - self._clock())

    def ping(self) -> bool:
        return True
