from .base import TokenStore
from .memory_store import MemoryTokenStore
from .redis_store import RedisTokenStore

__all__ = [
    "TokenStore",
    "MemoryTokenStore",
    "RedisTokenStore",
]
