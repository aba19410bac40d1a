"""基于Redis的验证码存储"""
from typing import Optional

import redis
from redis.exceptions import RedisError

from codeverify.core.exceptions import StoreError, TokenNotFoundError


class RedisTokenStore:
    """Redis实现的 TokenStore

    单键的 SET/GET/DEL 由 Redis 保证原子性，这里不加进程内锁。
    redis-py 的异常统一转换为 ``StoreError``。
    """

    def __init__(self, client: redis.Redis):
        self.redis = client

    def set(self, key: str, value: str, ttl: int) -> None:
        try:
            self.redis.set(key, value, ex=ttl)
        except RedisError as e:
            raise StoreError(key, f"set failed: {e}") from e

    def set_if_absent(self, key: str, value: str, ttl: int) -> bool:
        """SET NX EX，键已存在时返回 False"""
        try:
            return bool(self.redis.set(key, value, ex=ttl, nx=True))
        except RedisError as e:
            raise StoreError(key, f"set nx failed: {e}") from e

    def exists(self, key: str) -> bool:
        try:
            return int(self.redis.exists(key)) > 0
        except RedisError as e:
            raise StoreError(key, f"exists failed: {e}") from e

    def get(self, key: str) -> str:
        try:
            value = self.redis.get(key)
        except RedisError as e:
            raise StoreError(key, f"get failed: {e}") from e
        if value is None:
            raise TokenNotFoundError(key)
        return str(value)

    def delete(self, key: str) -> bool:
        try:
            return int(self.redis.delete(key)) > 0
        except RedisError as e:
            raise StoreError(key, f"delete failed: {e}") from e

    def ttl(self, key: str) -> Optional[int]:
        """剩余秒数；键不存在或未设置过期时间时返回 None"""
        try:
            remaining = int(self.redis.ttl(key))
        except RedisError as e:
            raise StoreError(key, f"ttl failed: {e}") from e
        return remaining if remaining >= 0 else None

    def ping(self) -> bool:
        try:
            return bool(self.redis.ping())
        except RedisError as e:
            raise StoreError("", f"ping failed: {e}") from e
