"""Token store interface."""

from __future__ import annotations

from typing import Optional, Protocol


class TokenStore(Protocol):
    """按命名空间键存取验证码的缓存接口

    所有方法在后端故障时抛出 ``StoreError``；``get`` 在键不存在时
    抛出 ``TokenNotFoundError``，便于调用方区分记录。
    """

    def set(self, key: str, value: str, ttl: int) -> None:
        ...

    def set_if_absent(self, key: str, value: str, ttl: int) -> bool:
        ...

    def exists(self, key: str) -> bool:
        ...

    def get(self, key: str) -> str:
        ...

    def delete(self, key: str) -> bool:
        ...

    def ttl(self, key: str) -> Optional[int]:
        ...

    def ping(self) -> bool:
        ...
