from typing import Optional

from codeverify.core.exceptions import StoreError, TokenNotFoundError
from codeverify.schemas.verification import TokenKind
from codeverify.stores.base import TokenStore
from codeverify.utils.logger import verification_logger as logger


def normalize_code(code: Optional[str]) -> str:
    return (code or "").strip().upper()


class VerificationService:
    """验证码校验

    校验成功即删除，验证码只能使用一次；校验失败不删除，
    有效期内可以重试。
    """

    def __init__(self, store: TokenStore):
        self.store = store

    def verify_email_code(self, code: Optional[str], email: str) -> bool:
        """校验邮箱验证码"""
        return self.verify(code, email, TokenKind.email)

    def verify_image_code(self, code: Optional[str], email: str) -> bool:
        """校验图形验证码"""
        return self.verify(code, email, TokenKind.image)

    def verify(self, code: Optional[str], identity: str, kind: TokenKind) -> bool:
        """通用验证码校验"""
        key = kind.key_for(identity)

        try:
            stored_code = self.store.get(key)
        except TokenNotFoundError:
            logger.warning(f"验证码不存在或已过期，key: {key}")
            return False
        except StoreError as e:
            logger.error(f"验证码校验失败，key: {key}, 错误: {e}")
            return False

        if normalize_code(stored_code) != normalize_code(code):
            logger.warning(f"用户验证码错误，key: {key}")
            return False

        # 并发校验时只有真正删除了键的一方算通过
        try:
            if not self.store.delete(key):
                logger.warning(f"验证码已被并发使用，key: {key}")
                return False
        except StoreError as e:
            logger.error(f"删除验证码缓存失败，key: {key}, 错误: {e}")

        logger.info(f"验证码校验通过，key: {key}")
        return True
