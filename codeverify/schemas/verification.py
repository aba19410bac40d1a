from datetime import timedelta
from enum import Enum

from pydantic import BaseModel, Field

EMAIL_VERIFICATION_CODE_CACHE_KEY_PREFIX = "Email:VERIFICATION:CODE:"
EMAIL_VERIFICATION_CODE_CACHE_EXPIRATION = timedelta(minutes=3)
IMG_VERIFICATION_CODE_CACHE_PREFIX = "IMG:VERIFICATION:CODE:CACHE:"
IMG_VERIFICATION_CODE_CACHE_EXPIRATION = timedelta(minutes=3)


class TokenKind(str, Enum):
    """验证码类型"""
    email = "email"
    image = "image"

    @property
    def prefix(self) -> str:
        if self is TokenKind.email:
            return EMAIL_VERIFICATION_CODE_CACHE_KEY_PREFIX
        return IMG_VERIFICATION_CODE_CACHE_PREFIX

    @property
    def expiration(self) -> timedelta:
        if self is TokenKind.email:
            return EMAIL_VERIFICATION_CODE_CACHE_EXPIRATION
        return IMG_VERIFICATION_CODE_CACHE_EXPIRATION

    @property
    def ttl_seconds(self) -> int:
        return int(self.expiration.total_seconds())

    def key_for(self, identity: str) -> str:
        """构造缓存键: 前缀 + 邮箱"""
        return self.prefix + identity


class ImgVerificationData(BaseModel):
    img_base64: str = Field(..., alias="imgBase64",
                            description="图形验证码的Base64编码")

    class Config:
        populate_by_name = True
