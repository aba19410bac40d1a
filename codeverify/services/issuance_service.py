"""验证码签发服务

图形验证码：生成 -> 写入缓存（覆盖旧值）-> 返回图片。
邮箱验证码：校验邮箱 -> SET NX 写入缓存 -> 发送邮件，发送失败时删除已写入的验证码。
"""
from typing import List, Optional, Protocol, Tuple

from codeverify.core.exceptions import (AlreadyPendingError, DispatchFailedError,
                                        GenerationFailedError, InvalidRequestError,
                                        RenderError, StorageFailedError, StoreError)
from codeverify.schemas.verification import TokenKind
from codeverify.services.code_generator import CodeGenerator
from codeverify.stores.base import TokenStore
from codeverify.utils.logger import verification_logger as logger
from codeverify.utils.validators import valid_email

EMAIL_CONTENT_TEMPLATE = "您的注册验证码是: {code} , 有效期为 {minutes} 分钟。"


class MailTransport(Protocol):
    async def send(self, body: str, recipients: List[str]) -> Tuple[bool, Optional[str]]:
        ...


class IssuanceService:
    """验证码签发"""

    def __init__(self, store: TokenStore, generator: CodeGenerator, transport: MailTransport):
        self.store = store
        self.generator = generator
        self.transport = transport

    def issue_image_code(self, identity: str) -> str:
        """生成图形验证码并返回Base64编码，答案只保存在缓存中"""
        if not identity or not identity.strip():
            logger.error("请求参数错误，邮箱地址为空")
            raise InvalidRequestError("请求参数错误，邮箱地址为空")

        kind = TokenKind.image
        key = kind.key_for(identity)

        try:
            img_base64, answer = self.generator.generate_image_code()
        except RenderError as e:
            logger.error(f"生成图片验证码失败，邮箱: {identity}, 错误: {e}")
            raise GenerationFailedError("服务器错误，生成图形验证码失败") from e

        try:
            self.store.set(key, answer, kind.ttl_seconds)
        except StoreError as e:
            logger.error(f"图形验证码写入缓存失败，key: {key}, 错误: {e}")
            raise StorageFailedError("服务器错误，生成图形验证码失败") from e

        logger.info(f"图形验证码已生成，key: {key}")
        return img_base64

    async def issue_email_code(self, identity: str) -> None:
        """发送邮箱验证码，有效期内不允许重复发送"""
        if not identity or not identity.strip():
            logger.error("请求参数错误，邮箱地址为空")
            raise InvalidRequestError("请求参数错误，邮箱地址为空")

        if not valid_email(identity):
            logger.error(f"邮箱格式无效: {identity}")
            raise InvalidRequestError("邮箱格式无效")

        kind = TokenKind.email
        key = kind.key_for(identity)
        code = self.generator.generate_email_code()

        try:
            written = self.store.set_if_absent(key, str(code), kind.ttl_seconds)
        except StoreError as e:
            logger.error(f"邮箱验证码写入缓存失败，key: {key}, 错误: {e}")
            raise StorageFailedError() from e

        if not written:
            logger.warning(f"邮箱验证码仍在有效期内，拒绝重复发送，key: {key}")
            raise AlreadyPendingError()

        minutes = round(kind.ttl_seconds / 60)
        content = EMAIL_CONTENT_TEMPLATE.format(code=code, minutes=minutes)

        try:
            success, err = await self.transport.send(content, [identity])
        except Exception as e:
            success, err = False, str(e)

        if not success:
            logger.error(f"邮箱验证码发送失败，邮箱地址: {identity}, 错误: {err}")
            self._discard(key)
            raise DispatchFailedError()

        logger.info(f"邮箱验证码发送成功，key: {key}")

    def _discard(self, key: str) -> None:
        """发送失败后删除验证码，删除失败只记录日志"""
        try:
            self.store.delete(key)
        except StoreError as e:
            logger.error(f"删除验证码缓存失败，key: {key}, 错误: {e}")
