from typing import List, Optional, Tuple

import httpx
from codeverify.config import settings
from codeverify.utils.logger import get_logger

logger = get_logger("email")


class EmailService:
    """邮件发送服务，通过 SMTP 中继服务的 HTTP 接口投递"""

    def __init__(
        self,
        smtp_service_url: str = settings.smtp_service_url,
        api_key: str = settings.smtp_api_key,
        subject: str = settings.mail_subject,
        timeout: float = settings.mail_timeout
    ):
        self.smtp_service_url = smtp_service_url.rstrip("/")
        self.api_key = api_key
        self.subject = subject
        self.timeout = timeout

    async def send(self, body: str, recipients: List[str]) -> Tuple[bool, Optional[str]]:
        """发送纯文本邮件

        Returns:
            (是否全部发送成功, 失败原因)
        """
        if not recipients:
            return False, "收件人为空"

        async with httpx.AsyncClient(timeout=self.timeout) as client:
            for recipient in recipients:
                try:
                    response = await client.post(
                        f"{self.smtp_service_url}/v1/mail/send",
                        headers={
                            "Content-Type": "application/json",
                            "X-API-Key": self.api_key
                        },
                        json={
                            "recipient_email": recipient,
                            "subject": self.subject,
                            "body": body,
                            "body_type": "text"
                        }
                    )
                except httpx.RequestError as e:
                    logger.error(f"邮件服务连接失败，收件人: {recipient}, 错误: {e}")
                    return False, f"邮件服务连接失败：{e}"

                if response.status_code != 200:
                    logger.error(
                        f"邮件发送失败，收件人: {recipient}, 状态码: {response.status_code}")
                    return False, f"邮件发送失败：{response.text}"

        return True, None
