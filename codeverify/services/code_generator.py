import secrets
from typing import Tuple

from codeverify.config import settings
from codeverify.core.exceptions import RenderError
from codeverify.utils.captcha import CaptchaRenderer


class CodeGenerator:
    """验证码生成，与存储无关"""

    def __init__(
        self,
        renderer: CaptchaRenderer = None,
        code_min: int = settings.email_code_min,
        code_max: int = settings.email_code_max
    ):
        if code_min > code_max:
            raise ValueError("email code range is empty")
        self.renderer = renderer or CaptchaRenderer()
        self.code_min = code_min
        self.code_max = code_max

    def generate_email_code(self) -> int:
        """在 [code_min, code_max] 内均匀生成数字验证码"""
        return self.code_min + secrets.randbelow(self.code_max - self.code_min + 1)

    def generate_image_code(self) -> Tuple[str, str]:
        """生成图形验证码，返回 (图片Base64, 答案)"""
        try:
            img_base64, answer = self.renderer.render()
        except Exception as e:
            raise RenderError(f"captcha render failed: {e}") from e
        if not img_base64 or not answer:
            raise RenderError("captcha renderer returned empty output")
        return img_base64, answer
