"""图形验证码渲染"""
import base64
import io
import secrets
import string
from typing import Optional, Tuple

from PIL import Image, ImageDraw, ImageFont

from codeverify.config import settings

# 去掉容易混淆的字符 (0/O, 1/I/L)
AMBIGUOUS = {"0", "O", "I", "1", "L"}
ALPHABET = "".join(ch for ch in (string.ascii_uppercase + string.digits)
                   if ch not in AMBIGUOUS)

FONT_PATHS = [
    "arial.ttf",
    "Arial.ttf",
    "C:/Windows/Fonts/arial.ttf",
    "/usr/share/fonts/truetype/dejavu/DejaVuSans-Bold.ttf",
    "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf",
    "/System/Library/Fonts/Helvetica.ttc",
]

_rng = secrets.SystemRandom()


def _load_font(size: int):
    for font_path in FONT_PATHS:
        try:
            return ImageFont.truetype(font_path, size)
        except OSError:
            continue
    return ImageFont.load_default()


class CaptchaRenderer:
    """生成图形验证码图片及其答案"""

    def __init__(
        self,
        length: int = settings.captcha_length,
        width: int = settings.captcha_width,
        height: int = settings.captcha_height,
        font_size: Optional[int] = None
    ):
        self.length = length
        self.width = width
        self.height = height
        self.font_size = font_size or int(height * 0.7)

    def random_text(self) -> str:
        return "".join(secrets.choice(ALPHABET) for _ in range(self.length))

    def render(self) -> Tuple[str, str]:
        """返回 (data URI 形式的 base64 PNG, 答案)"""
        answer = self.random_text()
        image = self.draw(answer)

        buffer = io.BytesIO()
        image.save(buffer, format='PNG')
        encoded = base64.b64encode(buffer.getvalue()).decode('ascii')
        return f"data:image/png;base64,{encoded}", answer

    def draw(self, text: str) -> Image.Image:
        canvas = Image.new('RGB', (self.width, self.height), 'white')
        draw = ImageDraw.Draw(canvas)
        font = _load_font(self.font_size)

        # 干扰线
        for _ in range(4):
            start = (_rng.randint(0, self.width), _rng.randint(0, self.height))
            end = (_rng.randint(0, self.width), _rng.randint(0, self.height))
            draw.line([start, end], fill=self._random_color(120, 200), width=1)

        slot = self.width // max(len(text), 1)
        for idx, char in enumerate(text):
            bbox = draw.textbbox((0, 0), char, font=font)
            char_width = bbox[2] - bbox[0]
            char_height = bbox[3] - bbox[1]
            x = idx * slot + max((slot - char_width) // 2, 0) + _rng.randint(-2, 2)
            y = max((self.height - char_height) // 2 - bbox[1], 0) + _rng.randint(-3, 3)
            draw.text((x, y), char, fill=self._random_color(0, 100), font=font)

        # 干扰点
        for _ in range(self.width * self.height // 30):
            point = (_rng.randint(0, self.width - 1),
                     _rng.randint(0, self.height - 1))
            draw.point(point, fill=self._random_color(100, 220))

        return canvas

    @staticmethod
    def _random_color(low: int, high: int) -> Tuple[int, int, int]:
        return (_rng.randint(low, high), _rng.randint(low, high), _rng.randint(low, high))
