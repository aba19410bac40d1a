"""邮箱验证码与图形验证码服务"""

__version__ = "1.0.0"
