class AppException(Exception):
    """应用程序异常基类"""

    def __init__(self, message: str, code: str = "APP_ERROR", status_code: int = 400):
        self.message = message
        self.code = code
        self.status_code = status_code
        super().__init__(self.message)


class InvalidRequestError(AppException):
    """请求参数错误（邮箱为空或格式无效）"""

    def __init__(self, message: str = "请求参数错误"):
        super().__init__(message, "INVALID_REQUEST", 400)


class AlreadyPendingError(AppException):
    """验证码尚未过期，不能重复发送"""

    def __init__(self, message: str = "验证码已发送，请勿重复获取"):
        super().__init__(message, "ALREADY_PENDING", 400)


class GenerationFailedError(AppException):
    """验证码生成失败"""

    def __init__(self, message: str = "服务器错误，生成验证码失败"):
        super().__init__(message, "GENERATION_FAILED", 500)


class StorageFailedError(AppException):
    """验证码缓存读写失败"""

    def __init__(self, message: str = "服务器错误，验证码缓存失败"):
        super().__init__(message, "STORAGE_FAILED", 500)


class DispatchFailedError(AppException):
    """邮件发送失败"""

    def __init__(self, message: str = "邮箱验证码发送失败"):
        super().__init__(message, "DISPATCH_FAILED", 500)


class StoreError(Exception):
    """缓存后端错误，只在服务内部流转"""

    def __init__(self, key: str, message: str = "cache backend error"):
        self.key = key
        self.message = message
        super().__init__(f"{message} (key={key})")


class TokenNotFoundError(StoreError):
    """键不存在或已过期"""

    def __init__(self, key: str):
        super().__init__(key, "key not found")


class RenderError(Exception):
    """图形验证码渲染失败"""
