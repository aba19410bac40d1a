from pydantic_settings import BaseSettings
from typing import List, Optional


class Settings(BaseSettings):
    # Redis
    redis_url: str = "redis://localhost:6379/0"
    redis_socket_timeout: float = 5.0
    redis_connect_timeout: float = 5.0

    # Email code
    email_code_min: int = 100000
    email_code_max: int = 999999

    # Image captcha
    captcha_length: int = 4
    captcha_width: int = 120
    captcha_height: int = 40

    # Email
    smtp_service_url: str = "http://localhost:8025"
    smtp_api_key: str = ""
    mail_subject: str = "验证码"
    mail_timeout: float = 30.0

    # Logging
    log_level: str = "INFO"
    log_file: Optional[str] = None

    # Application
    app_name: str = "Codeverify API"
    app_version: str = "1.0.0"
    debug: bool = True
    cors_origins: List[str] = [
        "http://localhost:3000", "http://localhost:5173"]

    class Config:
        env_file = ".env"


settings = Settings()
