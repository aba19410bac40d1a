from datetime import datetime, timezone
from typing import Any, Optional

from pydantic import BaseModel, Field


class ApiResponse(BaseModel):
    success: bool = Field(default=True, description="请求是否成功")
    message: str = Field(..., description="响应消息")
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc), description="响应时间戳")
    data: Optional[Any] = Field(None, description="响应数据")

    class Config:
        populate_by_name = True


class ErrorResponse(BaseModel):
    success: bool = Field(default=False, description="请求是否成功")
    message: str = Field(..., description="错误消息")
    code: str = Field(..., description="错误代码")
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc), description="错误时间戳")
