from datetime import datetime, timezone

from fastapi import APIRouter, Depends, Query
from codeverify.api.dependencies import get_issuance_service
from codeverify.schemas.base import ApiResponse, ErrorResponse
from codeverify.schemas.verification import ImgVerificationData
from codeverify.services.issuance_service import IssuanceService

router = APIRouter()

ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "请求参数错误"},
    500: {"model": ErrorResponse, "description": "服务器错误"},
}


@router.get("/sendImgVerificationCode", response_model=ApiResponse, responses=ERROR_RESPONSES)
def send_img_verification_code(
    email: str = Query("", description="邮箱地址，用于生成验证码"),
    service: IssuanceService = Depends(get_issuance_service)
):
    """生成图形验证码并返回Base64编码"""
    img_base64 = service.issue_image_code(email)
    return ApiResponse(
        success=True,
        message="图形验证码生成成功",
        timestamp=datetime.now(timezone.utc),
        data=ImgVerificationData(img_base64=img_base64).model_dump(by_alias=True)
    )


@router.get("/sendEmailVerificationCode", response_model=ApiResponse, responses=ERROR_RESPONSES)
async def send_email_verification_code(
    email: str = Query("", description="邮箱地址，用于发送验证码"),
    service: IssuanceService = Depends(get_issuance_service)
):
    """发送邮箱验证码，验证码有效期为3分钟"""
    await service.issue_email_code(email)
    return ApiResponse(
        success=True,
        message="邮箱验证码发送成功, 请注意查收！",
        timestamp=datetime.now(timezone.utc)
    )
