from fastapi import APIRouter
from codeverify.api.v1.endpoints import verification

api_router = APIRouter()

# 验证码相关路由
api_router.include_router(
    verification.router, prefix="/verification", tags=["verification"])
