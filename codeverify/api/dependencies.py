from fastapi import Depends, Request
from codeverify.services.code_generator import CodeGenerator
from codeverify.services.email_service import EmailService
from codeverify.services.issuance_service import IssuanceService
from codeverify.services.verification_service import VerificationService
from codeverify.stores.base import TokenStore
from codeverify.stores.redis_store import RedisTokenStore


def get_token_store(request: Request) -> TokenStore:
    """从应用状态中取出启动时创建的Redis客户端"""
    return RedisTokenStore(request.app.state.redis)


def get_issuance_service(store: TokenStore = Depends(get_token_store)) -> IssuanceService:
    return IssuanceService(store, CodeGenerator(), EmailService())


def get_verification_service(store: TokenStore = Depends(get_token_store)) -> VerificationService:
    return VerificationService(store)
