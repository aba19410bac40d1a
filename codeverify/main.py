import time
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from codeverify.api.v1.router import api_router
from codeverify.config import settings
from codeverify.core.exceptions import AppException, StoreError
from codeverify.core.redis import create_redis
from codeverify.stores.redis_store import RedisTokenStore
from codeverify.utils.logger import api_logger, app_logger


def create_app() -> FastAPI:
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="邮箱验证码与图形验证码服务 - 后端API接口文档",
        openapi_url="/api/openapi.json",
        docs_url="/api/docs",
        redoc_url="/api/redoc",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # 请求ID中间件
    @app.middleware("http")
    async def add_request_id(request: Request, call_next):
        request_id = str(uuid.uuid4())
        request.state.request_id = request_id

        start_time = time.time()
        response = await call_next(request)
        process_time = time.time() - start_time

        response.headers["X-Request-ID"] = request_id
        response.headers["X-Process-Time"] = str(process_time)

        return response

    # 异常处理
    @app.exception_handler(AppException)
    async def app_exception_handler(request: Request, exc: AppException):
        api_logger.warning(
            f"{request.method} {request.url.path} -> {exc.status_code} {exc.code}: {exc.message}")
        return JSONResponse(
            status_code=exc.status_code,
            content={
                "success": False,
                "message": exc.message,
                "code": exc.code,
                "timestamp": time.time()
            }
        )

    # 通用异常处理
    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        api_logger.exception(f"{request.method} {request.url.path} 未处理的异常")
        return JSONResponse(
            status_code=500,
            content={
                "success": False,
                "message": "Internal server error",
                "code": "INTERNAL_ERROR",
                "timestamp": time.time()
            }
        )

    app.include_router(api_router, prefix="/api")

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """应用启动和关闭时执行"""
        app_logger.info("🚀 Application starting up...")

        app.state.redis = create_redis(settings)
        try:
            RedisTokenStore(app.state.redis).ping()
            app_logger.info("✅ Redis connection successful")
        except StoreError as e:
            app_logger.error(f"❌ Redis connection failed: {e}")

        app_logger.info(
            f"✅ Application started successfully on {settings.app_name} v{settings.app_version}")

        yield

        app_logger.info("🛑 Application shutting down...")
        app.state.redis.close()
        app_logger.info("✅ Application shut down complete")

    app.router.lifespan_context = lifespan

    return app


app = create_app()
