"""Redis连接管理"""
import redis
from codeverify.config import Settings, settings as default_settings


def create_redis(settings: Settings = default_settings) -> redis.Redis:
    """创建Redis客户端

    在应用启动时调用一次，由 lifespan 持有并注入到各个服务，
    关闭时调用 ``close()``。
    """
    return redis.from_url(
        settings.redis_url,
        decode_responses=True,
        socket_connect_timeout=settings.redis_connect_timeout,
        socket_timeout=settings.redis_socket_timeout,
        retry_on_timeout=True
    )
