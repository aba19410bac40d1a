"""Redis验证码管理工具"""
from datetime import datetime, timezone
from typing import Any, Dict, List

import redis
from redis.exceptions import RedisError

from codeverify.schemas.verification import TokenKind
from codeverify.utils.logger import get_logger

logger = get_logger("tools")


class VerificationCodeManager:
    """验证码运维管理器，只读取键名和TTL，不输出验证码本身"""

    def __init__(self, client: redis.Redis):
        self.redis = client

    def _keys(self, kind: TokenKind) -> List[str]:
        return [str(key) for key in self.redis.scan_iter(match=f"{kind.prefix}*")]

    def list_codes(self) -> List[Dict[str, Any]]:
        """列出所有验证码"""
        codes = []
        for kind in TokenKind:
            for key in self._keys(kind):
                ttl = int(self.redis.ttl(key))
                if ttl == -2:
                    # 扫描后已过期
                    continue
                codes.append({
                    "key": key,
                    "kind": kind.value,
                    "identity": key[len(kind.prefix):],
                    "ttl": ttl if ttl > 0 else 0
                })
        return codes

    def get_stats(self) -> Dict[str, Any]:
        """获取验证码统计信息"""
        return {
            "total_email_codes": len(self._keys(TokenKind.email)),
            "total_image_codes": len(self._keys(TokenKind.image)),
            "timestamp": datetime.now(timezone.utc).isoformat()
        }

    def cleanup(self) -> Dict[str, int]:
        """清理所有验证码数据"""
        deleted_count = 0
        for kind in TokenKind:
            keys = self._keys(kind)
            if keys:
                deleted_count += int(self.redis.delete(*keys))
        logger.info(f"清理验证码完成，删除了 {deleted_count} 个键")
        return {"deleted_count": deleted_count}


def main(argv: List[str]) -> int:
    from codeverify.core.redis import create_redis

    if len(argv) < 2:
        print("用法:")
        print("  python -m codeverify.tools.verification_manager stats - 显示统计信息")
        print("  python -m codeverify.tools.verification_manager list-codes - 列出所有验证码")
        print("  python -m codeverify.tools.verification_manager cleanup - 清理所有验证码数据")
        return 1

    command = argv[1]
    client = create_redis()
    manager = VerificationCodeManager(client)

    try:
        if command == "stats":
            stats = manager.get_stats()
            print("Redis验证码统计信息:")
            for key, value in stats.items():
                print(f"  {key}: {value}")

        elif command == "list-codes":
            codes = manager.list_codes()
            print(f"找到 {len(codes)} 个验证码:")
            for code in codes:
                print(
                    f"  类型: {code['kind']}, 邮箱: {code['identity']}, TTL: {code['ttl']}s")

        elif command == "cleanup":
            result = manager.cleanup()
            print(f"清理完成，删除了 {result['deleted_count']} 个键")

        else:
            print(f"未知命令: {command}")
            return 1
    except RedisError as e:
        logger.error(f"Redis操作失败: {e}")
        return 2
    finally:
        client.close()

    return 0


if __name__ == "__main__":
    import sys

    sys.exit(main(sys.argv))
