from typing import List, Optional, Tuple

import fakeredis
import pytest
from fastapi.testclient import TestClient

from codeverify.api.dependencies import get_issuance_service, get_token_store
from codeverify.main import app
from codeverify.services.code_generator import CodeGenerator
from codeverify.services.issuance_service import IssuanceService
from codeverify.services.verification_service import VerificationService
from codeverify.stores.memory_store import MemoryTokenStore
from codeverify.stores.redis_store import RedisTokenStore


class FakeClock:
    """可手动推进的时钟"""

    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class StubTransport:
    """记录发送内容的邮件发送桩"""

    def __init__(self, ok: bool = True, error: Optional[str] = None):
        self.ok = ok
        self.error = error
        self.sent: List[Tuple[str, List[str]]] = []

    async def send(self, body: str, recipients: List[str]) -> Tuple[bool, Optional[str]]:
        self.sent.append((body, list(recipients)))
        return self.ok, self.error


class StubRenderer:
    """按顺序返回预设答案的图形验证码渲染桩"""

    def __init__(self, answers: List[str]):
        self.answers = list(answers)
        self.calls = 0

    def render(self) -> Tuple[str, str]:
        answer = self.answers[self.calls % len(self.answers)]
        self.calls += 1
        return f"data:image/png;base64,IMG{self.calls}", answer


@pytest.fixture
def fake_redis():
    client = fakeredis.FakeRedis(decode_responses=True)
    yield client
    client.flushall()
    client.close()


@pytest.fixture
def redis_store(fake_redis):
    return RedisTokenStore(fake_redis)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def memory_store(clock):
    return MemoryTokenStore(clock=clock)


@pytest.fixture(params=["redis", "memory"])
def store(request, fake_redis, clock):
    """两种 TokenStore 实现都要满足同样的契约"""
    if request.param == "redis":
        return RedisTokenStore(fake_redis)
    return MemoryTokenStore(clock=clock)


@pytest.fixture
def transport():
    return StubTransport()


@pytest.fixture
def renderer():
    return StubRenderer(["Ab3d", "XyZ9"])


@pytest.fixture
def generator(renderer):
    return CodeGenerator(renderer=renderer)


@pytest.fixture
def issuance_service(store, generator, transport):
    return IssuanceService(store, generator, transport)


@pytest.fixture
def verification_service(store):
    return VerificationService(store)


@pytest.fixture
def client(redis_store, transport):
    def override_issuance_service():
        return IssuanceService(redis_store, CodeGenerator(), transport)

    app.dependency_overrides[get_token_store] = lambda: redis_store
    app.dependency_overrides[get_issuance_service] = override_issuance_service
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
