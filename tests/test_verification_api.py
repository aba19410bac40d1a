"""
Tests for the verification code endpoints
"""
from codeverify.core.exceptions import StoreError
from codeverify.api.dependencies import get_issuance_service
from codeverify.main import app
from codeverify.services.code_generator import CodeGenerator
from codeverify.services.issuance_service import IssuanceService
from codeverify.stores.memory_store import MemoryTokenStore

from conftest import StubTransport

IMG_KEY = "IMG:VERIFICATION:CODE:CACHE:a@b.com"
EMAIL_KEY = "Email:VERIFICATION:CODE:a@b.com"


class FailingStore(MemoryTokenStore):
    def set(self, key, value, ttl):
        raise StoreError(key, "connection refused")


def test_send_img_verification_code(client, fake_redis):
    response = client.get(
        "/api/verification/sendImgVerificationCode", params={"email": "a@b.com"})

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["data"]["imgBase64"].startswith("data:image/png;base64,")
    # 答案只保存在缓存中
    answer = fake_redis.get(IMG_KEY)
    assert answer
    assert set(body["data"]) == {"imgBase64"}
    assert "X-Request-ID" in response.headers


def test_send_img_verification_code_without_email(client):
    response = client.get("/api/verification/sendImgVerificationCode")

    assert response.status_code == 400
    body = response.json()
    assert body["success"] is False
    assert body["code"] == "INVALID_REQUEST"


def test_send_img_verification_code_storage_failure(client):
    def broken_issuance_service():
        return IssuanceService(FailingStore(), CodeGenerator(), StubTransport())

    app.dependency_overrides[get_issuance_service] = broken_issuance_service

    response = client.get(
        "/api/verification/sendImgVerificationCode", params={"email": "a@b.com"})

    assert response.status_code == 500
    assert response.json()["code"] == "STORAGE_FAILED"


def test_send_email_verification_code(client, fake_redis, transport):
    response = client.get(
        "/api/verification/sendEmailVerificationCode", params={"email": "a@b.com"})

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["data"] is None

    assert fake_redis.exists(EMAIL_KEY) == 1
    assert transport.sent[0][1] == ["a@b.com"]


def test_send_email_verification_code_twice_is_rejected(client):
    params = {"email": "a@b.com"}
    assert client.get("/api/verification/sendEmailVerificationCode", params=params).status_code == 200

    response = client.get("/api/verification/sendEmailVerificationCode", params=params)
    assert response.status_code == 400
    assert response.json()["code"] == "ALREADY_PENDING"


def test_send_email_verification_code_invalid_email(client):
    response = client.get(
        "/api/verification/sendEmailVerificationCode", params={"email": "nope"})

    assert response.status_code == 400
    assert response.json()["code"] == "INVALID_REQUEST"


def test_send_email_verification_code_dispatch_failure(client, fake_redis, transport):
    transport.ok = False
    transport.error = "relay down"

    response = client.get(
        "/api/verification/sendEmailVerificationCode", params={"email": "a@b.com"})

    assert response.status_code == 500
    assert response.json()["code"] == "DISPATCH_FAILED"
    assert fake_redis.exists(EMAIL_KEY) == 0
