"""
Tests for the verification code maintenance tool
"""
import pytest

from codeverify.tools.verification_manager import VerificationCodeManager, main


@pytest.fixture
def manager(fake_redis):
    fake_redis.set("Email:VERIFICATION:CODE:a@b.com", "123456", ex=180)
    fake_redis.set("IMG:VERIFICATION:CODE:CACHE:a@b.com", "AB3D", ex=180)
    fake_redis.set("IMG:VERIFICATION:CODE:CACHE:c@d.com", "XYZ9", ex=60)
    fake_redis.set("unrelated:key", "keep")
    return VerificationCodeManager(fake_redis)


def test_get_stats(manager):
    stats = manager.get_stats()
    assert stats["total_email_codes"] == 1
    assert stats["total_image_codes"] == 2
    assert "timestamp" in stats


def test_list_codes_hides_values(manager):
    codes = sorted(manager.list_codes(), key=lambda c: c["key"])

    assert [c["kind"] for c in codes] == ["email", "image", "image"]
    assert codes[0]["identity"] == "a@b.com"
    assert 0 < codes[0]["ttl"] <= 180
    for code in codes:
        assert "123456" not in code.values()
        assert "value" not in code


def test_cleanup_only_removes_verification_keys(manager, fake_redis):
    assert manager.cleanup() == {"deleted_count": 3}
    assert fake_redis.get("unrelated:key") == "keep"
    assert manager.get_stats()["total_image_codes"] == 0


def test_main_without_command_prints_usage(capsys):
    assert main(["verification_manager"]) == 1
    assert "用法" in capsys.readouterr().out
