from pydantic import validate_email
from pydantic_core import PydanticCustomError


def valid_email(email: str) -> bool:
    """校验邮箱格式

    只接受纯地址，不接受 ``Name <addr>`` 形式。
    """
    if not email or email != email.strip():
        return False
    try:
        _, normalized = validate_email(email)
    except PydanticCustomError:
        return False
    return normalized.lower() == email.lower()
