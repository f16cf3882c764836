import base64
from typing import Optional

BEARER_PREFIX = "Bearer "


class TokenError(ValueError):
    """Bearer 令牌无效"""
    pass


def extract_bearer_token(authorization: Optional[str]) -> Optional[str]:
    """
    从 Authorization 头中取出令牌

    前缀必须是大小写敏感的 "Bearer "，否则返回 None
    """
    if not authorization or not authorization.startswith(BEARER_PREFIX):
        return None
    return authorization[len(BEARER_PREFIX):]


def decode_user_id(encoded_token: str) -> str:
    """
    标准 base64 解码令牌，解码结果直接当作用户ID

    注意：这里没有签名、过期或用户库校验，只是占位方案

    Args:
        encoded_token: 去掉前缀后的令牌

    Returns:
        str: 用户ID

    Raises:
        TokenError: 含非法字符、填充或长度错误
    """
    # 多余的 = 会被 b64decode 忽略，按长度先拦下
    if len(encoded_token) % 4:
        raise TokenError("incorrect padding or length")
    try:
        token = base64.b64decode(encoded_token, validate=True)
    except ValueError as e:
        # binascii.Error 以及非 ASCII 字符都是 ValueError
        raise TokenError(str(e)) from e
    return token.decode("utf-8", errors="replace")
