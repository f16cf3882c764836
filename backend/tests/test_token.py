"""
Bearer 令牌解析测试
"""
import pytest

from listings_api.core.token import TokenError, decode_user_id, extract_bearer_token


@pytest.mark.parametrize("header, expected", [
    ("Bearer abc", "abc"),
    ("Bearer ", ""),
    ("Bearer  abc", " abc"),
    (None, None),
    ("", None),
    ("bearer abc", None),
    ("Bearer", None),
    ("Token abc", None),
])
def test_extract_bearer_token(header, expected):
    assert extract_bearer_token(header) == expected


def test_decode_user_id():
    assert decode_user_id("bXlTZWNyZXRUb2tlbjEyMw==") == "mySecretToken123"


def test_empty_token_decodes_to_empty_user():
    assert decode_user_id("") == ""


@pytest.mark.parametrize("token", [
    "!@#$%^&*()",   # 非法字符
    "YWJjZA",       # 缺少填充
    "YWJj=",        # 多余填充
    "YWJj==",
    "YWJjZA=",      # 长度不是 4 的倍数
    " YWJjZA==",    # 空白
    "YWJjZA==é",    # 非 ASCII
])
def test_invalid_token_raises(token):
    with pytest.raises(TokenError):
        decode_user_id(token)


def test_token_error_is_value_error():
    with pytest.raises(ValueError):
        decode_user_id("YWJjZA")
