import logging

import pytest
from fastapi.testclient import TestClient

from listings_api.boot.application import create_app

VALID_TOKEN = "bXlTZWNyZXRUb2tlbjEyMw=="  # mySecretToken123
AUTH_HEADERS = {"Authorization": f"Bearer {VALID_TOKEN}"}


def access_records(caplog):
    """访问日志中间件写出的记录"""
    return [r for r in caplog.records if r.getMessage().startswith("⬅️")]


@pytest.fixture
def test_logger():
    """可被 caplog 捕获的注入日志对象（business 日志不向上传播）"""
    logger = logging.getLogger("listings_api.tests")
    logger.setLevel(logging.DEBUG)
    logger.propagate = True
    return logger


@pytest.fixture
def client(test_logger):
    return TestClient(create_app(logger=test_logger))
