"""
访问日志中间件测试
"""
import pytest
from fastapi.testclient import TestClient
from starlette.responses import PlainTextResponse

from conftest import AUTH_HEADERS, access_records
from listings_api.middleware import access_log, authenticate, chain_middlewares


def status_app(status_code):
    async def app(scope, receive, send):
        await PlainTextResponse("created\n", status_code=status_code)(scope, receive, send)
    return app


async def failing_app(scope, receive, send):
    raise RuntimeError("boom")


def test_one_record_per_request(test_logger, caplog):
    client = TestClient(access_log(test_logger)(status_app(201)))
    response = client.post("/things")
    assert response.status_code == 201
    records = access_records(caplog)
    assert len(records) == 1
    message = records[0].getMessage()
    assert "POST /things - 201" in message
    assert message.endswith("ms)")


def test_default_status_logged_as_ok(test_logger, caplog):
    client = TestClient(access_log(test_logger)(status_app(200)))
    client.get("/")
    assert "GET / - 200" in access_records(caplog)[0].getMessage()


def test_rejected_request_still_logged_once(test_logger, caplog):
    """日志在外层包住认证，认证失败也能看到最终状态"""
    calls = []

    async def handler(scope, receive, send):
        calls.append(scope)
        await PlainTextResponse("ok\n")(scope, receive, send)

    app = chain_middlewares(access_log(test_logger), authenticate(test_logger))(handler)
    response = TestClient(app).get("/listings")
    assert response.status_code == 401
    assert calls == []
    records = access_records(caplog)
    assert len(records) == 1
    assert "GET /listings - 401" in records[0].getMessage()


def test_authenticated_request_logged_once(test_logger, caplog):
    app = chain_middlewares(access_log(test_logger), authenticate(test_logger))(status_app(200))
    response = TestClient(app).get("/listings", headers=AUTH_HEADERS)
    assert response.status_code == 200
    records = access_records(caplog)
    assert len(records) == 1
    assert "GET /listings - 200" in records[0].getMessage()


def test_handler_exception_propagates_without_record(test_logger, caplog):
    client = TestClient(access_log(test_logger)(failing_app))
    with pytest.raises(RuntimeError):
        client.get("/")
    assert access_records(caplog) == []
