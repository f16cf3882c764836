"""
响应状态记录测试
"""
import asyncio
import logging

from listings_api.middleware import ResponseRecorder


def make_recorder(logger=None):
    sent = []

    async def send(message):
        sent.append(message)

    return ResponseRecorder(send, logger), sent


def start(status):
    return {"type": "http.response.start", "status": status, "headers": []}


def test_default_status_is_ok():
    recorder, sent = make_recorder()
    assert recorder.status_code == 200
    assert not recorder.started
    assert sent == []


def test_records_status_and_forwards_messages():
    recorder, sent = make_recorder()
    asyncio.run(recorder(start(201)))
    asyncio.run(recorder({"type": "http.response.body", "body": b"done"}))
    assert recorder.status_code == 201
    assert [m["type"] for m in sent] == ["http.response.start", "http.response.body"]


def test_first_status_write_wins(test_logger, caplog):
    recorder, sent = make_recorder(test_logger)
    asyncio.run(recorder(start(200)))
    asyncio.run(recorder.write_header(400))
    assert recorder.status_code == 200
    assert len(sent) == 1
    assert any(
        r.levelno == logging.WARNING and "superfluous response status 400" in r.getMessage()
        for r in caplog.records
    )


def test_write_header_before_response_completes_it():
    recorder, sent = make_recorder()
    asyncio.run(recorder.write_header(400))
    assert recorder.status_code == 400
    assert sent == [start(400), {"type": "http.response.body", "body": b""}]
