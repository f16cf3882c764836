import logging
from http import HTTPStatus
from typing import Optional

from starlette.types import Message, Send


class ResponseRecorder:
    """
    包装 ASGI send，记录实际写出的状态码

    状态码默认 200，只有第一次 http.response.start 生效，之后的状态写入会被丢弃
    """

    def __init__(self, send: Send, logger: Optional[logging.Logger] = None):
        self._send = send
        self._logger = logger
        self.status_code = int(HTTPStatus.OK)
        self.started = False

    async def __call__(self, message: Message) -> None:
        if message["type"] == "http.response.start":
            if self.started:
                if self._logger:
                    self._logger.warning(
                        f"superfluous response status {message['status']} ignored, {self.status_code} already sent"
                    )
                return
            self.started = True
            self.status_code = message["status"]
        await self._send(message)

    async def write_header(self, status_code: int) -> None:
        """单独写状态码；响应尚未开始时补一个空响应体结束本次响应"""
        already_started = self.started
        await self({"type": "http.response.start", "status": status_code, "headers": []})
        if not already_started:
            await self({"type": "http.response.body", "body": b""})
