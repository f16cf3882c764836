"""
访问日志中间件
"""
import logging
import time

from starlette.types import ASGIApp, Receive, Scope, Send

from listings_api.library.url import route_path
from .auth import authenticate
from .chain import Middleware, chain_middlewares
from .recorder import ResponseRecorder


def access_log(logger: logging.Logger) -> Middleware:
    """每个请求记录一条日志：方法、路径、状态码、耗时

    下游抛出异常时不做兜底，异常继续向上抛，这次请求不会留下访问日志
    """
    def middleware(next_app: ASGIApp) -> ASGIApp:
        async def app(scope: Scope, receive: Receive, send: Send) -> None:
            if scope["type"] != "http":
                await next_app(scope, receive, send)
                return

            start_time = time.time()
            recorder = ResponseRecorder(send, logger)

            await next_app(scope, receive, recorder)

            # 计算处理时间
            process_time = (time.time() - start_time) * 1000
            logger.info(f"⬅️  {scope['method']} {route_path(scope)} - {recorder.status_code} ({process_time:.2f}ms)")
        return app
    return middleware


__all__ = ["Middleware", "ResponseRecorder", "access_log", "authenticate", "chain_middlewares"]
