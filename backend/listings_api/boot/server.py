import logging
import socket
from typing import Optional

import uvicorn
from starlette.types import ASGIApp

from .logger import logger as default_logger


def bind_socket(host: str, port: int) -> socket.socket:
    family = socket.AF_INET6 if ":" in host else socket.AF_INET
    sock = socket.socket(family, socket.SOCK_STREAM)
    sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
    try:
        sock.bind((host, port))
    except OSError:
        sock.close()
        raise
    sock.set_inheritable(True)
    return sock


def serve(app: ASGIApp, host: str, port: int, logger: Optional[logging.Logger] = None) -> int:
    """
    启动服务，返回进程退出码

    先自己绑定端口：端口被占用等启动失败直接记录错误并返回 1，不进入 uvicorn
    """
    logger = logger or default_logger
    try:
        sock = bind_socket(host, port)
    except OSError as e:
        logger.error(f"Error starting server: {e}")
        return 1

    # 日志已经由 setup_logging 接管，不让 uvicorn 重新配置
    server = uvicorn.Server(uvicorn.Config(app, log_config=None))
    logger.info(f"Server listening on {host}:{port}")
    try:
        server.run(sockets=[sock])
    finally:
        sock.close()
    return 0
