"""
Bearer 认证中间件

Authorization: Bearer <base64(用户ID)>
任何能按标准 base64 解码的令牌都视为合法用户，这是占位方案，不是真正的凭证校验
"""
import logging
from http import HTTPStatus
from typing import Optional

from starlette.datastructures import Headers
from starlette.responses import PlainTextResponse
from starlette.types import ASGIApp, Receive, Scope, Send

from listings_api.core.token import TokenError, decode_user_id, extract_bearer_token
from listings_api.schema.auth import AuthContext
from .chain import Middleware
from .recorder import ResponseRecorder

AUTH_STATE_KEY = "auth"


def with_auth_context(scope: Scope, context: AuthContext) -> Scope:
    """派生一个带身份的新 scope，原 scope 及其 state 不被修改"""
    state = dict(scope.get("state") or {})
    state[AUTH_STATE_KEY] = context
    return {**scope, "state": state}


def get_scope_auth(scope: Scope) -> Optional[AuthContext]:
    context = (scope.get("state") or {}).get(AUTH_STATE_KEY)
    return context if isinstance(context, AuthContext) else None


async def write_unauthed(scope: Scope, receive: Receive, send: Send) -> None:
    response = PlainTextResponse(HTTPStatus.UNAUTHORIZED.phrase, status_code=int(HTTPStatus.UNAUTHORIZED))
    await response(scope, receive, send)


def authenticate(logger: logging.Logger, recheck_original_scope: bool = False) -> Middleware:
    """
    认证中间件

    Args:
        logger: 注入的日志对象
        recheck_original_scope: 处理完请求后去原始 scope 复查身份（旧服务的行为）。
            原始 scope 从不携带身份，复查必然失败，会记录 "Invalid user ID" 并尝试补写 400；
            此时响应已经开始，补写会被丢弃。默认关闭，复查派生 scope。
    """
    def middleware(next_app: ASGIApp) -> ASGIApp:
        async def app(scope: Scope, receive: Receive, send: Send) -> None:
            if scope["type"] != "http":
                await next_app(scope, receive, send)
                return

            encoded_token = extract_bearer_token(Headers(scope=scope).get("authorization"))
            if encoded_token is None:
                await write_unauthed(scope, receive, send)
                return

            try:
                user_id = decode_user_id(encoded_token)
            except TokenError as e:
                await write_unauthed(scope, receive, send)
                logger.warning(f"Invalid bearer token characters, padding or length: {e}")
                return

            auth_scope = with_auth_context(scope, AuthContext(user_id=user_id))
            recorder = ResponseRecorder(send, logger)
            await next_app(auth_scope, receive, recorder)

            identity = get_scope_auth(scope if recheck_original_scope else auth_scope)
            if identity is None:
                logger.warning("Invalid user ID")
                await recorder.write_header(int(HTTPStatus.BAD_REQUEST))

            logger.info(f"Request served for user: {identity.user_id if identity else ''}")
        return app
    return middleware
