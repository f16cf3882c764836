"""
依赖注入模块
"""
from http import HTTPStatus

from fastapi import Request

from listings_api.boot import APIException
from listings_api.middleware.auth import AUTH_STATE_KEY
from listings_api.schema.auth import AuthContext


async def get_auth_context(request: Request) -> AuthContext:
    """
    获取认证中间件写入的当前用户

    子应用没有挂在认证中间件后面时，request.state 上没有身份，直接返回 401
    """
    context = getattr(request.state, AUTH_STATE_KEY, None)
    if not isinstance(context, AuthContext):
        raise APIException(
            msg=HTTPStatus.UNAUTHORIZED.phrase,
            code=int(HTTPStatus.UNAUTHORIZED),
            status_code=int(HTTPStatus.UNAUTHORIZED),
        )
    return context
