from typing import Callable

from starlette.types import ASGIApp

# 中间件即 ASGI 应用的变换函数：app -> app
Middleware = Callable[[ASGIApp], ASGIApp]


def chain_middlewares(*middlewares: Middleware) -> Middleware:
    """
    把多个中间件组合成一个

    第一个中间件在最外层：请求进来时最先执行，响应回去时最后执行。
    组合时从右往左依次包裹目标应用，构建阶段没有副作用；不传中间件时原样返回。

    用法：
        chained = chain_middlewares(access_log(logger), authenticate(logger))
        app = chained(v1_app)
    """
    def chained(app: ASGIApp) -> ASGIApp:
        for middleware in reversed(middlewares):
            app = middleware(app)
        return app
    return chained
