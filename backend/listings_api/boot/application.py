import logging
from typing import Callable, Optional, Sequence

from fastapi import FastAPI

from listings_api.api.v1 import router as v1_router
from listings_api.middleware import Middleware, access_log, authenticate, chain_middlewares
from .config import Settings, settings as default_settings
from .exceptions import setup_exception
from .logger import logger as default_logger


class ExtendedFastAPI(FastAPI):
    def use(self, plugin: Callable):
        """
        类Vue的use()方法，用于挂载插件
        用法：app.use(setup_exception)
        """
        plugin(self)
        return self  # 支持链式调用


def create_v1_app() -> FastAPI:
    """v1 子应用：不带文档，不自动补斜杠"""
    v1 = FastAPI(
        title="listings-api v1",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        redirect_slashes=False,
    )
    v1.include_router(v1_router)
    setup_exception(v1)
    return v1


def mount_versioned_api(app: FastAPI, prefix: str, api: FastAPI, middlewares: Sequence[Middleware]):
    """
    把子应用套上中间件链后挂到版本前缀下

    挂载会精确剥离一次前缀（大小写敏感），子应用里的路由不带前缀
    """
    app.mount(prefix, chain_middlewares(*middlewares)(api), name=prefix.strip("/"))
    # 中间件链包裹后看不到子应用的路由，留一份给路由文档用
    if not hasattr(app.state, "mounted_apis"):
        app.state.mounted_apis = {}
    app.state.mounted_apis[prefix.rstrip("/")] = api


def create_app(logger: Optional[logging.Logger] = None, settings: Optional[Settings] = None) -> FastAPI:
    logger = logger or default_logger
    settings = settings or default_settings

    app = ExtendedFastAPI(
        debug=settings.app.debug,
        title="listings-api",
        version="1.0.0",
        docs_url=None if settings.app.is_production else "/docs",
        openapi_url=None if settings.app.is_production else "/openapi.json",
    )

    def setup_v1(app: FastAPI):
        # 日志在外层，认证在内层：认证失败的请求同样会留下访问日志
        mount_versioned_api(
            app,
            settings.api.prefix,
            create_v1_app(),
            [
                access_log(logger),
                authenticate(logger, recheck_original_scope=settings.auth.legacy_identity_recheck),
            ],
        )

    app.use(setup_exception)
    app.use(setup_v1)
    app.use(lambda app: logger.info(f"所有插件已加载: {app.title}"))

    return app
