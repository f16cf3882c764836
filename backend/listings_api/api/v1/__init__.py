"""
API v1 路由

挂载在 /v1 下，前缀在挂载时剥离，这里的路径都不带前缀
"""
from typing import Callable, Iterable, List, NamedTuple

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from . import handlers


class RouteEntry(NamedTuple):
    method: str
    path: str
    endpoint: Callable
    name: str


def resource_routes(singular: str, plural: str) -> List[RouteEntry]:
    """一个资源的增删改查路由"""
    item = f"/{singular}/{{id}}"
    return [
        RouteEntry("GET", item, handlers.show_by_id, f"{singular}_show"),
        RouteEntry("GET", f"/{plural}", handlers.index_all, f"{singular}_index"),
        RouteEntry("PUT", item, handlers.update_by_id, f"{singular}_update"),
        RouteEntry("POST", f"/{singular}", handlers.create, f"{singular}_create"),
        RouteEntry("DELETE", item, handlers.destroy_by_id, f"{singular}_destroy"),
    ]


ROUTES = resource_routes("listing", "listings") + resource_routes("vote", "votes")


def build_router(routes: Iterable[RouteEntry]) -> APIRouter:
    """按路由表注册，(方法, 路径) 重复时启动即报错"""
    router = APIRouter()
    seen = set()
    for entry in routes:
        key = (entry.method, entry.path)
        if key in seen:
            raise ValueError(f"duplicate route: {entry.method} {entry.path}")
        seen.add(key)
        router.add_api_route(
            entry.path,
            entry.endpoint,
            methods=[entry.method],
            name=entry.name,
            response_class=PlainTextResponse,
        )
    return router


router = build_router(ROUTES)

# 显式导出
__all__ = ["ROUTES", "RouteEntry", "build_router", "resource_routes", "router"]
