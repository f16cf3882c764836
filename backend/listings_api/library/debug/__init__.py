from typing import List, Tuple

from fastapi import FastAPI
from starlette.routing import Mount


def describe_routes(app: FastAPI, prefix: str = "") -> List[Tuple[str, str, str]]:
    """列出 (路径, 方法, 名称)，挂载的子应用带上挂载前缀"""
    mounted = getattr(app.state, "mounted_apis", {})
    rows = []
    for route in app.routes:
        if isinstance(route, Mount):
            inner = mounted.get(route.path, route.app)
            if hasattr(inner, "routes"):
                rows.extend(describe_routes(inner, prefix + route.path))
        elif hasattr(route, "methods"):
            methods = ",".join(sorted(route.methods))
            rows.append((prefix + route.path, methods, getattr(route, "name", "")))
    return rows


def generate_route_md(app: FastAPI, filename: str = "routes.md"):
    with open(filename, "w") as f:
        f.write("# 路由文档\n\n| 路径 | 方法 | 名称 |\n|------|------|------|\n")
        for path, methods, name in describe_routes(app):
            f.write(f"| `{path}` | {methods} | {name} |\n")
