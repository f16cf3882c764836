from starlette.types import Scope


def route_path(scope: Scope) -> str:
    """挂载子应用内看到的路径（去掉 root_path 前缀）"""
    path = scope["path"]
    root_path = scope.get("root_path", "")
    if not root_path or not path.startswith(root_path):
        return path
    if path == root_path:
        return "/"
    if path[len(root_path)] == "/":
        return path[len(root_path):]
    return path
