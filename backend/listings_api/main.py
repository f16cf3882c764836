import sys

from .boot import settings
from .boot.application import create_app
from .boot.server import serve
from .library.debug import generate_route_md

app = create_app()

# 路由文档
if settings.app.route_doc:
    generate_route_md(app)


def run():
    sys.exit(serve(app, settings.server.host, settings.server.port))


if __name__ == "__main__":
    run()
