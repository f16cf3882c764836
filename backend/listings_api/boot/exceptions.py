from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse


class APIException(HTTPException):
    """自定义API异常"""
    def __init__(self, msg: str, code: int = 1, status_code: int = 200):
        self.code = code  # 业务错误码
        super().__init__(
            status_code=status_code,
            detail={
                "code": code,
                "msg": msg
            }
        )


def setup_exception(app: FastAPI):
    """注册自定义异常处理；其余异常保持框架默认行为（404/405 等），不做兜底"""

    @app.exception_handler(APIException)
    async def api_exception_handler(request: Request, exc: APIException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"code": exc.detail.get("code") or 1, "msg": exc.detail.get("msg") or ""}
        )
