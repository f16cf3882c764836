"""
资源接口占位实现

listing 和 vote 共用同一组处理函数，只返回固定文本
"""
from fastapi import Depends
from fastapi.responses import PlainTextResponse

from listings_api.schema.auth import AuthContext
from .deps import get_auth_context


async def index_all(identity: AuthContext = Depends(get_auth_context)):
    return PlainTextResponse("Index all\n")


async def show_by_id(id: str, identity: AuthContext = Depends(get_auth_context)):
    return PlainTextResponse("Show by ID\n")


async def create(identity: AuthContext = Depends(get_auth_context)):
    return PlainTextResponse("Create new\n")


async def update_by_id(id: str, identity: AuthContext = Depends(get_auth_context)):
    return PlainTextResponse("Update by ID\n")


async def destroy_by_id(id: str, identity: AuthContext = Depends(get_auth_context)):
    return PlainTextResponse("Destroy by ID\n")
