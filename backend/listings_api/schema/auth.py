from pydantic import BaseModel, ConfigDict


class AuthContext(BaseModel):
    """单次请求内的认证身份，由认证中间件写入派生的请求作用域"""
    user_id: str

    model_config = ConfigDict(frozen=True)
