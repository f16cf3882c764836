from pathlib import Path
from typing import Type, TypeVar
from pydantic import BaseModel, Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict
from .logger import logger


class AppConfig(BaseSettings):
    """应用配置

    注意：环境变量通过 load_dotenv() 统一加载，不在此处配置 env_file
    """
    model_config = SettingsConfigDict(
        case_sensitive=False,
        extra="ignore"
    )

    debug: bool = Field(default=True, validation_alias="APP_DEBUG")
    env: str = Field(default="development", validation_alias="APP_ENV")
    route_doc: bool = Field(default=False, validation_alias="APP_ROUTE_DOC")

    @property
    def is_production(self) -> bool:
        return self.env == "production"


class ServerConfig(BaseSettings):
    """监听地址配置"""
    model_config = SettingsConfigDict(
        case_sensitive=False,
        extra="ignore"
    )

    host: str = Field(default="0.0.0.0", validation_alias="SERVER_HOST")
    port: int = Field(default=6060, validation_alias="SERVER_PORT")


class ApiConfig(BaseSettings):
    model_config = SettingsConfigDict(
        case_sensitive=False,
        extra="ignore"
    )

    # 版本前缀，挂载时会被剥离
    prefix: str = Field(default="/v1", validation_alias="API_PREFIX")


class AuthConfig(BaseSettings):
    """认证配置

    legacy_identity_recheck 开启后，认证中间件在处理完请求后会去原始请求上复查用户，
    必然失败并尝试补写 400，仅用于和旧服务保持行为一致
    """
    model_config = SettingsConfigDict(
        case_sensitive=False,
        extra="ignore"
    )

    legacy_identity_recheck: bool = Field(default=False, validation_alias="AUTH_LEGACY_IDENTITY_RECHECK")


class Settings(BaseModel):
    app: AppConfig
    server: ServerConfig
    api: ApiConfig
    auth: AuthConfig


# 查找 .env 文件路径
def find_env_file() -> Path:
    """查找 .env 文件，优先使用 backend 目录下的 .env"""
    backend_dir = Path(__file__).resolve().parent.parent.parent
    env_path = backend_dir / ".env"

    if env_path.exists():
        return env_path

    # 如果 backend/.env 不存在，尝试查找项目根目录
    root_env_path = backend_dir.parent / ".env"
    if root_env_path.exists():
        return root_env_path

    # 都不存在时返回默认路径（会使用默认值）
    return env_path


ConfigT = TypeVar("ConfigT", bound=BaseSettings)


def load_section(config_cls: Type[ConfigT], label: str) -> ConfigT:
    """加载单个配置模块，校验失败时整段退回默认值"""
    try:
        config = config_cls()
        logger.info(f"✓ [{label}] 配置已加载")
        return config
    except ValidationError as e:
        logger.warning(f"⚠️  [{label}] 加载失败: {e}，使用默认值")
        return config_cls.model_construct()


def load_settings() -> Settings:
    env_file_path = find_env_file()
    if env_file_path.exists():
        from dotenv import load_dotenv
        load_dotenv(env_file_path)
        logger.info(f"✓ 成功加载配置文件: {env_file_path}")
    else:
        logger.warning(f"⚠️  未找到 .env 配置文件 (查找路径: {env_file_path})，将使用默认配置")

    return Settings(
        app=load_section(AppConfig, "应用配置 (app)"),
        server=load_section(ServerConfig, "服务配置 (server)"),
        api=load_section(ApiConfig, "接口配置 (api)"),
        auth=load_section(AuthConfig, "认证配置 (auth)"),
    )


settings = load_settings()
app_config = settings.app

print("=" * 60)
print("📋 配置详情:")
print(f"  🌐 监听: {settings.server.host}:{settings.server.port}")
print(f"  🧭 接口前缀: {settings.api.prefix}")
print(f"  🔑 认证复查: {'旧版复查(原始请求)' if settings.auth.legacy_identity_recheck else '关闭'}")
print(f"  🐛 调试模式: {'开启' if app_config.debug else '关闭'}")
print(f"  🌍 环境: {app_config.env}")
print("=" * 60)

logger.info("配置加载完成")
