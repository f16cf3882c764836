# 显式暴露子模块方法
from .config import settings
from .logger import logger
from .exceptions import APIException
