from datetime import datetime
import logging,os

from logging.handlers import RotatingFileHandler

LOGGER_NAME = "business"
LOG_FORMAT = "%(levelname)s - %(asctime)s :     %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class ColorFormatter(logging.Formatter):
    """控制台彩色日志格式，INFO 只给级别着色，其余级别整行着色"""
    grey = "\x1b[38;20m"
    green = "\x1b[32;20m"
    yellow = "\x1b[33;20m"
    red = "\x1b[31;20m"
    bold_red = "\x1b[31;1m"
    reset = "\x1b[0m"

    COLORS = {
        logging.DEBUG: grey,
        logging.INFO: green,
        logging.WARNING: yellow,
        logging.ERROR: red,
        logging.CRITICAL: bold_red
    }

    def format(self, record):
        color = self.COLORS.get(record.levelno, self.grey)
        if record.levelno == logging.INFO:
            fmt = f"{color}%(levelname)s - %(asctime)s :{self.reset}     %(message)s"
        else:
            fmt = f"{color}%(levelname)s - %(asctime)s :    %(message)s{self.reset} "
        return logging.Formatter(fmt, datefmt=DATE_FORMAT).format(record)


def build_file_handler(log_dir: str) -> logging.Handler:
    """按日期命名的滚动日志文件，打不开时退回空处理器"""
    try:
        os.makedirs(log_dir, exist_ok=True)
        log_filename = f"app_{datetime.now().strftime('%Y%m%d')}.log"
        return RotatingFileHandler(
            filename=os.path.join(log_dir, log_filename),
            backupCount=7,     # 保留7份
            maxBytes=10 * 1024 * 1024,  # 10MB
            encoding='utf-8'
        )
    except OSError as e:
        logging.getLogger(__name__).warning(f"无法创建日志文件: {str(e)}")
        return logging.NullHandler()


def setup_logging(log_dir: str = "logs", name: str = LOGGER_NAME) -> logging.Logger:
    logger = logging.getLogger(name)
    logger.propagate = False
    logger.setLevel(logging.DEBUG)
    logger.handlers.clear()

    # 控制台只显示 INFO 及以上级别
    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.INFO)
    console_handler.setFormatter(ColorFormatter())

    file_handler = build_file_handler(log_dir)
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))

    logger.addHandler(console_handler)
    logger.addHandler(file_handler)

    # 统一接管 uvicorn 日志
    for log_name in ["uvicorn", "uvicorn.access", "uvicorn.error"]:
        uvicorn_log = logging.getLogger(log_name)
        uvicorn_log.handlers.clear()
        uvicorn_log.propagate = False
        uvicorn_log.addHandler(console_handler)
        uvicorn_log.addHandler(file_handler)

    return logger

logger = setup_logging()
