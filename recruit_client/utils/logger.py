"""日志工具模块"""

import sys
from pathlib import Path
from loguru import logger
from .config import get_settings

settings = get_settings()


def setup_logger():
    """配置日志系统"""
    # 移除默认处理器
    logger.remove()

    # 控制台输出格式
    console_format = (
        "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
        "<level>{level: <8}</level> | "
        "<cyan>{extra[name]}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
        "<level>{message}</level>"
    )

    # 文件输出格式
    file_format = (
        "{time:YYYY-MM-DD HH:mm:ss} | "
        "{level: <8} | "
        "{extra[name]}:{function}:{line} | "
        "{message}"
    )

    logger.configure(extra={"name": "app"})

    logger.add(
        sys.stderr,
        format=console_format,
        level=settings.app.log_level,
        colorize=True,
        backtrace=settings.app.debug,
        diagnose=settings.app.debug
    )

    if not settings.app.log_to_file:
        return logger

    log_dir = Path(settings.app.log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)

    # 所有日志
    logger.add(
        log_dir / "app.log",
        format=file_format,
        level="DEBUG",
        rotation="10 MB",
        retention="30 days",
        compression="zip"
    )

    # 错误日志
    logger.add(
        log_dir / "error.log",
        format=file_format,
        level="ERROR",
        rotation="10 MB",
        retention="30 days",
        compression="zip",
        backtrace=True
    )

    # 接口调用日志
    logger.add(
        log_dir / "api.log",
        format=file_format,
        level="INFO",
        rotation="10 MB",
        retention="30 days",
        compression="zip",
        filter=lambda record: record["extra"].get("name") in ("api", "auth")
    )

    return logger


def get_logger(name: str = None):
    """获取日志记录器"""
    if name:
        return logger.bind(name=name)
    return logger


# 初始化日志系统
setup_logger()

# 导出常用的日志记录器
app_logger = get_logger("app")
api_logger = get_logger("api")
flow_logger = get_logger("flow")
auth_logger = get_logger("auth")
