"""
统一诊断日志模块

基于loguru实现:
- 控制台彩色输出
- 日志轮转
- 错误日志分离
"""


from __future__ import annotations
import sys
from pathlib import Path
from typing import Any, Optional

from loguru import logger

from tasklog_core.config import get_config

# 移除默认handler
logger.remove()

# 日志格式
LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)

LOG_FORMAT_FILE = (
    "{time:YYYY-MM-DD HH:mm:ss.SSS} | "
    "{level: <8} | "
    "{name}:{function}:{line} | "
    "{message}"
)


def setup_logging(
    log_dir: Optional[Path] = None,
    log_level: Optional[str] = None,
    console: bool = True,
) -> None:
    """
    配置诊断日志

    Args:
        log_dir: 日志目录
        log_level: 日志级别, 默认取配置
        console: 是否输出到控制台
    """
    config = get_config()

    if log_dir is None:
        log_dir = config.get_logs_path()

    if log_level is None:
        log_level = config.logging.level

    log_dir.mkdir(parents=True, exist_ok=True)

    if console:
        logger.add(
            sys.stderr,
            format=LOG_FORMAT,
            level=log_level,
            colorize=True,
        )

    logger.add(
        log_dir / "tasklog.log",
        format=LOG_FORMAT_FILE,
        level=log_level,
        rotation=config.logging.rotation,
        retention=config.logging.retention,
        encoding="utf-8",
    )

    # 错误日志单独文件
    logger.add(
        log_dir / "errors.log",
        format=LOG_FORMAT_FILE,
        level="ERROR",
        rotation=config.logging.rotation,
        retention=config.logging.retention,
        encoding="utf-8",
    )

    logger.info(f"诊断日志初始化完成, 日志目录: {log_dir}")


def get_logger(name: str = __name__) -> Any:
    """获取logger实例"""
    return logger.bind(name=name)


__all__ = [
    "logger",
    "get_logger",
    "setup_logging",
]
