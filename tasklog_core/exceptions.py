"""
任务日志统一异常定义

所有任务日志相关的异常都从TaskLogError继承
便于统一处理和日志记录
"""


from __future__ import annotations
from typing import Any


class TaskLogError(Exception):
    """任务日志基础异常"""

    def __init__(self, message: str, code: str = "TASK_LOG_ERROR", details: dict[str, Any] | None = None):
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class CannotWriteLogs(TaskLogError):
    """日志写入失败 (目录创建/文件创建/写入/刷新)"""

    def __init__(self, cause: BaseException, message: str = "无法写入日志"):
        self.cause = cause
        super().__init__(
            message=f"{message}: {cause}",
            code="CANNOT_WRITE_LOGS",
            details={"cause": repr(cause)},
        )


class CannotReadLogs(TaskLogError):
    """日志读取失败 (文件打开/行读取)"""

    def __init__(self, cause: BaseException, message: str = "无法读取日志"):
        self.cause = cause
        super().__init__(
            message=f"{message}: {cause}",
            code="CANNOT_READ_LOGS",
            details={"cause": repr(cause)},
        )
