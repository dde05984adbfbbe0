"""
任务日志核心模块
构建工具任务输出管线 - 日志双写与回放

模块列表:
- replay: 日志写入器 (LogWriter) 与日志回放 (replay_logs)
- ui: 终端前缀渲染 (UI, PrefixedWriter, PrefixedUI)
- exceptions: 异常定义
- config: 配置中心
- logging: 诊断日志 (setup_logging 供入口程序调用)
"""

from __future__ import annotations

# 版本
__version__ = "1.0.0"

# 显式导入 - 日志写入与回放
from tasklog_core.replay import (
    LineOutput,
    LogWriter,
    replay_logs,
)

# 显式导入 - 前缀渲染
from tasklog_core.ui import (
    UI,
    ByteSink,
    PrefixedUI,
    PrefixedWriter,
    BOLD,
    CYAN,
    GREY,
    style_for,
)

# 显式导入 - 异常
from tasklog_core.exceptions import (
    TaskLogError,
    CannotWriteLogs,
    CannotReadLogs,
)

# 显式导入 - 配置
from tasklog_core.config import (
    TaskLogConfig,
    get_config,
    reload_config,
)

# 显式导入 - 诊断日志
from tasklog_core.logging import (
    get_logger,
    setup_logging,
)

# 导出列表
__all__ = [
    # 日志写入与回放
    "LineOutput",
    "LogWriter",
    "replay_logs",

    # 前缀渲染
    "UI",
    "ByteSink",
    "PrefixedUI",
    "PrefixedWriter",
    "BOLD",
    "CYAN",
    "GREY",
    "style_for",

    # 异常
    "TaskLogError",
    "CannotWriteLogs",
    "CannotReadLogs",

    # 配置
    "TaskLogConfig",
    "get_config",
    "reload_config",

    # 诊断日志
    "get_logger",
    "setup_logging",
]
