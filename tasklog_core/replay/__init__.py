"""
任务日志模块

支持:
- 任务输出双写 (日志文件 + 终端前缀输出)
- 日志回放
"""


from __future__ import annotations
from tasklog_core.replay.player import LineOutput, replay_logs
from tasklog_core.replay.recorder import LogWriter

__all__ = [
    "LineOutput",
    "LogWriter",
    "replay_logs",
]
