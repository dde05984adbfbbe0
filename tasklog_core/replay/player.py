"""
日志回放

读取已保存的任务日志, 逐行通过前缀输出重新渲染 (如缓存命中时展示历史输出)
"""


from __future__ import annotations
from pathlib import Path
from typing import BinaryIO, Iterator, Optional, Protocol, Union

from tasklog_core.config import get_config
from tasklog_core.exceptions import CannotReadLogs
from tasklog_core.logging import get_logger

logger = get_logger(__name__)


class LineOutput(Protocol):
    """行级输出端, 如 PrefixedUI"""

    def output(self, message: str) -> None:
        ...


def replay_logs(
    output: LineOutput,
    log_file_name: Union[str, Path],
    encoding: Optional[str] = None,
) -> None:
    """
    回放日志文件

    按 "\\n" 分行, 去掉行尾的 "\\n" 以及紧随其前的 "\\r";
    末尾换行不会产生额外空行, 开头的空行会原样输出。

    Args:
        output: 行级输出端
        log_file_name: 日志文件路径
        encoding: 文件编码, 默认取配置

    Raises:
        CannotReadLogs: 文件打开失败, 或读取/解码某一行失败
            (失败前的行已输出)
    """
    logger.debug("开始回放日志")

    encoding = encoding or get_config().task_logs.encoding

    try:
        log_file = open(log_file_name, "rb")
    except OSError as e:
        logger.warning(f"打开日志文件失败: {e!r}")
        raise CannotReadLogs(e, "打开日志文件失败") from e

    with log_file:
        for line in _read_lines(log_file, encoding):
            output.output(line)

    logger.debug("日志回放完成")


def _read_lines(log_file: BinaryIO, encoding: str) -> Iterator[str]:
    """逐行读取并解码, 输出端自身的异常不会被包装为CannotReadLogs"""
    while True:
        try:
            raw_line = log_file.readline()
            if not raw_line:
                return
            line = _decode_line(raw_line, encoding)
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"读取日志失败: {e!r}")
            raise CannotReadLogs(e, "读取日志失败") from e
        yield line


def _decode_line(raw_line: bytes, encoding: str) -> str:
    if raw_line.endswith(b"\n"):
        raw_line = raw_line[:-1]
        if raw_line.endswith(b"\r"):
            raw_line = raw_line[:-1]
    return raw_line.decode(encoding)
