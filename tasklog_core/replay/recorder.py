"""
日志录制器

接收任务输出字节, 分发到日志文件和/或终端前缀写入器
"""


from __future__ import annotations
from pathlib import Path
from typing import BinaryIO, Optional, Union

from tasklog_core.config import get_config
from tasklog_core.exceptions import CannotWriteLogs
from tasklog_core.logging import get_logger
from tasklog_core.ui.prefixed import ByteSink

logger = get_logger(__name__)


class LogWriter:
    """
    日志写入器

    两个输出端各自可选:
    - 日志文件 (带缓冲, 由写入器持有)
    - 终端前缀写入器 (调用方移交)

    两端都存在时先写终端, 终端失败则不写文件, 返回值以文件为准。
    非线程安全, 调用方需保证单写者。
    """

    def __init__(self, buffer_size: Optional[int] = None):
        if buffer_size is not None and buffer_size <= 0:
            raise ValueError(f"buffer_size必须为正数: {buffer_size}")
        self._buffer_size = buffer_size
        self._log_file: Optional[BinaryIO] = None
        self._prefixed_writer: Optional[ByteSink] = None

    def attach_log_file(self, log_file_path: Union[str, Path]) -> None:
        """
        配置日志文件

        创建父目录, 创建/截断文件; 重复调用会替换之前的日志文件

        Raises:
            CannotWriteLogs: 目录或文件创建失败
        """
        log_file_path = Path(log_file_path)

        try:
            log_file_path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.warning(f"创建日志目录失败: {e!r}")
            raise CannotWriteLogs(e, "创建日志目录失败") from e

        buffer_size = self._buffer_size
        if buffer_size is None:
            buffer_size = get_config().task_logs.buffer_size
        try:
            log_file = open(log_file_path, "wb", buffering=buffer_size)
        except OSError as e:
            logger.warning(f"创建日志文件失败: {e!r}")
            raise CannotWriteLogs(e, "创建日志文件失败") from e

        self._log_file = log_file

    def attach_prefixed_writer(self, prefixed_writer: ByteSink) -> None:
        self._prefixed_writer = prefixed_writer

    @property
    def has_log_file(self) -> bool:
        return self._log_file is not None

    @property
    def has_prefixed_writer(self) -> bool:
        return self._prefixed_writer is not None

    def write(self, data: bytes) -> int:
        """
        写入字节

        Returns:
            写入的字节数 (两端都存在时为日志文件的字节数, 都不存在时为0)
        """
        log_file = self._log_file
        prefixed_writer = self._prefixed_writer

        if log_file is not None and prefixed_writer is not None:
            prefixed_writer.write(data)
            return self._write_log_file(log_file, data)
        if log_file is not None:
            return self._write_log_file(log_file, data)
        if prefixed_writer is not None:
            return prefixed_writer.write(data)

        # 未配置任何输出端时静默丢弃
        logger.debug("没有日志文件或前缀写入器")
        return 0

    def flush(self) -> None:
        """先刷新日志文件, 再刷新终端写入器"""
        if self._log_file is not None:
            try:
                self._log_file.flush()
            except OSError as e:
                logger.warning(f"刷新日志文件失败: {e!r}")
                raise CannotWriteLogs(e, "刷新日志文件失败") from e

        if self._prefixed_writer is not None:
            self._prefixed_writer.flush()

    def close(self) -> None:
        """刷新并关闭日志文件, 可重复调用"""
        log_file = self._log_file
        if log_file is None:
            return

        self._log_file = None
        try:
            log_file.close()
        except OSError as e:
            logger.warning(f"关闭日志文件失败: {e!r}")
            raise CannotWriteLogs(e, "关闭日志文件失败") from e

    def __enter__(self) -> "LogWriter":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        if exc_type is None:
            self.close()
            return

        # 已有异常在传播, 关闭失败只记录日志
        try:
            self.close()
        except CannotWriteLogs:
            pass

    @staticmethod
    def _write_log_file(log_file: BinaryIO, data: bytes) -> int:
        try:
            return log_file.write(data)
        except OSError as e:
            logger.warning(f"写入日志文件失败: {e!r}")
            raise CannotWriteLogs(e, "写入日志文件失败") from e
