"""
前缀输出

- PrefixedWriter: 字节级写入器, 在每行行首插入前缀 (LogWriter的终端输出端)
- PrefixedUI: 行级输出, 供日志回放逐行渲染
"""


from __future__ import annotations
from typing import BinaryIO, Optional, Protocol

from tasklog_core.config import TaskLogConfig, get_config
from tasklog_core.ui.styles import BOLD, UI, style_for


class ByteSink(Protocol):
    """字节输出端: write(bytes) -> 写入字节数, flush()"""

    def write(self, data: bytes) -> int:
        ...

    def flush(self) -> None:
        ...


class PrefixedWriter:
    """
    前缀写入器

    前缀在构造时绑定, 写入时在每一行行首插入;
    跨多次write调用追踪行首状态, 行被拆成多次写入时前缀只出现一次
    (与按每次write调用加前缀不同: write(b"partial ") 后接 write(b"line\n")
    输出 ">partial line\n", 只有一个前缀)
    """

    def __init__(self, ui: UI, prefix: str, writer: BinaryIO):
        self._prefix = ui.apply(prefix).encode("utf-8")
        self._writer = writer
        self._at_line_start = True

    @classmethod
    def from_config(cls, writer: BinaryIO, config: Optional[TaskLogConfig] = None) -> "PrefixedWriter":
        """按配置中的前缀与颜色创建"""
        config = config or get_config()
        prefix = style_for(config.ui.prefix_color)(config.ui.output_prefix)
        return cls(UI.from_config(config), prefix, writer)

    def write(self, data: bytes) -> int:
        if not data:
            return 0

        out = bytearray()
        start = 0
        while start < len(data):
            if self._at_line_start:
                out += self._prefix
            end = data.find(b"\n", start)
            if end == -1:
                out += data[start:]
                self._at_line_start = False
                break
            out += data[start:end + 1]
            self._at_line_start = True
            start = end + 1

        self._writer.write(bytes(out))
        return len(data)

    def flush(self) -> None:
        flush = getattr(self._writer, "flush", None)
        if flush is not None:
            flush()


class PrefixedUI:
    """
    行级前缀输出

    output() 写入标准前缀行, warn() 写入警告前缀行;
    err 未指定时警告与普通输出写到同一目标
    """

    def __init__(
        self,
        ui: UI,
        output_prefix: str,
        warn_prefix: str,
        out: BinaryIO,
        err: Optional[BinaryIO] = None,
    ):
        self._output_prefix = ui.apply(output_prefix)
        self._warn_prefix = ui.apply(warn_prefix)
        self._out = out
        self._err = err if err is not None else out

    @classmethod
    def from_config(
        cls,
        out: BinaryIO,
        err: Optional[BinaryIO] = None,
        config: Optional[TaskLogConfig] = None,
    ) -> "PrefixedUI":
        """按配置中的前缀与颜色创建"""
        config = config or get_config()
        return cls(
            UI.from_config(config),
            style_for(config.ui.prefix_color)(config.ui.output_prefix),
            BOLD(config.ui.warn_prefix),
            out,
            err,
        )

    def output(self, message: str) -> None:
        self._write_line(self._out, self._output_prefix, message)

    def warn(self, message: str) -> None:
        self._write_line(self._err, self._warn_prefix, message)

    @staticmethod
    def _write_line(writer: BinaryIO, prefix: str, message: str) -> None:
        writer.write(f"{prefix}{message}\n".encode("utf-8"))
