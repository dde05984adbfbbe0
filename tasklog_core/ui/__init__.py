"""
终端前缀渲染

提供样式、颜色开关以及前缀写入器
"""


from __future__ import annotations
from tasklog_core.ui.prefixed import ByteSink, PrefixedUI, PrefixedWriter
from tasklog_core.ui.styles import BOLD, CYAN, GREY, UI, style_for

__all__ = [
    "UI",
    "ByteSink",
    "PrefixedUI",
    "PrefixedWriter",
    "BOLD",
    "CYAN",
    "GREY",
    "style_for",
]
