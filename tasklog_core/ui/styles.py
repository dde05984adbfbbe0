"""
终端样式

基于click.style生成ANSI样式文本, UI负责按颜色开关决定是否保留样式
"""


from __future__ import annotations
from functools import partial
from typing import Callable, Optional

import click

from tasklog_core.config import TaskLogConfig, get_config

Style = Callable[[str], str]

CYAN: Style = partial(click.style, fg="cyan")
BOLD: Style = partial(click.style, bold=True)
GREY: Style = partial(click.style, fg="bright_black")


def style_for(color: str) -> Style:
    """按颜色名生成样式, 颜色名与click一致 (cyan, red, bright_black...)"""
    return partial(click.style, fg=color)


class UI:
    """
    终端渲染开关

    color=False 时去除所有ANSI转义序列
    """

    def __init__(self, color: bool = True):
        self.color = color

    @classmethod
    def from_config(cls, config: Optional[TaskLogConfig] = None) -> "UI":
        config = config or get_config()
        return cls(color=config.ui.color)

    def apply(self, styled: str) -> str:
        if self.color:
            return styled
        return click.unstyle(styled)
