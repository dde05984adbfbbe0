"""
任务日志配置中心

统一管理所有配置:
- 诊断日志配置 (logging)
- 终端前缀输出配置 (ui)
- 任务日志文件配置 (task_logs)
"""


from __future__ import annotations
import os
from functools import lru_cache
from pathlib import Path

import yaml
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings

# 项目根目录
PROJECT_ROOT = Path(__file__).parent.parent


class LoggingConfig(BaseModel):
    """诊断日志配置"""
    level: str = "INFO"
    rotation: str = "10 MB"
    retention: str = "30 days"
    log_dir: str = "logs"


class UIConfig(BaseModel):
    """终端前缀输出配置"""
    color: bool = True
    output_prefix: str = ">"
    warn_prefix: str = ">!"
    prefix_color: str = "cyan"


class TaskLogsConfig(BaseModel):
    """任务日志文件配置"""
    buffer_size: int = Field(default=8192, gt=0)
    encoding: str = "utf-8"


class TaskLogConfig(BaseSettings):
    """任务日志主配置"""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    ui: UIConfig = Field(default_factory=UIConfig)
    task_logs: TaskLogsConfig = Field(default_factory=TaskLogsConfig)

    model_config = {
        "env_prefix": "TASKLOG_",
        "env_nested_delimiter": "__",
    }

    @classmethod
    def from_yaml(cls, config_path: str | Path) -> "TaskLogConfig":
        """从YAML文件加载配置"""
        config_path = Path(config_path)
        if not config_path.exists():
            return cls()

        with open(config_path, "r", encoding="utf-8") as f:
            config_data = yaml.safe_load(f) or {}

        return cls(**config_data)

    def get_path(self, relative_path: str) -> Path:
        """获取相对于项目根目录的绝对路径"""
        return PROJECT_ROOT / relative_path

    def get_logs_path(self) -> Path:
        """获取诊断日志目录路径"""
        return self.get_path(self.logging.log_dir)


@lru_cache()
def get_config() -> TaskLogConfig:
    """获取配置单例"""
    config_path = os.environ.get("TASKLOG_CONFIG", "configs/tasklog.yaml")
    return TaskLogConfig.from_yaml(PROJECT_ROOT / config_path)


def reload_config() -> TaskLogConfig:
    """重新加载配置"""
    get_config.cache_clear()
    return get_config()
