"""
配置与异常单元测试
"""

import pytest
from pathlib import Path
import sys

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from pydantic import ValidationError

from tasklog_core.config import TaskLogConfig, get_config, reload_config
from tasklog_core.exceptions import CannotReadLogs, CannotWriteLogs, TaskLogError


class TestTaskLogConfig:
    """测试配置"""

    def test_default_values(self):
        """测试默认值"""
        config = TaskLogConfig()

        assert config.ui.color is True
        assert config.ui.output_prefix == ">"
        assert config.ui.warn_prefix == ">!"
        assert config.task_logs.buffer_size == 8192
        assert config.task_logs.encoding == "utf-8"

    def test_env_override(self, monkeypatch):
        """测试环境变量覆盖嵌套配置"""
        monkeypatch.setenv("TASKLOG_UI__COLOR", "false")
        monkeypatch.setenv("TASKLOG_TASK_LOGS__BUFFER_SIZE", "4096")

        config = TaskLogConfig()

        assert config.ui.color is False
        assert config.task_logs.buffer_size == 4096

    def test_invalid_buffer_size(self):
        """测试缓冲区大小必须为正数"""
        with pytest.raises(ValidationError):
            TaskLogConfig(task_logs={"buffer_size": 0})

    def test_from_yaml(self, tmp_path):
        """测试从YAML加载"""
        config_path = tmp_path / "tasklog.yaml"
        config_path.write_text(
            "ui:\n  output_prefix: '|'\ntask_logs:\n  encoding: latin-1\n",
            encoding="utf-8",
        )

        config = TaskLogConfig.from_yaml(config_path)

        assert config.ui.output_prefix == "|"
        assert config.task_logs.encoding == "latin-1"
        assert config.ui.color is True

    def test_from_missing_yaml(self, tmp_path):
        """测试YAML不存在时使用默认配置"""
        config = TaskLogConfig.from_yaml(tmp_path / "missing.yaml")
        assert config.task_logs.buffer_size == 8192

    def test_reload_config(self, tmp_path, monkeypatch):
        """测试通过TASKLOG_CONFIG指定配置文件并重新加载"""
        config_path = tmp_path / "custom.yaml"
        config_path.write_text("task_logs:\n  buffer_size: 512\n", encoding="utf-8")
        monkeypatch.setenv("TASKLOG_CONFIG", str(config_path))

        try:
            assert reload_config().task_logs.buffer_size == 512
            assert get_config() is get_config()
        finally:
            monkeypatch.delenv("TASKLOG_CONFIG")
            reload_config()


class TestExceptions:
    """测试异常定义"""

    def test_cannot_write_logs(self):
        cause = PermissionError(13, "Permission denied")
        error = CannotWriteLogs(cause, "创建日志文件失败")

        assert isinstance(error, TaskLogError)
        assert error.cause is cause
        assert error.to_dict()["error"] == "CANNOT_WRITE_LOGS"
        assert "创建日志文件失败" in error.message

    def test_cannot_read_logs(self):
        cause = FileNotFoundError(2, "No such file or directory")
        error = CannotReadLogs(cause)

        assert isinstance(error, TaskLogError)
        assert error.cause is cause
        assert error.to_dict()["details"]["cause"] == repr(cause)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
