"""
诊断日志单元测试
"""

import pytest
from pathlib import Path
import sys

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

import tasklog_core
from tasklog_core.logging import get_logger, logger, setup_logging
from tasklog_core.replay import replay_logs
from tasklog_core.exceptions import CannotReadLogs


class TestSetupLogging:
    """测试诊断日志配置"""

    def test_log_files(self, tmp_path):
        """测试主日志与错误日志分离"""
        log_dir = tmp_path / "logs"
        try:
            setup_logging(log_dir=log_dir, log_level="DEBUG", console=False)
            get_logger("test").error("磁盘已满")

            with pytest.raises(CannotReadLogs):
                replay_logs(None, tmp_path / "missing.log")
        finally:
            logger.remove()

        main_log = (log_dir / "tasklog.log").read_text(encoding="utf-8")
        errors_log = (log_dir / "errors.log").read_text(encoding="utf-8")

        assert "诊断日志初始化完成" in main_log
        assert "开始回放日志" in main_log
        assert "打开日志文件失败" in main_log
        assert "磁盘已满" in errors_log
        assert "打开日志文件失败" not in errors_log

    def test_package_entry_default_level(self, tmp_path):
        """测试从包入口调用setup_logging, 未指定级别时取配置 (INFO)"""
        log_dir = tmp_path / "logs"
        try:
            tasklog_core.setup_logging(log_dir=log_dir, console=False)
            tasklog_core.get_logger("test").debug("调试细节")
            tasklog_core.get_logger("test").info("任务开始")
        finally:
            logger.remove()

        main_log = (log_dir / "tasklog.log").read_text(encoding="utf-8")

        assert "任务开始" in main_log
        assert "调试细节" not in main_log


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
