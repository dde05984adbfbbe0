"""
测试公共夹具
"""

import pytest
from pathlib import Path
import sys

sys.path.insert(0, str(Path(__file__).parent.parent))

from tasklog_core.logging import logger


@pytest.fixture
def log_records():
    """捕获loguru诊断日志记录"""
    records = []
    handler_id = logger.add(lambda message: records.append(message.record), level="DEBUG")
    yield records
    logger.remove(handler_id)
