"""Settings / 日志配置测试"""

import logging
from pathlib import Path

import pytest

from infrastructure.config.logging_config import configure_logging
from infrastructure.config.settings import Settings


class TestSettings:
    """Settings 测试"""

    def test_defaults(self):
        """测试默认值"""
        settings = Settings(_env_file=None)

        assert settings.storage_backend == "json"
        assert settings.users_path == Path("data") / "users.json"
        assert settings.messages_path == Path("data") / "messages.json"
        assert settings.strict_persistence is False

    def test_test_env_forces_memory_backend(self):
        """测试 test 环境强制使用内存后端"""
        settings = Settings(_env_file=None, app_env="test", storage_backend="json")

        assert settings.effective_storage_backend == "memory"

    def test_reads_environment_variables(self, monkeypatch: pytest.MonkeyPatch):
        """测试从环境变量读取"""
        monkeypatch.setenv("DATA_DIR", "/var/lib/relay")
        monkeypatch.setenv("STRICT_PERSISTENCE", "true")

        settings = Settings(_env_file=None)

        assert settings.users_path == Path("/var/lib/relay") / "users.json"
        assert settings.strict_persistence is True


class TestConfigureLogging:
    """configure_logging 测试"""

    def test_configures_level_and_file(self, tmp_path: Path):
        """测试日志级别和文件输出"""
        log_file = tmp_path / "logs" / "app.log"
        settings = Settings(_env_file=None, log_level="debug", log_file=str(log_file))
        logger = logging.getLogger("test_configure_logging")
        logger.propagate = False

        configure_logging(settings, logger=logger)
        logger.debug("hello from test")
        for handler in logger.handlers:
            handler.flush()

        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 2
        assert "hello from test" in log_file.read_text(encoding="utf-8")

        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()

    def test_reconfigure_replaces_handlers(self):
        """测试重复配置不会累积 handler"""
        settings = Settings(_env_file=None)
        logger = logging.getLogger("test_reconfigure_logging")
        logger.propagate = False

        configure_logging(settings, logger=logger)
        configure_logging(settings, logger=logger)

        assert len(logger.handlers) == 1
        logger.removeHandler(logger.handlers[0])
