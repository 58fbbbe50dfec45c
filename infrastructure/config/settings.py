"""
应用配置管理

使用 pydantic-settings 管理环境变量和配置
"""

from pathlib import Path
from typing import Literal, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    应用配置类

    自动从环境变量和 .env 文件读取配置
    """

    # ========== 应用环境 ==========
    app_env: Literal["test", "dev", "staging", "prod"] = "dev"
    app_name: str = "Mail Relay"
    app_version: str = "1.0.0"
    debug: bool = False

    # ========== 存储配置 ==========
    # memory: 进程内存储（test 环境强制使用）
    # json: 每个集合一个 JSON 文件
    storage_backend: Literal["memory", "json"] = "json"
    data_dir: str = "data"
    users_file: str = "users.json"
    messages_file: str = "messages.json"
    # 文件损坏时抛出异常而不是当作空集合
    strict_persistence: bool = False

    # ========== 随机数据 ==========
    init_random_user_count: int = 10
    init_random_message_count: int = 20

    # ========== 日志配置 ==========
    log_level: str = "INFO"
    log_file: Optional[str] = None

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # 忽略未定义的环境变量
    )

    @property
    def is_test(self) -> bool:
        """是否为测试环境"""
        return self.app_env == "test"

    @property
    def is_dev(self) -> bool:
        """是否为开发环境"""
        return self.app_env == "dev"

    @property
    def is_prod(self) -> bool:
        """是否为生产环境"""
        return self.app_env == "prod"

    @property
    def effective_storage_backend(self) -> str:
        """获取实际使用的存储后端"""
        if self.is_test:
            return "memory"
        return self.storage_backend

    @property
    def users_path(self) -> Path:
        """用户集合文件路径"""
        return Path(self.data_dir) / self.users_file

    @property
    def messages_path(self) -> Path:
        """邮件集合文件路径"""
        return Path(self.data_dir) / self.messages_file


# 全局配置实例（单例）
_settings: Settings | None = None


def get_settings() -> Settings:
    """
    获取配置实例（单例模式）

    Returns:
        Settings 实例
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
