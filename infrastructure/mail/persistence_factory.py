"""持久化后端工厂"""

import logging
from typing import Iterator, Optional

from domain.mail.repositories.persistence_backend import PersistenceBackend
from infrastructure.config.settings import Settings
from infrastructure.mail.repositories.in_memory_persistence_backend import (
    InMemoryPersistenceBackend,
)
from infrastructure.mail.repositories.json_file_persistence_backend import (
    JsonFilePersistenceBackend,
)


class PersistenceBackendFactory:
    """根据配置创建持久化后端"""

    @staticmethod
    def create(settings: Settings, logger: Optional[logging.Logger] = None) -> PersistenceBackend:
        """
        创建持久化后端

        Args:
            settings: 应用配置
            logger: 可选的日志记录器

        Returns:
            test 环境或 storage_backend=memory 时返回内存后端，否则返回 JSON 文件后端
        """
        if settings.effective_storage_backend == "memory":
            return InMemoryPersistenceBackend()

        return JsonFilePersistenceBackend(
            users_path=settings.users_path,
            messages_path=settings.messages_path,
            strict=settings.strict_persistence,
            logger=logger,
        )


def init_persistence_backend(settings: Settings) -> Iterator[PersistenceBackend]:
    """
    DI 资源初始化函数

    后端在容器生命周期内只创建一次，shutdown_resources() 时关闭。
    """
    backend = PersistenceBackendFactory.create(settings)
    try:
        yield backend
    finally:
        backend.close()
