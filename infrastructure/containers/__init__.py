"""
依赖注入容器

用法：
    from infrastructure.containers import bootstrap

    boot = bootstrap()
    handler = boot.app.register_user_handler()
    ...
    boot.shutdown()
"""

from dataclasses import dataclass
from typing import Optional

from dependency_injector import providers

from infrastructure.config.settings import Settings
from infrastructure.containers.application import AppContainer
from infrastructure.containers.config import ConfigContainer
from infrastructure.containers.infrastructure import InfraContainer


@dataclass
class Bootstrap:
    """已装配的容器集合"""

    config: ConfigContainer
    infra: InfraContainer
    app: AppContainer

    def shutdown(self) -> None:
        """关闭所有资源（持久化后端等）"""
        self.infra.shutdown_resources()


def bootstrap(settings: Optional[Settings] = None) -> Bootstrap:
    """
    创建并装配所有容器

    Args:
        settings: 可选的配置实例，不提供时使用 get_settings()

    Returns:
        Bootstrap
    """
    config = ConfigContainer()
    if settings is not None:
        config.settings.override(providers.Object(settings))

    infra = InfraContainer(config=config)
    app = AppContainer(config=config, infra=infra)
    return Bootstrap(config=config, infra=infra, app=app)


__all__ = ["Bootstrap", "bootstrap"]
