"""
基础设施容器（InfraContainer）

管理基础设施组件：持久化后端。
依赖 ConfigContainer 获取配置。
"""

from dependency_injector import containers, providers

from infrastructure.mail.persistence_factory import init_persistence_backend


class InfraContainer(containers.DeclarativeContainer):
    """基础设施容器 - 管理技术实现"""

    # 依赖配置容器
    config = providers.DependenciesContainer()

    # ============ 持久化 ============

    # 持久化后端（资源：整个容器生命周期只创建一次，shutdown_resources() 时关闭）
    persistence_backend = providers.Resource(
        init_persistence_backend,
        settings=config.settings,
    )
