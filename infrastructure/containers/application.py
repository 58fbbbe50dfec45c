"""
应用容器（AppContainer）

管理领域服务与命令/查询处理器。
依赖 InfraContainer 获取持久化后端。

UserDirectory / MessageStore 为单例：同一个存储句柄按引用传给它们，
UserDirectory 的注册锁也必须在所有请求间共享。
"""

from dependency_injector import containers, providers

from application.commands.mail.init_random import InitRandomHandler
from application.commands.mail.register_user import RegisterUserHandler
from application.commands.mail.send_message import SendMessageHandler
from application.handlers.mail.get_user_handler import GetUserHandler
from application.handlers.mail.list_messages_handler import ListMessagesHandler
from application.handlers.mail.list_users_handler import ListUsersHandler
from domain.mail.services.message_store import MessageStore
from domain.mail.services.message_text_parser import MessageTextParser
from domain.mail.services.user_directory import UserDirectory


class AppContainer(containers.DeclarativeContainer):
    """应用容器 - 管理应用层服务"""

    # 依赖配置容器
    config = providers.DependenciesContainer()

    # 依赖基础设施容器
    infra = providers.DependenciesContainer()

    # ============ 领域服务 ============

    user_directory = providers.Singleton(
        UserDirectory,
        backend=infra.persistence_backend,
    )

    message_store = providers.Singleton(
        MessageStore,
        backend=infra.persistence_backend,
        directory=user_directory,
    )

    message_text_parser = providers.Singleton(MessageTextParser)

    # ============ 命令处理器 ============

    register_user_handler = providers.Factory(
        RegisterUserHandler,
        directory=user_directory,
    )

    send_message_handler = providers.Factory(
        SendMessageHandler,
        store=message_store,
        parser=message_text_parser,
    )

    init_random_handler = providers.Factory(
        InitRandomHandler,
        directory=user_directory,
        store=message_store,
        default_user_count=config.settings.provided.init_random_user_count,
        default_message_count=config.settings.provided.init_random_message_count,
    )

    # ============ 查询处理器 ============

    get_user_handler = providers.Factory(
        GetUserHandler,
        directory=user_directory,
    )

    list_users_handler = providers.Factory(
        ListUsersHandler,
        directory=user_directory,
    )

    list_messages_handler = providers.Factory(
        ListMessagesHandler,
        store=message_store,
    )
