"""
Handler 依赖注入

Handler 从挂在 app.state.container 上的 AppContainer 获取，
测试时可以通过 container.<provider>.override(...) 替换。
"""

from fastapi import HTTPException, Request, status

from application.commands.mail.init_random import InitRandomHandler
from application.commands.mail.register_user import RegisterUserHandler
from application.commands.mail.send_message import SendMessageHandler
from application.handlers.mail.get_user_handler import GetUserHandler
from application.handlers.mail.list_messages_handler import ListMessagesHandler
from application.handlers.mail.list_users_handler import ListUsersHandler
from infrastructure.containers.application import AppContainer


def get_container(request: Request) -> AppContainer:
    """获取应用容器"""
    container = getattr(request.app.state, "container", None)
    if container is None:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Container not configured. Please configure dependency injection.",
        )
    return container


def get_register_user_handler(request: Request) -> RegisterUserHandler:
    return get_container(request).register_user_handler()


def get_send_message_handler(request: Request) -> SendMessageHandler:
    return get_container(request).send_message_handler()


def get_init_random_handler(request: Request) -> InitRandomHandler:
    return get_container(request).init_random_handler()


def get_get_user_handler(request: Request) -> GetUserHandler:
    return get_container(request).get_user_handler()


def get_list_users_handler(request: Request) -> ListUsersHandler:
    return get_container(request).list_users_handler()


def get_list_messages_handler(request: Request) -> ListMessagesHandler:
    return get_container(request).list_messages_handler()
