"""邮件中转查询处理器模块"""

from application.handlers.mail.get_user_handler import GetUserHandler
from application.handlers.mail.list_users_handler import ListUsersHandler
from application.handlers.mail.list_messages_handler import ListMessagesHandler

__all__ = [
    "GetUserHandler",
    "ListUsersHandler",
    "ListMessagesHandler",
]
