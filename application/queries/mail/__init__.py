"""邮件中转查询模块"""

from application.queries.mail.get_user import GetUserQuery, GetUserResult
from application.queries.mail.list_users import ListUsersQuery, ListUsersResult
from application.queries.mail.list_messages import ListMessagesQuery, ListMessagesResult

__all__ = [
    "GetUserQuery",
    "GetUserResult",
    "ListUsersQuery",
    "ListUsersResult",
    "ListMessagesQuery",
    "ListMessagesResult",
]
