"""邮件中转命令模块"""

from application.commands.mail.register_user import (
    RegisterUserCommand,
    RegisterUserResult,
    RegisterUserHandler,
)
from application.commands.mail.send_message import (
    SendMessageCommand,
    SendMessageResult,
    SendMessageHandler,
)
from application.commands.mail.init_random import (
    InitRandomCommand,
    InitRandomResult,
    InitRandomHandler,
)

__all__ = [
    "RegisterUserCommand",
    "RegisterUserResult",
    "RegisterUserHandler",
    "SendMessageCommand",
    "SendMessageResult",
    "SendMessageHandler",
    "InitRandomCommand",
    "InitRandomResult",
    "InitRandomHandler",
]
