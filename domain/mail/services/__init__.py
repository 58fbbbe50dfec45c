"""邮件领域服务模块"""

from domain.mail.services.user_directory import UserDirectory
from domain.mail.services.message_store import MessageStore
from domain.mail.services.message_text_parser import MessageTextParser

__all__ = [
    "UserDirectory",
    "MessageStore",
    "MessageTextParser",
]
