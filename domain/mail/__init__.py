"""邮件中转领域模块

该模块包含用户目录和邮件存储的领域模型，包括：
- User、Message 实体
- PersistenceBackend 持久化接口
- UserDirectory、MessageStore、MessageTextParser 领域服务
"""

from domain.mail.entities.user import User
from domain.mail.entities.message import Message
from domain.mail.repositories.persistence_backend import PersistenceBackend

__all__ = [
    "User",
    "Message",
    "PersistenceBackend",
]
