"""持久化后端接口"""

from abc import ABC, abstractmethod
from typing import List

from domain.mail.entities.message import Message
from domain.mail.entities.user import User


class PersistenceBackend(ABC):
    """
    用户与邮件两个集合的持久化接口

    只提供整集合读取和单条追加，不做去重或校验（由 UserDirectory / MessageStore 负责）。
    每次 add_* 之后的 get_* 必须能看到新记录。具体实现在基础设施层。
    """

    @abstractmethod
    def get_users(self) -> List[User]:
        """
        获取所有用户

        Returns:
            按存储顺序排列的用户列表（独立副本）
        """
        raise NotImplementedError

    @abstractmethod
    def get_messages(self) -> List[Message]:
        """
        获取所有邮件

        Returns:
            按存储顺序排列的邮件列表（独立副本）
        """
        raise NotImplementedError

    @abstractmethod
    def add_user(self, user: User) -> None:
        """
        追加用户

        Args:
            user: 用户实体
        """
        raise NotImplementedError

    @abstractmethod
    def add_message(self, message: Message) -> None:
        """
        追加邮件

        Args:
            message: 邮件实体
        """
        raise NotImplementedError

    def close(self) -> None:
        """释放后端持有的资源"""

    def __enter__(self) -> "PersistenceBackend":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
