"""内存持久化后端"""

import threading
from typing import List

from domain.common.exceptions import StorageClosedException
from domain.mail.entities.message import Message
from domain.mail.entities.user import User
from domain.mail.repositories.persistence_backend import PersistenceBackend


class InMemoryPersistenceBackend(PersistenceBackend):
    """
    内存持久化后端

    不做任何 I/O，主要用于测试和 test 环境。读取返回副本，调用方修改列表不会影响内部状态。
    """

    def __init__(self) -> None:
        self._users: List[User] = []
        self._messages: List[Message] = []
        self._lock = threading.Lock()
        self._closed = False

    def get_users(self) -> List[User]:
        self._ensure_open()
        with self._lock:
            return list(self._users)

    def get_messages(self) -> List[Message]:
        self._ensure_open()
        with self._lock:
            return list(self._messages)

    def add_user(self, user: User) -> None:
        self._ensure_open()
        with self._lock:
            self._users.append(user)

    def add_message(self, message: Message) -> None:
        self._ensure_open()
        with self._lock:
            self._messages.append(message)

    def close(self) -> None:
        self._closed = True

    def _ensure_open(self) -> None:
        if self._closed:
            raise StorageClosedException()
