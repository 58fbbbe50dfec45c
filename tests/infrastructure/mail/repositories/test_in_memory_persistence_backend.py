"""InMemoryPersistenceBackend 测试"""

import pytest

from domain.common.exceptions import StorageClosedException
from domain.mail.entities.message import Message
from domain.mail.entities.user import User
from infrastructure.mail.repositories.in_memory_persistence_backend import (
    InMemoryPersistenceBackend,
)


@pytest.fixture
def backend() -> InMemoryPersistenceBackend:
    return InMemoryPersistenceBackend()


class TestInMemoryPersistenceBackend:
    """内存后端测试"""

    def test_starts_empty(self, backend: InMemoryPersistenceBackend):
        """测试初始为空"""
        assert backend.get_users() == []
        assert backend.get_messages() == []

    def test_read_after_write(self, backend: InMemoryPersistenceBackend):
        """测试写入后立即可读，保持存储顺序"""
        first = User(user_name="B", email="b@b")
        second = User(user_name="A", email="a@a")

        backend.add_user(first)
        backend.add_user(second)

        assert backend.get_users() == [first, second]

    def test_no_deduplication(self, backend: InMemoryPersistenceBackend):
        """测试后端不去重"""
        user = User(user_name="A", email="a@a")

        backend.add_user(user)
        backend.add_user(user)

        assert len(backend.get_users()) == 2

    def test_get_returns_copy(self, backend: InMemoryPersistenceBackend):
        """测试返回副本"""
        backend.add_message(Message(subject="S", body="B", sender_id="a@a", receiver_id="b@b"))

        backend.get_messages().clear()

        assert len(backend.get_messages()) == 1

    def test_closed_backend_raises(self, backend: InMemoryPersistenceBackend):
        """测试关闭后不可访问"""
        backend.close()

        with pytest.raises(StorageClosedException):
            backend.get_users()
        with pytest.raises(StorageClosedException):
            backend.add_user(User(user_name="A", email="a@a"))

    def test_context_manager_closes(self):
        """测试上下文管理器退出时关闭"""
        with InMemoryPersistenceBackend() as backend:
            backend.add_user(User(user_name="A", email="a@a"))

        with pytest.raises(StorageClosedException):
            backend.get_users()
