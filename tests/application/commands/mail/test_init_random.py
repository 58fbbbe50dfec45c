"""InitRandomHandler 测试"""

import pytest

from application.commands.mail.init_random import InitRandomCommand, InitRandomHandler
from domain.mail.services.message_store import MessageStore
from domain.mail.services.user_directory import UserDirectory
from infrastructure.mail.repositories.in_memory_persistence_backend import (
    InMemoryPersistenceBackend,
)


def build_handler(**kwargs) -> InitRandomHandler:
    backend = InMemoryPersistenceBackend()
    directory = UserDirectory(backend=backend)
    store = MessageStore(backend=backend, directory=directory)
    return InitRandomHandler(directory=directory, store=store, **kwargs)


class TestInitRandomHandler:
    """随机数据初始化测试"""

    @pytest.mark.asyncio
    async def test_populates_users_and_messages(self):
        """测试生成用户和邮件"""
        handler = build_handler()

        result = await handler.handle(InitRandomCommand(seed=1, user_count=5, message_count=7))

        assert result.success is True
        assert 1 <= result.users_created <= 5
        assert result.messages_created == 7
        assert len(handler._directory.list()) == result.users_created
        assert len(handler._store.list()) == 7

    @pytest.mark.asyncio
    async def test_same_seed_same_data(self):
        """测试相同种子生成相同数据"""
        first = build_handler()
        second = build_handler()

        await first.handle(InitRandomCommand(seed=123))
        await second.handle(InitRandomCommand(seed=123))

        assert first._directory.list() == second._directory.list()
        assert first._store.list() == second._store.list()

    @pytest.mark.asyncio
    async def test_messages_only_between_registered_users(self):
        """测试邮件双方都是已注册用户"""
        handler = build_handler()

        await handler.handle(InitRandomCommand(seed=42))

        emails = {user.email for user in handler._directory.list()}
        for message in handler._store.list():
            assert message.sender_id in emails
            assert message.receiver_id in emails

    @pytest.mark.asyncio
    async def test_uses_default_counts(self):
        """测试未指定数量时使用默认值"""
        handler = build_handler(default_user_count=3, default_message_count=4)

        result = await handler.handle(InitRandomCommand(seed=7))

        assert result.users_created <= 3
        assert result.messages_created == 4

    @pytest.mark.asyncio
    async def test_zero_users_means_no_messages(self):
        """测试没有用户时不生成邮件"""
        handler = build_handler()

        result = await handler.handle(InitRandomCommand(seed=1, user_count=0, message_count=5))

        assert result.users_created == 0
        assert result.messages_created == 0
