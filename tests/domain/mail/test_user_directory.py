"""UserDirectory 测试"""

from concurrent.futures import ThreadPoolExecutor
from unittest.mock import Mock

import pytest

from domain.common.exceptions import DuplicateEmailException
from domain.mail.entities.user import User
from domain.mail.repositories.persistence_backend import PersistenceBackend
from domain.mail.services.user_directory import UserDirectory
from infrastructure.mail.repositories.in_memory_persistence_backend import (
    InMemoryPersistenceBackend,
)


@pytest.fixture
def backend() -> InMemoryPersistenceBackend:
    """创建内存后端"""
    return InMemoryPersistenceBackend()


@pytest.fixture
def directory(backend: InMemoryPersistenceBackend) -> UserDirectory:
    """创建用户目录"""
    return UserDirectory(backend=backend)


class TestRegister:
    """register 测试"""

    def test_register_new_user(self, directory: UserDirectory):
        """测试注册后可以查到且列表只有该用户"""
        user = User(user_name="Ivan Pupkin", email="pupkin@x")

        directory.register(user)

        assert directory.lookup("pupkin@x") == user
        assert directory.list() == [user]

    def test_register_increases_length_by_one(self, directory: UserDirectory):
        """测试每次注册列表长度加一"""
        directory.register(User(user_name="A", email="a@a"))
        before = len(directory.list())

        directory.register(User(user_name="B", email="b@b"))

        assert len(directory.list()) == before + 1

    def test_register_duplicate_email_raises(
        self,
        directory: UserDirectory,
        backend: InMemoryPersistenceBackend,
    ):
        """测试重复邮箱注册失败且不改变存储"""
        directory.register(User(user_name="A", email="dup@x"))

        with pytest.raises(DuplicateEmailException) as exc_info:
            directory.register(User(user_name="B", email="dup@x"))

        assert exc_info.value.email == "dup@x"
        assert exc_info.value.code == "DUPLICATE_EMAIL"
        assert len(backend.get_users()) == 1
        assert directory.lookup("dup@x").user_name == "A"

    def test_same_name_different_emails(self, directory: UserDirectory):
        """测试同名不同邮箱都能注册"""
        directory.register(User(user_name="Bob", email="bob@gmail.com"))
        directory.register(User(user_name="Bob", email="bob@yandex.ru"))

        assert len(directory.list()) == 2

    def test_email_match_is_case_sensitive(self, directory: UserDirectory):
        """测试邮箱区分大小写"""
        directory.register(User(user_name="John", email="John@example.org"))
        directory.register(User(user_name="john", email="john@example.org"))

        assert len(directory.list()) == 2
        assert directory.lookup("JOHN@example.org") is None

    def test_duplicate_does_not_call_add_user(self):
        """测试重复时不调用后端写入"""
        backend = Mock(spec=PersistenceBackend)
        backend.get_users.return_value = [User(user_name="A", email="dup@x")]
        directory = UserDirectory(backend=backend)

        with pytest.raises(DuplicateEmailException):
            directory.register(User(user_name="B", email="dup@x"))

        backend.add_user.assert_not_called()

    def test_concurrent_registrations_with_distinct_emails(self, directory: UserDirectory):
        """测试并发注册不同邮箱全部成功"""
        users = [User(user_name=f"User {i}", email=f"user{i}@x") for i in range(50)]

        with ThreadPoolExecutor(max_workers=8) as pool:
            list(pool.map(directory.register, users))

        assert len(directory.list()) == 50

    def test_concurrent_registrations_with_same_email(self, directory: UserDirectory):
        """测试并发注册同一邮箱只有一个成功"""
        def register(i: int) -> bool:
            try:
                directory.register(User(user_name=f"User {i}", email="same@x"))
            except DuplicateEmailException:
                return False
            return True

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(register, range(20)))

        assert results.count(True) == 1
        assert len(directory.list()) == 1


class TestLookup:
    """lookup 测试"""

    def test_lookup_missing_returns_none(self, directory: UserDirectory):
        """测试查询不存在的用户"""
        assert directory.lookup("notregistered@ya.ru") is None

    def test_lookup_returns_first_match(self, backend: InMemoryPersistenceBackend):
        """测试存储中出现重复时返回第一条"""
        backend.add_user(User(user_name="First", email="x@x"))
        backend.add_user(User(user_name="Second", email="x@x"))
        directory = UserDirectory(backend=backend)

        assert directory.lookup("x@x").user_name == "First"


class TestList:
    """list 测试"""

    def test_empty_list(self, directory: UserDirectory):
        """测试没有用户时返回空列表"""
        assert directory.list() == []

    def test_list_sorted_by_email(self, directory: UserDirectory):
        """测试按邮箱升序，与注册顺序无关"""
        directory.register(User(user_name="BBB_First User", email="1st@example.org"))
        directory.register(User(user_name="AAA_Second User", email="2nd@random.email"))
        directory.register(User(user_name="Zero", email="0th@example.org"))

        emails = [user.email for user in directory.list()]

        assert emails == ["0th@example.org", "1st@example.org", "2nd@random.email"]

    def test_list_uses_ordinal_comparison(self, directory: UserDirectory):
        """测试按字符码排序（大写字母排在小写之前）"""
        directory.register(User(user_name="b", email="bob@x"))
        directory.register(User(user_name="B", email="Bob@x"))

        assert [user.email for user in directory.list()] == ["Bob@x", "bob@x"]
