"""RegisterUserHandler 测试"""

from unittest.mock import Mock

import pytest

from application.commands.mail.register_user import (
    RegisterUserCommand,
    RegisterUserHandler,
    RegisterUserResult,
)
from domain.common.exceptions import DuplicateEmailException, PersistenceReadException
from domain.mail.entities.user import User
from domain.mail.services.user_directory import UserDirectory


@pytest.fixture
def mock_directory() -> Mock:
    """创建 Mock 用户目录"""
    return Mock(spec=UserDirectory)


@pytest.fixture
def handler(mock_directory: Mock) -> RegisterUserHandler:
    return RegisterUserHandler(directory=mock_directory)


class TestRegisterUserHandler:
    """注册用户处理器测试"""

    @pytest.mark.asyncio
    async def test_register_success(self, handler: RegisterUserHandler, mock_directory: Mock):
        """测试注册成功"""
        result = await handler.handle(RegisterUserCommand(user_name="Ivan Pupkin", email="pupkin@x"))

        assert result.success is True
        assert result.email == "pupkin@x"
        assert result.error_code is None
        mock_directory.register.assert_called_once_with(
            User(user_name="Ivan Pupkin", email="pupkin@x")
        )

    @pytest.mark.asyncio
    async def test_duplicate_email(self, handler: RegisterUserHandler, mock_directory: Mock):
        """测试重复邮箱返回错误结果"""
        mock_directory.register.side_effect = DuplicateEmailException("dup@x")

        result = await handler.handle(RegisterUserCommand(user_name="B", email="dup@x"))

        assert result == RegisterUserResult(
            success=False,
            email="dup@x",
            message="Email already taken",
            error_code="DUPLICATE_EMAIL",
        )

    @pytest.mark.asyncio
    async def test_unexpected_errors_propagate(
        self,
        handler: RegisterUserHandler,
        mock_directory: Mock,
    ):
        """测试非领域异常不会被吞掉"""
        mock_directory.register.side_effect = OSError("disk full")

        with pytest.raises(OSError):
            await handler.handle(RegisterUserCommand(user_name="A", email="a@a"))

    @pytest.mark.asyncio
    async def test_storage_errors_propagate(
        self,
        handler: RegisterUserHandler,
        mock_directory: Mock,
    ):
        """测试存储故障不会被当作业务错误返回"""
        mock_directory.register.side_effect = PersistenceReadException(
            "/data/users.json", "invalid JSON"
        )

        with pytest.raises(PersistenceReadException):
            await handler.handle(RegisterUserCommand(user_name="A", email="a@a"))
