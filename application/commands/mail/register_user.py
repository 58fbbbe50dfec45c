"""注册用户命令"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Optional

from domain.common.exceptions import DuplicateEmailException, InvalidValueObjectException
from domain.mail.entities.user import User
from domain.mail.services.user_directory import UserDirectory


@dataclass
class RegisterUserCommand:
    """注册用户命令

    Attributes:
        user_name: 用户名
        email: 邮箱地址（唯一）
    """

    user_name: str
    email: str


@dataclass
class RegisterUserResult:
    """命令执行结果

    Attributes:
        success: 是否成功
        email: 用户邮箱
        message: 结果消息
        error_code: 错误代码（失败时有值）
    """

    success: bool
    email: str = ""
    message: str = ""
    error_code: Optional[str] = None


class RegisterUserHandler:
    """注册用户处理器"""

    def __init__(
        self,
        directory: UserDirectory,
        logger: Optional[logging.Logger] = None,
    ):
        """
        初始化处理器

        Args:
            directory: 用户目录
            logger: 日志记录器
        """
        self._directory = directory
        self._logger = logger or logging.getLogger(__name__)

    async def handle(self, command: RegisterUserCommand) -> RegisterUserResult:
        """
        处理注册用户命令

        注册在默认线程池中执行；调用方在派发前取消时不会写入任何数据。
        存储故障（文件损坏、存储已关闭）不转换为结果，直接向上抛出。

        Args:
            command: 注册用户命令

        Returns:
            命令执行结果
        """
        try:
            user = User(user_name=command.user_name, email=command.email)
            loop = asyncio.get_running_loop()
            await loop.run_in_executor(None, self._directory.register, user)
        except (DuplicateEmailException, InvalidValueObjectException) as e:
            return RegisterUserResult(
                success=False,
                email=command.email,
                message=e.message,
                error_code=e.code,
            )

        return RegisterUserResult(
            success=True,
            email=command.email,
            message="User registered successfully",
        )
