"""查询用户 Handler"""

import asyncio
import logging
from typing import Optional

from application.queries.mail.get_user import GetUserQuery, GetUserResult
from domain.mail.services.user_directory import UserDirectory


class GetUserHandler:
    """查询用户 Handler

    这是一个纯读取操作，不修改任何状态。
    """

    def __init__(
        self,
        directory: UserDirectory,
        logger: Optional[logging.Logger] = None,
    ):
        self._directory = directory
        self._logger = logger or logging.getLogger(__name__)

    async def handle(self, query: GetUserQuery) -> GetUserResult:
        """处理查询请求

        Args:
            query: 查询对象，包含 email

        Returns:
            GetUserResult
        """
        loop = asyncio.get_running_loop()
        user = await loop.run_in_executor(None, self._directory.lookup, query.email)

        if user is None:
            self._logger.debug(f"User {query.email} not found")
            return GetUserResult(
                found=False,
                message="User not found",
                error_code="USER_NOT_FOUND",
            )

        return GetUserResult(found=True, user=user)
