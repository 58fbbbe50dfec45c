"""查询用户列表 Handler"""

import asyncio

from application.queries.mail.list_users import ListUsersQuery, ListUsersResult
from domain.mail.services.user_directory import UserDirectory


class ListUsersHandler:
    """查询用户列表 Handler，结果按邮箱升序"""

    def __init__(self, directory: UserDirectory):
        self._directory = directory

    async def handle(self, query: ListUsersQuery) -> ListUsersResult:
        loop = asyncio.get_running_loop()
        users = await loop.run_in_executor(None, self._directory.list)
        return ListUsersResult(success=True, data=users)
