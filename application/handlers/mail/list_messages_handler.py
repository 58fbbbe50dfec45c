"""查询邮件列表 Handler"""

import asyncio

from application.queries.mail.list_messages import ListMessagesQuery, ListMessagesResult
from domain.mail.services.message_store import MessageStore


class ListMessagesHandler:
    """查询邮件列表 Handler，结果按追加顺序"""

    def __init__(self, store: MessageStore):
        self._store = store

    async def handle(self, query: ListMessagesQuery) -> ListMessagesResult:
        loop = asyncio.get_running_loop()
        messages = await loop.run_in_executor(None, self._store.list)
        return ListMessagesResult(success=True, data=messages)
