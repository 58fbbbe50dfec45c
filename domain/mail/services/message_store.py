"""邮件存储领域服务"""

import logging
from typing import List, Optional

from domain.common.exceptions import ReceiverNotFoundException, SenderNotFoundException
from domain.mail.entities.message import Message
from domain.mail.repositories.persistence_backend import PersistenceBackend
from domain.mail.services.user_directory import UserDirectory


class MessageStore:
    """
    邮件存储

    只接受发件人和收件人都已注册的邮件，按追加顺序保存。
    """

    def __init__(
        self,
        backend: PersistenceBackend,
        directory: UserDirectory,
        logger: Optional[logging.Logger] = None,
    ):
        self._backend = backend
        self._directory = directory
        self._logger = logger or logging.getLogger(__name__)

    def append(self, message: Message) -> None:
        """
        追加邮件

        先检查发件人，再检查收件人；任一失败时不写入任何数据。

        Args:
            message: 邮件实体

        Raises:
            SenderNotFoundException: 发件人未注册
            ReceiverNotFoundException: 收件人未注册
        """
        if self._directory.lookup(message.sender_id) is None:
            self._logger.warning(f"Message rejected, unknown sender: {message.sender_id}")
            raise SenderNotFoundException(message.sender_id)

        if self._directory.lookup(message.receiver_id) is None:
            self._logger.warning(f"Message rejected, unknown receiver: {message.receiver_id}")
            raise ReceiverNotFoundException(message.receiver_id)

        self._backend.add_message(message)
        self._logger.info(f"Message stored: {message.sender_id} -> {message.receiver_id}")

    def list(self) -> List[Message]:
        """获取所有邮件（按追加顺序）"""
        return self._backend.get_messages()
