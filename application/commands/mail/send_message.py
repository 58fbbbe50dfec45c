"""发送邮件命令"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Optional

from domain.common.exceptions import (
    InvalidMessageFormatException,
    ReceiverNotFoundException,
    SenderNotFoundException,
)
from domain.mail.services.message_store import MessageStore
from domain.mail.services.message_text_parser import MessageTextParser


@dataclass
class SendMessageCommand:
    """发送邮件命令

    Attributes:
        raw_text: RFC822 风格的邮件文本（Subject / From / To 头部 + 空行 + 正文）
    """

    raw_text: str


@dataclass
class SendMessageResult:
    """命令执行结果

    Attributes:
        success: 是否成功
        sender_id: 发件人（解析成功时有值）
        receiver_id: 收件人（解析成功时有值）
        message: 结果消息
        error_code: 错误代码（失败时有值）
    """

    success: bool
    sender_id: Optional[str] = None
    receiver_id: Optional[str] = None
    message: str = ""
    error_code: Optional[str] = None


class SendMessageHandler:
    """发送邮件处理器

    处理流程：
    1. 解析邮件文本
    2. 校验发件人、收件人并追加到邮件存储
    """

    def __init__(
        self,
        store: MessageStore,
        parser: MessageTextParser,
        logger: Optional[logging.Logger] = None,
    ):
        self._store = store
        self._parser = parser
        self._logger = logger or logging.getLogger(__name__)

    async def handle(self, command: SendMessageCommand) -> SendMessageResult:
        """
        处理发送邮件命令

        Args:
            command: 发送邮件命令

        Returns:
            命令执行结果
        """
        try:
            message = self._parser.parse(command.raw_text)
        except InvalidMessageFormatException as e:
            self._logger.warning(f"Unparsable message text: {e.message}")
            return SendMessageResult(success=False, message=e.message, error_code=e.code)

        try:
            loop = asyncio.get_running_loop()
            await loop.run_in_executor(None, self._store.append, message)
        except (SenderNotFoundException, ReceiverNotFoundException) as e:
            return SendMessageResult(
                success=False,
                sender_id=message.sender_id,
                receiver_id=message.receiver_id,
                message=e.message,
                error_code=e.code,
            )

        return SendMessageResult(
            success=True,
            sender_id=message.sender_id,
            receiver_id=message.receiver_id,
            message="Message sent successfully",
        )
