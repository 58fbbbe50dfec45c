"""邮件文本解析服务"""

from email import message_from_string
from email.message import Message as MimeMessage
from typing import Optional

from domain.common.exceptions import InvalidMessageFormatException
from domain.mail.entities.message import Message


class MessageTextParser:
    """
    RFC822 风格邮件文本解析器

    输入格式：Subject / From / To 头部，空行，然后是正文。例如::

        Subject: Test message
        From: john@example.org
        To: bob@example.org

        Hello world!!

    只检查必需头部是否存在且非空，不校验邮箱语法。
    """

    REQUIRED_HEADERS = ("Subject", "From", "To")

    def parse(self, raw_text: str) -> Message:
        """
        解析邮件文本

        Args:
            raw_text: 原始邮件文本

        Returns:
            Message 实体

        Raises:
            InvalidMessageFormatException: 缺少必需头部或正文为多段结构
        """
        if not raw_text or not raw_text.strip():
            raise InvalidMessageFormatException("message text is empty")

        normalized = raw_text.replace("\r\n", "\n").replace("\r", "\n")
        parsed = message_from_string(normalized)

        if parsed.is_multipart():
            raise InvalidMessageFormatException("multipart messages are not supported")

        headers = {name: self._header(parsed, name) for name in self.REQUIRED_HEADERS}
        missing = [name for name, value in headers.items() if not value]
        if missing:
            raise InvalidMessageFormatException(f"missing header(s): {', '.join(missing)}")

        body = parsed.get_payload()
        return Message(
            subject=headers["Subject"],
            body=body if isinstance(body, str) else "",
            sender_id=headers["From"],
            receiver_id=headers["To"],
        )

    @staticmethod
    def _header(parsed: MimeMessage, name: str) -> Optional[str]:
        value = parsed.get(name)
        if value is None:
            return None
        return str(value).strip()
