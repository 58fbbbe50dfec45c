"""邮件消息实体"""

from dataclasses import dataclass
from typing import Any, Dict

from domain.common.exceptions import InvalidValueObjectException


@dataclass(frozen=True)
class Message:
    """
    用户之间的一封邮件

    sender_id / receiver_id 是用户的邮箱地址，追加时由 MessageStore 校验。

    Attributes:
        subject: 主题
        body: 正文（持久化字段名为 "Message"）
        sender_id: 发件人邮箱
        receiver_id: 收件人邮箱
    """

    subject: str
    body: str
    sender_id: str
    receiver_id: str

    def __post_init__(self) -> None:
        for name in ("subject", "body", "sender_id", "receiver_id"):
            value = getattr(self, name)
            if not isinstance(value, str):
                raise InvalidValueObjectException(
                    value_object_type="Message",
                    value=value,
                    reason=f"{name} must be a string",
                )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "Subject": self.subject,
            "Message": self.body,
            "SenderId": self.sender_id,
            "ReceiverId": self.receiver_id,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Message":
        return cls(
            subject=data["Subject"],
            body=data["Message"],
            sender_id=data["SenderId"],
            receiver_id=data["ReceiverId"],
        )
