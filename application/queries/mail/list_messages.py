"""查询邮件列表"""

from dataclasses import dataclass, field
from typing import List

from domain.mail.entities.message import Message


@dataclass
class ListMessagesQuery:
    """查询所有邮件（按追加顺序）"""


@dataclass
class ListMessagesResult:
    """
    查询邮件列表结果

    Attributes:
        success: 是否成功
        data: 邮件列表
    """

    success: bool
    data: List[Message] = field(default_factory=list)
