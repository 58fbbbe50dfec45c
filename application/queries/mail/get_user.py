"""查询单个用户"""

from dataclasses import dataclass
from typing import Optional

from domain.mail.entities.user import User


@dataclass
class GetUserQuery:
    """按邮箱查询用户

    Attributes:
        email: 邮箱地址（精确匹配）
    """

    email: str


@dataclass
class GetUserResult:
    """查询结果

    Attributes:
        found: 是否找到
        user: 用户（找到时有值）
        message: 消息
        error_code: 错误代码（未找到时为 USER_NOT_FOUND）
    """

    found: bool
    user: Optional[User] = None
    message: str = ""
    error_code: Optional[str] = None
