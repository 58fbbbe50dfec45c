"""查询用户列表"""

from dataclasses import dataclass, field
from typing import List

from domain.mail.entities.user import User


@dataclass
class ListUsersQuery:
    """查询所有用户（按邮箱升序）"""


@dataclass
class ListUsersResult:
    """
    查询用户列表结果

    Attributes:
        success: 是否成功
        data: 用户列表
    """

    success: bool
    data: List[User] = field(default_factory=list)
