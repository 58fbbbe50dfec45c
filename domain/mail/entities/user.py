"""用户实体"""

from dataclasses import dataclass
from typing import Any, Dict

from domain.common.exceptions import InvalidValueObjectException


@dataclass(frozen=True)
class User:
    """
    注册用户

    邮箱地址是用户的唯一标识（区分大小写，精确匹配），用户名不做限制也不要求唯一。

    Attributes:
        user_name: 用户名
        email: 邮箱地址
    """

    user_name: str
    email: str

    def __post_init__(self) -> None:
        """初始化后验证"""
        for name in ("user_name", "email"):
            value = getattr(self, name)
            if not isinstance(value, str):
                raise InvalidValueObjectException(
                    value_object_type="User",
                    value=value,
                    reason=f"{name} must be a string",
                )

    def to_dict(self) -> Dict[str, Any]:
        """转换为持久化/接口格式"""
        return {"UserName": self.user_name, "Email": self.email}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "User":
        """从持久化/接口格式构造，缺少字段时抛出 KeyError"""
        return cls(user_name=data["UserName"], email=data["Email"])
