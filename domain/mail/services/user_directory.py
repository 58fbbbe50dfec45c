"""用户目录领域服务"""

import logging
import threading
from typing import List, Optional

from domain.common.exceptions import DuplicateEmailException
from domain.mail.entities.user import User
from domain.mail.repositories.persistence_backend import PersistenceBackend


class UserDirectory:
    """
    用户目录

    在持久化后端之上维护邮箱唯一性约束。
    注册时的"检查 + 追加"在同一把锁内完成，并发注册同一邮箱只有一个能成功。
    """

    def __init__(
        self,
        backend: PersistenceBackend,
        logger: Optional[logging.Logger] = None,
    ):
        """
        初始化用户目录

        Args:
            backend: 持久化后端
            logger: 可选的日志记录器
        """
        self._backend = backend
        self._logger = logger or logging.getLogger(__name__)
        self._register_lock = threading.Lock()

    def register(self, user: User) -> None:
        """
        注册用户

        Args:
            user: 待注册用户

        Raises:
            DuplicateEmailException: 邮箱已被注册
        """
        with self._register_lock:
            if self.lookup(user.email) is not None:
                self._logger.warning(f"Registration rejected, email already taken: {user.email}")
                raise DuplicateEmailException(user.email)

            self._backend.add_user(user)

        self._logger.info(f"User registered: {user.email}")

    def lookup(self, email: str) -> Optional[User]:
        """
        按邮箱查找用户

        Args:
            email: 邮箱地址（精确匹配）

        Returns:
            找到的用户，不存在返回 None
        """
        for user in self._backend.get_users():
            if user.email == email:
                return user
        return None

    def list(self) -> List[User]:
        """
        获取所有用户

        Returns:
            按邮箱升序排列的用户列表，与存储顺序无关
        """
        return sorted(self._backend.get_users(), key=lambda user: user.email)
