"""JSON 文件持久化后端"""

import json
import logging
import os
import stat
import tempfile
import threading
from contextlib import suppress
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Tuple, TypeVar, Union

from domain.common.exceptions import (
    InvalidValueObjectException,
    PersistenceReadException,
    StorageClosedException,
)
from domain.mail.entities.message import Message
from domain.mail.entities.user import User
from domain.mail.repositories.persistence_backend import PersistenceBackend
from domain.mail.value_objects.read_outcome import ReadOutcome

T = TypeVar("T", User, Message)

CorruptionHook = Callable[[Path, str], None]

# mkstemp 以 0600 创建临时文件；替换前恢复原文件权限，新文件使用 umask 决定的默认权限
_UMASK = os.umask(0)
os.umask(_UMASK)
DEFAULT_FILE_MODE = 0o666 & ~_UMASK


class JsonFilePersistenceBackend(PersistenceBackend):
    """
    JSON 文件持久化后端

    每个集合对应一个独立文件，文件内容是整个集合序列化后的 JSON 数组：
    - 读取：文件不存在或为空时返回空列表；内容损坏时记录警告、调用 on_corrupt 钩子，
      然后按空集合处理（strict=True 时改为抛出 PersistenceReadException）
    - 写入：在集合级别的锁内完成"读取 - 追加 - 写回"，写回时先写临时文件再原子替换，
      读操作不加锁，总能看到完整的文件
    """

    def __init__(
        self,
        users_path: Union[str, Path],
        messages_path: Union[str, Path],
        strict: bool = False,
        on_corrupt: Optional[CorruptionHook] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """
        初始化 JSON 文件后端

        Args:
            users_path: 用户集合文件路径
            messages_path: 邮件集合文件路径，必须与 users_path 不同
            strict: 文件损坏时是否抛出异常
            on_corrupt: 文件损坏时的诊断钩子，参数为 (文件路径, 错误描述)
            logger: 可选的日志记录器

        Raises:
            ValueError: 两个集合指向同一个文件
        """
        self._users_path = Path(users_path)
        self._messages_path = Path(messages_path)
        if self._users_path.resolve() == self._messages_path.resolve():
            raise ValueError(
                f"Users and messages must be stored in different files: {self._users_path}"
            )

        self._strict = strict
        self._on_corrupt = on_corrupt
        self._logger = logger or logging.getLogger(__name__)

        self._users_lock = threading.Lock()
        self._messages_lock = threading.Lock()
        self._closed = False

    @property
    def users_path(self) -> Path:
        return self._users_path

    @property
    def messages_path(self) -> Path:
        return self._messages_path

    def get_users(self) -> List[User]:
        self._ensure_open()
        return self._load(self._users_path, User.from_dict)

    def get_messages(self) -> List[Message]:
        self._ensure_open()
        return self._load(self._messages_path, Message.from_dict)

    def add_user(self, user: User) -> None:
        self._append(self._users_path, self._users_lock, user, User.from_dict)

    def add_message(self, message: Message) -> None:
        self._append(self._messages_path, self._messages_lock, message, Message.from_dict)

    def close(self) -> None:
        # 等待进行中的写入完成
        with self._users_lock, self._messages_lock:
            self._closed = True
        self._logger.debug(
            f"JSON storage closed ({self._users_path}, {self._messages_path})"
        )

    def _append(
        self,
        path: Path,
        lock: threading.Lock,
        item: T,
        factory: Callable[[Dict[str, Any]], T],
    ) -> None:
        with lock:
            self._ensure_open()
            items = self._load(path, factory)
            items.append(item)
            self._write(path, [entry.to_dict() for entry in items])

    def _load(self, path: Path, factory: Callable[[Dict[str, Any]], T]) -> List[T]:
        outcome, items, error = self._read(path, factory)
        if outcome is ReadOutcome.CORRUPT:
            self._report_corrupt(path, error or "unknown error")
        return items

    @staticmethod
    def _read(
        path: Path,
        factory: Callable[[Dict[str, Any]], T],
    ) -> Tuple[ReadOutcome, List[T], Optional[str]]:
        try:
            text = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return ReadOutcome.EMPTY, [], None
        except UnicodeDecodeError as e:
            return ReadOutcome.CORRUPT, [], f"not valid UTF-8: {e}"

        if not text.strip():
            return ReadOutcome.EMPTY, [], None

        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            return ReadOutcome.CORRUPT, [], f"invalid JSON: {e}"

        if not isinstance(data, list):
            return ReadOutcome.CORRUPT, [], "top-level value is not an array"

        try:
            items = [factory(record) for record in data]
        except (KeyError, TypeError, InvalidValueObjectException) as e:
            return ReadOutcome.CORRUPT, [], f"invalid record: {e!r}"

        return ReadOutcome.OK, items, None

    def _report_corrupt(self, path: Path, error: str) -> None:
        self._logger.warning(f"Corrupt storage file {path}, treating as empty: {error}")
        if self._on_corrupt is not None:
            self._on_corrupt(path, error)
        if self._strict:
            raise PersistenceReadException(str(path), error)

    @staticmethod
    def _write(path: Path, records: List[Dict[str, Any]]) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        try:
            mode = stat.S_IMODE(path.stat().st_mode)
        except FileNotFoundError:
            mode = DEFAULT_FILE_MODE

        fd, tmp_name = tempfile.mkstemp(
            dir=path.parent, prefix=f".{path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(records, f, ensure_ascii=False, indent=2)
                f.flush()
                os.fsync(f.fileno())
            os.chmod(tmp_name, mode)
            os.replace(tmp_name, path)
        except BaseException:
            with suppress(FileNotFoundError):
                os.unlink(tmp_name)
            raise

    def _ensure_open(self) -> None:
        if self._closed:
            raise StorageClosedException()
