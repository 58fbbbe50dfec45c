"""随机数据初始化命令"""

import asyncio
import logging
import random
from dataclasses import dataclass
from typing import Optional, Tuple

from domain.common.exceptions import DuplicateEmailException
from domain.mail.entities.message import Message
from domain.mail.entities.user import User
from domain.mail.services.message_store import MessageStore
from domain.mail.services.user_directory import UserDirectory

FIRST_NAMES = (
    "Ivan", "Maria", "John", "Olga", "Bob", "Alice", "Petr", "Anna", "Dmitry", "Eva",
)
LAST_NAMES = (
    "Pupkin", "Ivanova", "Smith", "Petrova", "Brown", "Sokolov", "Miller", "Orlova",
)
DOMAINS = ("example.org", "mail.test", "hse.ru", "localhost")
SUBJECTS = (
    "Hello", "Meeting tomorrow", "Re: report", "Lunch?", "Weekly update", "Question",
)
BODIES = (
    "Hi!\nHow are you?\n",
    "Please see the attached notes.\n",
    "Let's meet at noon.\n",
    "Thanks for the update.\n",
    "Can we talk later today?\n",
)


@dataclass
class InitRandomCommand:
    """随机数据初始化命令

    Attributes:
        seed: 随机种子，None 表示不固定
        user_count: 尝试生成的用户数，None 使用处理器默认值
        message_count: 生成的邮件数，None 使用处理器默认值
    """

    seed: Optional[int] = None
    user_count: Optional[int] = None
    message_count: Optional[int] = None


@dataclass
class InitRandomResult:
    """命令执行结果

    Attributes:
        success: 是否成功
        users_created: 实际注册的用户数（邮箱冲突的会被跳过）
        messages_created: 实际写入的邮件数
        message: 结果消息
    """

    success: bool
    users_created: int = 0
    messages_created: int = 0
    message: str = ""


class InitRandomHandler:
    """
    随机数据初始化处理器

    相同的种子总是生成相同的用户和邮件。邮件只在已注册用户之间生成。
    """

    def __init__(
        self,
        directory: UserDirectory,
        store: MessageStore,
        default_user_count: int = 10,
        default_message_count: int = 20,
        logger: Optional[logging.Logger] = None,
    ):
        self._directory = directory
        self._store = store
        self._default_user_count = default_user_count
        self._default_message_count = default_message_count
        self._logger = logger or logging.getLogger(__name__)

    async def handle(self, command: InitRandomCommand) -> InitRandomResult:
        loop = asyncio.get_running_loop()
        users_created, messages_created = await loop.run_in_executor(
            None, self._populate, command
        )

        self._logger.info(
            f"Random data initialized: seed={command.seed}, "
            f"users={users_created}, messages={messages_created}"
        )
        return InitRandomResult(
            success=True,
            users_created=users_created,
            messages_created=messages_created,
            message="Random data initialized",
        )

    def _populate(self, command: InitRandomCommand) -> Tuple[int, int]:
        rng = random.Random(command.seed)

        user_count = self._pick(command.user_count, self._default_user_count)
        message_count = self._pick(command.message_count, self._default_message_count)

        users_created = 0
        for _ in range(user_count):
            user = self._random_user(rng)
            try:
                self._directory.register(user)
            except DuplicateEmailException:
                continue
            users_created += 1

        users = self._directory.list()
        if not users:
            return users_created, 0

        messages_created = 0
        for _ in range(message_count):
            sender = rng.choice(users)
            receiver = rng.choice(users)
            self._store.append(
                Message(
                    subject=rng.choice(SUBJECTS),
                    body=rng.choice(BODIES),
                    sender_id=sender.email,
                    receiver_id=receiver.email,
                )
            )
            messages_created += 1

        return users_created, messages_created

    @staticmethod
    def _pick(value: Optional[int], default: int) -> int:
        return default if value is None else max(0, value)

    @staticmethod
    def _random_user(rng: random.Random) -> User:
        first = rng.choice(FIRST_NAMES)
        last = rng.choice(LAST_NAMES)
        number = rng.randint(1, 999)
        domain = rng.choice(DOMAINS)
        return User(
            user_name=f"{first} {last}",
            email=f"{first.lower()}.{last.lower()}{number}@{domain}",
        )
