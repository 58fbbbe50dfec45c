"""领域异常定义

所有领域异常都继承自 DomainException，携带机器可读的 code 和人类可读的 message，
应用层处理器据此生成结果对象，接口层再映射为 HTTP 响应。
"""

from typing import Any


class DomainException(Exception):
    """
    领域异常基类

    Attributes:
        code: 错误代码
        message: 错误描述
    """

    code: str = "DOMAIN_ERROR"

    def __init__(self, message: str, code: str | None = None):
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code

    def __str__(self) -> str:
        return self.message


class InvalidValueObjectException(DomainException):
    """值对象/实体字段无效"""

    code = "INVALID_VALUE"

    def __init__(self, value_object_type: str, value: Any, reason: str):
        self.value_object_type = value_object_type
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid {value_object_type}: {reason}")


class InvalidOperationException(DomainException):
    """操作在当前状态下不允许"""

    code = "INVALID_OPERATION"

    def __init__(self, operation: str, reason: str):
        self.operation = operation
        self.reason = reason
        super().__init__(f"Cannot {operation}: {reason}")


class DuplicateEmailException(DomainException):
    """邮箱地址已被注册"""

    code = "DUPLICATE_EMAIL"

    def __init__(self, email: str):
        self.email = email
        super().__init__("Email already taken")


class SenderNotFoundException(DomainException):
    """发件人未注册"""

    code = "SENDER_NOT_FOUND"

    def __init__(self, email: str):
        self.email = email
        super().__init__("Sender not found")


class ReceiverNotFoundException(DomainException):
    """收件人未注册"""

    code = "RECEIVER_NOT_FOUND"

    def __init__(self, email: str):
        self.email = email
        super().__init__("Receiver not found")


class InvalidMessageFormatException(DomainException):
    """邮件文本无法解析"""

    code = "INVALID_MESSAGE_FORMAT"

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Invalid message format: {reason}")


class PersistenceReadException(DomainException):
    """
    持久化文件内容损坏

    仅在严格模式下抛出；默认模式下损坏的文件被视为空集合。
    """

    code = "PERSISTENCE_READ_ERROR"

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to read {path}: {reason}")


class StorageClosedException(InvalidOperationException):
    """存储已关闭"""

    code = "STORAGE_CLOSED"

    def __init__(self):
        super().__init__(operation="access storage", reason="storage is closed")
