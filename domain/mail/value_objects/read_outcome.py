"""持久化读取结果值对象"""

from enum import Enum


class ReadOutcome(str, Enum):
    """集合文件的读取结果

    Attributes:
        OK: 读取成功
        EMPTY: 文件不存在或内容为空，视为尚未初始化
        CORRUPT: 文件内容无法解析
    """

    OK = "ok"
    EMPTY = "empty"
    CORRUPT = "corrupt"
