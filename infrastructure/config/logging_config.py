"""日志配置

使用标准 logging，根据 Settings 中的 log_level / log_file 配置根日志记录器。
"""

import logging
from pathlib import Path
from typing import Optional

from infrastructure.config.settings import Settings

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def configure_logging(settings: Settings, logger: Optional[logging.Logger] = None) -> logging.Logger:
    """
    配置日志

    总是输出到标准错误；设置了 log_file 时同时写入文件。

    Args:
        settings: 应用配置
        logger: 要配置的日志记录器，默认根日志记录器

    Returns:
        配置后的日志记录器
    """
    target = logger or logging.getLogger()
    target.setLevel(settings.log_level.upper())

    for handler in list(target.handlers):
        target.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT)

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(formatter)
    target.addHandler(stream_handler)

    if settings.log_file:
        log_path = Path(settings.log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        target.addHandler(file_handler)

    return target
