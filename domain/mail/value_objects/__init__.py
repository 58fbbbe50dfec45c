"""邮件值对象模块"""

from domain.mail.value_objects.read_outcome import ReadOutcome

__all__ = ["ReadOutcome"]
