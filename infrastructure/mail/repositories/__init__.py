"""持久化后端实现"""

from infrastructure.mail.repositories.in_memory_persistence_backend import (
    InMemoryPersistenceBackend,
)
from infrastructure.mail.repositories.json_file_persistence_backend import (
    JsonFilePersistenceBackend,
)

__all__ = ["InMemoryPersistenceBackend", "JsonFilePersistenceBackend"]
