from .key_value_store import InMemoryKeyValueStore, SqlAlchemyKeyValueStore
from .session_repository import KeyValueSessionRepository

__all__ = [
    "InMemoryKeyValueStore",
    "KeyValueSessionRepository",
    "SqlAlchemyKeyValueStore",
]
