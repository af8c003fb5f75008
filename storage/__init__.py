from .base import SecureStore
from .json_storage import JsonFileSecureStore
from .memory_storage import InMemorySecureStore

__all__ = ["SecureStore", "JsonFileSecureStore", "InMemorySecureStore"]
