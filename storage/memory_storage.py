from __future__ import annotations

from .base import SecureStore, validate_key


class InMemorySecureStore(SecureStore):
    """Process-local store, nothing survives the instance."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> str | None:
        return self._data.get(validate_key(key))

    def set_item(self, key: str, value: str) -> None:
        if not isinstance(value, str):
            raise TypeError(f"Store values must be text, got {type(value).__name__}")
        self._data[validate_key(key)] = value

    def delete_item(self, key: str) -> None:
        self._data.pop(validate_key(key), None)

    def keys(self) -> list[str]:
        return list(self._data)
