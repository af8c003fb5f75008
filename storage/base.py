from __future__ import annotations

import re
from typing import Protocol

_KEY_PATTERN = re.compile(r"[A-Za-z0-9._-]+")


def validate_key(key: str) -> str:
    if not isinstance(key, str) or not _KEY_PATTERN.fullmatch(key):
        raise ValueError(
            f"Invalid store key {key!r}: use letters, digits, '.', '-' or '_'"
        )
    return key


class SecureStore(Protocol):
    """Key-value text storage contract for the ledger repository.

    Every operation may raise ``StorageError``. Deleting an absent key is a no-op.
    """

    def get_item(self, key: str) -> str | None:
        ...

    def set_item(self, key: str, value: str) -> None:
        ...

    def delete_item(self, key: str) -> None:
        ...
