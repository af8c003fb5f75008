from __future__ import annotations

import json
import logging
import os
import tempfile
import threading

from domain.errors import StorageError

from .base import SecureStore, validate_key

logger = logging.getLogger(__name__)


class JsonFileSecureStore(SecureStore):
    """Secure store kept as one owner-readable JSON object file."""

    _path_locks: dict[str, threading.RLock] = {}
    _path_locks_guard = threading.Lock()

    def __init__(self, file_path: str = "secure_store.json") -> None:
        self._file_path = file_path
        abs_path = os.path.abspath(file_path)
        with self._path_locks_guard:
            if abs_path not in self._path_locks:
                self._path_locks[abs_path] = threading.RLock()
            self._lock = self._path_locks[abs_path]

    @property
    def file_path(self) -> str:
        return self._file_path

    def get_item(self, key: str) -> str | None:
        validate_key(key)
        with self._lock:
            return self._load_data().get(key)

    def set_item(self, key: str, value: str) -> None:
        validate_key(key)
        if not isinstance(value, str):
            raise TypeError(f"Store values must be text, got {type(value).__name__}")
        with self._lock:
            data = self._load_data()
            data[key] = value
            self._save_data(data)

    def delete_item(self, key: str) -> None:
        validate_key(key)
        with self._lock:
            data = self._load_data()
            if key not in data:
                return
            del data[key]
            self._save_data(data)

    def _load_data(self) -> dict[str, str]:
        try:
            with open(self._file_path, encoding="utf-8") as f:
                raw = f.read()
        except FileNotFoundError:
            return {}
        except OSError as exc:
            raise StorageError(f"Cannot read secure store {self._file_path}: {exc}") from exc
        if not raw.strip():
            return {}
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise StorageError(f"Secure store {self._file_path} is corrupted: {exc}") from exc
        if not isinstance(data, dict) or not all(
            isinstance(value, str) for value in data.values()
        ):
            raise StorageError(f"Secure store {self._file_path} has an unexpected layout")
        return data

    def _save_data(self, data: dict[str, str]) -> None:
        directory = os.path.dirname(self._file_path) or "."
        try:
            os.makedirs(directory, exist_ok=True)
            # mkstemp creates the file with 0o600, os.replace keeps that mode.
            fd, tmp_path = tempfile.mkstemp(prefix=".store_", suffix=".json", dir=directory)
        except OSError as exc:
            raise StorageError(f"Cannot write secure store {self._file_path}: {exc}") from exc
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
            os.replace(tmp_path, self._file_path)
        except OSError as exc:
            raise StorageError(f"Cannot write secure store {self._file_path}: {exc}") from exc
        finally:
            try:
                if os.path.exists(tmp_path):
                    os.remove(tmp_path)
            except OSError:
                logger.exception("Failed to cleanup temporary file during save: %s", tmp_path)
