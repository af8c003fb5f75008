import json
import logging
from abc import ABC, abstractmethod

from domain.errors import StorageError
from domain.records import LedgerKind, Record
from storage.base import SecureStore

logger = logging.getLogger(__name__)

INCOMES_KEY = "incomes_v2"
EXPENSES_KEY = "expenses_v2"


class LedgerRepository(ABC):
    @abstractmethod
    def load(self, kind: LedgerKind) -> list[Record]:
        """Load the whole ledger of one kind in entry order."""
        pass

    @abstractmethod
    def save(self, kind: LedgerKind, records: list[Record]) -> None:
        """Replace the stored ledger of one kind."""
        pass

    @abstractmethod
    def delete_all(self) -> None:
        """Erase both ledgers."""
        pass


class SecureStoreLedgerRepository(LedgerRepository):
    """Ledgers stored as JSON arrays under two fixed secure store keys."""

    def __init__(
        self,
        store: SecureStore,
        incomes_key: str = INCOMES_KEY,
        expenses_key: str = EXPENSES_KEY,
    ) -> None:
        if incomes_key == expenses_key:
            raise ValueError("Income and expense ledgers need distinct keys")
        self._store = store
        self._keys = {LedgerKind.INCOME: incomes_key, LedgerKind.EXPENSE: expenses_key}

    def key_for(self, kind: LedgerKind) -> str:
        return self._keys[LedgerKind(kind)]

    def load(self, kind: LedgerKind) -> list[Record]:
        key = self.key_for(kind)
        raw = self._store.get_item(key)
        if not raw:
            return []
        try:
            payload = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise StorageError(f"Stored ledger '{key}' is not valid JSON: {exc}") from exc
        if not isinstance(payload, list):
            raise StorageError(
                f"Stored ledger '{key}' must be a JSON array, got {type(payload).__name__}"
            )
        try:
            return [Record.from_dict(item) for item in payload]
        except ValueError as exc:
            raise StorageError(f"Stored ledger '{key}' has an invalid record: {exc}") from exc

    def save(self, kind: LedgerKind, records: list[Record]) -> None:
        key = self.key_for(kind)
        payload = json.dumps([record.to_dict() for record in records], ensure_ascii=False)
        self._store.set_item(key, payload)
        logger.debug("Ledger '%s' saved with %s records", key, len(records))

    def delete_all(self) -> None:
        for key in self._keys.values():
            self._store.delete_item(key)
        logger.debug("Ledger keys deleted: %s", ", ".join(self._keys.values()))
