from __future__ import annotations

import logging

from backup import create_backup
from config import BACKUP_ON_START, EXPENSES_KEY, INCOMES_KEY, STORE_PATH
from infrastructure.repositories import LedgerRepository, SecureStoreLedgerRepository
from storage.json_storage import JsonFileSecureStore

logger = logging.getLogger(__name__)


def bootstrap_repository(
    store_path: str | None = None, *, backup: bool = BACKUP_ON_START
) -> LedgerRepository:
    path = store_path or STORE_PATH
    logger.info("Secure store selected: %s", path)
    if backup:
        try:
            create_backup(path)
        except OSError:
            logger.exception("Failed to back up secure store %s", path)
    return SecureStoreLedgerRepository(
        JsonFileSecureStore(path),
        incomes_key=INCOMES_KEY,
        expenses_key=EXPENSES_KEY,
    )
