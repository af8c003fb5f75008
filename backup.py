from __future__ import annotations

import logging
import shutil
from datetime import datetime
from pathlib import Path

logger = logging.getLogger(__name__)


def create_backup(store_path: str) -> str | None:
    """Copy the store file into a sibling ``backups`` folder; None when there is nothing to copy."""
    source = Path(store_path)
    if not source.exists():
        return None
    stamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    backup_dir = source.parent / "backups"
    backup_dir.mkdir(exist_ok=True)
    backup_path = backup_dir / f"{source.stem}_backup_{stamp}{source.suffix}"
    shutil.copy2(source, backup_path)
    logger.info("Secure store backup created: %s", backup_path)
    return str(backup_path)
