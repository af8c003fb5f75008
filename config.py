from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent

STORE_PATH = str(PROJECT_ROOT / "secure_store.json")
INCOMES_KEY = "incomes_v2"
EXPENSES_KEY = "expenses_v2"

CURRENCY_SYMBOL = "₽"
CHART_PALETTE = ("#00FF00", "#0000FF", "#FF6347", "#FFD700", "#8A2BE2")

# Reject NaN, infinite and negative amounts on entry. Off keeps the historical behaviour.
STRICT_AMOUNTS = False
BACKUP_ON_START = True
LOG_LEVEL = "INFO"
