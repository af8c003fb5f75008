import threading
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

_ID_LOCK = threading.Lock()
_last_id = 0


class LedgerKind(str, Enum):
    INCOME = "income"
    EXPENSE = "expense"


def _next_record_id() -> str:
    """Epoch milliseconds as text, bumped when two records share a millisecond."""
    global _last_id
    with _ID_LOCK:
        candidate = int(time.time() * 1000)
        if candidate <= _last_id:
            candidate = _last_id + 1
        _last_id = candidate
        return str(candidate)


@dataclass(frozen=True)
class Record:
    amount: float
    category: str
    id: str = field(default_factory=_next_record_id)

    def __post_init__(self) -> None:
        object.__setattr__(self, "id", str(self.id))
        object.__setattr__(self, "amount", float(self.amount))
        if not isinstance(self.category, str):
            raise ValueError("category must be a string")

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "amount": self.amount, "category": self.category}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Record":
        if not isinstance(data, dict):
            raise ValueError(f"Record payload must be an object, got {type(data).__name__}")
        try:
            amount = float(data["amount"])
        except KeyError as exc:
            raise ValueError("Record payload is missing 'amount'") from exc
        except (TypeError, ValueError) as exc:
            raise ValueError(f"Invalid amount in record: {data.get('amount')!r}") from exc
        category = data.get("category")
        if not isinstance(category, str):
            raise ValueError(f"Invalid category in record: {category!r}")
        record_id = data.get("id")
        if record_id is None or str(record_id) == "":
            return cls(amount=amount, category=category)
        return cls(amount=amount, category=category, id=str(record_id))
