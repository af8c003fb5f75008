import logging
from dataclasses import dataclass

from domain.records import LedgerKind, Record
from domain.validation import ensure_valid_amount, is_submittable, parse_amount
from infrastructure.repositories import LedgerRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LedgerState:
    incomes: tuple[Record, ...] = ()
    expenses: tuple[Record, ...] = ()

    @classmethod
    def empty(cls) -> "LedgerState":
        return cls()

    def ledger(self, kind: LedgerKind) -> tuple[Record, ...]:
        if LedgerKind(kind) is LedgerKind.INCOME:
            return self.incomes
        return self.expenses

    def with_record(self, kind: LedgerKind, record: Record) -> "LedgerState":
        if LedgerKind(kind) is LedgerKind.INCOME:
            return LedgerState(incomes=self.incomes + (record,), expenses=self.expenses)
        return LedgerState(incomes=self.incomes, expenses=self.expenses + (record,))


class LoadLedgers:
    def __init__(self, repository: LedgerRepository):
        self._repository = repository

    def execute(self) -> LedgerState:
        """Read both ledgers; any failure yields empty ledgers."""
        try:
            incomes = self._repository.load(LedgerKind.INCOME)
            expenses = self._repository.load(LedgerKind.EXPENSE)
        except Exception:
            logger.exception("Failed to load ledgers, starting with empty data")
            return LedgerState.empty()
        logger.info("Ledgers loaded incomes=%s expenses=%s", len(incomes), len(expenses))
        return LedgerState(incomes=tuple(incomes), expenses=tuple(expenses))


class _CreateRecord:
    kind: LedgerKind

    def __init__(self, repository: LedgerRepository, strict: bool = False):
        self._repository = repository
        self._strict = strict

    def execute(
        self, state: LedgerState, *, amount: str, category: str
    ) -> tuple[LedgerState, Record | None]:
        """Persist a new record and return the updated state.

        Empty amount or category leaves the state untouched and returns no record.
        The state only changes after the ledger write succeeded.
        """
        if not is_submittable(amount, category):
            logger.debug("%s submission ignored: empty field", self.kind.value)
            return state, None
        value = parse_amount(amount)
        if self._strict:
            ensure_valid_amount(value)
        record = Record(amount=value, category=category)
        new_state = state.with_record(self.kind, record)
        self._repository.save(self.kind, list(new_state.ledger(self.kind)))
        logger.info(
            "%s record created id=%s amount=%s category=%s",
            self.kind.value.capitalize(),
            record.id,
            record.amount,
            record.category,
        )
        return new_state, record


class CreateIncome(_CreateRecord):
    kind = LedgerKind.INCOME


class CreateExpense(_CreateRecord):
    kind = LedgerKind.EXPENSE


class ClearAllData:
    def __init__(self, repository: LedgerRepository):
        self._repository = repository

    def execute(self) -> LedgerState:
        self._repository.delete_all()
        logger.info("All ledger data cleared")
        return LedgerState.empty()
