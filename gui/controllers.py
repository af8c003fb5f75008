from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from app.use_cases import ClearAllData, CreateExpense, CreateIncome, LedgerState, LoadLedgers
from domain.records import LedgerKind, Record
from domain.reports import LedgerReport, format_money, format_number
from infrastructure.repositories import LedgerRepository
from utils.charting import (
    DEFAULT_PALETTE,
    ChartSegment,
    group_totals,
    income_expense_bars,
    net_balance,
    sum_total,
    to_chart_series,
)

LEDGER_TITLES = {LedgerKind.INCOME: "Incomes", LedgerKind.EXPENSE: "Expenses"}
EMPTY_CHART_TEXT = "No data to display the chart"
EMPTY_ANALYSIS_TEXT = "No data for analysis"


@dataclass(frozen=True)
class LedgerView:
    kind: LedgerKind
    title: str
    segments: tuple[ChartSegment, ...]
    total: float
    total_text: str
    items: tuple[str, ...]
    empty_chart_text: str
    empty_list_text: str

    @property
    def has_chart(self) -> bool:
        return bool(self.segments)


@dataclass(frozen=True)
class AnalysisView:
    total_income: float
    total_expense: float
    balance: float
    balance_color: str
    bars: tuple[ChartSegment, ...]
    income_text: str
    expense_text: str
    balance_text: str
    empty_text: str = EMPTY_ANALYSIS_TEXT

    @property
    def has_data(self) -> bool:
        # NaN totals count as no data
        return any(value == value and value != 0 for value in (self.total_income, self.total_expense))


class FinanceController:
    """Owns the ledger state; views receive read-only snapshots."""

    def __init__(
        self,
        repository: LedgerRepository,
        *,
        palette: Sequence[str] = DEFAULT_PALETTE,
        currency_symbol: str = "₽",
        strict_amounts: bool = False,
    ) -> None:
        self._repository = repository
        self._palette = tuple(palette)
        self._currency_symbol = currency_symbol
        self._strict_amounts = strict_amounts
        self._state = LedgerState.empty()

    @property
    def state(self) -> LedgerState:
        return self._state

    def load(self) -> LedgerState:
        self._state = LoadLedgers(self._repository).execute()
        return self._state

    def add_income(self, amount: str, category: str) -> Record | None:
        self._state, record = CreateIncome(self._repository, self._strict_amounts).execute(
            self._state, amount=amount, category=category
        )
        return record

    def add_expense(self, amount: str, category: str) -> Record | None:
        self._state, record = CreateExpense(self._repository, self._strict_amounts).execute(
            self._state, amount=amount, category=category
        )
        return record

    def clear_all(self) -> None:
        """Empty both ledgers, then erase them from the store.

        The in-memory ledgers stay empty even when a delete fails part way.
        """
        self._state = LedgerState.empty()
        self._state = ClearAllData(self._repository).execute()

    def ledger_view(self, kind: LedgerKind) -> LedgerView:
        kind = LedgerKind(kind)
        records = self._state.ledger(kind)
        total = sum_total(records)
        title = LEDGER_TITLES[kind]
        return LedgerView(
            kind=kind,
            title=title,
            segments=tuple(to_chart_series(group_totals(records), self._palette)),
            total=total,
            total_text=f"Total {title.lower()}: {self._money(total)}",
            items=tuple(
                f"{record.category}: {format_number(record.amount)} {self._currency_symbol}"
                for record in records
            ),
            empty_chart_text=EMPTY_CHART_TEXT,
            empty_list_text=f"No {title.lower()} to display",
        )

    def analysis_view(self) -> AnalysisView:
        total_income = sum_total(self._state.incomes)
        total_expense = sum_total(self._state.expenses)
        balance = net_balance(total_income, total_expense)
        return AnalysisView(
            total_income=total_income,
            total_expense=total_expense,
            balance=balance,
            balance_color="green" if balance >= 0 else "red",
            bars=tuple(income_expense_bars(total_income, total_expense)),
            income_text=f"Incomes: {self._money(total_income)}",
            expense_text=f"Expenses: {self._money(total_expense)}",
            balance_text=f"Balance: {self._money(balance)}",
        )

    def build_report(self) -> LedgerReport:
        return LedgerReport(self._state.incomes, self._state.expenses)

    def _money(self, value: float) -> str:
        return f"{format_money(value)} {self._currency_symbol}"
