import math
from collections.abc import Iterable
from decimal import Decimal

from prettytable import PrettyTable

from utils.charting import group_totals, net_balance, sum_total

from .records import LedgerKind, Record

KIND_LABELS = {LedgerKind.INCOME: "Income", LedgerKind.EXPENSE: "Expense"}


def format_money(value: float) -> str:
    """Two-decimal text; NaN and infinities keep their readable names."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    return f"{value:.2f}"


def format_number(value: float) -> str:
    """Shortest text for an amount, printed the way JavaScript prints numbers.

    Plain notation from 1e-6 up to 1e21, exponent form (``1e+21``, ``1.5e-7``)
    outside it.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    value = float(value)
    if value == 0:
        return "0"
    if 1e-6 <= abs(value) < 1e21:
        text = format(Decimal(repr(value)), "f")
        return text[:-2] if text.endswith(".0") else text
    mantissa, _, exponent = repr(value).partition("e")
    mantissa = mantissa[:-2] if mantissa.endswith(".0") else mantissa
    power = int(exponent)
    sign = "+" if power >= 0 else "-"
    return f"{mantissa}e{sign}{abs(power)}"


class LedgerReport:
    def __init__(self, incomes: Iterable[Record], expenses: Iterable[Record]):
        self._records = {
            LedgerKind.INCOME: list(incomes),
            LedgerKind.EXPENSE: list(expenses),
        }

    def records(self, kind: LedgerKind) -> list[Record]:
        return list(self._records[LedgerKind(kind)])

    def category_totals(self, kind: LedgerKind) -> dict[str, float]:
        return group_totals(self._records[LedgerKind(kind)])

    def total_income(self) -> float:
        return sum_total(self._records[LedgerKind.INCOME])

    def total_expense(self) -> float:
        return sum_total(self._records[LedgerKind.EXPENSE])

    def balance(self) -> float:
        return net_balance(self.total_income(), self.total_expense())

    def is_empty(self) -> bool:
        return not any(self._records.values())

    def summary_rows(self) -> list[tuple[str, str, str]]:
        """Rows of (section, category, amount) shared by the exporters."""
        rows: list[tuple[str, str, str]] = []
        for kind in (LedgerKind.INCOME, LedgerKind.EXPENSE):
            for category, total in self.category_totals(kind).items():
                rows.append((KIND_LABELS[kind], category, format_money(total)))
        rows.append(("TOTAL", "Income", format_money(self.total_income())))
        rows.append(("TOTAL", "Expense", format_money(self.total_expense())))
        rows.append(("BALANCE", "", format_money(self.balance())))
        return rows

    def as_table(self) -> str:
        table = PrettyTable()
        table.field_names = ["Type", "Category", "Amount"]
        table.align["Category"] = "l"
        table.align["Amount"] = "r"

        for kind in (LedgerKind.INCOME, LedgerKind.EXPENSE):
            totals = self.category_totals(kind)
            items = list(totals.items())
            for index, (category, total) in enumerate(items):
                table.add_row(
                    [KIND_LABELS[kind], category, format_money(total)],
                    divider=index == len(items) - 1,
                )

        table.add_row(["TOTAL", "Income", format_money(self.total_income())])
        table.add_row(["TOTAL", "Expense", format_money(self.total_expense())], divider=True)
        table.add_row(["BALANCE", "", format_money(self.balance())])
        return str(table)
