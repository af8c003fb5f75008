import logging
import math
import os

from openpyxl import Workbook

from domain.records import LedgerKind
from domain.reports import LedgerReport, format_number
from utils.csv_utils import SUMMARY_HEADERS

logger = logging.getLogger(__name__)

SHEET_TITLES = {LedgerKind.INCOME: "Incomes", LedgerKind.EXPENSE: "Expenses"}


def report_to_xlsx(report: LedgerReport, filepath: str) -> None:
    """Export summary plus one sheet per ledger. Read-only format."""
    wb = Workbook()
    ws = wb.active
    if ws is not None:
        ws.title = "Summary"
        ws.append(SUMMARY_HEADERS)
        for row in report.summary_rows():
            ws.append(list(row))

    for kind in (LedgerKind.INCOME, LedgerKind.EXPENSE):
        sheet = wb.create_sheet(SHEET_TITLES[kind])
        sheet.append(["ID", "Category", "Amount"])
        for record in report.records(kind):
            # Excel has no NaN/inf cells
            amount = record.amount if math.isfinite(record.amount) else format_number(record.amount)
            sheet.append([record.id, record.category, amount])

    os.makedirs(os.path.dirname(filepath), exist_ok=True) if os.path.dirname(
        filepath
    ) else None
    wb.save(filepath)
    wb.close()
    logger.info("Report exported to XLSX: %s", filepath)
