import csv
import logging

from domain.records import LedgerKind
from domain.reports import KIND_LABELS, LedgerReport, format_money

logger = logging.getLogger(__name__)

SUMMARY_HEADERS = ["Type", "Category", "Amount"]
RECORD_HEADERS = ["id", "type", "category", "amount"]


def report_to_csv(report: LedgerReport, filepath: str) -> None:
    """Export the category summary followed by every entry. Read-only format."""
    with open(filepath, "w", newline="", encoding="utf-8") as csvfile:
        writer = csv.writer(csvfile)
        writer.writerow(SUMMARY_HEADERS)
        for row in report.summary_rows():
            writer.writerow(row)

        writer.writerow([])
        writer.writerow(RECORD_HEADERS)
        for kind in (LedgerKind.INCOME, LedgerKind.EXPENSE):
            for record in report.records(kind):
                writer.writerow(
                    [record.id, KIND_LABELS[kind].lower(), record.category, format_money(record.amount)]
                )
    logger.info("Report exported to CSV: %s", filepath)
