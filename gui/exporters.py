import logging
import os

from domain.reports import LedgerReport

logger = logging.getLogger(__name__)

EXPORT_FORMATS = {
    "CSV": {"ext": ".csv", "desc": "CSV"},
    "XLSX": {"ext": ".xlsx", "desc": "Excel"},
    "PDF": {"ext": ".pdf", "desc": "PDF"},
}


def export_report(report: LedgerReport, filepath: str, fmt: str) -> None:
    fmt = (fmt or "csv").lower()
    os.makedirs(os.path.dirname(filepath), exist_ok=True) if os.path.dirname(
        filepath
    ) else None
    try:
        if fmt == "csv":
            from utils.csv_utils import report_to_csv

            report_to_csv(report, filepath)
        elif fmt in ("xlsx", "xls"):
            from utils.excel_utils import report_to_xlsx

            report_to_xlsx(report, filepath)
        elif fmt == "pdf":
            from utils.pdf_utils import report_to_pdf

            report_to_pdf(report, filepath)
        else:
            raise ValueError(f"Unsupported export format: {fmt}")
    except Exception:
        logger.exception("Failed to export report to %s (%s)", filepath, fmt)
        raise
