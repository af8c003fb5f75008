import logging
import os

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont
from reportlab.platypus import SimpleDocTemplate, Spacer, Table, TableStyle

from domain.records import LedgerKind
from domain.reports import KIND_LABELS, LedgerReport, format_money
from utils.csv_utils import SUMMARY_HEADERS

logger = logging.getLogger(__name__)

FONT_CANDIDATES = [
    "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf",
    "/Library/Fonts/Arial Unicode.ttf",
    "DejaVuSans.ttf",
]


def _register_unicode_font() -> str:
    """Register a TTF font with Cyrillic and currency glyphs and return its name.

    Falls back to built-in Helvetica, which cannot render those glyphs.
    """
    candidates = list(FONT_CANDIDATES)
    windir = os.environ.get("WINDIR") or os.environ.get("SystemRoot")
    if windir:
        fonts_dir = os.path.join(windir, "Fonts")
        candidates.append(os.path.join(fonts_dir, "DejaVuSans.ttf"))
        candidates.append(os.path.join(fonts_dir, "Arial.ttf"))

    for path in candidates:
        if not os.path.exists(path):
            continue
        name = os.path.splitext(os.path.basename(path))[0].replace(" ", "")
        try:
            pdfmetrics.registerFont(TTFont(name, path))
        except Exception:
            logger.debug("Failed to register font %s at %s", name, path, exc_info=True)
            continue
        logger.debug("Registered font %s from %s", name, path)
        return name

    logger.warning("No suitable TTF font found; falling back to Helvetica")
    return "Helvetica"


def _table(data: list[list[str]], col_widths: list[float], font_name: str) -> Table:
    table = Table(data, colWidths=col_widths, repeatRows=1)
    table.setStyle(
        TableStyle(
            [
                ("FONT", (0, 0), (-1, -1), font_name),
                ("FONTSIZE", (0, 0), (-1, -1), 10),
                ("GRID", (0, 0), (-1, -1), 0.5, colors.grey),
                ("BACKGROUND", (0, 0), (-1, 0), colors.lightgrey),
                ("ALIGN", (-1, 0), (-1, -1), "RIGHT"),
                ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
                ("LEFTPADDING", (0, 0), (-1, -1), 6),
                ("RIGHTPADDING", (0, 0), (-1, -1), 6),
            ]
        )
    )
    return table


def report_to_pdf(report: LedgerReport, filepath: str) -> None:
    """Export the category summary and the entry list as PDF tables."""
    summary_data = [list(SUMMARY_HEADERS)]
    summary_data.extend(list(row) for row in report.summary_rows())

    entries_data = [["Type", "Category", "Amount"]]
    for kind in (LedgerKind.INCOME, LedgerKind.EXPENSE):
        for record in report.records(kind):
            entries_data.append([KIND_LABELS[kind], record.category, format_money(record.amount)])

    os.makedirs(os.path.dirname(filepath), exist_ok=True) if os.path.dirname(
        filepath
    ) else None

    doc = SimpleDocTemplate(
        filepath,
        pagesize=A4,
        leftMargin=30,
        rightMargin=30,
        topMargin=30,
        bottomMargin=30,
    )
    available_width = A4[0] - 60
    col_widths = [
        available_width * 0.25,
        available_width * 0.50,
        available_width * 0.25,
    ]

    font_name = _register_unicode_font()
    elems = [_table(summary_data, col_widths, font_name)]
    if len(entries_data) > 1:
        elems.append(Spacer(1, 14))
        elems.append(_table(entries_data, col_widths, font_name))
    doc.build(elems)
    logger.info("Report exported to PDF: %s", filepath)
