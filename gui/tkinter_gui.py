import logging
import tkinter as tk
from tkinter import filedialog, messagebox, ttk

from domain.errors import StorageError
from domain.records import LedgerKind
from gui.charts import draw_bar_chart, draw_pie
from gui.controllers import FinanceController
from gui.exporters import EXPORT_FORMATS, export_report
from gui.tabs import build_analysis_tab, build_ledger_tab

logger = logging.getLogger(__name__)

APP_TITLE = "Finance Tracker"


class FinanceTrackerApp(tk.Tk):
    def __init__(self, controller: FinanceController, currency_symbol: str = "₽") -> None:
        super().__init__()
        self.title(APP_TITLE)
        self.geometry("1000x700")
        self.minsize(800, 560)

        self.controller = controller
        self.currency_symbol = currency_symbol

        notebook = ttk.Notebook(self)
        notebook.pack(fill=tk.BOTH, expand=True)

        self.tab_incomes = ttk.Frame(notebook)
        self.tab_expenses = ttk.Frame(notebook)
        self.tab_analysis = ttk.Frame(notebook)
        notebook.add(self.tab_incomes, text="Incomes")
        notebook.add(self.tab_expenses, text="Expenses")
        notebook.add(self.tab_analysis, text="Analysis")

        self.ledger_tabs = {
            LedgerKind.INCOME: build_ledger_tab(
                self.tab_incomes,
                title="Incomes",
                on_add=lambda amount, category: self._add(LedgerKind.INCOME, amount, category),
                on_redraw=self._refresh,
                after=self.after,
                after_cancel=self.after_cancel,
            ),
            LedgerKind.EXPENSE: build_ledger_tab(
                self.tab_expenses,
                title="Expenses",
                on_add=lambda amount, category: self._add(LedgerKind.EXPENSE, amount, category),
                on_redraw=self._refresh,
                after=self.after,
                after_cancel=self.after_cancel,
            ),
        }
        self.analysis_tab = build_analysis_tab(
            self.tab_analysis,
            on_clear_all=self._clear_all,
            on_export=self._export_report,
            on_redraw=self._refresh,
            after=self.after,
            after_cancel=self.after_cancel,
        )

        self.controller.load()
        self._refresh()

    def _add(self, kind: LedgerKind, amount: str, category: str) -> bool:
        """Return True when the entry was stored so the form can be reset."""
        try:
            if kind is LedgerKind.INCOME:
                record = self.controller.add_income(amount, category)
            else:
                record = self.controller.add_expense(amount, category)
        except StorageError as exc:
            logger.exception("Failed to save %s entry", kind.value)
            messagebox.showerror("Error", f"Entry was not saved: {exc}")
            return False
        except ValueError as exc:
            messagebox.showerror("Error", str(exc))
            return False
        if record is None:
            return False
        self._refresh()
        return True

    def _clear_all(self) -> None:
        try:
            self.controller.clear_all()
        except StorageError as exc:
            logger.exception("Failed to clear stored data")
            messagebox.showerror("Error", f"Data was not cleared: {exc}")
            self._refresh()
            return
        self._refresh()
        messagebox.showinfo("Info", "Data cleared")

    def _export_report(self) -> None:
        filetypes = [(spec["desc"], f"*{spec['ext']}") for spec in EXPORT_FORMATS.values()]
        filepath = filedialog.asksaveasfilename(
            title="Export report",
            defaultextension=".csv",
            filetypes=filetypes,
        )
        if not filepath:
            return
        fmt = next(
            (name for name, spec in EXPORT_FORMATS.items() if filepath.lower().endswith(spec["ext"])),
            "CSV",
        )
        try:
            export_report(self.controller.build_report(), filepath, fmt)
        except Exception as exc:
            messagebox.showerror("Error", f"Export failed: {exc}")
            return
        messagebox.showinfo("Success", f"Report exported to {filepath}")

    def _refresh(self) -> None:
        for kind, bindings in self.ledger_tabs.items():
            view = self.controller.ledger_view(kind)
            draw_pie(
                bindings.pie_canvas,
                bindings.legend_frame,
                view.segments,
                empty_text=view.empty_chart_text,
                currency_symbol=self.currency_symbol,
            )
            bindings.total_var.set(view.total_text)
            bindings.records_listbox.delete(0, tk.END)
            for item in view.items:
                bindings.records_listbox.insert(tk.END, item)
            bindings.empty_list_label.configure(text="" if view.items else view.empty_list_text)

        analysis = self.controller.analysis_view()
        draw_bar_chart(
            self.analysis_tab.bar_canvas,
            analysis.bars if analysis.has_data else (),
            empty_text=analysis.empty_text,
        )
        self.analysis_tab.income_var.set(analysis.income_text)
        self.analysis_tab.expense_var.set(analysis.expense_text)
        self.analysis_tab.balance_var.set(analysis.balance_text)
        self.analysis_tab.balance_label.configure(fg=analysis.balance_color)


def run(controller: FinanceController, currency_symbol: str = "₽") -> None:
    try:
        app = FinanceTrackerApp(controller, currency_symbol)
        app.mainloop()
    except KeyboardInterrupt:
        logger.info("Application closed by user")
