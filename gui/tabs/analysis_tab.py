from __future__ import annotations

import tkinter as tk
from collections.abc import Callable
from dataclasses import dataclass
from tkinter import ttk


@dataclass(slots=True)
class AnalysisTabBindings:
    bar_canvas: tk.Canvas
    income_var: tk.StringVar
    expense_var: tk.StringVar
    balance_var: tk.StringVar
    balance_label: tk.Label


def build_analysis_tab(
    parent: tk.Frame | ttk.Frame,
    *,
    on_clear_all: Callable[[], None],
    on_export: Callable[[], None],
    on_redraw: Callable[[], None],
    after: Callable[[int, Callable[[], None]], str],
    after_cancel: Callable[[str], None],
) -> AnalysisTabBindings:
    parent.grid_columnconfigure(0, weight=1)
    parent.grid_rowconfigure(1, weight=1)

    ttk.Label(parent, text="Analysis", font=("Segoe UI", 16, "bold")).grid(
        row=0, column=0, sticky="w", padx=10, pady=(10, 0)
    )

    chart_frame = ttk.LabelFrame(parent, text="Income vs expenses")
    chart_frame.grid(row=1, column=0, sticky="nsew", padx=10, pady=10)
    bar_canvas = tk.Canvas(chart_frame, height=220, bg="white", highlightthickness=0)
    bar_canvas.pack(fill=tk.BOTH, expand=True, padx=10, pady=10)

    totals_frame = tk.Frame(parent)
    totals_frame.grid(row=2, column=0, sticky="ew", padx=10)

    income_var = tk.StringVar()
    expense_var = tk.StringVar()
    balance_var = tk.StringVar()
    ttk.Label(totals_frame, textvariable=income_var, font=("Segoe UI", 12)).pack(anchor="w")
    ttk.Label(totals_frame, textvariable=expense_var, font=("Segoe UI", 12)).pack(anchor="w")
    balance_label = tk.Label(totals_frame, textvariable=balance_var, font=("Segoe UI", 12, "bold"))
    balance_label.pack(anchor="w", pady=(0, 10))

    actions = tk.Frame(parent)
    actions.grid(row=3, column=0, sticky="w", padx=10, pady=(0, 10))
    ttk.Button(actions, text="Export report", command=on_export).pack(side=tk.LEFT, padx=(0, 8))
    tk.Button(actions, text="Clear all data", fg="red", command=on_clear_all).pack(side=tk.LEFT)

    redraw_job: str | None = None

    def _schedule_redraw(_event: object | None = None) -> None:
        nonlocal redraw_job
        if redraw_job is not None:
            after_cancel(redraw_job)
        redraw_job = after(120, on_redraw)

    bar_canvas.bind("<Configure>", _schedule_redraw)

    return AnalysisTabBindings(
        bar_canvas=bar_canvas,
        income_var=income_var,
        expense_var=expense_var,
        balance_var=balance_var,
        balance_label=balance_label,
    )
