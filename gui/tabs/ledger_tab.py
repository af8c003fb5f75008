from __future__ import annotations

import tkinter as tk
from collections.abc import Callable
from dataclasses import dataclass
from tkinter import VERTICAL, Listbox, ttk


@dataclass(slots=True)
class LedgerTabBindings:
    amount_entry: ttk.Entry
    category_entry: ttk.Entry
    pie_canvas: tk.Canvas
    legend_frame: tk.Frame
    total_var: tk.StringVar
    records_listbox: Listbox
    empty_list_label: ttk.Label


def build_ledger_tab(
    parent: tk.Frame | ttk.Frame,
    *,
    title: str,
    on_add: Callable[[str, str], bool],
    on_redraw: Callable[[], None],
    after: Callable[[int, Callable[[], None]], str],
    after_cancel: Callable[[str], None],
) -> LedgerTabBindings:
    parent.grid_columnconfigure(0, weight=0)
    parent.grid_columnconfigure(1, weight=1)
    parent.grid_rowconfigure(1, weight=1)

    ttk.Label(parent, text=title, font=("Segoe UI", 16, "bold")).grid(
        row=0, column=0, columnspan=2, sticky="w", padx=10, pady=(10, 0)
    )

    left_frame = tk.Frame(parent)
    left_frame.grid(row=1, column=0, sticky="nsw", padx=10, pady=10)

    form_frame = ttk.LabelFrame(left_frame, text="Add entry")
    form_frame.grid(row=0, column=0, sticky="ew", pady=(0, 10))
    form_frame.grid_columnconfigure(1, weight=1)

    ttk.Label(form_frame, text="Amount:").grid(row=0, column=0, sticky="w", padx=6, pady=4)
    amount_entry = ttk.Entry(form_frame)
    amount_entry.grid(row=0, column=1, sticky="ew", padx=6, pady=4)

    ttk.Label(form_frame, text="Category:").grid(row=1, column=0, sticky="w", padx=6, pady=4)
    category_entry = ttk.Entry(form_frame)
    category_entry.grid(row=1, column=1, sticky="ew", padx=6, pady=4)

    def submit() -> None:
        if on_add(amount_entry.get(), category_entry.get()):
            amount_entry.delete(0, tk.END)
            category_entry.delete(0, tk.END)

    ttk.Button(form_frame, text="Add", command=submit).grid(
        row=2, column=0, columnspan=2, sticky="ew", padx=6, pady=(6, 8)
    )
    category_entry.bind("<Return>", lambda _event: submit())

    total_var = tk.StringVar()
    ttk.Label(left_frame, textvariable=total_var, font=("Segoe UI", 12)).grid(
        row=1, column=0, sticky="w", pady=(0, 10)
    )

    list_frame = ttk.LabelFrame(left_frame, text="Entries")
    list_frame.grid(row=2, column=0, sticky="nsew")
    left_frame.grid_rowconfigure(2, weight=1)
    list_frame.grid_rowconfigure(0, weight=1)
    list_frame.grid_columnconfigure(0, weight=1)

    records_listbox = Listbox(list_frame, height=14)
    records_listbox.grid(row=0, column=0, sticky="nsew", padx=6, pady=6)
    scrollbar = ttk.Scrollbar(list_frame, orient=VERTICAL, command=records_listbox.yview)
    scrollbar.grid(row=0, column=1, sticky="ns", pady=6)
    records_listbox.config(yscrollcommand=scrollbar.set)
    empty_list_label = ttk.Label(list_frame, foreground="#6b7280")
    empty_list_label.grid(row=1, column=0, columnspan=2, sticky="w", padx=6, pady=(0, 6))

    chart_frame = ttk.LabelFrame(parent, text="By category")
    chart_frame.grid(row=1, column=1, sticky="nsew", padx=10, pady=10)

    pie_canvas = tk.Canvas(chart_frame, height=240, bg="white", highlightthickness=0)
    pie_canvas.pack(fill=tk.BOTH, expand=True, padx=10, pady=(10, 6))
    legend_frame = tk.Frame(chart_frame)
    legend_frame.pack(fill=tk.X, padx=10, pady=(0, 10))

    redraw_job: str | None = None

    def _schedule_redraw(_event: object | None = None) -> None:
        nonlocal redraw_job
        if redraw_job is not None:
            after_cancel(redraw_job)
        redraw_job = after(120, on_redraw)

    pie_canvas.bind("<Configure>", _schedule_redraw)

    return LedgerTabBindings(
        amount_entry=amount_entry,
        category_entry=category_entry,
        pie_canvas=pie_canvas,
        legend_frame=legend_frame,
        total_var=total_var,
        records_listbox=records_listbox,
        empty_list_label=empty_list_label,
    )
