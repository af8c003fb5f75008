from __future__ import annotations

import math
import tkinter as tk
from collections.abc import Sequence
from tkinter import ttk

from utils.charting import ChartSegment, bar_value_range

PLACEHOLDER_COLOR = "#6b7280"
FONT = ("Segoe UI", 11)
SMALL_FONT = ("Segoe UI", 9)


def _drawable(value: float) -> bool:
    return math.isfinite(value) and value > 0


def draw_placeholder(canvas: tk.Canvas, text: str) -> None:
    canvas.delete("all")
    canvas.create_text(10, 10, anchor="nw", text=text, fill=PLACEHOLDER_COLOR, font=FONT)


def draw_pie(
    canvas: tk.Canvas,
    legend_frame: tk.Frame,
    segments: Sequence[ChartSegment],
    *,
    empty_text: str,
    currency_symbol: str,
) -> None:
    canvas.delete("all")
    for child in legend_frame.winfo_children():
        child.destroy()

    # Slices need positive finite values; the legend still lists every category.
    slices = [segment for segment in segments if _drawable(segment.value)]
    if not slices:
        draw_placeholder(canvas, empty_text)
    else:
        width = max(canvas.winfo_width(), 220)
        height = max(canvas.winfo_height(), 220)
        size = min(width, height) - 30
        x0 = (width - size) / 2
        y0 = (height - size) / 2

        total = sum(segment.value for segment in slices)
        start = 0.0
        for segment in slices:
            extent = (segment.value / total) * 360
            # A lone 360 degree arc renders as nothing in Tk
            if extent >= 360:
                canvas.create_oval(x0, y0, x0 + size, y0 + size, fill=segment.color, outline="white")
            else:
                canvas.create_arc(
                    x0,
                    y0,
                    x0 + size,
                    y0 + size,
                    start=start,
                    extent=extent,
                    fill=segment.color,
                    outline="white",
                )
            start += extent

    for segment in segments:
        legend_row = tk.Frame(legend_frame)
        legend_row.pack(anchor="w", pady=2)
        color_box = tk.Canvas(legend_row, width=12, height=12, highlightthickness=0)
        color_box.create_rectangle(0, 0, 12, 12, fill=segment.color, outline=segment.color)
        color_box.pack(side=tk.LEFT)
        ttk.Label(
            legend_row,
            text=f"{segment.label}: {segment.value:.2f} {currency_symbol}",
            font=SMALL_FONT,
        ).pack(side=tk.LEFT, padx=6)


def draw_bar_chart(canvas: tk.Canvas, bars: Sequence[ChartSegment], *, empty_text: str) -> None:
    canvas.delete("all")
    low, high = bar_value_range(bars)
    if high - low <= 0:
        draw_placeholder(canvas, empty_text)
        return

    width = max(canvas.winfo_width(), 300)
    height = max(canvas.winfo_height(), 220)
    padding = {"left": 40, "right": 20, "top": 20, "bottom": 30}
    chart_w = width - padding["left"] - padding["right"]
    chart_h = height - padding["top"] - padding["bottom"]
    scale = (chart_h - 10) / (high - low)
    # zero line; negative totals hang below it
    base_y = padding["top"] + 5 + high * scale

    canvas.create_line(padding["left"], base_y, padding["left"] + chart_w, base_y, fill="#d1d5db")

    group_width = chart_w / len(bars)
    bar_width = max(12, min(80, group_width * 0.5))
    for idx, segment in enumerate(bars):
        value = segment.value if math.isfinite(segment.value) else 0.0
        x_center = padding["left"] + group_width * idx + group_width / 2
        bar_top = base_y - value * scale
        canvas.create_rectangle(
            x_center - bar_width / 2,
            min(bar_top, base_y),
            x_center + bar_width / 2,
            max(bar_top, base_y),
            fill=segment.color,
            outline="",
        )
        canvas.create_text(
            x_center,
            bar_top - 8 if value >= 0 else bar_top + 8,
            text=f"{segment.value:.2f}",
            fill=PLACEHOLDER_COLOR,
            font=SMALL_FONT,
        )
        canvas.create_text(
            x_center,
            padding["top"] + chart_h + 12,
            text=segment.label,
            fill=PLACEHOLDER_COLOR,
            font=SMALL_FONT,
        )
