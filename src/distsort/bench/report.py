"""
Console reporting with rich.

Public API (stable):
    format_array_sample(values, max_elements=20) -> str
    print_before_after(console, title, before, after) -> None
    print_summary_table(console, summary, case_labels, algorithms) -> None
    run_demo(console) -> dict[str, list[int]]
"""

from __future__ import annotations

from typing import Dict, List, Sequence

import pandas as pd
from rich.console import Console
from rich.table import Table
from rich.text import Text

from distsort.algorithms import CORE_ALGORITHMS, DISPLAY_NAMES, get_algorithm
from distsort.datasets import DEMO_ARRAY

__all__ = ["format_array_sample", "print_before_after", "print_summary_table", "run_demo"]


def format_array_sample(values: Sequence[int], max_elements: int = 20) -> str:
    """
    Space-separated leading elements of `values`.

    Longer arrays are cut at `max_elements` with a "... (N total elements)" suffix.
    """
    shown = " ".join(str(int(v)) for v in values[:max_elements])
    if len(values) > max_elements:
        shown += f" ... ({len(values)} total elements)"
    return shown


def print_before_after(
    console: Console, title: str, before: Sequence[int], after: Sequence[int]
) -> None:
    console.print(f"[bold]{title}[/bold]")
    console.print(f"  Original: {format_array_sample(before)}")
    console.print(f"  Sorted  : {format_array_sample(after)}")
    console.print()


def _format_cell(median_ns: int, iqr_ns: int) -> str:
    return f"{median_ns / 1e6:.3f} ± {iqr_ns / 1e6:.3f}"


def print_summary_table(
    console: Console,
    summary: pd.DataFrame,
    case_labels: Sequence[str],
    algorithms: Sequence[str],
    title: str = "Benchmark Summary (median ± IQR in ms)",
) -> None:
    """One row per algorithm, one column per case; "—" where no sample exists."""
    table = Table(title=title)
    table.add_column("Algorithm", style="bold")
    for label in case_labels:
        table.add_column(Text(label), justify="right")

    for algo in algorithms:
        row = [DISPLAY_NAMES.get(algo, algo)]
        for label in case_labels:
            s = summary[(summary["algo"] == algo) & (summary["case"] == label)] if not summary.empty else summary
            if s.empty:
                row.append("—")
            else:
                row.append(_format_cell(int(s["median_ns"].iloc[0]), int(s["iqr_ns"].iloc[0])))
        table.add_row(*row)

    console.print()
    console.print(table)
    console.print()


def run_demo(console: Console) -> Dict[str, List[int]]:
    """Sort the fixed demo array with each of the five algorithms and print before/after."""
    results: Dict[str, List[int]] = {}
    for i, name in enumerate(CORE_ALGORITHMS, start=1):
        data = list(DEMO_ARRAY)
        get_algorithm(name)(data)
        print_before_after(console, f"{i}. {DISPLAY_NAMES[name].upper()}", DEMO_ARRAY, data)
        results[name] = data
    return results
