import numpy as np
from tabulate import tabulate

from .strategies import StrategyReport


def format_duration(seconds: float) -> str:
    """Formats a duration in seconds as 'M min. S sec. MS ms.'."""
    total_ms = int(round(max(seconds, 0.0) * 1e3))
    minutes, remainder = divmod(total_ms, 60_000)
    secs, ms = divmod(remainder, 1_000)
    return f"{minutes} min. {secs} sec. {ms} ms."


def format_report(report: StrategyReport) -> str:
    """Renders one strategy report in the phone book's plain text format."""
    line = (f"Found {report.found_count} / {report.total_queries} entries. "
            f"Time taken: {format_duration(report.total_time)}")
    if report.degraded:
        line += f" - STOPPED, moved to {report.fallback} search"

    lines = [line]
    if report.setup_time is not None:
        lines.append(f"{report.setup_label} time: {format_duration(report.setup_time)}")
        if report.degraded:
            lines.append("Searching time: n/a")
        elif report.search_time is not None:
            lines.append(f"Searching time: {format_duration(report.search_time)}")
    return "\n".join(lines)


def average_reports(runs: list[list[StrategyReport]]) -> list[dict]:
    """
    Collapses several runs of the same strategies into one row per strategy,
    averaging the timings (in milliseconds) over the runs in which each phase was measured.
    """
    if not runs:
        return []

    rows = []
    for position, first in enumerate(runs[0]):
        reports = [run[position] for run in runs]
        setup = [r.setup_time * 1e3 for r in reports if r.setup_time is not None]
        search = [r.search_time * 1e3 for r in reports if r.search_time is not None]
        rows.append({
            'name': first.name,
            'found': f"{first.found_count} / {first.total_queries}",
            'total_ms': np.mean([r.total_time * 1e3 for r in reports]),
            'setup_ms': np.mean(setup) if setup else None,
            'search_ms': np.mean(search) if search else None,
            'degraded': sum(r.degraded for r in reports),
        })
    return rows


def summary_table(rows: list[dict], num_runs: int = 1) -> str:
    headers = ["Strategy", "Found", "Avg Total (ms)", "Avg Setup (ms)", "Avg Search (ms)", "Degraded Runs"]
    table_data = []
    for row in rows:
        table_data.append([
            row['name'],
            row['found'],
            f"{row['total_ms']:.2f}",
            f"{row['setup_ms']:.2f}" if row['setup_ms'] is not None else "-",
            f"{row['search_ms']:.2f}" if row['search_ms'] is not None else "-",
            f"{row['degraded']}/{num_runs}",
        ])
    return tabulate(table_data, headers=headers, tablefmt="grid")
