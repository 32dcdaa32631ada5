from collections import defaultdict

from rich.console import Console
from rich.table import Table

# Registered in pyproject.toml
KNOWN_MARKERS = {"unit_grid", "unit_common", "unit_ui", "unit_gui"}


def pytest_terminal_summary(terminalreporter, exitstatus, config):
    """
    Print statistics by marker at the end of the test session.
    """
    _ = (exitstatus, config)
    marker_stats = defaultdict(
        lambda: {"passed": 0, "failed": 0, "skipped": 0, "total": 0, "duration": 0.0}
    )

    for outcome in ["passed", "failed", "skipped"]:
        for report in terminalreporter.stats.get(outcome, []):
            # Only count the actual test call, or setup skips
            if report.when == "call" or (report.when == "setup" and report.outcome == "skipped"):
                duration = getattr(report, "duration", 0.0)
                for marker in KNOWN_MARKERS:
                    if marker in report.keywords:
                        stats = marker_stats[marker]
                        stats[outcome] += 1
                        stats["total"] += 1
                        stats["duration"] += duration

    if not marker_stats:
        return

    table = Table(title="Test Statistics by Marker", show_header=True, header_style="bold magenta")
    table.add_column("Marker", style="cyan")
    table.add_column("Total", justify="right")
    table.add_column("Passed", justify="right", style="green")
    table.add_column("Failed", justify="right", style="red")
    table.add_column("Skipped", justify="right", style="yellow")
    table.add_column("Duration (s)", justify="right", style="blue")

    for marker in sorted(marker_stats):
        stats = marker_stats[marker]
        table.add_row(
            marker,
            str(stats["total"]),
            str(stats["passed"]),
            str(stats["failed"]),
            str(stats["skipped"]),
            f"{stats['duration']:.2f}",
        )

    console = Console()
    console.print("\n")
    console.print(table)
