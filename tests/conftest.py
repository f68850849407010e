import pytest
from collections import defaultdict

from rich.console import Console
from rich.table import Table

# Markers declared in pyproject.toml
KNOWN_MARKERS = {"unit_common", "unit_gui", "gui"}


def pytest_terminal_summary(terminalreporter, exitstatus, config):
    """
    Print statistics by marker at the end of the test session.
    """
    _ = (exitstatus, config)
    marker_stats = defaultdict(lambda: {"passed": 0, "failed": 0, "skipped": 0, "total": 0, "duration": 0.0})

    for outcome in ["passed", "failed", "skipped"]:
        reports = terminalreporter.stats.get(outcome, [])
        for report in reports:
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
        if stats["total"] > 0:
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


@pytest.fixture
def flow_rows() -> list[dict]:
    """Orchestration rows as the export backend returns them."""
    return [
        {
            "id": "pdef_abcdef1234567",
            "name": "deploy-app",
            "version": "v3",
            "authPlugins": ["wecmdb", "saltstack"],
            "rootEntity": "wecmdb:app_instance",
            "mgmtRolesDisplay": ["Platform Admin"],
            "userRolesDisplay": ["Ops", "Dev"],
        },
        {
            "id": "pdef_zz99",
            "name": "Rollback-App",
            "version": "v1",
            "authPlugins": [],
            "rootEntity": "",
            "mgmtRolesDisplay": [],
            "userRolesDisplay": [],
        },
    ]


@pytest.fixture
def itsm_rows() -> list[dict]:
    return [
        {
            "id": "tpl-1",
            "name": "Release request",
            "version": "v2",
            "type": 1,
            "procDefName": "deploy-app",
            "procDefVersion": "v3",
            "tags": "release",
            "description": "Standard release process",
            "mgmtRoles": [{"displayName": "Platform Admin"}],
            "useRoles": [{"displayName": "Ops"}, {"displayName": "Dev"}],
            "updatedBy": "admin",
            "updatedTime": "2024-01-15 10:30:00",
        },
        {
            "id": "tpl-2",
            "name": "Incident",
            "type": "4",
            "mgmtRoles": [],
            "useRoles": [],
        },
    ]
