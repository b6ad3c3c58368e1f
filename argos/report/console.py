# argos/report/console.py

"""
Console output of the monitor.

Changes and "no change" lines go to stdout; failures and the final
give-up message go to stderr.
"""
from __future__ import annotations

import click

from argos.watcher.models import CycleReport, ReportKind, Termination

CHANGED_MESSAGE = "Change in website content since last check!"
UNCHANGED_MESSAGE = "No change since last time"
TERMINATED_MESSAGE = "Max number of consecutive failures reached. Exiting program"


def format_report(report: CycleReport) -> str:
    """Return the console line for *report*."""
    if report.kind is ReportKind.CHANGED:
        return CHANGED_MESSAGE
    if report.kind is ReportKind.UNCHANGED:
        return UNCHANGED_MESSAGE
    if report.reason is not None:
        return f"Failed to request URL response: {report.reason}"
    return f"Request failed with status code {report.status}"


class ConsoleReporter:
    """Echoes cycle reports with click; ``verbose`` appends the fingerprint."""

    def __init__(self, verbose: bool = False) -> None:
        self.verbose = verbose

    def report(self, report: CycleReport) -> None:
        line = format_report(report)
        if report.kind is ReportKind.FAILED:
            click.echo(line, err=True)
            return
        if self.verbose and report.fingerprint is not None:
            line = f"{line} [{report.fingerprint.hex}]"
        click.echo(line)

    def terminated(self, termination: Termination) -> None:
        click.secho(TERMINATED_MESSAGE, fg="red", err=True)
