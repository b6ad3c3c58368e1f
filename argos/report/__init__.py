"""argos.report: output of cycle reports for the CLI."""

from .console import ConsoleReporter, format_report

__all__ = ["ConsoleReporter", "format_report"]
