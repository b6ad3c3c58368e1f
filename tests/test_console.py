# File: tests/test_console.py
from argos.report.console import ConsoleReporter, format_report
from argos.watcher.fingerprint import fingerprint
from argos.watcher.models import CycleReport, ReportKind, Termination


def test_format_messages():
    assert format_report(CycleReport(ReportKind.CHANGED, 200, 0)) == "Change in website content since last check!"
    assert format_report(CycleReport(ReportKind.UNCHANGED, 200, 0)) == "No change since last time"
    assert format_report(CycleReport(ReportKind.FAILED, 503, 1)) == "Request failed with status code 503"
    assert (
        format_report(CycleReport(ReportKind.FAILED, 204, 2, reason="timeout"))
        == "Failed to request URL response: timeout"
    )


def test_reporter_streams(capsys):
    reporter = ConsoleReporter()
    reporter.report(CycleReport(ReportKind.CHANGED, 200, 0, fingerprint=fingerprint("A")))
    reporter.report(CycleReport(ReportKind.FAILED, 500, 1))
    reporter.terminated(Termination(consecutive_failures=1))

    captured = capsys.readouterr()
    assert captured.out == "Change in website content since last check!\n"
    assert "Request failed with status code 500" in captured.err
    assert "Max number of consecutive failures reached. Exiting program" in captured.err


def test_verbose_reporter_prints_fingerprint(capsys):
    fp = fingerprint("A")
    ConsoleReporter(verbose=True).report(CycleReport(ReportKind.UNCHANGED, 200, 0, fingerprint=fp))
    assert capsys.readouterr().out == f"No change since last time [{fp.hex}]\n"
