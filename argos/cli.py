# === FILE: argos/cli.py ===
#!/usr/bin/env python3
"""
Command-line entry point of the Argos page monitor.

Options:
  --web-address, -w URL          Page to watch (required unless set in --config)
  --check-interval-sec, -d SEC   Seconds between checks (default: 30)
  --max-num-of-failures, -n N    Consecutive failures before exiting (default: 10)
  --config, -c PATH              YAML/JSON file with the same settings; flags override it
  --user-agent TEXT              User-Agent header (default: Mozilla/5.0)
  --timeout SEC                  Total timeout of one request (default: 300)
  --verbose                      Print the fingerprint next to each report
  --log-level LEVEL              Logging level (DEBUG, INFO, ...)
  --log-file PATH                Also write logs to this file
  --version, -v                  Show the Argos version

Example:
  argos -w https://example.com -d 60 -n 5
"""
import asyncio
import sys
from pathlib import Path

import click
from pydantic import ValidationError

from argos import __version__
from argos.config import load_config
from argos.engine import run_monitor
from argos.logger import init_logging, logger
from argos.report.console import ConsoleReporter

CONTEXT_SETTINGS = dict(help_option_names=["--help", "-h"])


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


@click.command(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='Argos, version %(version)s')
@click.option(
    '--web-address', '-w', 'web_address',
    default=None,
    help='Address of the page to watch.'
)
@click.option(
    '--check-interval-sec', '-d', 'check_interval_sec',
    type=click.IntRange(min=1),
    default=None,
    help='Seconds to wait between checks.  [default: 30]'
)
@click.option(
    '--max-num-of-failures', '-n', 'max_num_of_failures',
    type=click.IntRange(min=1),
    default=None,
    help='Consecutive failures after which the program exits.  [default: 10]'
)
@click.option(
    '--config', '-c', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='YAML or JSON file with monitor settings.'
)
@click.option(
    '--user-agent', 'user_agent',
    default=None,
    help='User-Agent header sent with every request.  [default: Mozilla/5.0]'
)
@click.option(
    '--timeout', 'timeout',
    type=click.FloatRange(min=0, min_open=True),
    default=None,
    help='Total timeout of a single request in seconds.  [default: 300]'
)
@click.option(
    '--verbose', is_flag=True,
    help='Print the content fingerprint next to each report.'
)
@click.option(
    '--log-level', 'log_level',
    default='WARNING', show_default=True,
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']),
    help='Logging level'
)
@click.option(
    '--log-file', 'log_file',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Log file (stderr only if not given)'
)
def cli(web_address, check_interval_sec, max_num_of_failures, config_path,
        user_agent, timeout, verbose, log_level, log_file):
    """Watch a web page and report whenever its content changes."""
    init_logging(level=log_level, log_file=str(log_file) if log_file else None)

    overrides = {
        'web_address': web_address,
        'check_interval_sec': check_interval_sec,
        'max_num_of_failures': max_num_of_failures,
        'user_agent': user_agent,
        'timeout': timeout,
    }
    try:
        cfg = load_config(config_path, overrides)
    except ValidationError as e:
        print_error(f'Invalid configuration:\n{e}')
    except (OSError, ValueError, TypeError) as e:
        print_error(f'Error loading configuration: {e}')

    try:
        exit_code = asyncio.run(run_monitor(cfg, ConsoleReporter(verbose=verbose)))
    except KeyboardInterrupt:
        logger.info("Argos stopped by user")
        sys.exit(130)
    sys.exit(exit_code)


if __name__ == "__main__":
    cli()
