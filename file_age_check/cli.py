"""Command-line interface for the file age check."""

import logging
import sys
import click
from typing import List, Optional

from . import __version__
from .core.models import EvaluationResult, Severity
from .core.monitor import FileAgeCheck
from .core.resolver import DirectoryResolver
from .config.config_manager import ConfigManager
from .utils.formatters import format_status_line

PLACEHOLDER_HELP = """\b
With no modifiers, <age> is expected in seconds. Modifiers: s, m, h, d, w.
With no modifiers, <size> is expected in bytes. Modifiers: k, M, G.

\b
Placeholders for the date components of <dir>:
  #YEAR#   4-digit year (searched back max_years_back years, default 10)
  #MONTH#  2-digit month (searched back max_months_back months, default 12)
  #DAY#    3-digit day of year (searched back max_days_back days, default 366)
  #MDAY#   2-digit day of month (searched back max_days_back days, default 366)

The search runs over the smallest period given, so if #DAY# is present the
day bound applies regardless of any other placeholders.
"""


def setup_logging(level: str, log_file: Optional[str] = None):
    """Set up logging configuration.

    Console output goes to stderr; stdout is reserved for the status line.
    """
    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        raise ValueError(f'Invalid log level: {level}')
    
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    
    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)
    
    if log_file:
        try:
            file_handler = logging.FileHandler(log_file)
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)
        except OSError as e:
            click.echo(f"Warning: Could not set up file logging: {e}", err=True)


def _unknown(message: str) -> EvaluationResult:
    return EvaluationResult(severity=Severity.UNKNOWN, message=message)


@click.command(context_settings={'help_option_names': ['-h', '--help']},
               epilog=PLACEHOLDER_HELP)
@click.option('-d', 'directory', required=True, metavar='<dir>',
              help='Directory to search for files in. Wildcards are permitted, '
                   'but if used, enclose the directory in quotes')
@click.option('-f', 'file_pattern', required=True, metavar='<file>',
              help='File to search for in the directory, as a regular expression '
                   'matching the whole file name')
@click.option('-w', 'warn_age', metavar='<age>',
              help='Warn if latest file is at least <age> old (default: 240 seconds)')
@click.option('-c', 'crit_age', metavar='<age>',
              help='Critical if latest file is at least <age> old (default: 600 seconds)')
@click.option('-W', 'warn_size', metavar='<size>',
              help='File must be at least this many bytes long (default: 0). Warn if not')
@click.option('-C', 'crit_size', metavar='<size>',
              help='File must be at least this many bytes long (default: 0). Critical if not')
@click.option('--config', 'config_path',
              help='Path to configuration file')
@click.option('--log-level',
              type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
              help='Logging level (default: WARNING)')
@click.option('--log-file',
              help='Log file path')
@click.version_option(__version__, '-V', '--version')
@click.pass_context
def cli(ctx, directory: str, file_pattern: str, warn_age: Optional[str], crit_age: Optional[str],
        warn_size: Optional[str], crit_size: Optional[str], config_path: Optional[str],
        log_level: Optional[str], log_file: Optional[str]):
    """Find the latest file matching <file> in <dir> and check its age and size."""
    config_manager = ConfigManager(config_path)
    try:
        config_manager.load_config()
    except (FileNotFoundError, ValueError) as e:
        click.echo(format_status_line(_unknown(str(e))))
        ctx.exit(Severity.UNKNOWN.value)
    
    logging_config = config_manager.get_logging_config()
    setup_logging(log_level or logging_config['level'], log_file or logging_config.get('file'))
    
    thresholds = config_manager.get_thresholds_config()
    lookback = config_manager.get_lookback_config()
    
    check = FileAgeCheck(
        directory=directory,
        file_pattern=file_pattern,
        warn_age=warn_age if warn_age is not None else thresholds['warn_age'],
        crit_age=crit_age if crit_age is not None else thresholds['crit_age'],
        warn_size=warn_size if warn_size is not None else thresholds['warn_size'],
        crit_size=crit_size if crit_size is not None else thresholds['crit_size'],
        resolver=DirectoryResolver(
            max_days_back=lookback['max_days_back'],
            max_months_back=lookback['max_months_back'],
            max_years_back=lookback['max_years_back']
        )
    )
    
    result = check.run()
    click.echo(format_status_line(result))
    ctx.exit(result.exit_code)


def main(argv: Optional[List[str]] = None):
    """Main CLI entry point.

    Usage errors exit with the UNKNOWN code rather than click's default of 2,
    which monitoring systems would read as CRITICAL.
    """
    try:
        exit_code = cli.main(args=argv, prog_name='check-file-age', standalone_mode=False)
    except click.ClickException as e:
        click.echo(format_status_line(_unknown(e.format_message())))
        exit_code = Severity.UNKNOWN.value
    except click.Abort:
        click.echo(format_status_line(_unknown("Aborted")))
        exit_code = Severity.UNKNOWN.value
    
    sys.exit(exit_code or 0)


if __name__ == '__main__':
    main()
