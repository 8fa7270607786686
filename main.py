"""
Main entry point for the SQL highlighter command line tool.

This module handles:
- Command line argument parsing
- Logging configuration
- Settings loading
- Reading SQL from a file or stdin
- Writing highlighted output (terminal colors, HTML or JSON segments)
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
import traceback
from dataclasses import dataclass
from datetime import datetime
from enum import Enum, auto
from pathlib import Path
from typing import List, Optional

from sqlcolor import __version__, get_segments, render_segments
from sqlcolor.services.settings import SettingsManager


# =============================================================================
# Constants
# =============================================================================

APP_NAME = "sqlcolor"
APP_VERSION = __version__

LOGS_DIR = Path.home() / ".cache" / APP_NAME / "logs"


# =============================================================================
# Enums
# =============================================================================

class OutputFormat(Enum):
    """What the tool writes."""
    ANSI = auto()      # Terminal color codes
    HTML = auto()      # Escaped HTML with span classes
    SEGMENTS = auto()  # JSON list of segments
    CSS = auto()       # Stylesheet for HTML output


# =============================================================================
# Data Classes
# =============================================================================

@dataclass
class CommandLineArgs:
    """Parsed command line arguments."""
    input_path: Optional[str] = None
    output_path: Optional[str] = None
    output_format: Optional[OutputFormat] = None  # None: taken from settings
    class_prefix: Optional[str] = None
    no_color: bool = False
    scheme: Optional[str] = None
    config_file: Optional[str] = None
    reset_settings: bool = False
    log_level: str = "WARNING"
    debug: bool = False


# =============================================================================
# Logging Setup
# =============================================================================

LOG_FORMAT = '%(asctime)s | %(levelname)-8s | %(name)s | %(message)s'
LOG_DATE_FORMAT = '%H:%M:%S'


class LevelColorFormatter(logging.Formatter):
    """Formatter that tints each record by level when writing to a terminal."""

    LEVEL_CODES = {
        logging.DEBUG: '\033[2m',      # Dim
        logging.WARNING: '\033[33m',   # Yellow
        logging.ERROR: '\033[31m',     # Red
        logging.CRITICAL: '\033[1;31m',  # Bold red
    }

    def __init__(self, colorize: bool):
        super().__init__(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
        self.colorize = colorize

    def format(self, record: logging.LogRecord) -> str:
        text = super().format(record)
        code = self.LEVEL_CODES.get(record.levelno) if self.colorize else None
        return f"{code}{text}\033[0m" if code else text


def setup_logging(level: str = "WARNING", log_file: Optional[Path] = None) -> logging.Logger:
    """
    Route log records to stderr, and to log_file when given.

    stdout is reserved for the highlighted output.
    """
    numeric_level = getattr(logging, level.upper(), logging.WARNING)

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(LevelColorFormatter(colorize=getattr(sys.stderr, 'isatty', lambda: False)()))
    handlers: List[logging.Handler] = [console]

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        to_file = logging.FileHandler(log_file, encoding='utf-8')
        to_file.setFormatter(LevelColorFormatter(colorize=False))
        handlers.append(to_file)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(numeric_level)
    for handler in handlers:
        handler.setLevel(numeric_level)
        root_logger.addHandler(handler)

    return root_logger


# =============================================================================
# Exception Handling
# =============================================================================

class ExceptionHandler:
    """Global handler that logs unhandled exceptions."""

    def __init__(self, logger: logging.Logger):
        self.logger = logger

    def handle_exception(
        self,
        exc_type: type,
        exc_value: BaseException,
        exc_tb
    ) -> None:
        """Handle an unhandled exception."""
        if issubclass(exc_type, KeyboardInterrupt):
            sys.__excepthook__(exc_type, exc_value, exc_tb)
            return

        self.logger.critical(
            "Unhandled exception",
            exc_info=(exc_type, exc_value, exc_tb)
        )
        self.logger.debug(''.join(traceback.format_exception(exc_type, exc_value, exc_tb)))


# =============================================================================
# Command Line Parsing
# =============================================================================

def parse_arguments(args: Optional[List[str]] = None) -> CommandLineArgs:
    """
    Parse command line arguments.

    Args:
        args: Arguments to parse (defaults to sys.argv)

    Returns:
        Parsed arguments
    """
    parser = argparse.ArgumentParser(
        prog=APP_NAME,
        description="Highlight SQL for terminals and HTML",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s query.sql                     Print query with terminal colors
  %(prog)s --html query.sql -o out.html  Write highlighted HTML
  echo "SELECT 1" | %(prog)s --segments  Dump segments as JSON
  %(prog)s --css "Default Dark"          Print a stylesheet for HTML output
  %(prog)s --css                         Stylesheet for the configured scheme
        """
    )

    parser.add_argument(
        'input',
        nargs='?',
        help='SQL file to highlight (reads stdin when omitted or "-")'
    )
    parser.add_argument(
        '-o', '--output',
        help='Output file (defaults to stdout)'
    )

    # Output selection
    format_group = parser.add_mutually_exclusive_group()
    format_group.add_argument(
        '--html',
        action='store_true',
        help='Write HTML instead of terminal colors'
    )
    format_group.add_argument(
        '--segments',
        action='store_true',
        help='Write segments as JSON'
    )
    format_group.add_argument(
        '--css',
        nargs='?',
        const='',
        metavar='SCHEME',
        help='Write a stylesheet for a color scheme (defaults to the configured one)'
    )

    # Rendering options
    parser.add_argument(
        '--class-prefix',
        help='CSS class prefix for HTML output'
    )
    parser.add_argument(
        '--no-color',
        action='store_true',
        help='Write terminal output without color codes'
    )

    # Configuration
    parser.add_argument(
        '-c', '--config',
        help='Configuration file path'
    )
    parser.add_argument(
        '--reset-settings',
        action='store_true',
        help='Reset all settings to defaults'
    )

    # Logging
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable verbose output'
    )
    parser.add_argument(
        '--debug',
        action='store_true',
        help='Enable debug mode'
    )
    parser.add_argument(
        '--log-level',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
        default='WARNING',
        help='Log level'
    )

    parser.add_argument(
        '--version',
        action='version',
        version=f'{APP_NAME} {APP_VERSION}'
    )

    parsed = parser.parse_args(args)

    result = CommandLineArgs()
    result.input_path = parsed.input
    result.output_path = parsed.output
    result.class_prefix = parsed.class_prefix
    result.no_color = parsed.no_color
    result.config_file = parsed.config
    result.reset_settings = parsed.reset_settings
    result.debug = parsed.debug

    if parsed.css is not None:
        result.output_format = OutputFormat.CSS
        result.scheme = parsed.css or None
    elif parsed.segments:
        result.output_format = OutputFormat.SEGMENTS
    elif parsed.html:
        result.output_format = OutputFormat.HTML

    if parsed.debug or parsed.verbose:
        result.log_level = 'DEBUG'
    else:
        result.log_level = parsed.log_level

    return result


# =============================================================================
# Input / Output
# =============================================================================

def read_input(path: Optional[str]) -> str:
    """Read SQL from a file, or from stdin when path is None or "-"."""
    if path is None or path == '-':
        return sys.stdin.read()

    with open(path, 'r', encoding='utf-8') as f:
        return f.read()


def write_output(text: str, path: Optional[str]) -> None:
    """Write text to a file, or to stdout when path is None."""
    if path is None:
        sys.stdout.write(text)
        return

    Path(path).parent.mkdir(parents=True, exist_ok=True)
    with open(path, 'w', encoding='utf-8') as f:
        f.write(text)


def build_stylesheet(scheme_name: str, class_prefix: str) -> str:
    """Build the CSS for a named editor color scheme."""
    # Qt is only needed for stylesheets
    from sqlcolor.ui.sql_highlighter import get_scheme_by_name

    return get_scheme_by_name(scheme_name).to_css(class_prefix) + '\n'


def render(sql: str, args: CommandLineArgs, manager: SettingsManager) -> str:
    """Produce the output text for the requested format."""
    highlight_settings = manager.settings.highlight
    options = highlight_settings.to_render_options()
    class_prefix = options.class_prefix if args.class_prefix is None else args.class_prefix

    output_format = args.output_format
    if output_format is None:
        # --no-color asks for terminal text even when settings default to HTML
        if options.html_mode and not args.no_color:
            output_format = OutputFormat.HTML
        else:
            output_format = OutputFormat.ANSI

    if output_format == OutputFormat.CSS:
        scheme = args.scheme or manager.settings.editor.color_scheme
        return build_stylesheet(scheme, class_prefix)

    segments = get_segments(sql)
    logging.info(f"Main - {len(segments)} segments from {len(sql)} characters")

    if output_format == OutputFormat.SEGMENTS:
        return json.dumps([segment.to_dict() for segment in segments], indent=2) + '\n'

    if output_format == OutputFormat.HTML:
        return render_segments(segments, options, html_mode=True, class_prefix=class_prefix)

    if args.no_color:
        return ''.join(segment.content for segment in segments)

    return render_segments(segments, options, html_mode=False)


# =============================================================================
# Main
# =============================================================================

def main(argv: Optional[List[str]] = None) -> int:
    """
    Command line entry point.

    Returns:
        Exit code (0 for success)
    """
    args = parse_arguments(argv)

    log_file = LOGS_DIR / f"{APP_NAME}_{datetime.now():%Y%m%d}.log" if args.debug else None
    logger = setup_logging(args.log_level, log_file)
    logger.debug(f"Starting {APP_NAME} v{APP_VERSION}")

    exception_handler = ExceptionHandler(logger)
    sys.excepthook = exception_handler.handle_exception

    manager = SettingsManager(Path(args.config_file) if args.config_file else None)
    if args.reset_settings:
        logger.info(f"Resetting settings at {manager.settings_path}")
        manager.reset()

    try:
        sql = '' if args.output_format == OutputFormat.CSS else read_input(args.input_path)
        output = render(sql, args, manager)
        write_output(output, args.output_path)
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Main - Could not read or write SQL: {e}")
        return 1

    return 0


# =============================================================================
# Entry Point
# =============================================================================

if __name__ == '__main__':
    sys.exit(main())
