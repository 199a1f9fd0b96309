"""
ARIA Helper CLI

Command-line interface for checking markup snippets for ARIA smells and
writing conservatively fixed copies.

Usage:
    python check_aria.py snippet.html [options]
    aria-helper snippet.html [options]
    cat snippet.html | aria-helper - --fix fixed.html
"""

import argparse
import logging
import sys
from pathlib import Path

from . import __version__
from .analysis import analyze_snippet
from .autofix import FixOptions


def setup_logging(verbose: bool = False) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(levelname)s: %(message)s'
    )


def parse_args(args: list = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog='aria-helper',
        description='Check markup snippets for common WAI-ARIA mistakes',
        epilog='Example: aria-helper widget.html --fix'
    )

    parser.add_argument(
        'input',
        type=str,
        help="Path to input snippet or HTML file ('-' reads stdin)"
    )

    parser.add_argument(
        '-o', '--output',
        type=str,
        default=None,
        help='Output file for report (default: stdout)'
    )

    parser.add_argument(
        '-f', '--format',
        choices=['json', 'text'],
        default='text',
        help='Output format (default: text)'
    )

    parser.add_argument(
        '--fix',
        nargs='?',
        const='',
        default=None,
        metavar='PATH',
        help='Write the fixed snippet to PATH (default: input.fixed.html)'
    )

    parser.add_argument(
        '--track-tablist-depth',
        action='store_true',
        help='Match nested same-named containers when adding role="tablist"'
    )

    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable verbose output'
    )

    parser.add_argument(
        '--version',
        action='version',
        version=f'%(prog)s {__version__}'
    )

    return parser.parse_args(args)


def main(args: list = None) -> int:
    """
    Main entry point for CLI.

    Args:
        args: Command-line arguments (default: sys.argv)

    Returns:
        Exit code (0 when clean, 2 when smells were found, 1 for error)
    """
    parsed = parse_args(args)
    setup_logging(parsed.verbose)

    logger = logging.getLogger(__name__)

    # Resolve fixed-output path
    fix_path = None
    if parsed.fix:
        fix_path = Path(parsed.fix)
    elif parsed.fix is not None:
        if parsed.input == '-':
            logger.error("--fix needs a PATH when reading from stdin")
            return 1
        fix_path = Path(parsed.input).with_suffix('.fixed.html')

    # Read input
    if parsed.input == '-':
        source = '<stdin>'
        snippet = sys.stdin.read()
    else:
        input_path = Path(parsed.input)
        if not input_path.exists():
            logger.error(f"Input file not found: {input_path}")
            return 1
        source = str(input_path)
        try:
            with open(input_path, 'r', encoding='utf-8') as f:
                snippet = f.read()
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Could not read {input_path}: {e}")
            return 1

    fix_options = FixOptions(track_tablist_depth=parsed.track_tablist_depth)

    logger.info(f"Checking: {source}")
    report = analyze_snippet(snippet, source=source, fix_options=fix_options)

    if parsed.format == 'json':
        output = report.to_json()
    else:
        output = report.to_text()

    if parsed.output:
        with open(parsed.output, 'w', encoding='utf-8') as f:
            f.write(output)
        logger.info(f"Report written to: {parsed.output}")
    else:
        print(output)

    if fix_path is not None:
        with open(fix_path, 'w', encoding='utf-8') as f:
            f.write(report.fixed_text)
        logger.info(f"Applied {report.fixes_available} fixes, written to: {fix_path}")

    return 2 if report.has_smells else 0


if __name__ == '__main__':
    sys.exit(main())
