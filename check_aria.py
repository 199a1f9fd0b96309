#!/usr/bin/env python3
"""
ARIA Helper - Convenience CLI Script

Check a markup snippet for common WAI-ARIA mistakes.

Usage:
    python check_aria.py input.html [options]

Options:
    -o, --output FILE       Write the report to FILE (default: stdout)
    -f, --format FORMAT     Report format: text or json (default: text)
    --fix [PATH]            Write the fixed snippet (default: input.fixed.html)
    --track-tablist-depth   Match nested containers when adding role="tablist"
    -v, --verbose           Verbose output
    --version               Show version

Examples:
    python check_aria.py widget.html
    python check_aria.py widget.html -f json -o report.json
    python check_aria.py tabs.html --fix
"""

import sys
from pathlib import Path

# Add package to path if running directly
package_dir = Path(__file__).parent
if str(package_dir) not in sys.path:
    sys.path.insert(0, str(package_dir))

from aria_helper.cli import main

if __name__ == '__main__':
    sys.exit(main())
