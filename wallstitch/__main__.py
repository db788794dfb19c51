#!/usr/bin/env python3
"""
Wallstitch stitches per-monitor wallpapers into one tiling image.
"""

import sys

from wallstitch.cli import cli_logic


def main():
    """Runs the CLI and exits with its status."""
    sys.exit(cli_logic())


if __name__ == "__main__":
    main()
