"""Command-line argument parsing for gwt."""

import argparse
import sys

from gwt.__version__ import __version__
from gwt.cli.commands import usage_text


class ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that reports usage errors with exit status 1."""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def build_parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog="gwt",
        description="Named git worktrees with session manager integration",
        epilog=usage_text(),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Show verbose output")
    parser.add_argument(
        "--debug", action="store_true", help="Show debug information for troubleshooting"
    )
    parser.add_argument("--version", action="version", version=f"gwt {__version__}")
    parser.add_argument("command", nargs="?", help="Subcommand or alias (see below)")
    parser.add_argument("name", nargs="?", default="", help="Worktree name")
    return parser


def parse_args(argv=None):
    """Parse command-line arguments."""
    return build_parser().parse_args(argv)
