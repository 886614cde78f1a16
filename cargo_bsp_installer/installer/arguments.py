"""Command line validation."""

import argparse
from collections.abc import Sequence
from typing import NoReturn

from cargo_bsp_installer.installer.errors import UsageError
from cargo_bsp_installer.models.request import InstallRequest


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises UsageError instead of exiting."""

    def error(self, message: str) -> NoReturn:
        raise UsageError(self.format_usage(), f"{self.prog}: error: {message}")


def build_parser(prog: str) -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog=prog,
        description="Build the cargo-bsp server and register it in a Rust project",
        add_help=False,
    )
    parser.add_argument(
        "directory",
        metavar="DIRECTORY",
        help="Project directory that receives the .bsp connection file",
    )
    parser.add_argument("-h", "--help", action="store_true", help="Show this message")
    return parser


def validate_arguments(args: Sequence[str], prog: str) -> InstallRequest:
    """Turn the raw argument list into an install request.

    Args:
        args: Arguments without the program name
        prog: Invocation name shown in the usage line

    Returns:
        The request for the single DIRECTORY argument

    Raises:
        UsageError: On no arguments, a help flag, or anything but one positional
    """
    parser = build_parser(prog)
    usage = parser.format_usage()

    # Help wins over any other problem with the arguments
    if not args or any(arg in ("-h", "--help") for arg in args):
        raise UsageError(usage)

    namespace = parser.parse_args(list(args))
    return InstallRequest(target_directory=namespace.directory)
