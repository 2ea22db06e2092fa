"""Command-line arguments for the removal tool."""

from __future__ import annotations

import argparse
from dataclasses import dataclass, field


@dataclass
class RemoveArgs:
    """Parsed command-line options."""

    force: bool = False
    prompt_always: bool = False
    prompt_once: bool = False
    interactive: str = "always"
    recursive: bool = False
    directory: bool = False
    no_preserve_root: bool = False
    preserve_root: str = "all"
    verbose: bool = False
    debug: bool = False
    files: list[str] = field(default_factory=list)


def build_parser() -> argparse.ArgumentParser:
    """Return the argument parser for the command."""
    parser = argparse.ArgumentParser(
        prog="rmtool", description="Remove files or directories."
    )
    parser.add_argument(
        "-f", "--force", action="store_true", help="never prompt, remove without asking."
    )
    parser.add_argument(
        "-i",
        dest="prompt_always",
        action="store_true",
        help="prompt before every removal (whole directories are removed on confirmation).",
    )
    parser.add_argument(
        "-I",
        dest="prompt_once",
        action="store_true",
        help="prompt once before every removal.",
    )
    parser.add_argument(
        "--interactive",
        nargs="?",
        const="always",
        default="always",
        metavar="WHEN",
        help="prompt according to WHEN: never, once (-I), or always (-i); "
        "without WHEN, prompt always.",
    )
    parser.add_argument(
        "-r",
        "--recursive",
        action="store_true",
        help="remove directories and their contents in their entirety.",
    )
    parser.add_argument(
        "-d",
        "--dir",
        dest="directory",
        action="store_true",
        help="remove empty directories.",
    )
    parser.add_argument(
        "--no-preserve-root",
        dest="no_preserve_root",
        action="store_true",
        help="do not treat '/' specially.",
    )
    parser.add_argument(
        "--preserve-root",
        dest="preserve_root",
        default="all",
        help="do not remove '/'; options: (all|none).",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="show progress of the program."
    )
    parser.add_argument(
        "-D", "--debug", action="store_true", help="show debugging information."
    )
    parser.add_argument("files", nargs="*", metavar="FILE")
    return parser


def parse_args(argv=None) -> RemoveArgs:
    """Parse *argv* (or the process arguments) into a :class:`RemoveArgs`."""
    namespace = build_parser().parse_args(argv)
    return RemoveArgs(**vars(namespace))