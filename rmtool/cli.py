"""Command entry point: parses options and removes each named path."""

from __future__ import annotations

import sys
from pathlib import Path

from rmtool.args import RemoveArgs, parse_args
from rmtool.remover import Mode, RemovalError, Remover, ask_confirmation

_INTERACTIVE_MODES = {"never": Mode.FORCE, "once": Mode.ONCE, "always": Mode.ALWAYS}


def initial_mode(args: RemoveArgs) -> Mode:
    """Work out the starting mode from the prompting and root options."""
    mode = Mode.UNSET
    if args.force:
        mode = Mode.FORCE
    if args.prompt_once:
        mode = Mode.ONCE
    if args.prompt_always:
        mode = Mode.ALWAYS
    if mode == Mode.UNSET:
        mode = _INTERACTIVE_MODES.get(args.interactive.lower(), Mode.UNSET)
    if args.no_preserve_root:
        mode = Mode.ROOT
    return mode


def _write_debug(writer, args: RemoveArgs, mode: Mode) -> None:
    lines = [
        "ARG:FILES PROPERTIES",
        f"file_count = {len(args.files)}",
        f"files = {args.files!r}",
        "REMOVAL ARGUMENTS",
        f"i = {args.prompt_always}",
        f"force = {args.force}",
        f"I = {args.prompt_once}",
        f"interactive = {args.interactive!r}",
        "PRESERVE ROOT ARGS",
        f"preserve_root = {args.preserve_root!r}",
        f"no_preserve_root = {args.no_preserve_root}",
        "LOOP PARAMETERS",
        f"mode = {mode.name}",
    ]
    writer.write("\n".join(lines) + "\n")


def run(args: RemoveArgs, reader, writer) -> int:
    """Remove every path in *args*; return the process exit status."""
    if not args.files:
        writer.write(
            "[Error] no files were inputted. Try running with '-h' or '--help' "
            "for more information.\n"
        )
        return 1

    mode = initial_mode(args)
    preserve = args.preserve_root.lower()
    if preserve not in ("none", "all"):
        writer.write(
            f"[Error] {args.preserve_root} is not a valid option for --preserve-root, "
            "please see '-h' or '--help' for more information.\n"
        )
        return 1

    if args.debug:
        _write_debug(writer, args, mode)

    remover = Remover(
        file_count=len(args.files),
        recursive=args.recursive,
        directory=args.directory,
        force=args.force,
        continue_after_root=preserve == "none",
        prompt=lambda message: ask_confirmation(message, reader, writer),
        cwd=Path.cwd(),
    )

    previous = None
    for filename in args.files:
        if args.verbose or args.debug:
            if mode == Mode.SOFT_ERROR and previous is not None:
                writer.write(
                    f"[WARNING] a soft error occurred when trying to delete {previous},\n"
                )
            if args.debug:
                writer.write(f"mode = {mode.name}\n")
            writer.write(f"[Verbose] removing '{filename}'\n")
        try:
            mode = remover.process(filename, mode)
        except RemovalError as exc:
            if str(exc):
                writer.write(f"{exc}\n")
            return 1
        previous = filename
    return 0


def main(argv=None) -> int:
    """Run the command with *argv* or the process arguments."""
    return run(parse_args(argv), sys.stdin, sys.stderr)