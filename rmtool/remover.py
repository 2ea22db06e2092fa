"""Decides how each path is removed and performs the removal."""

from __future__ import annotations

import enum
import os
import shutil
import sys
from pathlib import Path
from typing import Callable, TextIO


class Mode(enum.IntEnum):
    """State carried from one path to the next."""

    FORCE = 0
    ONCE = 1
    ALWAYS = 2
    RECURSIVE = 3
    EMPTY_DIR = 4
    ROOT = 5
    SOFT_ERROR = 6
    UNSET = 9


class RemovalKind(enum.Enum):
    """How a path is removed from the filesystem."""

    FILE = "file"
    TREE = "tree"
    EMPTY_DIR = "empty_dir"


class RemovalError(Exception):
    """A failure that ends the run; the message may be empty."""


def _warn(message: str) -> None:
    print(message, file=sys.stderr)


def describe_target(filename, file_count, is_dir, mode, cwd) -> str:
    """Build the confirmation question shown before removing *filename*."""
    parts = filename.split("/")
    name = parts[-1].strip()
    directory = parts[0].strip()

    if file_count <= 0:
        raise RemovalError("")
    if file_count == 1:
        size = name
    elif file_count <= 100:
        size = f"{file_count} files"
    else:
        size = "more than 100 files"

    labelled = name + (" (directory)" if is_dir else " (regular file)")
    if mode == Mode.ONCE:
        subject = size
    elif mode == Mode.ALWAYS:
        subject = labelled
    else:
        raise ValueError(f"no prompt exists for mode {Mode(mode).name}")
    return (
        f"\n[WARNING] you are about to delete {subject} in {cwd}/{directory}."
        "\nTo confirm this, press [y/n]: "
    )


def ask_confirmation(message, reader: TextIO, writer: TextIO) -> bool:
    """Show *message* and read answers until one is 'y' or 'n'; EOF means no."""
    writer.write(message)
    writer.flush()
    for line in reader:
        answer = line.strip().lower()
        if answer == "y":
            return True
        if answer == "n":
            return False
        writer.write("please enter either 'y' or 'n'.\n")
        writer.flush()
    return False


def remove_path(filename, kind: RemovalKind) -> None:
    """Remove *filename* as *kind*, turning OS failures into :class:`RemovalError`."""
    try:
        if kind is RemovalKind.FILE:
            os.remove(filename)
        elif kind is RemovalKind.TREE:
            if os.path.islink(filename):
                os.unlink(filename)
            else:
                shutil.rmtree(filename)
        elif kind is RemovalKind.EMPTY_DIR:
            os.rmdir(filename)
        else:
            raise ValueError(f"unknown removal kind {kind!r}")
    except PermissionError as exc:
        if kind is RemovalKind.TREE:
            raise RemovalError("[ERROR] You must be root to run this command.") from exc
        raise RemovalError(
            f"[ERROR] Cannot remove '{filename}': Permission denied"
        ) from exc
    except OSError as exc:
        raise RemovalError(f"Something went wrong, exiting program ({exc})") from exc


class Remover:
    """Applies the removal rules to one path at a time."""

    def __init__(
        self,
        file_count: int,
        recursive: bool,
        directory: bool,
        force: bool,
        continue_after_root: bool,
        prompt: Callable[[str], bool],
        cwd,
    ):
        self.file_count = file_count
        self.recursive = recursive
        self.directory = directory
        self.force = force
        self.continue_after_root = continue_after_root
        self.prompt = prompt
        self.cwd = Path(cwd)

    def _confirm(self, filename: str, mode: Mode, is_dir: bool) -> bool:
        return self.prompt(
            describe_target(filename, self.file_count, is_dir, mode, self.cwd)
        )

    def process(self, filename: str, mode) -> Mode:
        """Remove *filename* according to *mode*; return the mode for the next path."""
        mode = Mode(mode)
        if not os.path.exists(filename):
            raise RemovalError(
                f"[Error] {self.cwd}/{filename} is either missing, or does not exist."
            )
        is_dir = os.path.isdir(filename)

        if filename == "/" and mode in (Mode.FORCE, Mode.RECURSIVE):
            warning = (
                "[WARNING] It is dangerous to run this recursively on the root directory. "
                "\nRun with --no-preserve-root to override this fail save."
            )
            if not self.continue_after_root:
                raise RemovalError(warning)
            _warn(warning)
            mode = Mode.SOFT_ERROR

        if self.recursive and (self.force or mode == Mode.FORCE) and is_dir:
            mode = Mode.RECURSIVE
        if self.recursive and is_dir and mode != Mode.RECURSIVE:
            mode = Mode.ALWAYS

        if is_dir and self.directory and not self.force:
            with os.scandir(filename) as entries:
                empty = next(entries, None) is None
            if empty:
                mode = Mode.EMPTY_DIR
            else:
                _warn(f"[Error] cannot remove '{filename}': Directory not empty")
                mode = Mode.SOFT_ERROR

        if (
            is_dir
            and mode not in (Mode.RECURSIVE, Mode.EMPTY_DIR, Mode.SOFT_ERROR)
            and not self.recursive
        ):
            _warn(f"[Error] cannot remove '{filename}': Is a directory")
            mode = Mode.SOFT_ERROR

        if mode == Mode.FORCE:
            remove_path(filename, RemovalKind.FILE)
        elif mode == Mode.ONCE:
            if not self._confirm(filename, mode, is_dir):
                raise RemovalError("")
            remove_path(filename, RemovalKind.FILE)
            mode = Mode.FORCE
        elif mode == Mode.ALWAYS:
            if self._confirm(filename, mode, is_dir):
                kind = RemovalKind.TREE if is_dir else RemovalKind.FILE
                remove_path(filename, kind)
        elif mode in (Mode.RECURSIVE, Mode.ROOT):
            remove_path(filename, RemovalKind.TREE)
        elif mode == Mode.EMPTY_DIR:
            remove_path(filename, RemovalKind.EMPTY_DIR)
        return mode