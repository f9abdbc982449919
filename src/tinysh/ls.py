"""The ``ls`` command — list the entries of a directory.

Usage::

    ls [-FLAGS] [path]

Only the first argument may carry flags, and ``l`` (long listing) is
the only flag understood.  A lone ``-`` is a path, not a flag marker.

Listing happens in three stages, each a separate function so it can be
tested on its own:

1. **parse_args** — split arguments into an ``LsRequest``.
2. **read_directory** — snapshot every entry (type, mode, owner, size).
   A directory that cannot be opened raises ``ListingError``; problems
   with individual entries are collected instead.
3. **render** — turn the snapshots into output lines.

If any single entry could not be read, the errors are reported and no
entries are shown at all.
"""

import os
import stat
from dataclasses import dataclass, field
from enum import StrEnum

from tinysh.commands import CommandResult
from tinysh.permissions import format_mode

CURRENT_DIR = "."
LONG_FLAG = "l"
VALID_OPTIONS: frozenset[str] = frozenset(LONG_FLAG)


def display_path(path: str) -> str:
    """Return *path* safe to print, with undecodable bytes replaced by U+FFFD."""
    return os.fsencode(path).decode(errors="replace")


@dataclass(frozen=True)
class LsRequest:
    """A parsed ``ls`` invocation.

    ``options`` holds each flag letter once, in the order it first
    appeared on the command line.
    """

    path: str = CURRENT_DIR
    options: tuple[str, ...] = ()


def parse_args(args: list[str]) -> LsRequest:
    """Split ``ls`` arguments into a target path and flag letters.

    Args:
        args: Everything after the command name.

    Returns:
        The parsed request.  Arguments past the path are ignored.

    """
    if not args:
        return LsRequest()

    first = args[0]
    if first.startswith("-") and len(first) > 1:
        options = tuple(dict.fromkeys(first[1:]))
        path = args[1] if len(args) > 1 else CURRENT_DIR
        return LsRequest(path=path, options=options)

    return LsRequest(path=first)


def validate_options(options: tuple[str, ...]) -> str | None:
    """Return the first unrecognised flag letter, or None if all are valid."""
    for option in options:
        if option not in VALID_OPTIONS:
            return option
    return None


class FileKind(StrEnum):
    """The type of a directory entry, as reported by ``lstat``."""

    REGULAR = "regular"
    DIRECTORY = "directory"
    SYMLINK = "symlink"
    BLOCK_DEVICE = "block_device"
    CHAR_DEVICE = "char_device"
    SOCKET = "socket"
    FIFO = "fifo"

    @property
    def glyph(self) -> str:
        """Return the single character shown in a long listing."""
        return _GLYPHS[self]

    @classmethod
    def from_mode(cls, mode: int) -> "FileKind":
        """Classify a raw ``st_mode`` value."""
        if stat.S_ISDIR(mode):
            return cls.DIRECTORY
        if stat.S_ISLNK(mode):
            return cls.SYMLINK
        if stat.S_ISBLK(mode):
            return cls.BLOCK_DEVICE
        if stat.S_ISCHR(mode):
            return cls.CHAR_DEVICE
        if stat.S_ISSOCK(mode):
            return cls.SOCKET
        if stat.S_ISFIFO(mode):
            return cls.FIFO
        return cls.REGULAR


# Symlinks and sockets share the ``s`` glyph.
_GLYPHS: dict[FileKind, str] = {
    FileKind.REGULAR: "-",
    FileKind.DIRECTORY: "d",
    FileKind.SYMLINK: "s",
    FileKind.BLOCK_DEVICE: "b",
    FileKind.CHAR_DEVICE: "c",
    FileKind.SOCKET: "s",
    FileKind.FIFO: "p",
}


@dataclass(frozen=True)
class EntryInfo:
    """Read-only snapshot of one directory entry (symlinks not followed)."""

    path: str
    kind: FileKind
    mode: int
    uid: int
    gid: int
    size: int

    @classmethod
    def from_dir_entry(cls, entry: os.DirEntry[str]) -> "EntryInfo":
        """Snapshot *entry* via ``lstat``.

        Raises:
            OSError: If the entry's metadata cannot be read.

        """
        info = entry.stat(follow_symlinks=False)
        return cls(
            path=display_path(entry.path),
            kind=FileKind.from_mode(info.st_mode),
            mode=info.st_mode,
            uid=info.st_uid,
            gid=info.st_gid,
            size=info.st_size,
        )

    def long_format(self) -> str:
        """Render as ``<type><perms> <uid> <gid> <size> <path>``."""
        return (
            f"{self.kind.glyph}{format_mode(self.mode)} "
            f"{self.uid} {self.gid} {self.size} {self.path}"
        )


class AccessError(StrEnum):
    """Why a directory could not be opened, worded for the user."""

    NOT_FOUND = "no such file or directory"
    PERMISSION_DENIED = "permission denied to view contents of"
    NOT_A_DIRECTORY = "file is not a directory"

    @classmethod
    def classify(cls, error: OSError) -> "AccessError":
        """Map an ``OSError`` onto one of the three user-facing reasons."""
        if isinstance(error, FileNotFoundError):
            return cls.NOT_FOUND
        if isinstance(error, PermissionError):
            return cls.PERMISSION_DENIED
        return cls.NOT_A_DIRECTORY


class ListingError(Exception):
    """Raised when the target directory itself cannot be opened."""

    def __init__(self, reason: AccessError, path: str) -> None:
        """Create a listing error for *path*."""
        self.reason = reason
        self.path = path
        super().__init__(f"{reason}: {path}")


@dataclass
class Listing:
    """Everything read from one directory: entries and per-entry errors."""

    entries: list[EntryInfo] = field(default_factory=list)
    errors: list[OSError] = field(default_factory=list)


def read_directory(path: str) -> Listing:
    """Snapshot every entry of the directory at *path*.

    Entries come back in whatever order the filesystem yields them.

    Raises:
        ListingError: If *path* cannot be opened as a directory.

    """
    try:
        iterator = os.scandir(path)
    except OSError as e:
        raise ListingError(AccessError.classify(e), path) from e
    except ValueError as e:
        # Embedded NUL bytes never name a directory.
        raise ListingError(AccessError.NOT_A_DIRECTORY, path) from e

    listing = Listing()
    with iterator:
        while True:
            try:
                entry = next(iterator)
            except StopIteration:
                break
            except OSError as e:
                # The directory stream itself failed; nothing more to read.
                listing.errors.append(e)
                break
            try:
                listing.entries.append(EntryInfo.from_dir_entry(entry))
            except OSError as e:
                listing.errors.append(e)
    return listing


def render(entries: list[EntryInfo], options: tuple[str, ...]) -> list[str]:
    """Turn entry snapshots into output lines.

    Without flags every path goes on one space-joined line (an empty
    directory gives one empty line).  With ``-l`` each entry gets a line
    of its own.
    """
    if LONG_FLAG in options:
        return [entry.long_format() for entry in entries]
    return [" ".join(entry.path for entry in entries)]


def execute(args: list[str]) -> CommandResult:
    """Run ``ls`` with *args* and return its output."""
    request = parse_args(args)

    invalid = validate_options(request.options)
    if invalid is not None:
        return CommandResult.error(f"ls : invalid option - '{invalid}'")

    try:
        listing = read_directory(request.path)
    except ListingError as e:
        return CommandResult.error(str(e))

    if listing.errors:
        return CommandResult(stderr=[str(error) for error in listing.errors])

    return CommandResult(stdout=render(listing.entries, request.options))
