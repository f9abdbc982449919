"""Unix permission bits, decoded for display.

A file mode carries nine permission bits arranged as three triads::

    owner  group  other
    r w x  r w x  r w x
    8 7 6  5 4 3  2 1 0

Each triad is isolated by masking and shifting, then rendered as the
familiar ``rwx`` / ``r--`` string used by ``ls -l``.  The special bits
(setuid, setgid, sticky) sit above bit 8 and are ignored here.
"""

from dataclasses import dataclass

OWNER_MASK = 0o700
GROUP_MASK = 0o070
OTHER_MASK = 0o007

_READ = 0o4
_WRITE = 0o2
_EXECUTE = 0o1


@dataclass(frozen=True)
class Permission:
    """One read/write/execute triad, stored as a 3-bit value."""

    bits: int

    @property
    def readable(self) -> bool:
        """Return True if the read bit is set."""
        return self.bits & _READ > 0

    @property
    def writable(self) -> bool:
        """Return True if the write bit is set."""
        return self.bits & _WRITE > 0

    @property
    def executable(self) -> bool:
        """Return True if the execute bit is set."""
        return self.bits & _EXECUTE > 0

    def __str__(self) -> str:
        """Render as three characters, e.g. ``rw-``."""
        return (
            ("r" if self.readable else "-")
            + ("w" if self.writable else "-")
            + ("x" if self.executable else "-")
        )


@dataclass(frozen=True)
class ModePermissions:
    """The owner, group, and other triads of a file mode."""

    owner: Permission
    group: Permission
    other: Permission

    @classmethod
    def from_mode(cls, mode: int) -> "ModePermissions":
        """Decode the permission triads from a raw ``st_mode`` value."""
        return cls(
            owner=Permission((mode & OWNER_MASK) >> 6),
            group=Permission((mode & GROUP_MASK) >> 3),
            other=Permission(mode & OTHER_MASK),
        )

    def __str__(self) -> str:
        """Render all three triads, e.g. ``rw-r--r--``."""
        return f"{self.owner}{self.group}{self.other}"


def format_mode(mode: int) -> str:
    """Return the nine-character permission string for *mode*."""
    return str(ModePermissions.from_mode(mode))
