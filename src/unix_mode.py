"""Decode Unix file mode bits, and render them the way ``ls -l`` does.

Every filesystem entry (inode) on Unix has a bit field of mode bits that
describe both the type of the file and its permissions::

    >>> to_string(0o0040755)
    'drwxr-xr-x'
    >>> to_string(0o0100640)
    '-rw-r-----'

The encoding is the same across unices, and also turns up in file formats
and network protocols on non-Unix platforms (tar headers, rsync, sftp).
Nothing here asks the OS to interpret the bits, so it works anywhere.

The predicate names follow ``stat.S_ISDIR`` and friends, but in the
spelling of ``pathlib.Path.is_dir()``.
"""
from enum import Enum
from typing import Dict, Final

from file_type_masks import S_IFMT, S_ISGID, S_ISUID, S_ISVTX, TYPE_SHIFT


def _type_bits(mode: int) -> int:
    """Return just the bits representing the type of file."""
    return (mode & S_IFMT) >> TYPE_SHIFT


class Type(Enum):
    """The different types of files known to this module.

    Each member's value is the character ``ls`` shows for it.

    More types may be added in the future: code matching on a ``Type``
    should always have a fall-through for members it doesn't know, and
    the meaning of ``UNKNOWN`` may narrow as that happens.
    """

    FILE = "-"
    """A plain file."""
    DIR = "d"
    """A directory."""
    SYMLINK = "l"
    """A symbolic link."""
    SOCKET = "s"
    """A Unix-domain socket."""
    FIFO = "p"
    """A named pipe / FIFO."""
    BLOCK_DEVICE = "b"
    """A block device, such as a disk."""
    CHAR_DEVICE = "c"
    """A character device, such as ``/dev/null``."""
    WHITEOUT = "w"
    """A removed file in union file systems."""
    UNKNOWN = "?"
    """File type not recognized by this version of this module."""

    @classmethod
    def from_mode(cls, mode: int) -> "Type":
        """Parse type from mode.

        >>> Type.from_mode(0o0100640)
        <Type.FILE: '-'>
        """
        return _TYPE_CODES.get(_type_bits(mode), cls.UNKNOWN)

    @property
    def char(self) -> str:
        return self.value


_TYPE_CODES: Final[Dict[int, Type]] = {
    0o01: Type.FIFO,
    0o02: Type.CHAR_DEVICE,
    0o04: Type.DIR,
    0o06: Type.BLOCK_DEVICE,
    0o10: Type.FILE,
    0o12: Type.SYMLINK,
    0o14: Type.SOCKET,
    0o16: Type.WHITEOUT,
}


class Accessor(Enum):
    """Who is accessing, for ``is_allowed``.

    Values are the position of the accessor's group of three bits,
    counting from the least significant.
    """

    OTHER = 0
    """Access by anyone other than the owner or group."""
    GROUP = 1
    """Access by the group of the file."""
    OWNER = 2
    """Access by the owner of the file."""
    USER = 2  # alias, as in chmod's "u"


class Access(Enum):
    """The type of access, for ``is_allowed``.

    Values are the position of the bit within an accessor's group.
    """

    EXECUTE = 0
    """Permission to "execute", broadly.

    For plain files this is permission to execute. For directories it
    grants permission to open files within the directory whose name is
    known.
    """
    WRITE = 1
    """Permission to write the file."""
    READ = 2
    """Permission to read the file, or the names of files in a directory."""


AccessKind = Access


def classify(mode: int) -> Type:
    """Return the type of file described by ``mode``."""
    return Type.from_mode(mode)


def is_allowed(by: Accessor, access: Access, mode: int) -> bool:
    """Check whether ``mode`` allows (``True``) or denies (``False``) the access."""
    bits = (mode >> (3 * by.value)) & 0o7
    return bits & (1 << access.value) != 0


def is_file(mode: int) -> bool:
    """Returns true if this mode represents a regular file.

    >>> is_file(0o0041777), is_file(0o0100640)
    (False, True)
    """
    return classify(mode) is Type.FILE


def is_dir(mode: int) -> bool:
    """Returns true if this mode represents a directory.

    >>> is_dir(0o0041777), is_dir(0o0100640)
    (True, False)
    """
    return classify(mode) is Type.DIR


def is_symlink(mode: int) -> bool:
    """Returns true if this mode represents a symlink.

    >>> is_symlink(0o0040755), is_symlink(0o0120755)
    (False, True)
    """
    return classify(mode) is Type.SYMLINK


def is_fifo(mode: int) -> bool:
    """Returns true if this mode represents a fifo, also known as a named pipe."""
    return classify(mode) is Type.FIFO


def is_char_device(mode: int) -> bool:
    """Returns true if this mode represents a character device."""
    return classify(mode) is Type.CHAR_DEVICE


def is_block_device(mode: int) -> bool:
    """Returns true if this mode represents a block device.

    >>> is_block_device(0o0020600), is_block_device(0o0060600)
    (False, True)
    """
    return classify(mode) is Type.BLOCK_DEVICE


def is_socket(mode: int) -> bool:
    """Returns true if this mode represents a Unix-domain socket."""
    return classify(mode) is Type.SOCKET


def is_setuid(mode: int) -> bool:
    """Returns true if the set-user-ID bit is set."""
    return mode & S_ISUID != 0


def is_setgid(mode: int) -> bool:
    """Returns true if the set-group-ID bit is set."""
    return mode & S_ISGID != 0


def is_sticky(mode: int) -> bool:
    """Returns true if the sticky bit is set."""
    return mode & S_ISVTX != 0


def _execute_char(allowed: bool, special: bool, special_char: str) -> str:
    if special:
        return special_char if allowed else special_char.upper()
    return "x" if allowed else "-"


def to_string(mode: int) -> str:
    """Convert Unix mode bits to a text string describing type and permissions,
    as shown in ``ls``.

    >>> to_string(0o0041777)  # classic "sticky" directory
    'drwxrwxrwt'
    >>> to_string(0o0020600), to_string(0o0060600)
    ('crw-------', 'brw-------')
    >>> to_string(0o0120777)
    'lrwxrwxrwx'
    >>> to_string(0o0106000)  # setuid and setgid, but nothing executable
    '---S--S---'
    """
    specials: Final = {
        Accessor.OWNER: (is_setuid(mode), "s"),
        Accessor.GROUP: (is_setgid(mode), "s"),
        Accessor.OTHER: (is_sticky(mode), "t"),
    }
    chars = [classify(mode).char]
    for by in (Accessor.OWNER, Accessor.GROUP, Accessor.OTHER):
        chars.append("r" if is_allowed(by, Access.READ, mode) else "-")
        chars.append("w" if is_allowed(by, Access.WRITE, mode) else "-")
        chars.append(_execute_char(is_allowed(by, Access.EXECUTE, mode), *specials[by]))
    return "".join(chars)


render = to_string
