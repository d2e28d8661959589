"""Defines helper class ``FileAttr`` to use instead of a regular
``dict`` when dealing with ``stat`` structures.
"""
from datetime import datetime
import os
from typing import Callable, Dict, Final, Generator, List, Tuple, Union

import unix_mode


STAT_FIELDS: Final = (
    "st_mode",
    "st_nlink",
    "st_uid",
    "st_gid",
    "st_size",
    "st_atime",
    "st_mtime",
    "st_ctime",
)
"""The fields copied by ``FileAttr.from_stat``, in ``ls -l`` order."""


class FileAttr(Dict[str, int | float]):
    """Adds custom __str__ to format time stamps and the mode in a `stat` structure."""

    @classmethod
    def from_stat(cls, st: os.stat_result) -> "FileAttr":
        """Copy the portable fields out of an ``os.stat_result``.

        ``st_birthtime`` is included where the platform reports it.
        """
        attr = cls((key, getattr(st, key)) for key in STAT_FIELDS)
        birthtime = getattr(st, "st_birthtime", None)
        if birthtime is not None:
            attr["st_birthtime"] = birthtime
        return attr

    @property
    def file_type(self) -> unix_mode.Type:
        return unix_mode.classify(int(self["st_mode"]))

    @property
    def mode_string(self) -> str:
        """The ``st_mode`` field as ``ls -l`` shows it, e.g. ``drwxr-xr-x``."""
        return unix_mode.to_string(int(self["st_mode"]))

    def items_formatted(self) -> Generator[Tuple[str, str], None, None]:
        """Returns key/value pairs, but with the value formatted for human
        (programmer) consumption.
        """
        for key, value in self.items():
            formatter = _FORMATTERS.get(key, str)
            str_value = formatter(value) # type: ignore[arg-type]
            yield (key, str_value)


    def __str__(self) -> str:
        """`str()` function for `FileAttr`s.

        Returns:
            A YAML-like sting using "key: value", one line per key.
            If you want more control over formatting, call
            ``items_formatted()`` and iterate directly.
        """
        lines: List[str] = []
        for key, value in self.items_formatted():
            lines.append(f"{key}: {value}")
        return "\n".join(lines)

    __repr__ = __str__

    def copy(self) -> "FileAttr":
        return FileAttr(self.items())


# Static helpers

_TIME_FMT = Callable[[float], str]
_MODE_FMT = Callable[[int], str]
_FMT_T = Union[_TIME_FMT, _MODE_FMT]

def __format_time(timet: float) -> str:
    return datetime.fromtimestamp(timet).isoformat()

def __format_mode(value: int) -> str:
    return f"{unix_mode.to_string(value)} ({value:#o})"

_FORMATTERS: Final[Dict[str, _FMT_T]] = {
    "st_ctime": __format_time,
    "st_mtime": __format_time,
    "st_atime": __format_time,
    "st_birthtime": __format_time,
    "st_mode": __format_mode,
}
