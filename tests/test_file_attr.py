import os
import sys
from datetime import datetime

import pytest

from file_attr import STAT_FIELDS, FileAttr
from file_type_masks import S_IFDIR, S_IFREG
from unix_mode import Type


@pytest.fixture
def dir_attr():
    return FileAttr(st_mode=S_IFDIR | 0o1777, st_nlink=2, st_mtime=0.0)


def test_mode_string(dir_attr: FileAttr):
    assert dir_attr.mode_string == "drwxrwxrwt"
    assert dir_attr.file_type is Type.DIR


def test_items_formatted(dir_attr: FileAttr):
    formatted = dict(dir_attr.items_formatted())
    assert formatted["st_mode"] == "drwxrwxrwt (0o41777)"
    assert formatted["st_nlink"] == "2"
    assert formatted["st_mtime"] == datetime.fromtimestamp(0.0).isoformat()


def test_str_is_one_line_per_key(dir_attr: FileAttr):
    lines = str(dir_attr).splitlines()
    assert lines[0] == "st_mode: drwxrwxrwt (0o41777)"
    assert len(lines) == len(dir_attr)


def test_copy_keeps_type(dir_attr: FileAttr):
    copied = dir_attr.copy()
    assert isinstance(copied, FileAttr)
    assert copied == dir_attr
    copied["st_mode"] = S_IFREG | 0o640
    assert copied.mode_string == "-rw-r-----"
    assert dir_attr.mode_string == "drwxrwxrwt"


def test_missing_mode():
    with pytest.raises(KeyError):
        FileAttr(st_size=1).mode_string


@pytest.mark.skipif(sys.platform == "win32", reason="needs a Unix host")
def test_from_stat(tmp_path):
    f = tmp_path / "f"
    f.write_bytes(b"abc")
    f.chmod(0o640)
    attr = FileAttr.from_stat(os.lstat(f))
    assert set(STAT_FIELDS) <= set(attr)
    assert attr["st_size"] == 3
    assert attr.mode_string == "-rw-r-----"
