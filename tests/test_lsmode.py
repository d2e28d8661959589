import argparse
import io
import sys

import pytest

import lsmode


@pytest.fixture(autouse=True)
def restore_root_logger():
    handlers = list(lsmode.ROOT_LOGGER.handlers)
    level = lsmode.ROOT_LOGGER.level
    yield
    lsmode.ROOT_LOGGER.handlers[:] = handlers
    lsmode.ROOT_LOGGER.setLevel(level)


@pytest.fixture
def parser():
    return lsmode.make_parser()


@pytest.mark.parametrize("arg, expected", [
    ("755", 0o755),
    ("40755", 0o40755),
    ("0040755", 0o40755),
    ("0o41777", 0o41777),
    ("0O644", 0o644),
])
def test_check_octal(arg: str, expected: int):
    assert lsmode.check_octal(arg) == expected


@pytest.mark.parametrize("arg", ["", "8", "rwx", "-755", "0x1ff", "7_55", "0o"])
def test_check_octal_rejects(arg: str):
    with pytest.raises(argparse.ArgumentTypeError):
        lsmode.check_octal(arg)


def test_run_modes(parser):
    out = io.StringIO()
    args = parser.parse_args(["40755", "0100640", "0o41777"])
    assert lsmode.run(args, out) == 0
    assert out.getvalue().splitlines() == [
        "drwxr-xr-x 40755",
        "-rw-r----- 0100640",
        "drwxrwxrwt 0o41777",
    ]


def test_run_modes_long(parser):
    out = io.StringIO()
    args = parser.parse_args(["--long", "106740"])
    assert lsmode.run(args, out) == 0
    assert out.getvalue().splitlines() == [
        "-rwsr-S--- 106740",
        "mode: 0o106740",
        "type: file",
        "special: setuid, setgid",
        "owner: read, write, execute",
        "group: read",
        "other: none",
    ]


@pytest.mark.skipif(sys.platform == "win32", reason="needs a Unix host")
def test_run_paths(parser, tmp_path):
    d = tmp_path / "d"
    d.mkdir()
    d.chmod(0o755)
    out = io.StringIO()
    args = parser.parse_args(["--path", str(d), str(tmp_path / "missing")])
    assert lsmode.run(args, out) == 1
    assert out.getvalue().splitlines() == [f"drwxr-xr-x {d}"]


def test_log_levels(parser):
    lsmode.setup_log_levels(parser.parse_args(["-v", "0"]))
    assert lsmode.ROOT_LOGGER.level == lsmode.logging.DEBUG
    lsmode.setup_log_levels(parser.parse_args(["-q", "0"]))
    assert lsmode.ROOT_LOGGER.level == lsmode.logging.WARNING
    lsmode.setup_log_levels(parser.parse_args(["0"]))
    assert lsmode.ROOT_LOGGER.level == lsmode.logging.INFO


def test_main_exit_status(capsys):
    with pytest.raises(SystemExit) as e:
        lsmode.main(["0o120777"])
    assert e.value.code == 0
    assert capsys.readouterr().out == "lrwxrwxrwx 0o120777\n"


def test_main_rejects_bad_mode(capsys):
    with pytest.raises(SystemExit) as e:
        lsmode.main(["rwxr-xr-x"])
    assert e.value.code == 2
    assert "Not an octal mode: rwxr-xr-x" in capsys.readouterr().err
