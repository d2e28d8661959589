#!/usr/bin/env python3
"""Entry script for lsmode: show Unix mode bits the way ``ls -l`` does."""

import argparse
import logging
import os
import sys
from typing import Final, List, Optional, TextIO

from color_logger import add_colour_logging_to
from file_attr import FileAttr
import unix_mode

ROOT_LOGGER: Final = logging.getLogger()
LOGGER: Final = logging.getLogger(__name__)


def check_octal(arg: str) -> int:
    """Checks the arg is an octal mode, with or without a ``0o`` / ``0`` prefix."""
    digits = arg[2:] if arg.lower().startswith("0o") else arg
    try:
        mode = int(digits, 8)
    except ValueError:
        mode = -1
    if mode < 0 or not digits.isdigit():
        raise argparse.ArgumentTypeError(f"Not an octal mode: {arg}")
    LOGGER.debug("check_octal: %s mode: %#08o", arg, mode)
    return mode


def make_parser():
    """Makes Parser ready to parse args passed to script."""

    parser = argparse.ArgumentParser(
        prog='lsmode',
        description='Shows Unix file mode bits as `ls -l` does, e.g. `drwxr-xr-x`.',
    )
    parser.add_argument(
        "modes", nargs="+", metavar="MODE_OR_PATH",
        help="Octal mode values, e.g. `40755`, or paths when `--path` is given."
    )
    parser.add_argument("--path", "-p", action='store_true',
                        help="Treat arguments as paths and `lstat` them.")
    parser.add_argument("--long", "-l", action='store_true',
                        help="Show the type and special bits (numbers) or all stat fields (paths).")
    parser.add_argument("--verbose", "-v", action='store_true', help="Enables DEBUG level tracing")
    parser.add_argument("--quiet", "-q", action='store_true', help="Drops to WARNING level tracing")

    return parser


def setup_loggers(stream: Optional[TextIO] = None):
    """Setup loggers."""
    for h in list(ROOT_LOGGER.handlers):
        ROOT_LOGGER.removeHandler(h)
    add_colour_logging_to(ROOT_LOGGER, stream=stream, level=logging.DEBUG)


def setup_log_levels(args: argparse.Namespace):
    """Setup logging levels per arguments."""
    log_level: Final = (
        logging.DEBUG if args.verbose
        else logging.WARNING if args.quiet
        else logging.INFO
    )
    ROOT_LOGGER.setLevel(log_level)


def describe(mode: int) -> str:
    """The ``--long`` breakdown of a bare mode value."""
    specials = [
        name for name, is_set in (
            ("setuid", unix_mode.is_setuid(mode)),
            ("setgid", unix_mode.is_setgid(mode)),
            ("sticky", unix_mode.is_sticky(mode)),
        ) if is_set
    ]
    lines = [
        f"mode: {mode:#o}",
        f"type: {unix_mode.classify(mode).name.lower()}",
        f"special: {', '.join(specials) or 'none'}",
    ]
    for by in (unix_mode.Accessor.OWNER, unix_mode.Accessor.GROUP, unix_mode.Accessor.OTHER):
        allowed = [
            access.name.lower() for access in unix_mode.Access
            if unix_mode.is_allowed(by, access, mode)
        ]
        lines.append(f"{by.name.lower()}: {', '.join(reversed(allowed)) or 'none'}")
    return "\n".join(lines)


def show_mode(arg: str, out: TextIO, long: bool) -> None:
    mode = check_octal(arg)
    print(unix_mode.to_string(mode), arg, file=out)
    if long:
        print(describe(mode), file=out)


def show_path(path: str, out: TextIO, long: bool) -> bool:
    """Prints the mode of ``path``; returns False if it couldn't be ``lstat``ed."""
    try:
        attr = FileAttr.from_stat(os.lstat(path))
    except OSError as e:
        LOGGER.warning("`lstat` failed -> %s", e)
        return False
    LOGGER.debug("show_path: %s mode: %#08o", path, attr["st_mode"])
    print(attr.mode_string, path, file=out)
    if long:
        print(attr, file=out)
    return True


def run(args: argparse.Namespace, out: Optional[TextIO] = None) -> int:
    """Prints each argument's mode string; returns the exit status."""
    out = out if out is not None else sys.stdout
    status = 0
    for arg in args.modes:
        if args.path:
            if not show_path(arg, out, args.long):
                status = 1
        else:
            show_mode(arg, out, args.long)
    return status


def main(argv: Optional[List[str]] = None):
    """Main."""
    setup_loggers()
    parser = make_parser()
    args = parser.parse_args(argv)
    setup_log_levels(args)
    if not args.path:
        for arg in args.modes:
            try:
                check_octal(arg)
            except argparse.ArgumentTypeError as e:
                parser.error(str(e))
    sys.exit(run(args))


if __name__ == '__main__':
    main()
