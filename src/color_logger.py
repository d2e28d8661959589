"""Defines a ColourFormatter for logging to stderr.

Mode strings go to stdout, so log records default to stderr and only get
colour when that stream is a terminal.
"""
import logging
import os
import sys
from typing import Final, TextIO


RESET: Final = "\x1b[0m"

LEVEL_COLOURS: Final[tuple[tuple[int, str], ...]] = (
    (logging.DEBUG, "\x1b[34;20m"),     # blue
    (logging.INFO, "\x1b[36;20m"),      # cyan
    (logging.WARNING, "\x1b[33;20m"),   # yellow
    (logging.ERROR, "\x1b[31;20m"),     # red
    (logging.CRITICAL, "\x1b[31;1m"),   # bold red
)

FORMAT_TEMPLATE: Final = "%(levelname)s - %(name)s - %(message)s"


class ColourFormatter(logging.Formatter):
    """Wraps each record in the ANSI colour for its level."""

    def __init__(self, fmt: str = FORMAT_TEMPLATE, *args, **kwargs):
        super().__init__(fmt, *args, **kwargs)
        self._formatters: tuple[tuple[int, logging.Formatter], ...] = tuple(
            (lvl, logging.Formatter(colour + fmt + RESET, *args, **kwargs))
            for lvl, colour in LEVEL_COLOURS
        )

    def __get_formatter(self, level: int) -> logging.Formatter:
        for lvl, formatter in self._formatters:
            if level <= lvl:
                return formatter
        return self._formatters[-1][1]

    def format(self, record):
        return self.__get_formatter(record.levelno).format(record)


def wants_colour(stream: TextIO) -> bool:
    """Colour only for terminals, and never when ``NO_COLOR`` is set."""
    if os.environ.get("NO_COLOR"):
        return False
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


def make_color_stream_handler(stream: TextIO | None = None, level=logging.DEBUG) -> logging.Handler:
    """Makes a stream handler, with the colour formatter if the stream is a terminal."""
    stream = stream if stream is not None else sys.stderr
    h = logging.StreamHandler(stream)
    h.setLevel(level)
    h.setFormatter(ColourFormatter() if wants_colour(stream) else logging.Formatter(FORMAT_TEMPLATE))
    return h


def add_colour_logging_to(
        logger: logging.Logger | str | None,
        stream: TextIO | None = None,
        level=logging.DEBUG,
) -> logging.Logger:
    """Creates stream handler with colour formatter and attaches it to the given logger."""
    if not isinstance(logger, logging.Logger):
        logger = logging.getLogger(logger)
    h = make_color_stream_handler(stream=stream, level=level)
    logger.addHandler(h)
    logger.setLevel(level)
    return logger
