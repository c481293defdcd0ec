"""
Interchangeable log sinks for the log demo.

Each sink is a logging handler. SinkLogger owns a private logging.Logger that
holds exactly one sink at a time; it is created by the caller and closed when
the caller is done with it, instead of living in a process-wide instance.
"""

from enum import Enum
import logging
import os
import sys

from .exceptions import UnknownSinkError
from .logger import logger


class SinkKind(Enum):
    CONSOLE = "console"
    FILE = "file"
    NONE = "none"

    @property
    def description(self):
        if self is SinkKind.NONE:
            return "NONE (no output)"
        return self.name


def valid_sink_names():
    return ", ".join(kind.value for kind in SinkKind)


def parse_sink_kind(value):
    """Case-insensitive lookup of a sink kind by name."""
    try:
        return SinkKind(value.lower())
    except ValueError:
        raise UnknownSinkError(value) from None


class ConsoleSink(logging.StreamHandler):
    def __init__(self, stream=None):
        super().__init__(stream if stream is not None else sys.stdout)
        self.setFormatter(logging.Formatter("[Console] %(message)s"))


class FileSink(logging.Handler):
    """
    Appends each record to a file.

    The file is opened in append mode for every record and closed straight
    away, so it is created on first use and never truncated.
    """

    def __init__(self, filename):
        super().__init__()
        self.filename = os.fspath(filename)
        self.setFormatter(logging.Formatter("[File] %(message)s"))

    def emit(self, record):
        try:
            msg = self.format(record)
            with open(self.filename, "a") as f:
                f.write(msg + "\n")
        except Exception:
            self.handleError(record)


class NullSink(logging.NullHandler):
    pass


def create_sink(kind, log_file):
    if kind is SinkKind.CONSOLE:
        return ConsoleSink()
    if kind is SinkKind.FILE:
        return FileSink(log_file)
    if kind is SinkKind.NONE:
        return NullSink()
    raise UnknownSinkError(str(kind))


class SinkLogger:
    def __init__(self, kind=SinkKind.CONSOLE, log_file="app.log"):
        self.log_file = log_file
        self.kind = None
        self.sink = None
        self._logger = logging.Logger("number_pipeline.sinks", logging.INFO)
        self._logger.propagate = False
        self.set_sink(kind)

    def set_sink(self, kind):
        self._detach_sink()
        self.sink = create_sink(kind, self.log_file)
        self._logger.addHandler(self.sink)
        self.kind = kind
        logger.info(f"Log sink set to {kind.name}")

    def log(self, message):
        self._logger.info(message)

    def _detach_sink(self):
        if self.sink is not None:
            self._logger.removeHandler(self.sink)
            self.sink.close()
            self.sink = None

    def close(self):
        self._detach_sink()
        self.kind = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
