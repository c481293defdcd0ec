"""
Observers receive every kept number as it is found, then one completion call.
"""

from abc import ABC, abstractmethod
from contextlib import ExitStack
import sys

from .io import OutputWriter
from .logger import logger


class NumberObserver(ABC):
    """Base class for consumers of the filtered number stream."""

    def on_started(self):
        """Called once after the source has been read, before any number."""
        pass

    @abstractmethod
    def on_number(self, number):
        """Called once for each kept number, in arrival order."""
        pass

    @abstractmethod
    def on_finished(self):
        """Called exactly once after the last number."""
        pass

    def close(self):
        """Release resources. Called at the end of every run, even a failed one."""
        pass


class PrintObserver(NumberObserver):
    def __init__(self, stream=None):
        self.stream = stream

    def on_number(self, number):
        stream = self.stream if self.stream is not None else sys.stdout
        print(number, file=stream)

    def on_finished(self):
        pass


class CountObserver(NumberObserver):
    def __init__(self, stream=None):
        self.stream = stream
        self._count = 0

    @property
    def count(self):
        return self._count

    def on_number(self, number):
        self._count += 1

    def on_finished(self):
        stream = self.stream if self.stream is not None else sys.stdout
        print(f"Total numbers passed filter: {self._count}", file=stream)


class JsonlinesObserver(NumberObserver):
    """
    Writes kept numbers to a jsonlines file, one number per line.

    The file is opened in on_started, after the source has been read and
    before any number is passed on, so an unwritable destination fails the
    run before other observers produce output. Output is gzip-compressed
    unless dry_run is set.
    """

    def __init__(self, output_dest, dry_run=False):
        self.output_dest = output_dest
        self.dry_run = dry_run
        self._output_writer = None
        self._stack = ExitStack()

    def on_started(self):
        self._output_writer = self._stack.enter_context(
            OutputWriter(self.output_dest, self.dry_run)
        )

    def on_number(self, number):
        self._output_writer.write_data(number)

    def on_finished(self):
        self.close()
        logger.info(f"Finished writing kept numbers to {self.output_dest}")

    def close(self):
        self._stack.close()
        self._output_writer = None
