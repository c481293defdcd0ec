"""
Single-pass processing of a number source through a filter and its observers.
"""

from contextlib import ExitStack
from enum import Enum

from .exceptions import ProcessorStateError
from .logger import logger


class ProcessorState(Enum):
    NOT_STARTED = "not_started"
    RUNNING = "running"
    FINISHED = "finished"
    FAILED = "failed"


class NumberProcessor:
    """
    Reads a source, applies the filter to each number and notifies observers.

    Observers are started once the source has been read, so a failed read
    reaches none of them. They are then called in the order they were given,
    for every kept number, and each receives on_finished exactly once at the
    end of the pass. Every observer is closed when the run ends, whether it
    succeeded or not. A processor performs a single run.
    """

    def __init__(self, reader, number_filter, observers):
        self.reader = reader
        self.number_filter = number_filter
        self.observers = list(observers)
        self.state = ProcessorState.NOT_STARTED
        self.n_processed = 0
        self.n_kept = 0

    def run(self, source):
        if self.state is not ProcessorState.NOT_STARTED:
            raise ProcessorStateError(
                f"Processor has already been run (state: {self.state.value})"
            )
        self.state = ProcessorState.RUNNING

        try:
            with ExitStack() as stack:
                for observer in self.observers:
                    stack.callback(observer.close)

                numbers = self.reader.read_numbers(source)
                self.notify_started()
                for number in numbers:
                    self.n_processed += 1
                    if self.number_filter.keep(number):
                        logger.debug(f"Keeping {number}")
                        self.n_kept += 1
                        self.notify_number(number)
                self.notify_finished()
        except Exception:
            self.state = ProcessorState.FAILED
            raise

        self.state = ProcessorState.FINISHED
        logger.info(f"Processed {self.n_processed} numbers")
        logger.info(f"Kept {self.n_kept} numbers")

    def notify_started(self):
        for observer in self.observers:
            observer.on_started()

    def notify_number(self, number):
        for observer in self.observers:
            observer.on_number(number)

    def notify_finished(self):
        for observer in self.observers:
            observer.on_finished()
