from .exceptions import NumberSourceError
from .logger import logger
import gzip
import jsonlines
import re

INTEGER_TOKEN = re.compile(r"[+-]?[0-9]+")


class FileNumberReader:
    """Reads whitespace-separated integers from a (optionally gzipped) file."""

    def read_numbers(self, source):
        return read_numbers(source)


class OutputWriter:
    def __init__(self, output_dest, dry_run=False):
        self.output_dest = output_dest
        self.dry_run = dry_run
        self.file_object = None
        self.writer = None
        logger.info(f"Writing output to {self.output_dest}")

    def __enter__(self):
        self._open_file()
        return self

    def _open_file(self):
        logger.debug(f"Opening {self.output_dest} for writing")
        if self.dry_run:
            self.file_object = open(self.output_dest, "w")
        else:
            self.file_object = gzip.open(self.output_dest, "wt")
        self.writer = jsonlines.Writer(self.file_object)
        return self

    def write_data(self, data):
        self.writer.write(data)

    def _close_file(self):
        logger.debug(f"Closing {self.output_dest}")
        if self.writer:
            self.writer.close()
            self.writer = None
        if self.file_object:
            self.file_object.close()
            self.file_object = None

    def __exit__(self, exc_type, exc_val, exc_tb):
        self._close_file()


def _open_source(source):
    if str(source).endswith(".gz"):
        return gzip.open(source, "rt", encoding="utf-8")
    return open(source, "rt", encoding="utf-8")


def _leading_integer(token):
    """
    Split a token into its leading integer and the text after it.

    Returns (None, token) if the token doesn't start with an integer, or if
    the digits are too long to convert.
    """
    match = INTEGER_TOKEN.match(token)
    if not match:
        return None, token
    try:
        number = int(match.group())
    except ValueError:
        return None, token
    return number, token[match.end():]


def read_numbers(source):
    """
    Read integers from a file of whitespace-separated tokens.

    Reading stops where an integer can't be read: at a token that doesn't
    start with one, or straight after the leading integer of a token like
    ``12abc`` (12 is kept). The rest of the file is ignored and only a
    warning is logged. A file that can't be opened or decoded raises
    NumberSourceError.
    """
    logger.info(f"Reading numbers from {source}")
    numbers = []
    try:
        with _open_source(source) as f:
            for i, line in enumerate(f, 1):
                for token in line.split():
                    number, rest = _leading_integer(token)
                    if number is not None:
                        numbers.append(number)
                    if rest:
                        logger.warning(
                            f"Stopped reading {source} at non-integer text "
                            f"{rest[:40]!r} on line {i}"
                        )
                        return numbers
    except (OSError, EOFError, UnicodeDecodeError) as e:
        raise NumberSourceError(str(source), e) from e

    logger.debug(f"Read {len(numbers)} numbers from {source}")
    return numbers


def write_json(data, file):
    with gzip.open(file, "wb") as f:
        with jsonlines.Writer(f) as writer:
            writer.write(data)
