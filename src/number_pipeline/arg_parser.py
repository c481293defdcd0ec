from number_pipeline import config
from .filter_factory import FILTERS
import argparse
import importlib.resources as pkg_resources
import sys

USAGE_ERROR_STATUS = 1


def get_config_filepath(filename):
    return pkg_resources.files(config).joinpath(filename)


class ArgumentParser(argparse.ArgumentParser):
    """argparse.ArgumentParser that reports usage errors with exit status 1."""

    def error(self, message):
        self.print_usage(sys.stderr)
        if self.epilog:
            sys.stderr.write(f"{self.epilog}\n")
        self.exit(USAGE_ERROR_STATUS, f"{self.prog}: error: {message}\n")


def parse_args_for_filtering(argv=None):
    parser, input_group, output_group, options_group = shared_args("filter-numbers")
    parser.description = "Filter integers from a file and report the ones that pass"
    parser.epilog = "Example: filter-numbers EVEN numbers.txt"

    input_group.add_argument(
        "filter",
        metavar="FILTER",
        help=f"Filter token: {', '.join(FILTERS.tokens())} (e.g. GT5, GT-3)",
    )

    input_group.add_argument(
        "source",
        metavar="FILENAME",
        help="File of whitespace-separated integers (.gz files are decompressed)",
    )

    output_group.add_argument(
        "-o",
        "--output",
        help="Also write the kept numbers to this jsonlines.gz file",
    )

    output_group.add_argument(
        "--summary",
        help="Compressed JSON file to record the number of processed and kept values",
    )

    options_group.add_argument(
        "-n",
        "--dry-run",
        action="store_true",
        help="Test mode. Output will be uncompressed jsonlines and the summary is skipped.",
    )

    return parser.parse_args(argv)


def parse_args_for_logging(argv=None):
    parser, input_group, output_group, options_group = shared_args("log-demo")
    parser.description = "Send test messages to a console, file or null log sink"
    parser.epilog = "Valid options: console, file, none"

    input_group.add_argument(
        "sink",
        metavar="SINK",
        nargs="?",
        help="Log sink: console, file or none (case-insensitive, default: console)",
    )

    options_group.add_argument(
        "-c",
        "--config",
        help="Log demo configuration file in json.",
        default=get_config_filepath("log_demo.json"),
    )

    output_group.add_argument(
        "--log-file",
        help="File the file sink appends to (default: taken from the config file)",
    )

    return parser.parse_args(argv)


def shared_args(prog=None):
    parser = ArgumentParser(prog=prog)

    input_group = parser.add_argument_group("Input")
    output_group = parser.add_argument_group("Output")
    options_group = parser.add_argument_group("General options")

    options_group.add_argument(
        "-l",
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="WARNING",
        help="Set the logging level (default: WARNING)",
    )

    return parser, input_group, output_group, options_group
