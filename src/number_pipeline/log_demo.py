from .arg_parser import parse_args_for_logging
from .config_parser import LogDemoConfig
from .exceptions import UnknownSinkError
from .logger import logger, setup_logger
from .sinks import SinkKind, SinkLogger, parse_sink_kind, valid_sink_names
import sys

CONFIG_ERROR_STATUS = 1
N_TEST_MESSAGES = 3


def main(argv=None):

    args = parse_args_for_logging(argv)
    setup_logger(args.log_level)

    demo_config = None
    try:
        if args.sink is None:
            demo_config = LogDemoConfig(args.config)
            kind = parse_sink_kind(demo_config.default_sink)
            print(f"No sink type specified. Using default: {kind.name}.")
        else:
            kind = parse_sink_kind(args.sink)

        # the config is only read for the settings the command line leaves out
        log_file = args.log_file
        if log_file is None and kind is SinkKind.FILE:
            if demo_config is None:
                demo_config = LogDemoConfig(args.config)
            log_file = demo_config.log_file
    except UnknownSinkError as e:
        print(f"Error: {e}", file=sys.stderr)
        print(f"Valid options: {valid_sink_names()}", file=sys.stderr)
        return CONFIG_ERROR_STATUS
    except (OSError, ValueError, KeyError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return CONFIG_ERROR_STATUS

    with SinkLogger(kind, log_file) as sink_logger:
        print(f"Log sink set to {kind.description}.")
        for i in range(1, N_TEST_MESSAGES + 1):
            sink_logger.log(f"Test message {i}")

    logger.info(f"Sent {N_TEST_MESSAGES} messages to the {kind.value} sink")
    print("Logging complete.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
