from .arg_parser import parse_args_for_filtering
from .exceptions import NumberPipelineError
from .filter_factory import create_filter
from .io import FileNumberReader, write_json
from .logger import logger, setup_logger
from .observers import CountObserver, JsonlinesObserver, PrintObserver
from .processing_framework import NumberProcessor
import sys

ERROR_STATUS = 2


def main(argv=None):

    args = parse_args_for_filtering(argv)
    setup_logger(args.log_level)

    try:
        number_filter = create_filter(args.filter)

        # set up observers
        observers = [PrintObserver(), CountObserver()]
        if args.output:
            observers.append(JsonlinesObserver(args.output, args.dry_run))

        processor = NumberProcessor(FileNumberReader(), number_filter, observers)
        processor.run(args.source)

        # write optional output
        if not args.dry_run and args.summary:
            logger.info(f"Writing summary to {args.summary}")
            write_json(
                {
                    "filter": args.filter,
                    "source": args.source,
                    "processed": processor.n_processed,
                    "kept": processor.n_kept,
                },
                args.summary,
            )

    except (NumberPipelineError, OSError) as e:
        logger.debug(f"Run failed: {e!r}")
        print(f"Error: {e}", file=sys.stderr)
        return ERROR_STATUS

    return 0


if __name__ == "__main__":
    sys.exit(main())
