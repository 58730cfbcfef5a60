"""argen command line entry point.

``argen <command> SPEC...`` runs one command and exits; ``argen`` alone opens
the interactive menu. Exit status is 0 on success, 1 when a specification,
the configuration or an output file is rejected, and 130 on Ctrl-C.
"""

import sys

from argen.cli.parser import create_parser
from argen.core.application import Application
from argen.ui.menu import SpecMenu
from argen.utils.logging_manager import get_logger

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130

# Parser destinations that belong to argen itself, not to a command
GLOBAL_OPTIONS = {"command", "specs", "config", "debug", "verbose", "silent"}


def command_options(args) -> dict:
    """Command options the user actually gave on the command line"""
    return {
        key: value
        for key, value in vars(args).items()
        if key not in GLOBAL_OPTIONS and value is not None
    }


def main(argv=None) -> int:
    args = create_parser().parse_args(argv)
    app = None

    try:
        app = Application.from_args(args)

        if args.command is None:
            SpecMenu(app, args).run()
            return EXIT_OK

        logger.info(f"Running '{args.command}' on {len(args.specs)} specification(s)")
        app.execute_handler(args.command, args.specs, command_options(args))
        return EXIT_OK

    except KeyboardInterrupt:
        logger.info("Cancelled")
        return EXIT_INTERRUPTED
    except (ValueError, RuntimeError, OSError) as e:
        # SpecError is a ValueError; loading failures arrive as RuntimeError
        logger.error(f"argen {args.command or 'menu'}: {e}", exc_info=args.debug)
        return EXIT_FAILURE
    except Exception as e:
        logger.error(f"Unexpected error: {e}", exc_info=True)
        return EXIT_FAILURE
    finally:
        if app is not None:
            app.shutdown()


if __name__ == "__main__":
    sys.exit(main())
