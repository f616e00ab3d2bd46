"""check-node-types - verify @types/node matches the declared Node.js version

    Returns:
        int: Exit code (0 pass, 1 fail, 2 warning or usage error)
"""
import logging
import os
import sys

from args import parse_args
from checker import check
from cli_config import apply_config, load_config
from common.logging_utils import configure_logging, extra_context, is_debug_enabled
from constants import Constants, ExitCodes
from output import OutputOptions, format_json, format_result
from versioning.models import CheckStatus, VersionSource

logger = logging.getLogger(__name__)

_EXIT_CODES = {
    CheckStatus.PASS: ExitCodes.SUCCESS,
    CheckStatus.FAIL: ExitCodes.MISMATCH,
    CheckStatus.WARN: ExitCodes.WARNINGS,
}


def exit_code_for(status: CheckStatus) -> int:
    """Map a check status to the process exit code."""
    return _EXIT_CODES[status].value


def use_color(args, stream=None) -> bool:
    """Color is on unless disabled by flag, NO_COLOR, or a non-TTY stream."""
    if not args.COLOR:
        return False
    if os.environ.get(Constants.NO_COLOR_ENV):
        return False
    stream = stream if stream is not None else sys.stdout
    isatty = getattr(stream, "isatty", None)
    return bool(callable(isatty) and isatty())


def run(argv=None) -> int:
    """Parse arguments, run the check, print the report and return the exit code."""
    args = parse_args(argv)
    configure_logging(args.LOG_LEVEL, args.LOG_FILE)
    apply_config(args, load_config(args.CONFIG))

    source = VersionSource(args.SOURCE)
    if is_debug_enabled(logger):
        logger.debug(
            "CLI start",
            extra=extra_context(
                event="function_entry",
                component="cli",
                action="main",
                package=args.PACKAGE,
                source=source.value,
            ),
        )

    result = check(args.PACKAGE, source)

    if args.QUIET and result.status is CheckStatus.PASS and not args.PRINT:
        return exit_code_for(result.status)

    if args.JSON:
        print(format_json(result))
    else:
        options = OutputOptions(
            verbose=args.VERBOSE,
            quiet=args.QUIET,
            print_only=args.PRINT,
            color=use_color(args),
        )
        text = format_result(result, options)
        if text:
            print(text)
        if args.PRINT:
            return ExitCodes.SUCCESS.value

    return exit_code_for(result.status)


def main():
    """Main function of the program."""
    sys.exit(run())


if __name__ == "__main__":
    main()
