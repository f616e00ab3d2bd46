"""Argument parsing functionality for check-node-types."""

import argparse
from constants import Constants


def build_parser():
    """Builds the argument parser for the program."""
    parser = argparse.ArgumentParser(
        prog=Constants.PROG_NAME,
        description=(
            "Verify that the @types/node major version matches the "
            "project's declared Node.js major version"
        ),
        add_help=True,
    )

    # Options left at None can be filled from a config file; see cli_config.
    parser.add_argument("-p", "--package",
                        dest="PACKAGE",
                        help="Path to package.json or the directory containing it (default: package.json)",
                        action="store", type=str,
                        default=None)
    parser.add_argument("-s", "--source",
                        dest="SOURCE",
                        help="Where to read the Node.js version from (default: engines)",
                        action="store", type=str,
                        choices=Constants.SUPPORTED_SOURCES,
                        default=None)
    parser.add_argument("--json",
                        dest="JSON",
                        help="Output the result as JSON.",
                        action="store_true",
                        default=None)
    parser.add_argument("--print",
                        dest="PRINT",
                        help="Print the detected versions without checking them.",
                        action="store_true",
                        default=None)
    parser.add_argument("-q", "--quiet",
                        dest="QUIET",
                        help="Do not output anything when the check passes.",
                        action="store_true",
                        default=None)
    parser.add_argument("-v", "--verbose",
                        dest="VERBOSE",
                        help="Show version details even when the check passes.",
                        action="store_true",
                        default=None)
    parser.add_argument("--no-color",
                        dest="COLOR",
                        help="Disable colored output.",
                        action="store_false",
                        default=None)

    parser.add_argument("-c", "--config",
                        dest="CONFIG",
                        help="Path to configuration file (YAML, YML, or JSON)",
                        action="store",
                        type=str)
    parser.add_argument("--loglevel",
                        dest="LOG_LEVEL",
                        help="Set the logging level",
                        action="store",
                        type=str,
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                        default=None)
    parser.add_argument("--logfile",
                        dest="LOG_FILE",
                        help="Log output file",
                        action="store",
                        type=str)
    parser.add_argument("--version",
                        action="version",
                        version=f"%(prog)s {Constants.VERSION}")
    return parser


def parse_args(argv=None):
    """Parses the arguments passed to the program."""
    return build_parser().parse_args(argv)
