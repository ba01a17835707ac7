"""Argument parsing functionality for AuditGate."""

import argparse
from constants import Constants

def parse_args(argv=None):
    """Parses the arguments passed to the program."""
    parser = argparse.ArgumentParser(
        prog="auditgate",
        description=(
            "AuditGate - checks projects for known high-severity dependency vulnerabilities"
        ),
        add_help=True,
    )

    parser.add_argument("-d", "--directory",
                        dest="FROM_SRC",
                        help="Project root directory to evaluate (can be used multiple times)",
                        action="append",
                        type=str,
                        required=True)
    parser.add_argument("--language",
                        dest="LANGUAGE",
                        help="Declared source language of the project (default: javascript)",
                        action="store",
                        type=str.lower,
                        choices=Constants.SUPPORTED_LANGUAGES,
                        default="javascript")
    parser.add_argument("--timeout",
                        dest="TIMEOUT",
                        help="Seconds to wait for the audit command before giving up",
                        action="store",
                        type=int)

    parser.add_argument("-o", "--output",
                        dest="OUTPUT",
                        help="Path to JSON output file",
                        action="store",
                        type=str)
    parser.add_argument("--loglevel",
                        dest="LOG_LEVEL",
                        help="Set the logging level",
                        action="store",
                        type=str,
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                        default='INFO')
    parser.add_argument("--logfile",
                        dest="LOG_FILE",
                        help="Log output file",
                        action="store",
                        type=str)
    parser.add_argument("--error-on-warnings",
                        dest="ERROR_ON_WARNINGS",
                        help="Exit with a non-zero status code if a practice is violated.",
                        action="store_true")
    parser.add_argument("-q", "--quiet",
                        dest="QUIET",
                        help="Do not output to console.",
                        action="store_true")
    parser.add_argument("-c", "--config",
                        dest="CONFIG",
                        help="Path to configuration file (YAML, YML, or JSON)",
                        action="store",
                        type=str)

    return parser.parse_args(argv)
