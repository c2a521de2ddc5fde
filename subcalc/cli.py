#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Command-line interface for SubCalc.
"""
import argparse
import json
import logging
import os
import sys
import traceback
import typing

from . import __version__ as VERSION
from . import core


# Configure logging
logging.basicConfig(
    handlers=[logging.StreamHandler(sys.stderr)],
    level=logging.WARNING,
    format='%(asctime)s.%(msecs)03d [%(levelname)s]: (%(name)s.%(funcName)s) - %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S'
)
logger = logging.getLogger(__name__)

DEBUG_ENV_VAR = "SUBCALC_DEBUG"
EXIT_KEYWORDS = ("ex", "exit", "quit")
PROMPT = "Input: "

BANNER = f"""SubCalc {VERSION}
----------------------------------------------------------
Write 'ex' to exit the program.
Input forms: [IP] [CIDR] OR [IP]/[CIDR] OR [IP]/[Subnet Mask]"""


def print_result_stdout(res: typing.Dict[str, typing.Any], file: typing.TextIO = None) -> None:
    """Print result in human-readable format."""
    file = file or sys.stdout
    for k in core.RESULT_FIELDS:
        print(f"{k.capitalize()}: {res[k]}", file=file)
    print(f"Private: {'yes' if res['private'] else 'no'}", file=file)

    # Print comment if present for reserved ranges
    if res.get("comment"):
        print(f"Comment: {res['comment']}", file=file)


def print_result_json(res: typing.Dict[str, typing.Any], file: typing.TextIO = None) -> None:
    """Print result as valid JSON."""
    # Filter out empty comment for cleaner JSON output
    filtered_res = res.copy()
    if filtered_res.get("comment") == "":
        filtered_res.pop("comment", None)

    print(json.dumps(filtered_res), file=file or sys.stdout)


def run_cli(address: str, mask: typing.Optional[str] = None, json_output: bool = False) -> int:
    """
    Run CLI mode with given address.

    Args:
        address: IPv4 subnet input (e.g. 192.168.1.1/24)
        mask: optional mask or suffix given as a separate argument
        json_output: Whether to output JSON format

    Returns:
        Exit code (0 for success, 1 for error)
    """
    try:
        result = core.compute_from_cidr(address, mask)

        if json_output:
            print_result_json(result)
        else:
            print_result_stdout(result)
        return 0

    except ValueError as e:
        logger.error(f"{type(e).__name__} {str(e)}\n{traceback.format_exc()}")
        print(f"Error: {e}", file=sys.stderr)
        return 1


def run_list(address: str, mask: typing.Optional[str] = None) -> int:
    """Print every address of the subnet, one per line."""
    try:
        for item in core.iter_addresses(address, mask):
            print(item)
        return 0

    except ValueError as e:
        logger.error(f"{type(e).__name__} {str(e)}\n{traceback.format_exc()}")
        print(f"Error: {e}", file=sys.stderr)
        return 1


def run_interactive(stdin: typing.TextIO = None, stdout: typing.TextIO = None) -> int:
    """
    Read subnets line by line and print their parameters.

    Stops on end of input or when a line is one of EXIT_KEYWORDS.
    Invalid lines are reported and the loop continues.

    Returns:
        Exit code (always 0)
    """
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    print(BANNER, file=stdout)
    while True:
        print(f"\n{PROMPT}", end="", file=stdout, flush=True)
        line = stdin.readline()
        if not line:
            break

        text = line.strip()
        if text.lower() in EXIT_KEYWORDS:
            break
        if not text:
            continue

        try:
            result = core.compute_from_cidr(text)
        except ValueError as e:
            logger.debug(f"Rejected input {text!r}: {e}")
            print(f"Invalid Input! {e}", file=stdout)
            continue

        print(file=stdout)
        print_result_stdout(result, file=stdout)

    return 0


def main(argv: typing.Optional[list] = None) -> int:
    """
    Main CLI entry point.

    Args:
        argv: Command line arguments (uses sys.argv[1:] if None)

    Returns:
        Exit code (0 for success, 1 for error)
    """
    if argv is None:
        # Exclude program name when parsing args
        argv = sys.argv[1:]

    parser = argparse.ArgumentParser(
        prog="subcalc",
        description="SubCalc: IPv4 subnet calculator",
        epilog=(
            "Examples:\n"
            "  subcalc 192.168.1.10/24\n"
            "  subcalc 10.0.0.0/255.0.0.0 --json\n"
            "  subcalc 172.16.0.1 20\n"
            "  subcalc 192.168.1.0/29 --list\n"
            "  subcalc --interactive"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument(
        "address",
        nargs="?",
        help="IPv4 address with suffix or mask (e.g., 192.168.1.1/24 or 192.168.1.1/255.255.255.0)"
    )
    parser.add_argument(
        "mask",
        nargs="?",
        help="Suffix or mask, when not given after a '/' in ADDRESS"
    )
    parser.add_argument(
        "--json", "-j", action="store_true", help="Output result in JSON format"
    )
    parser.add_argument("--version", "-v", action="version", version=f"SubCalc {VERSION}")
    parser.add_argument(
        "--list",
        "-l",
        action="store_true",
        help="List every address of the subnet"
    )
    parser.add_argument(
        "--interactive",
        "-i",
        action="store_true",
        help="Read subnets from standard input until 'ex' is entered"
    )
    parser.add_argument(
        "--debug",
        "-d",
        action="store_true",
        help="Enable debug mode with detailed logging and timing information"
    )

    args = parser.parse_args(argv)

    # Setup debug mode if requested
    if args.debug or os.environ.get(DEBUG_ENV_VAR) == 'true':
        core.setup_logging(debug=True)
        logger.debug("Debug mode enabled")

    if args.interactive:
        return run_interactive()

    if args.address:
        if args.list:
            return run_list(args.address, args.mask)
        return run_cli(args.address, args.mask, args.json)

    # For CLI mode without address, show help
    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
