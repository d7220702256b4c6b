#!/usr/bin/env python3

import argparse
import logging
import sys
from importlib import metadata

from .const import (
    NAME,
    BANNER,
    PROMPT,
    STRONG_VERDICT,
    WEAK_VERDICT,
    SUCCESS_MESSAGE,
)
from .errors import PwTesterError, InputClosedError
from .rules import evaluate
from .terminal import MaskedLineReader, get_masked_reader

log = logging.getLogger(__name__)


def print_banner():
    for line in BANNER:
        print(line)
    print()


def print_verdict(result):
    """Prints the verdict and, for a weak password, the list of reasons."""
    if result.is_strong:
        print(STRONG_VERDICT)
        return
    print(WEAK_VERDICT)
    print("Reasons:")
    for reason in result.reasons:
        print(f"- {reason}")
    print()


def run(reader: MaskedLineReader) -> int:
    """Prompts for passwords until one satisfies every rule."""
    print_banner()
    attempts = 0
    while True:
        print(PROMPT, end="", flush=True)
        password = reader.read_line()
        print()
        attempts += 1

        result = evaluate(password)
        print_verdict(result)
        if result.is_strong:
            break
        if reader.at_eof:
            raise InputClosedError()

    log.debug("Strong password accepted after %d attempt(s).", attempts)
    print(SUCCESS_MESSAGE)
    return 0


def main():
    """Main function to run the password tester."""
    parser = argparse.ArgumentParser(
        prog=NAME,
        description="Interactively test passwords against the composition rules until one passes.",
    )
    parser.add_argument(
        "-v", "--version", action="version", version=f"{metadata.version(NAME)}"
    )
    parser.add_argument(
        "--debug", action="store_true", help="Print diagnostic messages to stderr."
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(levelname)s: %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        run(get_masked_reader())
    except PwTesterError as e:
        print(f"\nError: {e}", file=sys.stderr)
        sys.exit(1)
    except KeyboardInterrupt:
        print("\n\nOperation cancelled by user.")
        sys.exit(130)
    except Exception as e:
        print(f"An unexpected error occurred: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
