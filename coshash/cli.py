"""
CosHash — terminal front end.

Without arguments, prompts for one line on stdin and prints the digest:

    [INPUT] Enter input string to CosHash
    > hello
    [OUTPUT] Hashed: <128 hex chars>

With a positional argument, prints only the hex digest of that argument.
"""

import argparse
import os
import sys

from .coshash import cos_hash_hex

PROMPT = "[INPUT] Enter input string to CosHash\n> "
OUTPUT_PREFIX = "[OUTPUT] Hashed: "


def _read_line(stream):
    # Raw bytes as typed; end of input counts as an empty line
    line = stream.readline()
    if line.endswith(b'\n'):
        line = line[:-1]
        if line.endswith(b'\r'):
            line = line[:-1]
    return line


def build_parser():
    parser = argparse.ArgumentParser(
        prog="coshash",
        description="Compute the 512-bit CosHash digest of a string.")
    parser.add_argument("text", nargs="?",
                        help="string to hash (prompts on stdin when omitted)")
    return parser


def main(argv=None, stdin=None, stdout=None) -> int:
    args = build_parser().parse_args(argv)
    if stdout is None:
        stdout = sys.stdout

    if args.text is not None:
        stdout.write(cos_hash_hex(os.fsencode(args.text)) + "\n")
        return 0

    if stdin is None:
        stdin = sys.stdin.buffer
    stdout.write(PROMPT)
    stdout.flush()
    data = _read_line(stdin)
    stdout.write(OUTPUT_PREFIX + cos_hash_hex(data) + "\n")
    stdout.flush()
    return 0
