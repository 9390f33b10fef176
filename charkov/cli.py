"""
Copyright (c) 2025 Ynosound.
All rights reserved.

See LICENSE file in the project root for full license information.
"""

import argparse
import re
import sys

from charkov.char_markov import Fixed_order_Markov
from charkov.config import DEFAULT_LENGTH, DEFAULT_LINES, DEFAULT_ORDER, GenerationConfig
from charkov.errors import CharkovError
from charkov.formatting import format_output
from charkov.normalizer import decode_codepoints, prepare_bytes


def build_parser():
    parser = argparse.ArgumentParser(prog='charkov', description='Generates text with a character level Markov chain')
    parser.add_argument('-f', dest='files', action='append', default=[], metavar='FILE',
                        help='The input file, can be repeated')
    parser.add_argument('--stdin', action='store_true', help='Read input from stdin instead')
    parser.add_argument('--length', type=int, default=DEFAULT_LENGTH, help='The maximum length of the output')
    parser.add_argument('--lines', type=int, default=DEFAULT_LINES, help='How many lines to generate')
    parser.add_argument('--order', type=int, default=DEFAULT_ORDER, help='The order of the ngrams')
    parser.add_argument('--seed', type=int, help='The seed for the random number generator')
    parser.add_argument('--min-line', type=int, default=0, help='Ignore lines that are shorter than this')
    parser.add_argument('--split', metavar='REGEX', help='Split output by regex')
    parser.add_argument('--dump-input', action='store_true',
                        help='Print the processed text instead of generating output')
    parser.add_argument('--print-seed', action='store_true',
                        help='Print the seed used for the random number generator')
    parser.add_argument('--ascii', action='store_true', help='Strip non-ascii characters')
    parser.add_argument('--stats', action='store_true', help='Print statistics about the model')
    return parser


def generate(config, data):
    """Processes a single input: dumps it or prints config.lines generations."""
    prepared = prepare_bytes(data, min_line=config.min_line, ascii_only=config.ascii_only)
    if config.dump_input:
        print(prepared.decode('utf-8', errors='replace'))
        return
    corpus = decode_codepoints(prepared)
    mc = Fixed_order_Markov(corpus, config.order, seed=config.seed)
    if config.print_seed:
        print(f"Seed: {mc.seed}")
    if config.stats:
        mc.show_stats()
    for _ in range(config.lines):
        print(format_output(mc.generate(config.length), config.split))


def read_stdin():
    return b''.join(line.rstrip(b'\n') + b'\n' for line in sys.stdin.buffer)


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.split is not None:
        try:
            re.compile(args.split)
        except re.error as e:
            parser.error(f"invalid --split regex: {e}")
    if args.order < 1:
        parser.error("--order must be positive")
    if args.length < 0 or args.lines < 0 or args.min_line < 0:
        parser.error("--length, --lines and --min-line must be non-negative")
    config = GenerationConfig.from_args(args)

    if args.stdin:
        inputs = [('<stdin>', read_stdin)]
    elif args.files:
        inputs = [(path, lambda path=path: read_file(path)) for path in args.files]
    else:
        parser.print_help(sys.stderr)
        return 1

    failed = 0
    for name, read in inputs:
        try:
            generate(config, read())
        except (OSError, CharkovError) as e:
            # an input failing does not stop the others
            print(f"error: {name}: {e}", file=sys.stderr)
            failed += 1
    return 1 if failed else 0


def read_file(path):
    with open(path, 'rb') as file:
        return file.read()


if __name__ == '__main__':
    sys.exit(main())
