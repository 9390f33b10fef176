"""
Copyright (c) 2025 Ynosound.
All rights reserved.

See LICENSE file in the project root for full license information.
"""

import secrets

DEFAULT_ORDER = 6
DEFAULT_LENGTH = 100
DEFAULT_LINES = 1


def draw_seed():
    # 64 bits from the system entropy source
    return secrets.randbits(64)


class GenerationConfig:
    def __init__(self, order=DEFAULT_ORDER, length=DEFAULT_LENGTH, lines=DEFAULT_LINES, seed=None,
                 min_line=0, ascii_only=False, dump_input=False, split=None, print_seed=False, stats=False):
        self.order = order
        self.length = length
        # number of generations per input
        self.lines = lines
        # None means a new seed is drawn for each input
        self.seed = seed
        self.min_line = min_line
        self.ascii_only = ascii_only
        self.dump_input = dump_input
        # regex used to split the generated text for display
        self.split = split
        self.print_seed = print_seed
        self.stats = stats

    @classmethod
    def from_args(cls, args):
        return cls(order=args.order, length=args.length, lines=args.lines, seed=args.seed,
                   min_line=args.min_line, ascii_only=args.ascii, dump_input=args.dump_input,
                   split=args.split, print_seed=args.print_seed, stats=args.stats)
