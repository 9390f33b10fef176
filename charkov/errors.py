"""
Copyright (c) 2025 Ynosound.
All rights reserved.

See LICENSE file in the project root for full license information.
"""


class CharkovError(Exception):
    pass


class EncodingError(CharkovError):
    def __init__(self, position, reason):
        self.position = position
        self.reason = reason
        super().__init__(f"invalid UTF-8 at byte {position}: {reason}")


class InsufficientCorpusError(CharkovError):
    def __init__(self, corpus_length, order):
        self.corpus_length = corpus_length
        self.order = order
        super().__init__(f"corpus has {corpus_length} characters, needs more than the order ({order})")


class NoSeedNgramError(CharkovError):
    # no ngram starts with a space, so there is nowhere to start a generation
    def __init__(self, order):
        self.order = order
        super().__init__(f"no ngram of order {order} starts with a space")
