"""
Copyright (c) 2025 Ynosound.
All rights reserved.

See LICENSE file in the project root for full license information.
"""

import numpy as np

from charkov.config import draw_seed
from charkov.errors import InsufficientCorpusError, NoSeedNgramError

"""
- Fixed order Markov model on characters (code points), not words.
- Contexts (ngrams) are str of exactly `order` code points, continuations are single code points.
- Continuations are kept with their repetitions, so sampling uniformly in the list follows the empirical frequencies.
- The dictionary keeps the ngrams in order of first occurrence, so a seed fully determines the generated text.
- Each model owns its random generator (numpy PCG64), successive generations share its state.
"""

SEED_MASK = (1 << 64) - 1


class Fixed_order_Markov:
    def __init__(self, corpus, order=6, seed=None):
        if order < 1:
            raise ValueError(f"order must be positive, got {order}")
        if len(corpus) <= order:
            raise InsufficientCorpusError(len(corpus), order)
        self.order = order
        self.corpus = corpus
        # ngram -> list of continuations, with repetitions
        self.prefixes_to_continuations = {}
        self.build_markov_model(corpus)
        self.ngrams = list(self.prefixes_to_continuations)
        # the ngrams a generation can start with
        self.space_ngrams = [ngram for ngram in self.ngrams if ngram.startswith(' ')]
        if seed is None:
            seed = draw_seed()
        self.seed = seed & SEED_MASK
        self.rng = np.random.default_rng(self.seed)

    def build_markov_model(self, corpus):
        order = self.order
        for i in range(len(corpus) - order):
            ngram = corpus[i:i + order]
            if ngram not in self.prefixes_to_continuations:
                self.prefixes_to_continuations[ngram] = []
            self.prefixes_to_continuations[ngram].append(corpus[i + order])

    def ngram_count(self):
        return len(self.ngrams)

    def transition_count(self):
        return sum(len(conts) for conts in self.prefixes_to_continuations.values())

    def successors(self, ngram):
        return list(self.prefixes_to_continuations.get(ngram, []))

    def random_index(self, size):
        return int(self.rng.integers(size))

    def random_seed_ngram(self):
        # rejection sampling over all the ngrams, keeps the draws uniform on the table
        if not self.space_ngrams:
            raise NoSeedNgramError(self.order)
        while True:
            ngram = self.ngrams[self.random_index(len(self.ngrams))]
            if ngram.startswith(' '):
                return ngram

    def generate(self, length=100):
        """
        Generates a random walk in the model, starting with an ngram that begins with a space.

        Args:
            length: the maximum number of code points. The seed ngram is always returned entirely,
            so the result is never shorter than the order

        Returns:
            the generated str, shorter than length if the walk reaches an ngram with no continuation
        """
        if length < 0:
            raise ValueError(f"length must be non-negative, got {length}")
        result = [*self.random_seed_ngram()]
        while len(result) < length:
            ngram = ''.join(result[-self.order:])
            conts = self.prefixes_to_continuations.get(ngram)
            if conts is None:
                break
            result.append(conts[self.random_index(len(conts))])
        return ''.join(result)

    def show_stats(self):
        distinct = [len(set(conts)) for conts in self.prefixes_to_continuations.values()]
        print(f"corpus size: {len(self.corpus)}, order: {self.order}")
        print(f"ngrams: {self.ngram_count()}, transitions: {self.transition_count()}")
        print(f"ngrams starting with a space: {len(self.space_ngrams)}")
        print(f"min distinct continuations: {min(distinct)}, max: {max(distinct)}")
