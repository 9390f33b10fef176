import io
import unittest
from contextlib import redirect_stdout

import numpy as np

from charkov.char_markov import Fixed_order_Markov
from charkov.errors import InsufficientCorpusError, NoSeedNgramError

CORPUS = "the cat sat on the mat the cat ran"


def reference_walk(corpus, order, seed, lengths):
    # straightforward rendition of the sampling with the documented rng (numpy PCG64)
    table = {}
    for i in range(len(corpus) - order):
        table.setdefault(corpus[i:i + order], []).append(corpus[i + order])
    keys = list(table)
    rng = np.random.default_rng(seed)
    outputs = []
    for length in lengths:
        while True:
            out = keys[rng.integers(len(keys))]
            if out[0] == ' ':
                break
        while len(out) < length and out[-order:] in table:
            conts = table[out[-order:]]
            out += conts[rng.integers(len(conts))]
        outputs.append(out)
    return outputs


class TestModel(unittest.TestCase):
    def test_table(self):
        mc = Fixed_order_Markov("abcabd", 2, seed=0)
        self.assertEqual(mc.prefixes_to_continuations, {"ab": ["c", "d"], "bc": ["a"], "ca": ["b"]})
        self.assertEqual(mc.ngrams, ["ab", "bc", "ca"])

    def test_keys_have_order_length_and_continuations(self):
        for order in range(1, 8):
            mc = Fixed_order_Markov(CORPUS, order, seed=1)
            for ngram, conts in mc.prefixes_to_continuations.items():
                self.assertEqual(len(ngram), order)
                self.assertTrue(conts)
            self.assertEqual(mc.transition_count(), len(CORPUS) - order)

    def test_duplicates_are_kept(self):
        mc = Fixed_order_Markov(CORPUS, 3, seed=1)
        self.assertEqual(mc.successors("the"), [" ", " ", " "])
        self.assertEqual(sorted(mc.successors(" ca")), ["t", "t"])
        self.assertEqual(mc.successors("zzz"), [])

    def test_successors_returns_a_copy(self):
        mc = Fixed_order_Markov(CORPUS, 3, seed=1)
        mc.successors("the").append("x")
        self.assertEqual(len(mc.successors("the")), 3)

    def test_code_points_not_bytes(self):
        mc = Fixed_order_Markov(" été été", 2, seed=3)
        self.assertIn("ét", mc.prefixes_to_continuations)
        self.assertEqual(mc.successors(" é"), ["t", "t"])

    def test_insufficient_corpus(self):
        with self.assertRaises(InsufficientCorpusError):
            Fixed_order_Markov("abc", 3)
        with self.assertRaises(InsufficientCorpusError):
            Fixed_order_Markov("", 1)
        Fixed_order_Markov("abcd", 3)

    def test_invalid_order(self):
        with self.assertRaises(ValueError):
            Fixed_order_Markov(CORPUS, 0)

    def test_seed(self):
        self.assertEqual(Fixed_order_Markov(CORPUS, 3, seed=-1).seed, 2 ** 64 - 1)
        seed = Fixed_order_Markov(CORPUS, 3).seed
        self.assertTrue(0 <= seed < 2 ** 64)


class TestGenerate(unittest.TestCase):
    def test_scenario(self):
        mc = Fixed_order_Markov(CORPUS, 3, seed=42)
        self.assertEqual(mc.generate(100), " mat the cat sat the cat sat ran")
        self.assertEqual(mc.generate(100), " on the cat ran")

    def test_matches_reference_walk(self):
        mc = Fixed_order_Markov(CORPUS, 3, seed=42)
        outputs = [mc.generate(40), mc.generate(40)]
        self.assertEqual(outputs, reference_walk(CORPUS, 3, 42, [40, 40]))

    def test_deterministic(self):
        first = Fixed_order_Markov(CORPUS, 2, seed=7)
        second = Fixed_order_Markov(CORPUS, 2, seed=7)
        self.assertEqual([first.generate(50), first.generate(50)], [second.generate(50), second.generate(50)])

    def test_generate_zero_returns_seed_ngram(self):
        mc = Fixed_order_Markov(CORPUS, 3, seed=5)
        for _ in range(10):
            out = mc.generate(0)
            self.assertEqual(len(out), 3)
            self.assertTrue(out.startswith(' '))
            self.assertIn(out, mc.space_ngrams)

    def test_length_below_order(self):
        mc = Fixed_order_Markov(CORPUS, 4, seed=5)
        self.assertEqual(len(mc.generate(2)), 4)

    def test_walk_follows_the_table(self):
        mc = Fixed_order_Markov(CORPUS, 3, seed=11)
        for length in (5, 20, 100):
            out = mc.generate(length)
            self.assertLessEqual(len(out), length)
            self.assertTrue(out.startswith(' '))
            for i in range(3, len(out)):
                self.assertIn(out[i], mc.successors(out[i - 3:i]))

    def test_stops_at_dead_end(self):
        mc = Fixed_order_Markov(" xyz", 2, seed=9)
        self.assertEqual(mc.generate(10), " xyz")

    def test_no_ngram_starting_with_space(self):
        mc = Fixed_order_Markov("ab cd", 3, seed=0)
        with self.assertRaises(NoSeedNgramError):
            mc.generate(10)
        mc = Fixed_order_Markov("abcdefgh", 2, seed=0)
        with self.assertRaises(NoSeedNgramError):
            mc.generate(10)

    def test_negative_length(self):
        mc = Fixed_order_Markov(CORPUS, 3, seed=0)
        with self.assertRaises(ValueError):
            mc.generate(-1)

    def test_show_stats(self):
        mc = Fixed_order_Markov(CORPUS, 3, seed=0)
        buf = io.StringIO()
        with redirect_stdout(buf):
            mc.show_stats()
        self.assertIn(f"ngrams: {mc.ngram_count()}", buf.getvalue())
        self.assertIn("order: 3", buf.getvalue())


if __name__ == '__main__':
    unittest.main()
