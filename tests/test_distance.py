"""Tests for the Levenshtein distance functions used when merging barcodes."""

import itertools
import random
import unittest

from barcount.distance import bounded_edit_distance, edit_distance


def generate_dna_sequence(seed_str: str, length: int) -> str:
    """Generate a deterministic DNA sequence from a seed string."""
    rng = random.Random(seed_str)
    return ''.join(rng.choice('ACGT') for _ in range(length))


class TestEditDistance(unittest.TestCase):

    def test_identical_is_zero(self):
        self.assertEqual(edit_distance("ACGTACGT", "ACGTACGT"), 0)

    def test_single_substitution(self):
        self.assertEqual(edit_distance("AAAA", "AAAT"), 1)

    def test_single_insertion_and_deletion(self):
        self.assertEqual(edit_distance("AAAA", "AAAAA"), 1)
        self.assertEqual(edit_distance("ACGT", "AGT"), 1)

    def test_completely_different(self):
        self.assertEqual(edit_distance("AAAA", "GGGG"), 4)

    def test_shift_counts_as_indels_not_substitutions(self):
        # Hamming distance would be 5; one deletion plus one insertion suffices
        self.assertEqual(edit_distance("ACGTA", "CGTAC"), 2)

    def test_empty_strings(self):
        self.assertEqual(edit_distance("", ""), 0)
        self.assertEqual(edit_distance("", "ACG"), 3)
        self.assertEqual(edit_distance("ACGT", ""), 4)

    def test_symmetric(self):
        pairs = [("ACGT", "AGT"), ("", "AC"), ("GATTACA", "TACGA"), ("AAAA", "CCCCCC")]
        for a, b in pairs:
            self.assertEqual(edit_distance(a, b), edit_distance(b, a), f"{a} vs {b}")

    def test_zero_only_for_equal_strings(self):
        seqs = [generate_dna_sequence(f"zero{i}", 6) for i in range(10)]
        for a, b in itertools.combinations(seqs, 2):
            if a != b:
                self.assertGreater(edit_distance(a, b), 0)

    def test_triangle_inequality(self):
        rng = random.Random("triangle")
        seqs = [generate_dna_sequence(f"tri{i}", rng.randint(0, 8)) for i in range(12)]
        for a, b, c in itertools.permutations(seqs, 3):
            self.assertLessEqual(edit_distance(a, c), edit_distance(a, b) + edit_distance(b, c),
                                 f"triangle violated for {a!r}, {b!r}, {c!r}")


class TestBoundedEditDistance(unittest.TestCase):

    def test_within_bound_returns_exact_distance(self):
        self.assertEqual(bounded_edit_distance("AAAA", "AAAT", 1), 1)
        self.assertEqual(bounded_edit_distance("AAAA", "AATT", 3), 2)

    def test_beyond_bound_returns_none(self):
        self.assertIsNone(bounded_edit_distance("AAAA", "GGGG", 1))
        self.assertIsNone(bounded_edit_distance("AAAA", "AATT", 1))

    def test_zero_bound_only_accepts_identical(self):
        self.assertEqual(bounded_edit_distance("ACGT", "ACGT", 0), 0)
        self.assertIsNone(bounded_edit_distance("ACGT", "ACGA", 0))

    def test_length_difference_beyond_bound(self):
        self.assertIsNone(bounded_edit_distance("AC", "ACGTACGT", 2))

    def test_empty_strings(self):
        self.assertEqual(bounded_edit_distance("", "", 0), 0)
        self.assertEqual(bounded_edit_distance("", "A", 1), 1)
        self.assertIsNone(bounded_edit_distance("ACG", "", 2))

    def test_agrees_with_unbounded(self):
        seqs = [generate_dna_sequence(f"agree{i}", 5 + i % 3) for i in range(10)]
        for a, b in itertools.combinations(seqs, 2):
            exact = edit_distance(a, b)
            for k in range(0, 7):
                expected = exact if exact <= k else None
                self.assertEqual(bounded_edit_distance(a, b, k), expected, f"{a} vs {b}, k={k}")


if __name__ == '__main__':
    unittest.main()
