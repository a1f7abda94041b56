"""
test_seeding.py — pytest suite for loreforge.seeding
=====================================================
Covers: seed(), LoreStream, stream_for(), weighted_index() and its
monotonicity / zero-weight fallback over many seeded trials.
"""

import math

import pytest

from loreforge.seeding import LoreStream, seed, stream_for, weighted_index
from loreforge.survey import index_counts


# ─────────────────────────────────────────────────────
# seed
# ─────────────────────────────────────────────────────

class TestSeed:
    def test_origin_is_zero(self):
        assert seed(0, 0, 0) == 0

    def test_single_axis_uses_its_prime(self):
        assert seed(1, 0, 0) == 73856093
        assert seed(0, 1, 0) == 19349663
        assert seed(0, 0, 1) == 83492791

    def test_axes_combine_with_xor(self):
        assert seed(1, 1, 1) == 73856093 ^ 19349663 ^ 83492791

    def test_salt_folds_in(self):
        assert seed(0, 0, 0, salt=1) == 2654435761
        assert seed(3, 4, 5, salt=7) != seed(3, 4, 5)

    def test_zero_salt_matches_unsalted(self):
        assert seed(3.5, -2.0, 8.25, salt=0) == seed(3.5, -2.0, 8.25)

    def test_repeatable(self):
        assert seed(10.0, 0.0, 5.0, 42) == seed(10.0, 0.0, 5.0, 42)

    @pytest.mark.parametrize("coords", [
        (-1, 0, 0), (-1e6, 3.3, 7.7), (1e9, 1e9, 1e9), (0.001, -0.001, 12345.678),
        (1e308, -1e308, 1e307), (1.7e308, 0, -1.7e308),
    ])
    def test_always_unsigned_32_bit(self, coords):
        s = seed(*coords, salt=-99)
        assert 0 <= s < 2 ** 32

    def test_non_finite_and_non_numeric_axes_count_as_zero(self):
        assert seed(math.nan, math.inf, -math.inf) == 0
        assert seed('north', None, 0) == 0
        assert seed(1, math.nan, 0) == seed(1, 0, 0)

    def test_fractional_coordinates_truncate_toward_zero(self):
        assert seed(0.5, 0, 0) == int(0.5 * 73856093)

    def test_huge_coordinates_keep_their_integer_part(self):
        # far past float range once multiplied; the exact integer product is used
        assert seed(1e308, 0, 0) == (int(1e308) * 73856093) & 0xFFFFFFFF

    def test_unusable_salt_counts_as_zero(self):
        assert seed(3, 4, 5, salt=float('inf')) == seed(3, 4, 5)
        assert seed(3, 4, 5, salt=float('nan')) == seed(3, 4, 5)
        assert seed(3, 4, 5, salt='x') == seed(3, 4, 5)


# ─────────────────────────────────────────────────────
# LoreStream / stream_for
# ─────────────────────────────────────────────────────

class TestLoreStream:
    def test_same_seed_same_sequence(self):
        a, b = LoreStream(1234), LoreStream(1234)
        assert [a.next_float() for _ in range(20)] == [b.next_float() for _ in range(20)]

    def test_different_seeds_diverge(self):
        a, b = LoreStream(1), LoreStream(2)
        assert [a.next_index() for _ in range(5)] != [b.next_index() for _ in range(5)]

    def test_next_int_half_open(self):
        s = LoreStream(7)
        values = {s.next_int(3, 6) for _ in range(300)}
        assert values == {3, 4, 5}

    def test_next_int_empty_range_returns_lo(self):
        s = LoreStream(7)
        assert s.next_int(5, 5) == 5
        assert s.next_int(9, 2) == 9

    def test_chance_extremes(self):
        s = LoreStream(99)
        assert not any(s.chance(0.0) for _ in range(100))
        assert all(s.chance(1.0) for _ in range(100))

    def test_seed_is_masked(self):
        assert LoreStream(-1).seed == 2 ** 32 - 1

    def test_streams_do_not_share_state(self):
        a = stream_for((4, 5, 6), 1)
        first = a.next_float()
        # Building and draining another stream leaves a fresh one unchanged
        other = stream_for((4, 5, 6), 1)
        for _ in range(50):
            other.next_float()
        assert stream_for((4, 5, 6), 1).next_float() == first

    def test_stream_for_pads_missing_axes(self):
        assert stream_for((2,)).seed == seed(2, 0, 0)
        assert stream_for(None).seed == 0

    def test_stream_for_non_sequence_is_origin(self):
        assert stream_for(5).seed == seed(0, 0, 0)
        assert stream_for(object(), salt=3).seed == seed(0, 0, 0, salt=3)


# ─────────────────────────────────────────────────────
# weighted_index
# ─────────────────────────────────────────────────────

class TestWeightedIndex:
    def test_empty_weights_return_zero(self):
        assert weighted_index([], LoreStream(1)) == 0

    def test_single_category(self):
        assert weighted_index([0.4], LoreStream(1)) == 0

    def test_zero_weight_categories_never_win(self):
        for salt in range(200):
            assert weighted_index([0.0, 0.0, 3.0], stream_for((1, 2, 3), salt)) == 2
            assert weighted_index([0.0, 1.0, 0.0], stream_for((1, 2, 3), salt)) == 1

    def test_negative_weights_count_as_zero(self):
        for salt in range(200):
            assert weighted_index([-5.0, 2.0, -1.0], stream_for((0, 0, 0), salt)) == 1

    def test_repeatable_for_same_stream_seed(self):
        weights = [0.1, 0.4, 0.2, 0.3]
        picks_a = [weighted_index(weights, stream_for((9, 9, 9), s)) for s in range(50)]
        picks_b = [weighted_index(weights, stream_for((9, 9, 9), s)) for s in range(50)]
        assert picks_a == picks_b

    def test_proportions_follow_weights(self):
        counts = index_counts([1.0, 3.0], trials=4000, position=(5, 5, 5))
        assert counts.sum() == 4000
        # expected 1000 / 3000
        assert 850 < counts[0] < 1150


class TestWeightedIndexMonotonicity:
    @pytest.mark.parametrize("boost", [2.0, 3.0, 6.0])
    def test_raising_one_weight_never_lowers_its_share(self, boost):
        base = [1.0, 1.0, 1.0, 1.0]
        raised = list(base)
        raised[1] = boost
        before = index_counts(base, trials=3000, position=(3, 1, 4))
        after = index_counts(raised, trials=3000, position=(3, 1, 4))
        assert after[1] > before[1]

    def test_share_grows_with_weight(self):
        shares = []
        for w in (0.5, 1.0, 2.0, 4.0):
            counts = index_counts([1.0, w, 1.0], trials=3000, position=(2, 7, 1))
            shares.append(counts[1])
        assert shares == sorted(shares)


class TestZeroWeightFallback:
    @pytest.mark.parametrize("weights", [
        [0.0, 0.0, 0.0, 0.0],
        [-1.0, -2.0, 0.0, -0.5],
    ])
    def test_uniform_over_all_indices(self, weights):
        counts = index_counts(weights, trials=4000, position=(8, 0, 2))
        assert counts.sum() == 4000
        assert len(counts) == 4
        # each index expected 1000
        for c in counts:
            assert 850 < c < 1150

    def test_always_in_range(self):
        for salt in range(300):
            idx = weighted_index([0, 0, 0], stream_for((1, 1, 1), salt))
            assert 0 <= idx < 3
