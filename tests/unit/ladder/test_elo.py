"""Elo rating model tests.

- Expected score symmetry and range
- Integer rating updates with half-up rounding
"""

from hypothesis import given
from hypothesis import strategies as st

from oche.ladder.elo import EloConfig, expected_score, update_rating

ratings = st.integers(min_value=0, max_value=4000)


class TestExpectedScore:
    @given(a=ratings, b=ratings)
    def test_expected_scores_sum_to_one(self, a, b):
        """E(A,B) + E(B,A) = 1 for any pair of ratings."""
        assert abs(expected_score(a, b) + expected_score(b, a) - 1.0) < 1e-9

    @given(r=ratings)
    def test_equal_ratings_give_half(self, r):
        assert expected_score(r, r) == 0.5

    @given(a=ratings, b=ratings)
    def test_expected_score_in_open_interval(self, a, b):
        e = expected_score(a, b)
        assert 0.0 < e < 1.0

    def test_higher_rating_favored(self):
        assert expected_score(1200, 1000) > 0.5
        assert expected_score(1000, 1200) < 0.5

    def test_400_point_gap_is_ten_to_one(self):
        assert abs(expected_score(1400, 1000) - 10 / 11) < 1e-12


class TestUpdateRating:
    def test_win_between_equals_gains_half_k(self):
        assert update_rating(1000, 1, 0.5) == 1016

    def test_loss_between_equals_loses_half_k(self):
        assert update_rating(1000, 0, 0.5) == 984

    def test_returns_int(self):
        assert isinstance(update_rating(1000, 1, 0.3), int)

    def test_halves_round_up(self):
        """1000.5 rounds to 1001 and 999.5 to 1000."""
        cfg = EloConfig(k_factor=1)
        assert update_rating(1000, 1, 0.5, cfg=cfg) == 1001
        assert update_rating(1000, 0, 0.5, cfg=cfg) == 1000

    def test_custom_k_factor(self):
        assert update_rating(1000, 1, 0.5, cfg=EloConfig(k_factor=64)) == 1032

    @given(r=ratings, e=st.floats(min_value=0.0, max_value=1.0))
    def test_win_never_lowers_rating(self, r, e):
        assert update_rating(r, 1, e) >= r
        assert update_rating(r, 0, e) <= r
