"""
Tests for item response theory curves.
"""

import numpy as np
import pytest


class TestItemResponseProbability:
    """Test item_response_probability function."""

    def test_midpoint_at_difficulty(self):
        from longsim.stats.irt import item_response_probability

        assert item_response_probability(0.5, 0.5, 1.7) == pytest.approx(0.5)

    def test_midpoint_with_asymptotes(self):
        from longsim.stats.irt import item_response_probability

        p = item_response_probability(1.0, 1.0, 1.2, guessing=0.2, upper=0.9)
        assert p == pytest.approx((0.2 + 0.9) / 2)

    def test_monotone_in_theta(self):
        from longsim.stats.irt import item_response_probability

        p = item_response_probability(np.linspace(-4, 4, 50), 0.0, 1.5)
        assert np.all(np.diff(p) > 0)

    def test_bounded_by_asymptotes(self):
        from longsim.stats.irt import item_response_probability

        p = item_response_probability(np.linspace(-30, 30, 61), 0.0, 2.0, guessing=0.25, upper=0.95)
        assert p.min() >= 0.25
        assert p.max() <= 0.95

    def test_zero_discrimination_is_flat(self):
        from longsim.stats.irt import item_response_probability

        p = item_response_probability(np.linspace(-3, 3, 7), 1.0, 0.0)
        np.testing.assert_allclose(p, 0.5)

    def test_invalid_parameters(self):
        from longsim import InvalidParameter
        from longsim.stats.irt import item_response_probability

        with pytest.raises(InvalidParameter):
            item_response_probability(0.0, 0.0, -1.0)
        with pytest.raises(InvalidParameter):
            item_response_probability(0.0, 0.0, 1.0, guessing=0.5, upper=0.4)


class TestItemInformation:
    """Test item_information function."""

    def test_2pl_peak(self):
        from longsim.stats.irt import item_information

        a = 1.8
        theta = np.linspace(-3, 3, 601)
        info = item_information(theta, 0.5, a)
        assert theta[np.argmax(info)] == pytest.approx(0.5, abs=0.01)
        assert info.max() == pytest.approx(a**2 / 4, rel=1e-3)

    def test_2pl_matches_closed_form(self):
        from longsim.stats.irt import item_information, item_response_probability

        theta = np.linspace(-2, 2, 9)
        p = item_response_probability(theta, 0.0, 1.3)
        np.testing.assert_allclose(item_information(theta, 0.0, 1.3), 1.3**2 * p * (1 - p))

    def test_non_negative(self):
        from longsim.stats.irt import item_information

        info = item_information(np.linspace(-50, 50, 101), 0.0, 2.0, guessing=0.2)
        assert np.all(info >= 0)
        assert np.all(np.isfinite(info))


class TestProbabilitySurface:
    """Test probability_surface and surface_frame functions."""

    def test_shape(self):
        from longsim.stats.irt import probability_surface

        surface = probability_surface(np.linspace(-3, 3, 25), np.linspace(-2, 2, 9), 1.0)
        assert surface.shape == (9, 25)

    def test_rows_decrease_with_difficulty(self):
        from longsim.stats.irt import probability_surface

        surface = probability_surface(np.linspace(-3, 3, 25), np.linspace(-2, 2, 9), 1.0)
        assert np.all(np.diff(surface, axis=0) < 0)

    def test_rejects_2d_grid(self):
        from longsim import InvalidParameter
        from longsim.stats.irt import probability_surface

        with pytest.raises(InvalidParameter):
            probability_surface(np.zeros((2, 2)), [0.0])

    def test_frame_long_format(self):
        from longsim.stats.irt import probability_surface, surface_frame

        theta = np.linspace(-1, 1, 5)
        difficulty = np.array([-0.5, 0.5])
        frame = surface_frame(theta, difficulty, 1.2)

        assert list(frame.columns) == ["theta", "difficulty", "probability"]
        assert len(frame) == 10
        np.testing.assert_allclose(frame["probability"].to_numpy(), probability_surface(theta, difficulty, 1.2).ravel())


class TestExpectedScoreCurve:
    """Test expected_score_curve function."""

    def test_sum_of_item_curves(self):
        from longsim.stats.irt import expected_score_curve, item_response_probability

        theta = np.linspace(-2, 2, 5)
        b = [-1.0, 0.0, 1.0]
        a = [0.8, 1.0, 1.5]
        expected = sum(item_response_probability(theta, bi, ai) for bi, ai in zip(b, a))
        np.testing.assert_allclose(expected_score_curve(theta, b, a), expected)

    def test_range(self):
        from longsim.stats.irt import expected_score_curve

        tcc = expected_score_curve(np.linspace(-40, 40, 3), [0.0, 0.5, 1.0, 1.5])
        assert tcc[0] == pytest.approx(0.0, abs=1e-6)
        assert tcc[-1] == pytest.approx(4.0, abs=1e-6)

    def test_length_mismatch(self):
        from longsim import InvalidParameter
        from longsim.stats.irt import expected_score_curve

        with pytest.raises(InvalidParameter, match="lengths differ"):
            expected_score_curve(0.0, [0.0, 1.0], [1.0])
