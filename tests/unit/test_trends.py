"""
Tests for per-individual trend-line fits.
"""

import numpy as np
import pandas as pd
import pytest


def _noise_free(n=30, seed=3):
    from longsim import generate

    return generate(n, 8, 2.0, 4.0, 0.4, 0.0, 0.0, 0.0, 0.0, seed)


class TestFitIndividualTrends:
    """Test fit_individual_trends function."""

    def test_one_row_per_individual(self, scenario_dataset):
        from longsim.stats.trends import fit_individual_trends

        trends = fit_individual_trends(scenario_dataset)
        assert len(trends) == 200
        assert list(trends.columns) == ["individual_id", "group", "intercept", "slope", "n_obs"]
        assert trends["individual_id"].tolist() == list(range(1, 201))

    def test_recovers_noise_free_line(self):
        from longsim.stats.trends import fit_individual_trends

        trends = fit_individual_trends(_noise_free())
        np.testing.assert_allclose(trends["intercept"], 2.0, atol=1e-8)
        np.testing.assert_allclose(trends["slope"], 4.0, atol=1e-8)

    def test_recovers_random_effects_without_residuals(self):
        from longsim import generate
        from longsim.stats.trends import fit_individual_trends

        data = generate(40, 10, 1.0, 6.0, 0.4, 0.0, 2.5, 2.0, 0.3, 11)
        trends = fit_individual_trends(data)
        np.testing.assert_allclose(trends["intercept"], 1.0 + data.random_effects[:, 0], atol=1e-8)
        np.testing.assert_allclose(trends["slope"], 6.0 + data.random_effects[:, 1], atol=1e-8)

    def test_counts_observations(self, scenario_dataset):
        from longsim.stats.trends import fit_individual_trends

        trends = fit_individual_trends(scenario_dataset)
        assert trends["n_obs"].sum() == len(scenario_dataset)

    def test_accepts_frame(self, scenario_dataset):
        from longsim.stats.trends import fit_individual_trends

        from_dataset = fit_individual_trends(scenario_dataset)
        from_frame = fit_individual_trends(scenario_dataset.to_frame())
        pd.testing.assert_frame_equal(from_dataset, from_frame)

    def test_missing_columns(self):
        from longsim.stats.trends import fit_individual_trends

        with pytest.raises(ValueError, match="missing columns"):
            fit_individual_trends(pd.DataFrame({"individual_id": [1], "outcome": [0.0]}))

    def test_wrong_type(self):
        from longsim.stats.trends import fit_individual_trends

        with pytest.raises(TypeError):
            fit_individual_trends([1, 2, 3])


class TestPopulationTrend:
    """Test population_trend function."""

    def test_noise_free(self):
        from longsim.stats.trends import population_trend

        trend = population_trend(_noise_free())
        assert trend["intercept"] == pytest.approx(2.0)
        assert trend["slope"] == pytest.approx(4.0)

    def test_scenario_close_to_fixed_effects(self):
        from longsim import generate
        from longsim.stats.trends import population_trend

        data = generate(3000, 10, 1.0, 6.0, 0.4, 1.5, 2.5, 2.0, 0.3, 5)
        trend = population_trend(data)
        assert trend["intercept"] == pytest.approx(1.0, abs=0.3)
        assert trend["slope"] == pytest.approx(6.0, abs=0.3)
