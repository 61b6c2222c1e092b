"""
Tests for the trajectory plot (non-interactive matplotlib backend).
"""

import pytest

matplotlib = pytest.importorskip("matplotlib")
matplotlib.use("Agg")


@pytest.fixture(autouse=True)
def _close_figures():
    yield
    import matplotlib.pyplot as plt

    plt.close("all")


class TestPlotTrajectories:
    """Test _plot_trajectories function."""

    def test_one_line_per_individual(self, scenario_params):
        from longsim import generate
        from longsim.utils.visualization import _plot_trajectories

        scenario_params["n"] = 15
        frame = generate(**scenario_params).to_frame()
        ax = _plot_trajectories(frame, show=False)
        assert len(ax.get_lines()) == 15

    def test_legend_per_group(self, scenario_params):
        from longsim import generate
        from longsim.utils.visualization import _plot_trajectories

        frame = generate(**scenario_params).to_frame()
        ax = _plot_trajectories(frame, show=False)
        labels = [t.get_text() for t in ax.get_legend().get_texts()]
        assert sorted(labels) == [f"group {g}" for g in sorted(frame["group"].unique())]

    def test_no_groups(self, scenario_params):
        from longsim import generate
        from longsim.utils.visualization import _plot_trajectories

        scenario_params["n"] = 5
        frame = generate(**scenario_params).to_frame()
        ax = _plot_trajectories(frame, by_group=False, show=False)
        assert ax.get_legend() is None

    def test_existing_axes(self, scenario_params):
        import matplotlib.pyplot as plt

        from longsim import generate
        from longsim.utils.visualization import _plot_trajectories

        scenario_params["n"] = 5
        fig, ax = plt.subplots()
        returned = _plot_trajectories(generate(**scenario_params).to_frame(), ax=ax, show=False)
        assert returned is ax

    def test_model_plot(self, quiet_model):
        data = quiet_model.generate(10)
        ax = quiet_model.plot(data, show=False)
        assert len(ax.get_lines()) == 10
