"""
Configuration front-end for longitudinal data generation.

This module provides the LongitudinalModel class, which holds the
generating parameters, validates every change, and produces datasets.
"""

from typing import Optional

from .stats.data_generation import LongitudinalDataset, generate
from .utils.validators import (
    _validate_autocorrelation,
    _validate_coefficient,
    _validate_correlation,
    _validate_group_settings,
    _validate_max_obs,
    _validate_n_individuals,
    _validate_parallel_settings,
    _validate_sd,
)


class LongitudinalModel:
    """Synthetic longitudinal panel generator.

    Simulates repeated measurements ``outcome = (b0 + u0) + (b1 + u1) * ln(t) + e``
    where ``(u0, u1)`` are correlated per-individual random effects and ``e``
    follows a stationary AR(1) process.

    Every ``set_*`` method validates its input immediately and returns
    ``self`` for method chaining.

    Attributes:
        seed: Random seed for reproducibility (default: 2137).
        max_obs: Largest time index (default: 10).
        beta0: Population intercept (default: 1.0).
        beta1: Population slope on ``ln(t)`` (default: 6.0).
        autocorrelation: AR(1) coefficient of residuals (default: 0.4).
        sigma: Marginal residual SD (default: 1.5).
        tau0: Random intercept SD (default: 2.5).
        tau1: Random slope SD (default: 2.0).
        tau01: Random intercept/slope correlation (default: 0.3).
        group_trials: Binomial trials of the group draw (default: 3).
        group_probability: Binomial success probability (default: 0.5).
        parallel: Whether individuals are generated in worker processes.
        n_cores: Number of CPU cores for parallel execution.

    Example:
        >>> model = LongitudinalModel()
        >>> model.set_fixed_effects(intercept=1.0, slope=6.0).set_autocorrelation(0.4)
        >>> data = model.generate(200)
        >>> data.to_frame().head()
    """

    def __init__(self):
        self.seed: Optional[int] = 2137

        self.max_obs = 10
        self.beta0 = 1.0
        self.beta1 = 6.0
        self.autocorrelation = 0.4
        self.sigma = 1.5
        self.tau0 = 2.5
        self.tau1 = 2.0
        self.tau01 = 0.3
        self.group_trials = 3
        self.group_probability = 0.5

        self.parallel = False
        self.n_cores = 1

    # =========================================================================
    # Configuration methods
    # =========================================================================

    def set_seed(self, seed: Optional[int] = None):
        """Set random seed for reproducibility.

        Args:
            seed: Non-negative integer, or ``None`` for fresh entropy on
                every call to ``generate``.

        Returns:
            self: For method chaining.

        Raises:
            TypeError: If *seed* is not an integer or ``None``.
            ValueError: If *seed* is negative.
        """
        if seed is not None:
            if not isinstance(seed, int) or isinstance(seed, bool):
                raise TypeError("seed must be an integer or None")
            if seed < 0:
                raise ValueError("seed must be non-negative")

        self.seed = seed
        if seed is not None:
            print(f"Seed set to: {seed}")
        else:
            print("Random seeding enabled")
        return self

    def set_fixed_effects(self, intercept: Optional[float] = None, slope: Optional[float] = None):
        """Set the population intercept and/or slope on ``ln(time_index)``.

        Returns:
            self: For method chaining.

        Raises:
            InvalidParameter: If a value is not a finite number.
        """
        if intercept is not None:
            _validate_coefficient(intercept, "intercept").raise_if_invalid()
            self.beta0 = float(intercept)
        if slope is not None:
            _validate_coefficient(slope, "slope").raise_if_invalid()
            self.beta1 = float(slope)
        return self

    def set_random_effects(
        self,
        intercept_sd: Optional[float] = None,
        slope_sd: Optional[float] = None,
        correlation: Optional[float] = None,
    ):
        """Set the between-individual heterogeneity.

        Args:
            intercept_sd: SD of random intercepts (``tau0``).
            slope_sd: SD of random slopes (``tau1``).
            correlation: Intercept/slope correlation (``tau01``, in [-1, 1]).

        Returns:
            self: For method chaining.

        Raises:
            InvalidParameter: If an SD is negative or the correlation is
                outside [-1, 1].
        """
        if intercept_sd is not None:
            _validate_sd(intercept_sd, "intercept_sd").raise_if_invalid()
            self.tau0 = float(intercept_sd)
        if slope_sd is not None:
            _validate_sd(slope_sd, "slope_sd").raise_if_invalid()
            self.tau1 = float(slope_sd)
        if correlation is not None:
            _validate_correlation(correlation, "correlation").raise_if_invalid()
            self.tau01 = float(correlation)
        return self

    def set_autocorrelation(self, autocorrelation: float):
        """Set the AR(1) coefficient of the residuals.

        The marginal residual SD stays at ``sigma`` whatever the value.

        Raises:
            InvalidParameter: If *autocorrelation* is outside (-1, 1).
        """
        _validate_autocorrelation(autocorrelation).raise_if_invalid()
        self.autocorrelation = float(autocorrelation)
        return self

    def set_error_sd(self, sigma: float):
        """Set the marginal SD of the residuals."""
        _validate_sd(sigma, "sigma").raise_if_invalid()
        self.sigma = float(sigma)
        return self

    def set_max_observations(self, max_obs: int):
        """Set the largest time index (and maximum observations per individual).

        Raises:
            InvalidParameter: If *max_obs* < 5.
        """
        _validate_max_obs(max_obs).raise_if_invalid()
        self.max_obs = int(max_obs)
        return self

    def set_groups(self, trials: int = 3, probability: float = 0.5):
        """Set the binomial group-label draw; labels run ``1..trials+1``."""
        _validate_group_settings(trials, probability).raise_if_invalid()
        self.group_trials = int(trials)
        self.group_probability = float(probability)
        return self

    def set_parallel(self, enable: bool = True, n_cores: Optional[int] = None):
        """Enable or disable parallel generation across individuals.

        Requires ``joblib`` to be installed. Falls back to sequential
        processing with a warning if ``joblib`` is unavailable. Results are
        identical either way.

        Args:
            enable: ``True`` for worker processes, ``False`` for in-process.
            n_cores: Number of CPU cores to use. Defaults to
                ``cpu_count // 2``.

        Returns:
            self: For method chaining.
        """
        if enable is False:
            self.parallel, self.n_cores = False, 1
            return self

        try:
            import joblib  # noqa: F401 — availability check only
        except ImportError:
            print("Warning: joblib not available. Install with: pip install joblib")
            print("Warning: Continuing with sequential processing.")
            self.parallel = False
            return self

        settings, result = _validate_parallel_settings(enable, n_cores)
        result.raise_if_invalid()
        self.parallel, self.n_cores = settings
        return self

    # =========================================================================
    # Generation
    # =========================================================================

    def generate(self, n_individuals: int, progress_callback=None) -> LongitudinalDataset:
        """Generate a panel of *n_individuals* simulated individuals.

        Args:
            n_individuals: Number of individuals (>= 1).
            progress_callback: ``None`` for no progress output, ``True`` for
                the console ``ConsoleProgress``, or any callable taking a
                :class:`~longsim.progress.PanelProgress`.

        Returns:
            LongitudinalDataset

        Raises:
            InvalidParameter: If *n_individuals* or the configuration is
                out of range.
        """
        _validate_n_individuals(n_individuals).raise_if_invalid()

        progress = progress_callback if callable(progress_callback) else None
        if progress_callback is True:
            from .progress import ConsoleProgress

            progress = ConsoleProgress()

        n_jobs = self.n_cores if self.parallel else 1
        if n_jobs > 1 and n_individuals < 2 * n_jobs:
            n_jobs = 1

        return generate(
            n=n_individuals,
            max_obs=self.max_obs,
            beta0=self.beta0,
            beta1=self.beta1,
            autocorrelation=self.autocorrelation,
            sigma=self.sigma,
            tau0=self.tau0,
            tau1=self.tau1,
            tau01=self.tau01,
            seed=self.seed,
            group_trials=self.group_trials,
            group_probability=self.group_probability,
            n_jobs=n_jobs,
            progress=progress,
        )

    def plot(self, data, by_group: bool = True, show: bool = True):
        """Draw the individual trajectories of *data* (dataset or DataFrame)."""
        from .utils.visualization import _plot_trajectories

        frame = data.to_frame() if isinstance(data, LongitudinalDataset) else data
        return _plot_trajectories(frame, by_group=by_group, show=show)

    def __repr__(self):
        return (
            f"LongitudinalModel(max_obs={self.max_obs}, beta0={self.beta0}, beta1={self.beta1}, "
            f"autocorrelation={self.autocorrelation}, sigma={self.sigma}, tau0={self.tau0}, "
            f"tau1={self.tau1}, tau01={self.tau01}, seed={self.seed})"
        )
