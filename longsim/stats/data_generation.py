"""
Longitudinal Data Generator.

Generates synthetic panel datasets with:
- A random number of observations per individual on an irregular time grid
- Correlated random intercepts and slopes (bivariate normal)
- Stationary AR(1) residual error with a fixed marginal SD
- A binomial group label per individual

Every individual draws from its own ``numpy.random.Generator`` spawned from
a single ``SeedSequence``, so results do not depend on evaluation order and
parallel runs reproduce sequential ones exactly.
"""

from dataclasses import asdict, dataclass, field
from typing import Callable, Dict, Iterator, List, Optional, Sequence, Union

import numpy as np
from scipy.signal import lfilter

from ..progress import PanelProgress, PanelTracker
from ..utils.validators import MIN_OBSERVATIONS, _validate_generation_parameters

COLUMNS = ["individual_id", "group", "time_index", "outcome"]


@dataclass(frozen=True)
class Observation:
    """One row of the panel."""

    individual_id: int
    group: int
    time_index: int
    outcome: float


@dataclass(frozen=True)
class GenerationConfig:
    """All inputs of a single ``generate`` call."""

    n: int
    max_obs: int
    beta0: float
    beta1: float
    autocorrelation: float
    sigma: float
    tau0: float
    tau1: float
    tau01: float
    seed: Optional[int]
    group_trials: int = 3
    group_probability: float = 0.5

    def as_dict(self) -> Dict:
        return asdict(self)


@dataclass(frozen=True, eq=False)
class LongitudinalDataset:
    """Generated panel, stored column-wise.

    Immutable: fields cannot be reassigned and the arrays are read-only.
    Behaves as a sequence of :class:`Observation` while keeping
    the latent quantities needed to check or plot the data.
    """

    individual_id: np.ndarray
    """(N,) individual id per observation, ids ``1..n``."""

    group: np.ndarray
    """(N,) group label per observation."""

    time_index: np.ndarray
    """(N,) observation index, ascending within each individual."""

    outcome: np.ndarray
    """(N,) simulated outcome."""

    residuals: np.ndarray
    """(N,) AR(1) residual component of ``outcome``."""

    random_effects: np.ndarray
    """(n, 2) random intercept and slope per individual (row ``i`` is id ``i + 1``)."""

    config: GenerationConfig = field(repr=False, default=None)  # type: ignore[assignment]

    def __post_init__(self):
        for name in ("individual_id", "group", "time_index", "outcome", "residuals", "random_effects"):
            getattr(self, name).flags.writeable = False

    def __len__(self) -> int:
        return len(self.outcome)

    def __getitem__(self, index: int) -> Observation:
        return Observation(
            individual_id=int(self.individual_id[index]),
            group=int(self.group[index]),
            time_index=int(self.time_index[index]),
            outcome=float(self.outcome[index]),
        )

    def __iter__(self) -> Iterator[Observation]:
        for i in range(len(self)):
            yield self[i]

    @property
    def observations(self) -> List[Observation]:
        """All observations as a list."""
        return list(self)

    @property
    def n_individuals(self) -> int:
        return len(self.random_effects)

    def to_frame(self):
        """Return the panel as a pandas DataFrame with the standard columns."""
        import pandas as pd

        return pd.DataFrame(
            {
                "individual_id": self.individual_id,
                "group": self.group,
                "time_index": self.time_index,
                "outcome": self.outcome,
            },
            columns=COLUMNS,
        )


def draw_observation_count(rng: np.random.Generator, max_obs: int) -> int:
    """Number of observations for one individual: ``round(U(4, max_obs))``."""
    return int(np.rint(rng.uniform(MIN_OBSERVATIONS, max_obs)))


def draw_group(rng: np.random.Generator, trials: int = 3, probability: float = 0.5) -> int:
    """Group label ``Binomial(trials, probability) + 1``, so labels run ``1..trials+1``."""
    return int(rng.binomial(trials, probability)) + 1


def draw_time_indices(rng: np.random.Generator, n_obs: int, max_obs: int) -> np.ndarray:
    """Time grid for one individual.

    Index 1 is always observed; the other ``n_obs - 1`` indices are drawn
    without replacement from ``2..max_obs`` and sorted.
    """
    later = rng.choice(np.arange(2, max_obs + 1), size=n_obs - 1, replace=False)
    return np.concatenate(([1], np.sort(later))).astype(np.int64)


def random_effects_covariance(tau0: float, tau1: float, tau01: float) -> np.ndarray:
    """Covariance ``diag(tau) @ [[1, tau01], [tau01, 1]] @ diag(tau)`` of (u0, u1)."""
    scale = np.diag([tau0, tau1])
    corr = np.array([[1.0, tau01], [tau01, 1.0]])
    return scale @ corr @ scale


def ar1_residuals(
    rng: np.random.Generator,
    length: int,
    autocorrelation: float,
    sigma: float,
) -> np.ndarray:
    """Stationary AR(1) sequence with marginal SD *sigma*.

    The unit-innovation process ``e[t] = rho * e[t-1] + z[t]`` has marginal
    variance ``1 / (1 - rho**2)``. Its first value is drawn from that
    stationary distribution and the whole sequence is multiplied by
    ``sigma * sqrt(1 - rho**2)``.
    """
    innovations = rng.standard_normal(length)
    if length == 0:
        return innovations

    correction = np.sqrt(1.0 - autocorrelation**2)
    innovations[0] /= correction
    process = lfilter([1.0], [1.0, -autocorrelation], innovations)
    return np.asarray(process * sigma * correction)


def _simulate_individual(individual_id: int, seed_seq: np.random.SeedSequence, config: GenerationConfig) -> Dict[str, np.ndarray]:
    """Draw everything for one individual from its own random stream.

    Draw order is fixed: observation count, group, time grid, random
    effects, residual innovations.
    """
    rng = np.random.default_rng(seed_seq)

    n_obs = draw_observation_count(rng, config.max_obs)
    group = draw_group(rng, config.group_trials, config.group_probability)
    times = draw_time_indices(rng, n_obs, config.max_obs)

    cov = random_effects_covariance(config.tau0, config.tau1, config.tau01)
    u0, u1 = rng.multivariate_normal(np.zeros(2), cov)

    residuals = ar1_residuals(rng, n_obs, config.autocorrelation, config.sigma)
    outcome = (config.beta0 + u0) + (config.beta1 + u1) * np.log(times) + residuals

    return {
        "individual_id": np.full(n_obs, individual_id, dtype=np.int64),
        "group": np.full(n_obs, group, dtype=np.int64),
        "time_index": times,
        "outcome": outcome,
        "residuals": residuals,
        "random_effects": np.array([u0, u1]),
    }


def _assemble(parts: Sequence[Dict[str, np.ndarray]], config: GenerationConfig) -> LongitudinalDataset:
    """Stack per-individual results into a dataset (parts in id order)."""
    columns = {name: np.concatenate([p[name] for p in parts]) for name in ("individual_id", "group", "time_index", "outcome", "residuals")}
    random_effects = np.vstack([p["random_effects"] for p in parts])
    return LongitudinalDataset(random_effects=random_effects, config=config, **columns)


def generate(
    n: int,
    max_obs: int,
    beta0: float,
    beta1: float,
    autocorrelation: float,
    sigma: float,
    tau0: float,
    tau1: float,
    tau01: float,
    seed: Optional[int],
    group_trials: int = 3,
    group_probability: float = 0.5,
    n_jobs: int = 1,
    progress: Optional[Callable[[PanelProgress], None]] = None,
) -> LongitudinalDataset:
    """
    Generate a synthetic longitudinal panel.

    For individual ``i`` with random effects ``(u0_i, u1_i)`` and time
    index ``t``::

        outcome = (beta0 + u0_i) + (beta1 + u1_i) * ln(t) + residual

    Args:
        n: Number of individuals (>= 1).
        max_obs: Largest time index; each individual has between 4 and
            *max_obs* observations.
        beta0, beta1: Population intercept and slope on ``ln(t)``.
        autocorrelation: AR(1) coefficient of the residuals, in (-1, 1).
        sigma: Marginal SD of the residuals.
        tau0, tau1: SDs of the random intercept and slope.
        tau01: Correlation between random intercept and slope.
        seed: Non-negative integer seed, or ``None`` for fresh entropy.
        group_trials, group_probability: Binomial group-label draw.
        n_jobs: Worker processes. 1 runs in-process; any other non-zero
            value is handed to joblib (``-1`` uses every core).
        progress: Optional listener called with a :class:`PanelProgress`
            as individuals finish.

    Returns:
        A :class:`LongitudinalDataset`.

    Raises:
        InvalidParameter: If any parameter is out of range (raised before
            any random draw).
    """
    result = _validate_generation_parameters(
        n, max_obs, beta0, beta1, autocorrelation, sigma, tau0, tau1, tau01, seed, group_trials, group_probability, n_jobs
    )
    result.raise_if_invalid()

    config = GenerationConfig(
        n=int(n),
        max_obs=int(max_obs),
        beta0=float(beta0),
        beta1=float(beta1),
        autocorrelation=float(autocorrelation),
        sigma=float(sigma),
        tau0=float(tau0),
        tau1=float(tau1),
        tau01=float(tau01),
        seed=None if seed is None else int(seed),
        group_trials=int(group_trials),
        group_probability=float(group_probability),
    )
    child_seeds = np.random.SeedSequence(config.seed).spawn(config.n)

    tracker = PanelTracker(config.n, progress) if progress is not None else None

    if n_jobs != 1:
        from joblib import Parallel, delayed

        results = Parallel(n_jobs=n_jobs, backend="loky", verbose=0, return_as="generator")(
            delayed(_simulate_individual)(i + 1, ss, config) for i, ss in enumerate(child_seeds)
        )
    else:
        results = (_simulate_individual(i + 1, ss, config) for i, ss in enumerate(child_seeds))

    parts: List[Dict[str, np.ndarray]] = []
    for part in results:
        parts.append(part)
        if tracker is not None:
            tracker.record(len(part["outcome"]))

    return _assemble(parts, config)


def observations_to_frame(observations: Union[LongitudinalDataset, Sequence[Observation]]):
    """Convert a dataset or any sequence of observations to a DataFrame."""
    if isinstance(observations, LongitudinalDataset):
        return observations.to_frame()

    import pandas as pd

    return pd.DataFrame([asdict(o) for o in observations], columns=COLUMNS)
