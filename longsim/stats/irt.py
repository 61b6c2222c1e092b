"""
Item response theory curves for tutorial heat maps and line charts.

All functions use the four-parameter logistic (4PL) item model::

    P(theta) = c + (d - c) * expit(a * (theta - b))

with discrimination ``a``, difficulty ``b``, lower asymptote (guessing)
``c`` and upper asymptote ``d``. Setting ``c = 0, d = 1`` gives the 2PL,
additionally ``a = 1`` the Rasch/1PL model. Inputs broadcast like numpy
arrays.
"""

from typing import Optional, Sequence

import numpy as np
from scipy.special import expit

from ..utils.validators import InvalidParameter, _validate_irt_parameters


def item_response_probability(theta, difficulty, discrimination=1.0, guessing=0.0, upper=1.0) -> np.ndarray:
    """Probability of a correct response under the 4PL model.

    Raises:
        InvalidParameter: If the item parameters are out of range.
    """
    _validate_irt_parameters(discrimination, guessing, upper).raise_if_invalid()
    theta = np.asarray(theta, dtype=float)
    c = np.asarray(guessing, dtype=float)
    logistic = expit(np.asarray(discrimination, dtype=float) * (theta - np.asarray(difficulty, dtype=float)))
    return np.asarray(c + (np.asarray(upper, dtype=float) - c) * logistic)


def item_information(theta, difficulty, discrimination=1.0, guessing=0.0, upper=1.0) -> np.ndarray:
    """Fisher information of a 4PL item at *theta*.

    ``I = a^2 (P - c)^2 (d - P)^2 / ((d - c)^2 P (1 - P))``, which reduces
    to ``a^2 P (1 - P)`` for the 2PL.
    """
    p = item_response_probability(theta, difficulty, discrimination, guessing, upper)
    a = np.asarray(discrimination, dtype=float)
    c = np.asarray(guessing, dtype=float)
    d = np.asarray(upper, dtype=float)

    with np.errstate(divide="ignore", invalid="ignore"):
        info = a**2 * (p - c) ** 2 * (d - p) ** 2 / ((d - c) ** 2 * p * (1 - p))
    return np.asarray(np.where(np.isfinite(info), info, 0.0))


def probability_surface(theta, difficulty, discrimination=1.0, guessing=0.0, upper=1.0) -> np.ndarray:
    """Response probability over a grid of abilities and difficulties.

    Args:
        theta: 1-D ability grid (columns of the result).
        difficulty: 1-D difficulty grid (rows of the result).
        discrimination, guessing, upper: Scalar item parameters shared
            by the whole grid.

    Returns:
        Array of shape ``(len(difficulty), len(theta))``.
    """
    theta = np.atleast_1d(np.asarray(theta, dtype=float))
    difficulty = np.atleast_1d(np.asarray(difficulty, dtype=float))
    if theta.ndim != 1 or difficulty.ndim != 1:
        raise InvalidParameter("theta and difficulty grids must be one-dimensional")

    return item_response_probability(theta[np.newaxis, :], difficulty[:, np.newaxis], discrimination, guessing, upper)


def surface_frame(theta, difficulty, discrimination=1.0, guessing=0.0, upper=1.0):
    """Long-format DataFrame (``theta``, ``difficulty``, ``probability``) of the surface."""
    import pandas as pd

    theta = np.atleast_1d(np.asarray(theta, dtype=float))
    difficulty = np.atleast_1d(np.asarray(difficulty, dtype=float))
    surface = probability_surface(theta, difficulty, discrimination, guessing, upper)
    theta_grid, difficulty_grid = np.meshgrid(theta, difficulty)

    return pd.DataFrame(
        {
            "theta": theta_grid.ravel(),
            "difficulty": difficulty_grid.ravel(),
            "probability": surface.ravel(),
        }
    )


def expected_score_curve(
    theta,
    difficulties: Sequence[float],
    discriminations: Optional[Sequence[float]] = None,
    guessing: Optional[Sequence[float]] = None,
    upper: Optional[Sequence[float]] = None,
) -> np.ndarray:
    """Expected number-correct score of a test at each ability in *theta*.

    Item parameters are given per item; omitted ones default to the 2PL
    values (``a = 1, c = 0, d = 1``).

    Raises:
        InvalidParameter: If the item parameter sequences differ in length.
    """
    b = np.asarray(difficulties, dtype=float)
    n_items = len(b)
    a = np.ones(n_items) if discriminations is None else np.asarray(discriminations, dtype=float)
    c = np.zeros(n_items) if guessing is None else np.asarray(guessing, dtype=float)
    d = np.ones(n_items) if upper is None else np.asarray(upper, dtype=float)

    if not (len(a) == len(c) == len(d) == n_items):
        raise InvalidParameter(f"item parameter lengths differ: difficulties={n_items}, discriminations={len(a)}, guessing={len(c)}, upper={len(d)}")

    theta = np.atleast_1d(np.asarray(theta, dtype=float))
    probs = item_response_probability(theta[:, np.newaxis], b, a, c, d)
    return np.asarray(probs.sum(axis=1))

