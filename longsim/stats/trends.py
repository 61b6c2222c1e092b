"""
Trend-line summaries of a longitudinal panel.

Each individual's outcome is regressed on ``ln(time_index)``, matching the
generating model, so fitted intercepts and slopes estimate
``beta0 + u0_i`` and ``beta1 + u1_i``.
"""

from typing import Dict, List

import numpy as np
from sklearn.linear_model import LinearRegression

from .data_generation import COLUMNS, LongitudinalDataset

TREND_COLUMNS = ["individual_id", "group", "intercept", "slope", "n_obs"]


def _as_frame(data):
    """Accept a dataset or a DataFrame with the standard columns."""
    import pandas as pd

    if isinstance(data, LongitudinalDataset):
        return data.to_frame()
    if isinstance(data, pd.DataFrame):
        missing = [c for c in COLUMNS if c not in data.columns]
        if missing:
            raise ValueError(f"DataFrame is missing columns: {', '.join(missing)}")
        return data
    raise TypeError(f"Expected LongitudinalDataset or pandas DataFrame, got {type(data).__name__}")


def _fit_line(time_index: np.ndarray, outcome: np.ndarray):
    """OLS fit of outcome on ln(time); returns (intercept, slope)."""
    X = np.log(np.asarray(time_index, dtype=float)).reshape(-1, 1)
    reg = LinearRegression().fit(X, np.asarray(outcome, dtype=float))
    return float(reg.intercept_), float(reg.coef_[0])


def fit_individual_trends(data):
    """Fit one trend line per individual.

    Args:
        data: ``LongitudinalDataset`` or DataFrame with columns
            ``individual_id, group, time_index, outcome``.

    Returns:
        DataFrame with columns ``individual_id, group, intercept, slope,
        n_obs``, one row per individual in id order.
    """
    import pandas as pd

    frame = _as_frame(data)
    rows: List[Dict] = []
    for individual_id, sub in frame.groupby("individual_id", sort=True):
        intercept, slope = _fit_line(sub["time_index"].to_numpy(), sub["outcome"].to_numpy())
        rows.append(
            {
                "individual_id": individual_id,
                "group": sub["group"].iloc[0],
                "intercept": intercept,
                "slope": slope,
                "n_obs": len(sub),
            }
        )
    return pd.DataFrame(rows, columns=TREND_COLUMNS)


def population_trend(data) -> Dict[str, float]:
    """Pooled trend line over every observation: ``{"intercept", "slope"}``."""
    frame = _as_frame(data)
    intercept, slope = _fit_line(frame["time_index"].to_numpy(), frame["outcome"].to_numpy())
    return {"intercept": intercept, "slope": slope}
