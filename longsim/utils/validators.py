"""
Validation utilities for longitudinal data generation.

This module provides validation functions for generator inputs, model
settings, and IRT item parameters.
"""

from dataclasses import dataclass
from typing import Any, List, Optional, Tuple, Union

import numpy as np

__all__ = ["InvalidParameter"]

MIN_OBSERVATIONS = 4
MIN_MAX_OBS = MIN_OBSERVATIONS + 1
MAX_SEED = 2**63 - 1


class InvalidParameter(ValueError):
    """Raised when a generator or model parameter is out of range."""

    pass


@dataclass
class _ValidationResult:
    """Outcome of a validation check, carrying errors and warnings.

    Attributes:
        is_valid: ``True`` if no errors were found.
        errors: List of error messages (empty when valid).
        warnings: List of non-fatal warning messages.
    """

    is_valid: bool
    errors: List[str]
    warnings: List[str]

    def raise_if_invalid(self):
        """Raise ``InvalidParameter`` if the validation failed."""
        if not self.is_valid:
            error_msg = "Validation failed:\n" + "\n".join(f"• {err}" for err in self.errors)
            raise InvalidParameter(error_msg)

    def merge(self, other: "_ValidationResult") -> "_ValidationResult":
        """Combine two results into one, keeping every message."""
        return _ValidationResult(
            self.is_valid and other.is_valid,
            self.errors + other.errors,
            self.warnings + other.warnings,
        )


class _Validator:
    """Static helpers for type and range checks used by all validators."""

    @staticmethod
    def _check_type(value: Any, expected_types: tuple, name: str) -> Optional[str]:
        """Check if value has expected type."""
        if isinstance(value, bool) or not isinstance(value, expected_types):
            actual_type = type(value).__name__
            expected = expected_types[0].__name__ if len(expected_types) == 1 else f"one of {[t.__name__ for t in expected_types]}"
            return f"{name} must be {expected}, got {actual_type}"
        return None

    @staticmethod
    def _check_range(
        value: Union[int, float],
        min_val: Optional[float],
        max_val: Optional[float],
        name: str,
        exclusive: bool = False,
    ) -> Optional[str]:
        """Check if value is within range (open interval when *exclusive*)."""
        if not np.isfinite(value):
            return f"{name} must be finite, got {value}"
        if exclusive:
            if (min_val is not None and value <= min_val) or (max_val is not None and value >= max_val):
                return f"{name} must lie strictly between {min_val} and {max_val}, got {value}"
            return None
        if min_val is not None and value < min_val:
            return f"{name} must be >= {min_val}, got {value}"
        if max_val is not None and value > max_val:
            return f"{name} must be <= {max_val}, got {value}"
        return None


_validator = _Validator()

_INT_TYPES = (int, np.integer)
_REAL_TYPES = (int, float, np.integer, np.floating)


def _validate_numeric_parameter(
    value: Any,
    name: str,
    expected_types: tuple = _REAL_TYPES,
    min_val: Optional[float] = None,
    max_val: Optional[float] = None,
    exclusive: bool = False,
) -> _ValidationResult:
    """Generic validation for numeric parameters."""
    errors: List[str] = []

    type_error = _validator._check_type(value, expected_types, name)
    if type_error:
        errors.append(type_error)
        return _ValidationResult(False, errors, [])

    range_error = _validator._check_range(value, min_val, max_val, name, exclusive)
    if range_error:
        errors.append(range_error)

    return _ValidationResult(len(errors) == 0, errors, [])


def _validate_n_individuals(n: Any) -> _ValidationResult:
    """Validate the number of simulated individuals (integer >= 1)."""
    return _validate_numeric_parameter(n, "n", expected_types=_INT_TYPES, min_val=1)


def _validate_max_obs(max_obs: Any) -> _ValidationResult:
    """Validate the maximum number of observations per individual.

    Index 1 is always observed and the remaining indices are sampled from
    ``2..max_obs``, so ``max_obs`` must leave room for at least one index
    beyond the minimum of four.
    """
    result = _validate_numeric_parameter(max_obs, "max_obs", expected_types=_INT_TYPES)
    if not result.is_valid:
        return result

    if max_obs < MIN_MAX_OBS:
        result.errors.append(
            f"max_obs must be >= {MIN_MAX_OBS}, got {max_obs}: each individual has at least "
            f"{MIN_OBSERVATIONS} time indices starting at 1, sampled from 1..max_obs"
        )
        result.is_valid = False
    return result


def _validate_autocorrelation(autocorrelation: Any) -> _ValidationResult:
    """Validate the AR(1) coefficient (open interval (-1, 1) for stationarity)."""
    return _validate_numeric_parameter(autocorrelation, "autocorrelation", min_val=-1, max_val=1, exclusive=True)


def _validate_sd(value: Any, name: str) -> _ValidationResult:
    """Validate a standard deviation (finite, >= 0)."""
    return _validate_numeric_parameter(value, name, min_val=0)


def _validate_correlation(value: Any, name: str = "tau01") -> _ValidationResult:
    """Validate a correlation coefficient in [-1, 1]."""
    return _validate_numeric_parameter(value, name, min_val=-1, max_val=1)


def _validate_coefficient(value: Any, name: str) -> _ValidationResult:
    """Validate a fixed-effect coefficient (any finite real)."""
    return _validate_numeric_parameter(value, name)


def _validate_seed(seed: Any) -> _ValidationResult:
    """Validate a random seed (``None`` or a non-negative integer)."""
    if seed is None:
        return _ValidationResult(True, [], [])
    return _validate_numeric_parameter(seed, "seed", expected_types=_INT_TYPES, min_val=0, max_val=MAX_SEED)


def _validate_group_settings(trials: Any, probability: Any) -> _ValidationResult:
    """Validate the binomial group-label draw settings."""
    result = _validate_numeric_parameter(trials, "group_trials", expected_types=_INT_TYPES, min_val=1)
    return result.merge(_validate_numeric_parameter(probability, "group_probability", min_val=0, max_val=1))


def _validate_n_jobs(n_jobs: Any) -> _ValidationResult:
    """Validate a worker count.

    Positive values are process counts; negative values follow the joblib
    convention (``-1`` uses every core). Zero is rejected.
    """
    result = _validate_numeric_parameter(n_jobs, "n_jobs", expected_types=_INT_TYPES)
    if result.is_valid and n_jobs == 0:
        result.errors.append("n_jobs must be a non-zero integer, got 0")
        result.is_valid = False
    return result


def _validate_generation_parameters(
    n: Any,
    max_obs: Any,
    beta0: Any,
    beta1: Any,
    autocorrelation: Any,
    sigma: Any,
    tau0: Any,
    tau1: Any,
    tau01: Any,
    seed: Any,
    group_trials: Any = 3,
    group_probability: Any = 0.5,
    n_jobs: Any = 1,
) -> _ValidationResult:
    """Validate every input of the longitudinal generator at once.

    All failures are collected so a single ``raise_if_invalid`` reports
    the full list.
    """
    checks = [
        _validate_n_individuals(n),
        _validate_max_obs(max_obs),
        _validate_coefficient(beta0, "beta0"),
        _validate_coefficient(beta1, "beta1"),
        _validate_autocorrelation(autocorrelation),
        _validate_sd(sigma, "sigma"),
        _validate_sd(tau0, "tau0"),
        _validate_sd(tau1, "tau1"),
        _validate_correlation(tau01, "tau01"),
        _validate_seed(seed),
        _validate_group_settings(group_trials, group_probability),
        _validate_n_jobs(n_jobs),
    ]
    result = _ValidationResult(True, [], [])
    for check in checks:
        result = result.merge(check)
    return result


def _validate_parallel_settings(enable: Any, n_cores: Optional[int]) -> Tuple[Tuple[bool, int], _ValidationResult]:
    """Validate parallel processing settings.

    Args:
        enable: True or False
        n_cores: Number of CPU cores (positive int or None for auto)

    Returns:
        ((enable, n_cores), ValidationResult)
    """
    import multiprocessing as mp

    errors = []

    if enable not in (True, False):
        errors.append(f"enable must be True or False, got {enable!r}")
        return (False, 1), _ValidationResult(False, errors, [])

    max_cores = mp.cpu_count()
    validated_n_cores = max(1, max_cores // 2)

    if n_cores is not None:
        if not isinstance(n_cores, int) or n_cores <= 0:
            errors.append(f"n_cores must be a positive integer, got {n_cores}")
        else:
            validated_n_cores = min(n_cores, max_cores)

    return (bool(enable), validated_n_cores), _ValidationResult(len(errors) == 0, errors, [])


def _validate_irt_parameters(discrimination: Any, guessing: Any, upper: Any) -> _ValidationResult:
    """Validate 4PL item parameters (scalars or arrays).

    Discrimination must be non-negative, the lower asymptote in ``[0, 1)``
    and the upper asymptote in ``(guessing, 1]``.
    """
    errors: List[str] = []
    a = np.asarray(discrimination, dtype=float)
    c = np.asarray(guessing, dtype=float)
    d = np.asarray(upper, dtype=float)

    if not (np.all(np.isfinite(a)) and np.all(np.isfinite(c)) and np.all(np.isfinite(d))):
        errors.append("item parameters must be finite")
        return _ValidationResult(False, errors, [])

    if np.any(a < 0):
        errors.append(f"discrimination must be >= 0, got {discrimination}")
    if np.any(c < 0) or np.any(c >= 1):
        errors.append(f"guessing must lie in [0, 1), got {guessing}")
    if np.any(d > 1):
        errors.append(f"upper must be <= 1, got {upper}")
    if not errors:
        try:
            if np.any(d <= c):
                errors.append(f"upper ({upper}) must exceed guessing ({guessing})")
        except ValueError:
            errors.append("guessing and upper have incompatible shapes")

    return _ValidationResult(len(errors) == 0, errors, [])
