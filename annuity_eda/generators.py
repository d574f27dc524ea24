"""
Synthetic policy generator for the annuity book.

Design goals:
- Reproducible: every draw comes from an explicit numpy Generator, either
  supplied by the caller or seeded from config.SEED. No global random state.
- Total: every field of every record is populated, there is nothing to clean.
- Columns are drawn in a fixed order so a given seed always yields the same book.
"""

from __future__ import annotations

import numbers

import numpy as np
import pandas as pd

from . import config
from .errors import InvalidArgument
from .schemas import APPLICANT_COLUMNS, POLICY_COLUMNS


# ---------------- Utility helpers ---------------- #

def sigmoid(x):
    """Inverse logit, elementwise."""
    return 1.0 / (1.0 + np.exp(-np.asarray(x, dtype=float)))


def _check_policy_count(n_policies) -> int:
    if isinstance(n_policies, bool) or not isinstance(n_policies, numbers.Integral):
        raise InvalidArgument(f"n_policies must be an integer, got {n_policies!r}")
    if n_policies <= 0:
        raise InvalidArgument(f"n_policies must be positive, got {n_policies}")
    return int(n_policies)


def _start_dates(n: int, rng: np.random.Generator) -> pd.DatetimeIndex:
    offsets = rng.integers(0, config.START_OFFSET_MAX_DAYS, size=n, endpoint=True)
    return pd.Timestamp(config.EPOCH_DATE) + pd.to_timedelta(offsets, unit="D")


def _logistic_draws(n: int, params: tuple[float, float], rng: np.random.Generator) -> np.ndarray:
    mean, sd = params
    return sigmoid(rng.normal(mean, sd, size=n))


# ---------------- Policies ---------------- #

def generate_policy_data(
    n_policies: int = config.N_POLICIES,
    seed: int | None = config.SEED,
    rng: np.random.Generator | None = None,
) -> pd.DataFrame:
    """Simulate a book of annuity policies.

    Args:
        n_policies: number of records, must be a positive integer.
        seed: seed for a fresh ``numpy.random.default_rng``; ignored when
            ``rng`` is given.
        rng: generator to draw from. Passing one lets callers chain several
            simulations off a single stream.

    Returns:
        DataFrame with one row per policy and columns
        [policy_id, age, gender, start_date, policy_amount, duration_years,
         mortality_prob, morbidity_prob, lapse_prob, persistency_prob]

    Raises:
        InvalidArgument: if ``n_policies`` is not a positive integer.
    """
    n = _check_policy_count(n_policies)
    if rng is None:
        rng = np.random.default_rng(seed)

    ages = np.round(rng.normal(config.AGE_MEAN, config.AGE_SD, size=n)).astype(int)
    genders = rng.choice(config.GENDERS, size=n)
    start_dates = _start_dates(n, rng)
    amounts = rng.lognormal(
        mean=np.log(config.POLICY_AMOUNT_MEDIAN),
        sigma=config.POLICY_AMOUNT_SIGMA,
        size=n,
    )
    durations = rng.integers(
        config.DURATION_MIN_YEARS, config.DURATION_MAX_YEARS, size=n, endpoint=True
    )

    mortality = _logistic_draws(n, config.MORTALITY_LOGIT, rng)
    morbidity = _logistic_draws(n, config.MORBIDITY_LOGIT, rng)
    lapse = _logistic_draws(n, config.LAPSE_LOGIT, rng)

    policies = pd.DataFrame(
        {
            "policy_id": np.arange(1, n + 1),
            "age": ages,
            "gender": genders,
            "start_date": start_dates,
            "policy_amount": amounts,
            "duration_years": durations,
            "mortality_prob": mortality,
            "morbidity_prob": morbidity,
            "lapse_prob": lapse,
            "persistency_prob": 1.0 - lapse,
        },
        columns=POLICY_COLUMNS,
    )
    return policies


def example_applicants() -> pd.DataFrame:
    """The two new applicants scored at the end of the reference analysis."""
    return pd.DataFrame(config.EXAMPLE_APPLICANTS, columns=APPLICANT_COLUMNS)
