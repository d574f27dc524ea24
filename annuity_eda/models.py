"""
Binomial-logit risk models for the simulated annuity book.

Both models regress a *probability* column (mortality_prob, lapse_prob)
directly on policyholder attributes with a binomial family and logit link:

    logit(E[y]) = b0 + b_age * age + b_male * [gender == Male] + b_amt * policy_amount (+ ...)

The response is continuous in (0, 1) rather than a 0/1 outcome. statsmodels
accepts proportions for the binomial family and fits them by IRLS; this is the
reference behaviour of the analysis and is kept as is.

Categorical predictors are treatment coded. Levels are read from the training
data, sorted, and the first one is the reference (so "Female" for gender),
giving a single ``gender[T.Male]`` column. Unseen levels at prediction time
are rejected with SchemaMismatch.
"""

from __future__ import annotations

import warnings
from dataclasses import dataclass, field
from typing import Any, Sequence

import numpy as np
import pandas as pd
import statsmodels.api as sm
from statsmodels.tools.sm_exceptions import ConvergenceWarning

from . import config
from .errors import ConvergenceError, SchemaMismatch
from .generators import sigmoid


INTERCEPT = "Intercept"


# ---------------- Fitted model ---------------- #

@dataclass(frozen=True)
class FittedModel:
    """Parameters of a fitted logit model plus what is needed to encode new data."""

    response: str
    predictors: tuple[str, ...]
    params: pd.Series
    levels: dict[str, tuple[str, ...]]
    n_iterations: int
    results: Any = field(default=None, repr=False, compare=False)

    @property
    def design_columns(self) -> list[str]:
        return list(self.params.index)

    @property
    def coefficients(self) -> pd.Series:
        return self.params.copy()

    def summary(self):
        """statsmodels summary table of the underlying fit."""
        if self.results is None:
            raise AttributeError("model was built without a statsmodels results object")
        return self.results.summary()

    def predict(self, new_records: pd.DataFrame) -> pd.Series:
        return predict(self, new_records)


# ---------------- Design matrix ---------------- #

def _require_columns(frame: pd.DataFrame, columns: Sequence[str]) -> None:
    missing = [c for c in columns if c not in frame.columns]
    if missing:
        raise SchemaMismatch(f"missing required column(s): {missing}")
    with_nulls = [c for c in columns if frame[c].isna().any()]
    if with_nulls:
        raise SchemaMismatch(f"missing values in column(s): {with_nulls}")


def _training_levels(frame: pd.DataFrame, predictors: Sequence[str]) -> dict[str, tuple[str, ...]]:
    return {
        p: tuple(sorted(frame[p].astype(str).unique()))
        for p in predictors
        if p in config.CATEGORICAL_PREDICTORS
    }


def _numeric(frame: pd.DataFrame, column: str) -> np.ndarray:
    try:
        return pd.to_numeric(frame[column]).astype(float).to_numpy()
    except (TypeError, ValueError) as exc:
        raise SchemaMismatch(f"column {column!r} is not numeric") from exc


def _treatment_columns(frame: pd.DataFrame, column: str, levels: tuple[str, ...]) -> pd.DataFrame:
    values = frame[column].astype(str)
    coded = pd.Series(pd.Categorical(values, categories=list(levels)), index=frame.index)
    if coded.isna().any():
        unseen = sorted(set(values[coded.isna()]))
        raise SchemaMismatch(
            f"{column!r} has level(s) {unseen} not seen when fitting; known levels: {list(levels)}"
        )
    dummies = pd.get_dummies(coded, drop_first=True, dtype=float)
    dummies.columns = [f"{column}[T.{level}]" for level in dummies.columns]
    return dummies


def _design_matrix(
    frame: pd.DataFrame,
    predictors: Sequence[str],
    levels: dict[str, tuple[str, ...]],
) -> pd.DataFrame:
    """Intercept, then each predictor in order; categoricals expand to one column per non-reference level."""
    _require_columns(frame, predictors)

    parts = [pd.DataFrame({INTERCEPT: np.ones(len(frame))}, index=frame.index)]
    for p in predictors:
        if p in levels:
            parts.append(_treatment_columns(frame, p, levels[p]))
        else:
            parts.append(pd.DataFrame({p: _numeric(frame, p)}, index=frame.index))

    return pd.concat(parts, axis=1)


# ---------------- Fitting ---------------- #

def fit(
    table: pd.DataFrame,
    response: str,
    predictors: Sequence[str],
    maxiter: int = config.GLM_MAXITER,
    tol: float = config.GLM_TOL,
) -> FittedModel:
    """Fit a binomial-logit GLM of ``response`` on ``predictors``.

    Raises:
        SchemaMismatch: a response or predictor column is absent, holds
            missing values, or is not numeric where it must be.
        ConvergenceError: IRLS did not converge within ``maxiter`` iterations
            or produced non-finite parameters.
    """
    predictors = tuple(predictors)
    _require_columns(table, [response, *predictors])

    levels = _training_levels(table, predictors)
    exog = _design_matrix(table, predictors, levels)
    endog = pd.Series(_numeric(table, response), index=table.index, name=response)

    glm = sm.GLM(endog, exog, family=sm.families.Binomial())
    with warnings.catch_warnings():
        warnings.simplefilter("ignore", ConvergenceWarning)
        results = glm.fit(maxiter=maxiter, tol=tol)

    n_iter = int(results.fit_history.get("iteration", maxiter))
    if not results.converged:
        raise ConvergenceError(
            f"GLM for {response!r} did not converge after {n_iter} iterations"
        )
    if not np.all(np.isfinite(results.params)):
        raise ConvergenceError(f"GLM for {response!r} produced non-finite parameters")

    return FittedModel(
        response=response,
        predictors=predictors,
        params=results.params.copy(),
        levels=levels,
        n_iterations=n_iter,
        results=results,
    )


def fit_mortality_model(table: pd.DataFrame) -> FittedModel:
    return fit(table, config.MORTALITY_RESPONSE, config.MORTALITY_PREDICTORS)


def fit_lapse_model(table: pd.DataFrame) -> FittedModel:
    return fit(table, config.LAPSE_RESPONSE, config.LAPSE_PREDICTORS)


# ---------------- Prediction ---------------- #

def predict(model: FittedModel, new_records: pd.DataFrame) -> pd.Series:
    """Response-scale predictions, one per row of ``new_records``, in input order.

    Raises:
        SchemaMismatch: a predictor column is missing or has missing values,
            or a categorical level was not present in the training data.
    """
    exog = _design_matrix(new_records, model.predictors, model.levels)
    exog = exog[model.design_columns]
    linear = exog.to_numpy() @ model.params.to_numpy()
    return pd.Series(sigmoid(linear), index=new_records.index, name=f"{model.response}_pred")


def score_applicants(
    model: FittedModel,
    new_records: pd.DataFrame,
    column: str = "mortality_pred",
) -> pd.DataFrame:
    """Copy of ``new_records`` with the model's prediction appended as ``column``."""
    scored = new_records.copy()
    scored[column] = predict(model, new_records)
    return scored
