"""
Inspection helpers for the simulated book: summary tables and charts.

Charts are written to files and closed; nothing is displayed interactively.
"""

from __future__ import annotations

from pathlib import Path

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import numpy as np  # noqa: E402
import pandas as pd  # noqa: E402
import seaborn as sns  # noqa: E402

from .models import fit, predict  # noqa: E402


# ---------------- Summaries ---------------- #

def summarize(policies: pd.DataFrame, n_head: int = 6) -> dict:
    """Head, descriptive statistics, total missing count and gender counts."""
    return {
        "head": policies.head(n_head),
        "describe": policies.describe(include="all"),
        "n_missing": int(policies.isna().sum().sum()),
        "gender_counts": policies["gender"].value_counts(),
    }


# ---------------- Charts ---------------- #

def _save(fig, path: Path) -> Path:
    fig.savefig(path)
    plt.close(fig)
    return path


def _smooth_by_gender(ax, policies: pd.DataFrame, x: str, y: str) -> None:
    # one single-predictor logit curve per gender, drawn over the observed x range
    grid = pd.DataFrame({x: np.linspace(policies[x].min(), policies[x].max(), 100)})
    for gender, group in policies.groupby("gender"):
        curve = fit(group, y, [x])
        ax.plot(grid[x], predict(curve, grid), label=f"{gender} fit")


def _effect_plot(policies: pd.DataFrame, x: str, y: str, title: str, path: Path) -> Path:
    fig, ax = plt.subplots(figsize=(8, 5))
    sns.scatterplot(data=policies, x=x, y=y, hue="gender", alpha=0.5, ax=ax)
    _smooth_by_gender(ax, policies, x, y)
    ax.set_title(title)
    ax.legend()
    return _save(fig, path)


def render_plots(policies: pd.DataFrame, out_dir) -> list[Path]:
    """Render the exploratory charts as PNG files under ``out_dir``.

    Returns the written paths in drawing order.
    """
    out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    written = []

    fig, ax = plt.subplots(figsize=(8, 5))
    sns.histplot(policies["age"], bins=30, ax=ax)
    ax.set_title("Distribution of Policyholder Age")
    written.append(_save(fig, out_dir / "age_distribution.png"))

    fig, ax = plt.subplots(figsize=(8, 5))
    sns.countplot(data=policies, x="gender", ax=ax)
    ax.set_title("Gender Distribution")
    written.append(_save(fig, out_dir / "gender_distribution.png"))

    fig, ax = plt.subplots(figsize=(8, 5))
    sns.scatterplot(data=policies, x="age", y="mortality_prob", alpha=0.5, ax=ax)
    ax.set_title("Age vs. Mortality Probability")
    written.append(_save(fig, out_dir / "age_vs_mortality.png"))

    written.append(
        _effect_plot(
            policies, "age", "mortality_prob",
            "Mortality Probability by Age and Gender",
            out_dir / "mortality_by_age_gender.png",
        )
    )
    written.append(
        _effect_plot(
            policies, "duration_years", "lapse_prob",
            "Lapse Probability by Policy Duration and Gender",
            out_dir / "lapse_by_duration_gender.png",
        )
    )
    return written
