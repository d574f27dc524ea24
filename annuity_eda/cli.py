"""
Command-line entry point for the annuity exploratory analysis.

Usage (from project root):

    python -m annuity_eda.cli [--n-policies N] [--seed S] [--plots-dir DIR]

This script:
1) Simulates a reproducible book of annuity policies
2) Prints head, summary statistics and the missing-value count
3) Fits the mortality and lapse logit models
4) Scores the example applicants with the mortality model

Chart, fit and predict stages are isolated: a failure in one is reported and the
remaining independent stages still run. The exit status is 1 if any stage failed.
"""

from __future__ import annotations

import argparse
import sys

import pandas as pd

from . import config
from .errors import AnnuityEdaError, InvalidArgument
from .generators import example_applicants, generate_policy_data
from .models import fit_lapse_model, fit_mortality_model, score_applicants


# -------------------------------------------------------------------
# Arguments
# -------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="annuity-eda",
        description="Simulate annuity policies and fit mortality / lapse logit models.",
    )
    parser.add_argument(
        "--n-policies", type=int, default=config.N_POLICIES,
        help=f"number of simulated records (default {config.N_POLICIES})",
    )
    parser.add_argument(
        "--seed", type=int, default=config.SEED,
        help=f"seed for the random generator (default {config.SEED})",
    )
    parser.add_argument(
        "--plots-dir", default=None,
        help="write the exploratory charts as PNG files to this directory",
    )
    return parser


# -------------------------------------------------------------------
# Main entrypoint
# -------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    print(f"▶ Simulating {args.n_policies} annuity policies (seed={args.seed})...")
    try:
        policies = generate_policy_data(args.n_policies, seed=args.seed)
    except InvalidArgument as exc:
        parser.error(str(exc))

    # ---------------- Inspection ---------------- #

    # imported here so plotting backends load only when inspecting
    from .eda import render_plots, summarize

    summary = summarize(policies)
    with pd.option_context("display.width", 120, "display.max_columns", None):
        print(summary["head"])
        print(summary["describe"])
    print(f"ℹ Missing values: {summary['n_missing']}")

    failures = 0

    if args.plots_dir:
        try:
            paths = render_plots(policies, args.plots_dir)
            print(f"✔ {len(paths)} charts written to {args.plots_dir}")
        except AnnuityEdaError as exc:
            failures += 1
            print(f"✘ Charts failed: {exc}")

    # ---------------- Models ---------------- #

    mortality_model = None

    try:
        mortality_model = fit_mortality_model(policies)
        print(f"✔ Mortality model converged in {mortality_model.n_iterations} iterations")
        print(mortality_model.summary())
    except AnnuityEdaError as exc:
        failures += 1
        print(f"✘ Mortality model failed: {exc}")

    try:
        lapse_model = fit_lapse_model(policies)
        print(f"✔ Lapse model converged in {lapse_model.n_iterations} iterations")
        print(lapse_model.summary())
    except AnnuityEdaError as exc:
        failures += 1
        print(f"✘ Lapse model failed: {exc}")

    # ---------------- Scoring ---------------- #

    if mortality_model is not None:
        try:
            print(score_applicants(mortality_model, example_applicants()))
        except AnnuityEdaError as exc:
            failures += 1
            print(f"✘ Scoring failed: {exc}")

    if failures:
        print(f"⚠ Finished with {failures} failed stage(s)")
        return 1

    print("✅ Analysis complete")
    return 0


# -------------------------------------------------------------------
# CLI hook
# -------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
