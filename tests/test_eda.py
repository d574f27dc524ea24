"""
Tests for the inspection helpers.
"""

from annuity_eda.eda import render_plots, summarize
from annuity_eda.generators import generate_policy_data


def test_summarize(policy_data):
    summary = summarize(policy_data)
    assert summary["n_missing"] == 0
    assert len(summary["head"]) == 6
    assert summary["gender_counts"].sum() == len(policy_data)
    assert "age" in summary["describe"].columns


def test_render_plots(tmp_path):
    policies = generate_policy_data(400, seed=5)
    paths = render_plots(policies, tmp_path / "charts")
    assert len(paths) == 5
    for path in paths:
        assert path.exists() and path.stat().st_size > 0
