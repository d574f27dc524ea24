"""
Tests for the command-line pipeline.
"""

import pytest

from annuity_eda import cli


def test_cli_runs_pipeline(capsys):
    assert cli.main(["--n-policies", "500", "--seed", "11"]) == 0
    out = capsys.readouterr().out
    assert "Missing values: 0" in out
    assert "mortality_pred" in out
    assert "Analysis complete" in out


def test_cli_rejects_bad_policy_count():
    with pytest.raises(SystemExit) as exc:
        cli.main(["--n-policies", "0"])
    assert exc.value.code == 2


def test_cli_reports_failed_fit(monkeypatch, capsys):
    from annuity_eda.errors import ConvergenceError

    def fail(_):
        raise ConvergenceError("did not converge")

    monkeypatch.setattr(cli, "fit_lapse_model", fail)
    assert cli.main(["--n-policies", "300"]) == 1
    out = capsys.readouterr().out
    assert "Lapse model failed" in out
    assert "mortality_pred" in out


def test_cli_reports_failed_charts(monkeypatch, tmp_path, capsys):
    from annuity_eda import eda
    from annuity_eda.errors import ConvergenceError

    def fail(*_):
        raise ConvergenceError("smoothing fit did not converge")

    monkeypatch.setattr(eda, "render_plots", fail)
    assert cli.main(["--n-policies", "300", "--plots-dir", str(tmp_path)]) == 1
    out = capsys.readouterr().out
    assert "Charts failed" in out
    assert "Mortality model converged" in out
    assert "mortality_pred" in out
