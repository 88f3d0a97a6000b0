# -*- coding: utf-8 -*-
"""Command line demo tests."""

import pytest

from hwfilter.cli import main


def test_demo_prints_traces_and_sse(capsys):
    assert main(["--demo"]) == 0

    out = capsys.readouterr().out
    assert out.startswith("Estimated:")
    assert "index = 0, level: 3.930000" in out
    assert "trend" not in out
    assert "SSE:" in out


def test_series_with_season_and_forecast(capsys):
    code = main(["10,14,8,12,12,16,10,14", "--alpha", "0.5", "--beta", "0.2", "--gamma", "0.3",
                 "--period", "4", "--mode", "additive", "--estimate-seeds", "--horizon", "4"])

    assert code == 0
    out = capsys.readouterr().out
    assert "season:" in out
    assert "Forecast:" in out
    assert "h = 4" in out


def test_explicit_seeds(capsys):
    code = main(["1,2", "--alpha", "0.5", "--beta", "0.5", "--gamma", "0.5", "--period", "2",
                 "--mode", "additive", "--start-time", "1", "--seed-level", "1",
                 "--seed-trend", "0.5", "--seed-season", "0.1,-0.1"])

    assert code == 0
    assert "SSE: 0.662500" in capsys.readouterr().out


def test_configuration_error_exit_code(capsys):
    code = main(["1,2,3", "--alpha", "0.5", "--gamma", "0.5", "--period", "0"])

    assert code == 2
    captured = capsys.readouterr()
    assert "period" in captured.err
    assert captured.out == ""


def test_missing_alpha(capsys):
    assert main(["1,2,3"]) == 2
    assert "alpha" in capsys.readouterr().err


def test_bad_number(capsys):
    assert main(["1,x,3", "--alpha", "0.5"]) == 2


def test_no_series():
    with pytest.raises(SystemExit) as excinfo:
        main([])
    assert excinfo.value.code == 2
