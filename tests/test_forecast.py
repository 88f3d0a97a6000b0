# -*- coding: utf-8 -*-
"""Fitted value and forecast tests."""

import numpy as np
import pytest

from hwfilter import ConfigurationError
from hwfilter.holt_winters import HoltWintersConfig, fitted_values, forecast, run, run_model


@pytest.fixture
def additive_result():
    return run([1.0, 2.0], start_time=1, alpha=0.5, beta=0.5, gamma=0.5,
               seasonal_mode="additive", period=2,
               seed_level=1.0, seed_trend=0.5, seed_season=[0.1, -0.1])


def test_fitted_values_hand_computation(additive_result):
    np.testing.assert_allclose(fitted_values(additive_result), [1.6, 1.45])


@pytest.mark.parametrize("mode", ["additive", "multiplicative"])
def test_fitted_values_reproduce_sse(seasonal_series, mode):
    config = HoltWintersConfig(alpha=0.4, beta=0.1, gamma=0.3, seasonal=mode, period=4)
    result = run_model(seasonal_series, config)
    start = result.config.start_time - 1

    residuals = seasonal_series[start:] - fitted_values(result)
    assert np.sum(residuals ** 2) == pytest.approx(result.sse, rel=1e-12)


def test_forecast_additive_season_cycles(additive_result):
    np.testing.assert_allclose(forecast(additive_result, 3), [2.2625, 2.8375, 3.2375])


def test_forecast_first_step_matches_next_fitted_value(seasonal_series):
    kwargs = dict(start_time=5, alpha=0.4, beta=0.1, gamma=0.3, seasonal_mode="multiplicative",
                  period=4, seed_level=11.0, seed_trend=0.5, seed_season=[0.9, 1.3, 0.7, 1.1])
    shorter = run(seasonal_series[:-1], **kwargs)
    longer = run(seasonal_series, **kwargs)

    assert forecast(shorter, 1)[0] == pytest.approx(fitted_values(longer)[-1])


def test_forecast_without_season():
    result = run([1.0, 2.0, 3.0], start_time=1, alpha=0.5, beta=0.5,
                 seasonal_mode="multiplicative", seed_level=1.0, seed_trend=1.0)
    a, b = result.level[-1], result.trend[-1]
    np.testing.assert_allclose(forecast(result, 2), [a + b, a + 2 * b])


def test_forecast_level_only(us_population):
    result = run(us_population, start_time=2, alpha=0.9999208, seed_level=3.93)
    np.testing.assert_allclose(forecast(result, 3), np.full(3, result.level[-1]))


@pytest.mark.parametrize("horizon", [0, -1, 1.5])
def test_forecast_rejects_bad_horizon(additive_result, horizon):
    with pytest.raises(ConfigurationError):
        forecast(additive_result, horizon)
