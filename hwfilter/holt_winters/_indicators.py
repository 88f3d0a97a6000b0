from typing import Tuple

import numpy as np
from vectorbt import _typing as tp
from vectorbt.indicators.factory import IndicatorFactory

from ._forecast import fitted_values
from ._holt_winters import run_model
from .base import HoltWintersConfig, SeasonalMode


def hw_align_1d(a: tp.Array1d,
                alpha: float,
                beta: float,
                gamma: float,
                period: int,
                multiplicative: bool = True) -> Tuple[tp.Array1d, tp.Array1d, tp.Array1d, tp.Array1d]:
    """
    对单列序列估计种子并执行递推，把轨迹对齐到输入下标

    Returns
    -------
    fitted, level, trend, season : 1d arrays
        与 a 等长。递推起点之前为 NaN；未启用的趋势为 0，未启用的季节为模式的单位值。
    """
    config = HoltWintersConfig(alpha=alpha, beta=beta, gamma=gamma,
                               seasonal=SeasonalMode.from_value(multiplicative),
                               period=period)
    result = run_model(a, config)
    start = result.config.start_time - 1

    fitted = np.full(a.shape[0], np.nan, dtype=np.float64)
    level = np.full(a.shape[0], np.nan, dtype=np.float64)
    trend = np.full(a.shape[0], np.nan, dtype=np.float64)
    season = np.full(a.shape[0], np.nan, dtype=np.float64)

    fitted[start:] = fitted_values(result)
    level[start:] = result.level[1:]
    if result.trend is not None:
        trend[start:] = result.trend[1:]
    else:
        trend[start:] = 0.0
    if result.season is not None:
        season[start:] = result.season[result.config.period:]
    else:
        season[start:] = result.config.seasonal.identity
    return fitted, level, trend, season


def hw_apply_func(close: tp.Array2d,
                  alpha: float,
                  beta: float,
                  gamma: float,
                  period: int,
                  multiplicative: bool) -> Tuple[tp.Array2d, tp.Array2d, tp.Array2d, tp.Array2d]:
    """Apply function for Holt-Winters filter indicators."""
    outputs = tuple(np.empty_like(close, dtype=np.float64) for _ in range(4))
    for col in range(close.shape[1]):
        for out, values in zip(outputs, hw_align_1d(close[:, col], alpha, beta, gamma, period, multiplicative)):
            out[:, col] = values
    return outputs


def hw_delta_apply_func(close: tp.Array2d,
                        alpha: float,
                        beta: float,
                        gamma: float,
                        period: int,
                        multiplicative: bool) -> tp.Array2d:
    """Apply function for Holt-Winters Delta: observed value minus one-step-ahead fitted value."""
    fitted = hw_apply_func(close, alpha, beta, gamma, period, multiplicative)[0]
    return close - fitted


HWF = IndicatorFactory(
    class_name='HWF',
    module_name=__name__,
    short_name='hwf',
    input_names=['close'],
    param_names=['alpha', 'beta', 'gamma', 'period', 'multiplicative'],
    output_names=['fitted', 'level', 'trend', 'season']
).from_apply_func(
    hw_apply_func,
    param_product=True,
    beta=0.,
    gamma=0.,
    period=0,
    multiplicative=True
)

HWD = IndicatorFactory(
    class_name='HWD',
    module_name=__name__,
    short_name='hwd',
    input_names=['close'],
    param_names=['alpha', 'beta', 'gamma', 'period', 'multiplicative'],
    output_names=['hwd']
).from_apply_func(
    hw_delta_apply_func,
    beta=0.,
    gamma=0.,
    period=0,
    multiplicative=True
)
