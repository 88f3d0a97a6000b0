"""
Holt-Winters 初值估计

初始趋势与季节指数采用 NIST 推荐的方法:
http://www.itl.nist.gov/div898/handbook/pmc/section4/pmc435.htm
"""

from typing import Any, Optional, Tuple

import numpy as np

from .._utils import ConfigurationError, validate_series
from .base import HoltWintersConfig, SeasonalMode, SeedState


def _check_period(period: int) -> int:
    if isinstance(period, bool) or not isinstance(period, (int, np.integer)) or period < 1:
        raise ConfigurationError(f"period must be a positive integer: {period!r}",
                                 field="period", value=period)
    return int(period)


def initial_level(series: Any, period: Optional[int] = None) -> float:
    """第一个观测值作为水平初值（比第一个季节的均值更稳定）"""
    x = validate_series(series)
    return float(x[0])


def initial_trend(series: Any, period: int) -> float:
    """
    用前两个完整季节之间的平均变化估计趋势初值

        b0 = sum(y[p + i] - y[i] for i in range(p)) / p^2
    """
    x = validate_series(series)
    period = _check_period(period)
    if x.shape[0] < 2 * period:
        raise ConfigurationError("Data length must be at least 2 * period to estimate trend",
                                 field="series", value=x.shape[0])

    total = 0.0
    for i in range(period):
        total += x[period + i] - x[i]
    return total / (period * period)


def seasonal_indices(series: Any, period: int, mode: Any = SeasonalMode.MULTIPLICATIVE) -> np.ndarray:
    """
    计算季节指数

    对每个完整季节求均值，再将各观测值相对该季节均值（乘法模型为比值，加法模型为差值）
    按季节内位置取平均。不足一个季节的尾部数据被忽略。

    Args:
        series: 观测序列
        period: 季节长度
        mode: 季节模式

    Returns:
        长度为 period 的季节指数数组
    """
    x = validate_series(series)
    period = _check_period(period)
    mode = SeasonalMode.from_value(mode)

    seasons = x.shape[0] // period
    if seasons < 1:
        raise ConfigurationError("Data length must be at least one period to estimate seasonal indices",
                                 field="series", value=x.shape[0])

    blocks = x[:seasons * period].reshape(seasons, period)
    averages = blocks.mean(axis=1, keepdims=True)
    if mode is SeasonalMode.MULTIPLICATIVE:
        averaged_observations = blocks / averages
    else:
        averaged_observations = blocks - averages
    return averaged_observations.mean(axis=0)


def estimate_seeds(series: Any, config: HoltWintersConfig) -> Tuple[SeedState, int]:
    """
    根据配置估计种子状态和递推起点

    - 无趋势无季节: level = y[0]，从第 2 个观测值开始
    - 仅趋势: level = y[1]，trend = y[1] - y[0]，从第 3 个观测值开始
    - 季节: level 为第一个季节的均值，trend 与季节指数按 NIST 方法估计，从第 period + 1 个观测值开始

    Returns:
        (SeedState, start_time)
    """
    x = validate_series(series)
    config = config.validate()
    n = x.shape[0]

    if config.seasonal_enabled:
        period = config.period
        if n < 2 * period:
            raise ConfigurationError("Data length must be at least 2 * period to estimate seeds",
                                     field="series", value=n)
        level = float(np.mean(x[:period]))
        trend = initial_trend(x, period) if config.trend_enabled else 0.0
        season = seasonal_indices(x, period, config.seasonal)
        return SeedState(level=level, trend=trend, season=season), period + 1

    if config.trend_enabled:
        if n < 3:
            raise ConfigurationError("Data length must be at least 3 to estimate trend seeds",
                                     field="series", value=n)
        return SeedState(level=float(x[1]), trend=float(x[1] - x[0])), 3

    if n < 2:
        raise ConfigurationError("Data length must be at least 2 to estimate seeds",
                                 field="series", value=n)
    return SeedState(level=initial_level(x)), 2
