"""
Holt-Winters 递推核心

a: level component
b: trend component
s: seasonal component

Additive:
    Yhat[t]  = a[t-1] + b[t-1] + s[t-p]
    a[t] = α (Y[t] - s[t-p]) + (1-α) (a[t-1] + b[t-1])
    b[t] = β (a[t] - a[t-1]) + (1-β) b[t-1]
    s[t] = γ (Y[t] - a[t]) + (1-γ) s[t-p]

Multiplicative:
    Yhat[t]  = (a[t-1] + b[t-1]) * s[t-p]
    a[t] = α (Y[t] / s[t-p]) + (1-α) (a[t-1] + b[t-1])
    b[t] = β (a[t] - a[t-1]) + (1-β) b[t-1]
    s[t] = γ (Y[t] / a[t]) + (1-γ) s[t-p]
"""

import dataclasses
import logging
from typing import Any, Callable, Optional, Sequence

import numpy as np
from numba import njit
from vectorbt import _typing as tp

from .._utils import ConfigurationError, validate_series
from ._seeds import estimate_seeds
from .base import (
    ADDITIVE_IDENTITY,
    MULTIPLICATIVE_IDENTITY,
    HoltWintersConfig,
    HoltWintersResult,
    SeasonalMode,
    SeedState,
    trace_lengths,
)

logger = logging.getLogger(__name__)


# error_model='numpy': 乘法模型中除以 0 得到 inf/nan，而不是抛出 ZeroDivisionError
@njit(cache=True, error_model='numpy')
def additive_pass_nb(x: tp.Array1d,
                     start_time: int,
                     alpha: float,
                     beta: float,
                     gamma: float,
                     period: int,
                     level: tp.Array1d,
                     trend: tp.Array1d,
                     season: tp.Array1d) -> float:
    """Run the additive recurrence in place and return the sum of squared errors."""
    sse = 0.0
    for i in range(start_time - 1, x.shape[0]):
        i0 = i - start_time + 2
        s0 = i0 + period - 1

        xhat = level[i0 - 1]
        if beta > 0:
            xhat += trend[i0 - 1]
        if gamma > 0:
            stmp = season[s0 - period]
        else:
            stmp = ADDITIVE_IDENTITY
        xhat += stmp

        res = x[i] - xhat
        sse += res * res

        level[i0] = alpha * (x[i] - stmp) + (1 - alpha) * (level[i0 - 1] + trend[i0 - 1])
        if beta > 0:
            trend[i0] = beta * (level[i0] - level[i0 - 1]) + (1 - beta) * trend[i0 - 1]
        if gamma > 0:
            season[s0] = gamma * (x[i] - level[i0]) + (1 - gamma) * stmp
    return sse


@njit(cache=True, error_model='numpy')
def multiplicative_pass_nb(x: tp.Array1d,
                           start_time: int,
                           alpha: float,
                           beta: float,
                           gamma: float,
                           period: int,
                           level: tp.Array1d,
                           trend: tp.Array1d,
                           season: tp.Array1d) -> float:
    """Run the multiplicative recurrence in place and return the sum of squared errors."""
    sse = 0.0
    for i in range(start_time - 1, x.shape[0]):
        i0 = i - start_time + 2
        s0 = i0 + period - 1

        xhat = level[i0 - 1]
        if beta > 0:
            xhat += trend[i0 - 1]
        if gamma > 0:
            stmp = season[s0 - period]
        else:
            stmp = MULTIPLICATIVE_IDENTITY
        xhat *= stmp

        res = x[i] - xhat
        sse += res * res

        level[i0] = alpha * (x[i] / stmp) + (1 - alpha) * (level[i0 - 1] + trend[i0 - 1])
        if beta > 0:
            trend[i0] = beta * (level[i0] - level[i0 - 1]) + (1 - beta) * trend[i0 - 1]
        if gamma > 0:
            season[s0] = gamma * (x[i] / level[i0]) + (1 - gamma) * stmp
    return sse


class SeasonalStrategy:
    """
    单一季节模式的计算策略

    每次调用只选择一次策略，递推循环内部不再判断模式。
    """

    def __init__(self, mode: SeasonalMode, kernel: Callable, combine: Callable):
        self.mode = mode
        self.kernel = kernel
        self.combine = combine  # 预测值 = combine(水平 + 趋势, 季节)

    @property
    def identity(self) -> float:
        return self.mode.identity

    def __repr__(self) -> str:
        return f"<SeasonalStrategy: {self.mode.value}>"


_STRATEGIES = {
    SeasonalMode.ADDITIVE: SeasonalStrategy(SeasonalMode.ADDITIVE, additive_pass_nb, np.add),
    SeasonalMode.MULTIPLICATIVE: SeasonalStrategy(SeasonalMode.MULTIPLICATIVE, multiplicative_pass_nb, np.multiply),
}


def get_strategy(mode: Any) -> SeasonalStrategy:
    """根据季节模式获取计算策略"""
    return _STRATEGIES[SeasonalMode.from_value(mode)]


def _check_buffer(buf: Any, name: str, length: int) -> np.ndarray:
    """调用方提供的缓冲区必须是长度恰好为 length 的可写 float64 一维数组"""
    if not isinstance(buf, np.ndarray) or buf.dtype != np.float64 or buf.ndim != 1:
        raise ConfigurationError(f"{name} buffer must be a 1-d float64 numpy array", field=name)
    if buf.shape[0] != length:
        raise ConfigurationError(f"{name} buffer must have length {length}, got {buf.shape[0]}",
                                 field=name, value=buf.shape[0])
    if not buf.flags.writeable:
        raise ConfigurationError(f"{name} buffer must be writeable", field=name)
    return buf


def run_into(series: Any,
             config: HoltWintersConfig,
             seeds: SeedState,
             level: np.ndarray,
             trend: Optional[np.ndarray] = None,
             season: Optional[np.ndarray] = None) -> float:
    """
    在调用方分配的缓冲区上执行一次递推

    Args:
        series: 观测序列
        config: 参数配置
        seeds: 种子状态
        level: 长度为 len(series) - start_time + 2 的水平缓冲区
        trend: 与 level 等长的趋势缓冲区（beta > 0 时必须提供；beta == 0 时若提供则被填 0）
        season: 长度为 len(series) - start_time + 1 + period 的季节缓冲区（gamma > 0 时必须提供）

    Returns:
        一步预测误差平方和 (SSE)

    Raises:
        ConfigurationError: 参数、种子或缓冲区无效，在任何递推步骤之前抛出
    """
    x = validate_series(series)
    config = config.validate(x.shape[0])
    seeds = seeds.validate(config)
    strategy = get_strategy(config.seasonal)

    level_len, season_len = trace_lengths(x.shape[0], config.start_time, config.period)
    level = _check_buffer(level, "level", level_len)

    if trend is not None:
        trend = _check_buffer(trend, "trend", level_len)
    elif config.trend_enabled:
        raise ConfigurationError("trend buffer is required when beta > 0", field="trend")
    else:
        trend = np.zeros(level_len, dtype=np.float64)

    if config.seasonal_enabled:
        if season is None:
            raise ConfigurationError("season buffer is required when gamma > 0", field="season")
        season = _check_buffer(season, "season", season_len)
    else:
        season = np.empty(0, dtype=np.float64)

    level[0] = seeds.level
    if config.trend_enabled:
        trend[0] = seeds.trend
    else:
        trend[:] = 0.0
    if config.seasonal_enabled:
        season[:config.period] = seeds.season

    logger.debug("Holt-Winters %s pass: n=%d start_time=%d alpha=%g beta=%g gamma=%g period=%d",
                 strategy.mode.value, x.shape[0], config.start_time,
                 config.alpha, config.beta, config.gamma, config.period)

    sse = strategy.kernel(x, config.start_time, config.alpha, config.beta, config.gamma,
                          config.period, level, trend, season)
    return float(sse)


def run_model(series: Any,
              config: HoltWintersConfig,
              seeds: Optional[SeedState] = None) -> HoltWintersResult:
    """
    分配恰好所需长度的输出轨迹并执行一次递推

    Args:
        series: 观测序列
        config: 参数配置
        seeds: 种子状态；为 None 时由 estimate_seeds 根据序列估计，并使用其建议的 start_time

    Returns:
        HoltWintersResult
    """
    x = validate_series(series)
    if seeds is None:
        seeds, start_time = estimate_seeds(x, config)
        config = dataclasses.replace(config, start_time=start_time)

    config = config.validate(x.shape[0])
    level_len, season_len = trace_lengths(x.shape[0], config.start_time, config.period)

    level = np.empty(level_len, dtype=np.float64)
    trend = np.zeros(level_len, dtype=np.float64) if config.trend_enabled else None
    season = np.empty(season_len, dtype=np.float64) if config.seasonal_enabled else None

    sse = run_into(x, config, seeds, level, trend, season)
    result = HoltWintersResult(sse=sse, level=level, trend=trend, season=season, config=config)

    if result.degenerate:
        logger.warning("Holt-Winters %s pass produced non-finite values (sse=%s)",
                       config.seasonal.value, sse)
    return result


def run(series: Any,
        start_time: int,
        alpha: float,
        beta: float = 0.0,
        gamma: float = 0.0,
        seasonal_mode: Any = SeasonalMode.ADDITIVE,
        period: int = 0,
        seed_level: Optional[float] = None,
        seed_trend: float = 0.0,
        seed_season: Optional[Sequence[float]] = None) -> HoltWintersResult:
    """
    Holt-Winters 递推入口

    Args:
        series: 观测序列，长度 >= start_time
        start_time: 递推起点（1-based, >= 1）
        alpha: 水平平滑系数 (0, 1]
        beta: 趋势平滑系数，0 表示不估计趋势
        gamma: 季节平滑系数，0 表示不估计季节
        seasonal_mode: SeasonalMode / "additive" / "multiplicative" / bool
        period: 季节长度（gamma > 0 时 >= 1；gamma == 0 时不参与计算，但负值仍被拒绝）
        seed_level: 水平初值
        seed_trend: 趋势初值（beta > 0 时使用）
        seed_season: 长度为 period 的季节初值（gamma > 0 时使用）

    Returns:
        HoltWintersResult，可解包为 (sse, level, trend, season)

    Raises:
        ConfigurationError: 静态输入无效
    """
    if seed_level is None:
        raise ConfigurationError("seed_level must be supplied", field="seed_level")
    config = HoltWintersConfig(alpha=alpha, beta=beta, gamma=gamma, seasonal=seasonal_mode,
                               period=period, start_time=start_time)
    seeds = SeedState(level=seed_level, trend=seed_trend,
                      season=seed_season if seed_season is not None else ())
    return run_model(series, config, seeds)
