"""
基于递推轨迹的拟合值与外推预测

    Additive:       Yhat[t+h] = a[t] + h * b[t] + s[t + 1 + (h - 1) mod p]
    Multiplicative: Yhat[t+h] = (a[t] + h * b[t]) * s[t + 1 + (h - 1) mod p]
"""

import numpy as np

from .._utils import ConfigurationError
from ._holt_winters import get_strategy
from .base import HoltWintersResult


def fitted_values(result: HoltWintersResult) -> np.ndarray:
    """
    每个已处理步骤的一步先验预测值

    Returns:
        长度为 result.n_steps 的数组，第 k 个元素对应序列下标 start_time - 1 + k
    """
    strategy = get_strategy(result.config.seasonal)
    n = result.n_steps

    base = result.level[:n].copy()
    if result.trend is not None:
        base += result.trend[:n]

    if result.season is not None:
        stmp = result.season[:n]
    else:
        stmp = strategy.identity
    return strategy.combine(base, stmp)


def forecast(result: HoltWintersResult, horizon: int) -> np.ndarray:
    """
    从最后一个状态外推 horizon 步

    Args:
        result: run / run_model 的输出
        horizon: 预测步数 (>= 1)

    Returns:
        长度为 horizon 的预测数组
    """
    if isinstance(horizon, bool) or not isinstance(horizon, (int, np.integer)) or horizon < 1:
        raise ConfigurationError(f"horizon must be a positive integer: {horizon!r}",
                                 field="horizon", value=horizon)

    strategy = get_strategy(result.config.seasonal)
    h = np.arange(1, horizon + 1, dtype=np.float64)

    a = result.level[-1]
    b = result.trend[-1] if result.trend is not None else 0.0

    if result.season is not None:
        period = result.config.period
        size = result.season.shape[0]
        idx = size - period + (np.arange(horizon) % period)
        s = result.season[idx]
    else:
        s = strategy.identity
    return strategy.combine(a + h * b, s)
