"""
Holt-Winters 递推模块

提供 Holt-Winters 指数平滑递推的实现

模块结构:
- base: 季节模式、参数配置、种子状态与输出轨迹
- _holt_winters: 核心递推 (numba 内核)
- _seeds: 初值估计
- _forecast: 拟合值与外推预测
- _indicators: vectorbt 指标 (HWF, HWD)
"""

from hwfilter.holt_winters.base import (
    ADDITIVE_IDENTITY,
    MULTIPLICATIVE_IDENTITY,
    HoltWintersConfig,
    HoltWintersResult,
    SeasonalMode,
    SeedState,
    trace_lengths,
)

from hwfilter.holt_winters._holt_winters import (
    SeasonalStrategy,
    additive_pass_nb,
    get_strategy,
    multiplicative_pass_nb,
    run,
    run_into,
    run_model,
)

from hwfilter.holt_winters._seeds import (
    estimate_seeds,
    initial_level,
    initial_trend,
    seasonal_indices,
)

from hwfilter.holt_winters._forecast import (
    fitted_values,
    forecast,
)

from hwfilter.holt_winters._indicators import (
    HWF,
    HWD,
)

__all__ = [
    # 基础类型
    "ADDITIVE_IDENTITY",
    "MULTIPLICATIVE_IDENTITY",
    "HoltWintersConfig",
    "HoltWintersResult",
    "SeasonalMode",
    "SeedState",
    "trace_lengths",

    # 核心递推
    "SeasonalStrategy",
    "additive_pass_nb",
    "multiplicative_pass_nb",
    "get_strategy",
    "run",
    "run_into",
    "run_model",

    # 初值估计
    "estimate_seeds",
    "initial_level",
    "initial_trend",
    "seasonal_indices",

    # 预测
    "fitted_values",
    "forecast",

    # 指标
    "HWF",
    "HWD",
]
