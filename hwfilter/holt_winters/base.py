"""
Holt-Winters 模型基础类型

定义季节模式、参数配置、种子状态与输出轨迹
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Iterator, Optional, Sequence

import numpy as np
import pandas as pd

from .._utils import (
    ConfigurationError,
    validate_coefficient,
    validate_start_time,
)

# 关闭季节估计时使用的隐式季节值
ADDITIVE_IDENTITY = 0.0
MULTIPLICATIVE_IDENTITY = 1.0


class SeasonalMode(Enum):
    """季节分量与水平的组合方式"""
    ADDITIVE = "additive"
    MULTIPLICATIVE = "multiplicative"

    @property
    def identity(self) -> float:
        """gamma == 0 时参与预测组合的季节值"""
        if self is SeasonalMode.ADDITIVE:
            return ADDITIVE_IDENTITY
        return MULTIPLICATIVE_IDENTITY

    @classmethod
    def from_value(cls, value: Any) -> "SeasonalMode":
        """
        接受 SeasonalMode、字符串或 bool（True 表示乘法模型，与 multiplicative 参数一致）
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, (bool, np.bool_)):
            return cls.MULTIPLICATIVE if value else cls.ADDITIVE
        if isinstance(value, str):
            key = value.strip().lower()
            for mode in cls:
                if key == mode.value or key == mode.value[:3]:
                    return mode
        raise ConfigurationError(f"Unknown seasonal mode: {value!r}", field="seasonal", value=value)


def trace_lengths(n: int, start_time: int, period: int) -> tuple:
    """
    计算输出轨迹长度

    Args:
        n: 序列长度
        start_time: 递推起点（1-based）
        period: 季节长度

    Returns:
        (level/trend 长度, season 长度)
    """
    steps = n - start_time + 1
    return steps + 1, steps + period


@dataclass
class HoltWintersConfig:
    """Holt-Winters 递推参数配置"""
    alpha: float
    beta: float = 0.0
    gamma: float = 0.0
    seasonal: SeasonalMode = SeasonalMode.ADDITIVE
    period: int = 0
    start_time: int = 2

    def __post_init__(self):
        self.seasonal = SeasonalMode.from_value(self.seasonal)

    @property
    def trend_enabled(self) -> bool:
        return self.beta > 0

    @property
    def seasonal_enabled(self) -> bool:
        return self.gamma > 0

    def validate(self, n: Optional[int] = None) -> "HoltWintersConfig":
        """
        在递推开始之前检查全部静态参数

        Args:
            n: 序列长度；给出时同时检查 start_time 的范围

        Returns:
            参数已规整的新配置，调用方的配置对象保持不变

        Raises:
            ConfigurationError: 任一参数无效
        """
        alpha = validate_coefficient(self.alpha, "alpha", allow_zero=False)
        beta = validate_coefficient(self.beta, "beta")
        gamma = validate_coefficient(self.gamma, "gamma")

        period = self.period
        if isinstance(period, bool) or not isinstance(period, (int, np.integer)):
            raise ConfigurationError(f"period must be an integer: {period!r}",
                                     field="period", value=period)
        period = int(period)
        # 负的 period 无论 gamma 是否为 0 都拒绝
        if period < 0:
            raise ConfigurationError(f"period cannot be negative: {period}",
                                     field="period", value=period)
        if gamma > 0 and period < 1:
            raise ConfigurationError("period must be >= 1 when gamma > 0",
                                     field="period", value=period)

        start_time = self.start_time
        if n is not None:
            start_time = validate_start_time(start_time, n)
        return replace(self, alpha=alpha, beta=beta, gamma=gamma, period=period, start_time=start_time)


@dataclass
class SeedState:
    """递推初始状态（输出轨迹下标 0 处的值）"""
    level: float
    trend: float = 0.0
    season: Sequence[float] = field(default_factory=tuple)

    def validate(self, config: HoltWintersConfig) -> "SeedState":
        """
        检查种子与配置是否匹配

        Returns:
            level/trend 为 float、season 为 float64 数组的新种子状态，调用方的对象保持不变
        """
        values = {}
        for name in ("level", "trend"):
            value = getattr(self, name)
            try:
                values[name] = float(value)
            except (TypeError, ValueError):
                raise ConfigurationError(f"seed {name} must be a number: {value!r}",
                                         field=f"seed_{name}", value=value)

        try:
            season = np.array(self.season if self.season is not None else (), dtype=np.float64)
        except (TypeError, ValueError) as e:
            raise ConfigurationError(f"seed season must be numeric: {e}",
                                     field="seed_season", value=self.season)
        if config.seasonal_enabled:
            if season.ndim != 1 or season.shape[0] != config.period:
                raise ConfigurationError(
                    f"seed season must have length period={config.period}, got {season.size}",
                    field="seed_season", value=self.season)
        return replace(self, season=season, **values)


@dataclass
class HoltWintersResult:
    """
    一次递推的输出轨迹

    trend / season 在对应系数为 0 时为 None（未计算）。
    结果可以解包为 (sse, level, trend, season)。
    """
    sse: float
    level: np.ndarray
    trend: Optional[np.ndarray]
    season: Optional[np.ndarray]
    config: HoltWintersConfig

    def __iter__(self) -> Iterator:
        return iter((self.sse, self.level, self.trend, self.season))

    @property
    def n_steps(self) -> int:
        """已处理的递推步数"""
        return self.level.shape[0] - 1

    @property
    def degenerate(self) -> bool:
        """输出中是否出现 NaN / Inf（乘法模型中除以 0 时会出现）"""
        if not np.isfinite(self.sse):
            return True
        for arr in (self.level, self.trend, self.season):
            if arr is not None and not np.all(np.isfinite(arr)):
                return True
        return False

    def to_frame(self) -> pd.DataFrame:
        """
        将轨迹整理为 DataFrame

        行下标为轨迹下标（0 为种子）；season 列取每一步写入的季节值 season[i0 + period - 1]，
        第 0 行取种子向量的最后一个元素。未启用的分量不出现在列中。
        """
        data = {'level': self.level}
        if self.trend is not None:
            data['trend'] = self.trend
        if self.season is not None:
            period = self.config.period
            data['season'] = self.season[period - 1:]
        return pd.DataFrame(data)
