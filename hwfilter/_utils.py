from typing import Any, Optional, Sequence
import math

import numpy as np


def validate_coefficient(value: Any, field: str, allow_zero: bool = True) -> float:
    """
    验证平滑系数

    Args:
        value: 系数输入
        field: 参数名称（用于错误信息）
        allow_zero: 是否允许取 0（beta/gamma 为 0 表示关闭对应分量）

    Returns:
        验证后的 float 系数

    Raises:
        ConfigurationError: 系数无效时抛出
    """
    coef = safe_float_convert(value)
    if coef is None or not math.isfinite(coef):
        raise ConfigurationError(f"{field} must be a finite number: {value!r}", field=field, value=value)

    lower_ok = coef >= 0.0 if allow_zero else coef > 0.0
    if not lower_ok or coef > 1.0:
        bounds = "[0, 1]" if allow_zero else "(0, 1]"
        raise ConfigurationError(f"{field} must be in {bounds}: {coef}", field=field, value=value)

    return coef


def validate_series(series: Any, field: str = "series") -> np.ndarray:
    """
    将输入序列转换为一维 float64 数组

    Raises:
        ConfigurationError: 序列为空或维度不为 1 时抛出
    """
    try:
        arr = np.ascontiguousarray(series, dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"{field} must be numeric: {e}", field=field)

    if arr.ndim != 1:
        raise ConfigurationError(f"{field} must be one-dimensional, got {arr.ndim} dimensions",
                                 field=field)
    if arr.shape[0] == 0:
        raise ConfigurationError(f"{field} cannot be empty", field=field)

    return arr


def validate_start_time(start_time: Any, length: int) -> int:
    """
    验证递推起点（1-based）

    起点之前的观测值只作为种子上下文，不参与递推。
    """
    if isinstance(start_time, bool) or not isinstance(start_time, (int, np.integer)):
        raise ConfigurationError(f"start_time must be an integer: {start_time!r}",
                                 field="start_time", value=start_time)
    start_time = int(start_time)
    if start_time < 1 or start_time > length:
        raise ConfigurationError(f"start_time must be in [1, {length}]: {start_time}",
                                 field="start_time", value=start_time)
    return start_time


def parse_float_list(text: str, field: str = "values") -> Sequence[float]:
    """
    解析逗号分隔的数值字符串，例如 "3.93, 5.31,7.24"
    """
    values = []
    for token in text.split(","):
        token = token.strip()
        if not token:
            continue
        value = safe_float_convert(token)
        if value is None:
            raise ConfigurationError(f"Invalid number in {field}: {token!r}", field=field, value=token)
        values.append(value)
    return values


def safe_float_convert(value: Any, default: Optional[float] = None) -> Optional[float]:
    """
    安全转换为float类型

    Args:
        value: 要转换的值
        default: 转换失败时的默认值

    Returns:
        转换后的float值或默认值
    """
    if value is None or value == '' or value == 'N/A':
        return default

    if isinstance(value, bool):
        return default

    if isinstance(value, (int, float, np.integer, np.floating)):
        return float(value)

    if isinstance(value, str):
        value = value.strip()
        try:
            return float(value)
        except (ValueError, TypeError):
            return default

    try:
        return float(value)
    except (ValueError, TypeError):
        return default


class ConfigurationError(ValueError):
    """静态输入（参数、种子、缓冲区）配置异常"""
    def __init__(self, message: str, field: str = None, value=None):
        super().__init__(message)
        self.field = field
        self.value = value
