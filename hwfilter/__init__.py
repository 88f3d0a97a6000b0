"""
hwfilter - Holt-Winters 指数平滑递推

对单变量时间序列执行一次 Holt-Winters（加法/乘法）递推，
输出水平、趋势、季节轨迹以及一步预测误差平方和 (SSE)

模块结构:
- holt_winters: 递推核心、初值估计、预测与 vectorbt 指标
- cli: 命令行演示
"""

# 版本信息
__version__ = "0.1.0"
__description__ = "Holt-Winters exponential smoothing recurrence"
__license__ = "MIT"

# 导入Holt-Winters模块
from hwfilter.holt_winters import *

# 导入工具函数
from hwfilter._utils import ConfigurationError

__all__ = [
    # 版本信息
    "__version__",
    "__description__",
    "__license__",

    # 核心模块
    "holt_winters",
    "ConfigurationError",
]
