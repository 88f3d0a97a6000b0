"""
Holt-Winters 递推命令行演示

示例:
    hwfilter --demo
    hwfilter "1,2,3,4,5,6,7,8" --alpha 0.5 --beta 0.3 --gamma 0.2 --period 4 --estimate-seeds
"""

import argparse
import logging
import sys
from typing import List, Optional

from hwfilter._utils import ConfigurationError, parse_float_list
from hwfilter.holt_winters import (
    HoltWintersConfig,
    SeasonalMode,
    SeedState,
    forecast,
    run_model,
)

logger = logging.getLogger(__name__)

# US population in millions, 1790-1970
US_POPULATION = [3.93, 5.31, 7.24, 9.64, 12.90, 17.10, 23.20, 31.40, 39.80, 50.20,
                 62.90, 76.00, 92.00, 105.70, 122.80, 131.70, 151.30, 179.30, 203.20]
DEMO_ALPHA = 0.9999208


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hwfilter",
        description="Run one Holt-Winters recurrence pass and print the level/trend/season traces and SSE.")
    parser.add_argument("series", nargs="?", help="comma-separated observations")
    parser.add_argument("--demo", action="store_true", help="use the bundled US population series")
    parser.add_argument("--alpha", type=float, default=None, help="level coefficient in (0, 1]")
    parser.add_argument("--beta", type=float, default=0.0, help="trend coefficient, 0 disables trend")
    parser.add_argument("--gamma", type=float, default=0.0, help="seasonal coefficient, 0 disables season")
    parser.add_argument("--period", type=int, default=0, help="season length (required when gamma > 0)")
    parser.add_argument("--start-time", type=int, default=2, help="1-based index where the recurrence starts")
    parser.add_argument("--mode", choices=[m.value for m in SeasonalMode],
                        default=SeasonalMode.MULTIPLICATIVE.value, help="seasonal mode")
    parser.add_argument("--seed-level", type=float, default=None,
                        help="initial level (defaults to the first observation)")
    parser.add_argument("--seed-trend", type=float, default=0.0, help="initial trend")
    parser.add_argument("--seed-season", default="", help="comma-separated initial seasonal components")
    parser.add_argument("--estimate-seeds", action="store_true",
                        help="estimate seeds and start time from the series instead")
    parser.add_argument("--horizon", type=int, default=0, help="number of steps to forecast after the series")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    return parser


def setup_logging(level: int) -> None:
    """设置日志"""
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler(sys.stderr)]
    )


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)

    if args.demo:
        series = US_POPULATION
        alpha = DEMO_ALPHA if args.alpha is None else args.alpha
    elif args.series:
        alpha = args.alpha
        try:
            series = parse_float_list(args.series, field="series")
        except ConfigurationError as e:
            print(f"error: {e}", file=sys.stderr)
            return 2
    else:
        parser.error("a series or --demo is required")

    try:
        if alpha is None:
            raise ConfigurationError("--alpha is required", field="alpha")
        config = HoltWintersConfig(alpha=alpha, beta=args.beta, gamma=args.gamma,
                                   seasonal=args.mode, period=args.period,
                                   start_time=args.start_time)
        if args.estimate_seeds:
            seeds = None
        else:
            seed_level = series[0] if args.seed_level is None and series else args.seed_level
            seeds = SeedState(level=seed_level, trend=args.seed_trend,
                              season=parse_float_list(args.seed_season, field="seed_season"))
        result = run_model(series, config, seeds)
        predictions = forecast(result, args.horizon) if args.horizon else None
    except ConfigurationError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    period = result.config.period
    print("Estimated:")
    for i in range(result.level.shape[0]):
        line = f"\tindex = {i}, level: {result.level[i]:f}"
        if result.trend is not None:
            line += f", trend: {result.trend[i]:f}"
        if result.season is not None:
            line += f", season: {result.season[i + period - 1]:f}" if i > 0 else \
                f", season: [{', '.join(f'{s:f}' for s in result.season[:period])}]"
        print(line)
    print(f"SSE: {result.sse:f}")

    if predictions is not None:
        print("Forecast:")
        for h, value in enumerate(predictions, start=1):
            print(f"\th = {h}, value: {value:f}")

    if result.degenerate:
        logger.warning("Outputs contain NaN or Infinity")
    return 0


if __name__ == "__main__":
    sys.exit(main())
