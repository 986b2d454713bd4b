"""
缺日补全（metric_filling）

- 功能：把按日期升序、可能缺日的社媒指标序列补成以今天结尾的连续 N 天，
  缺失日期取最近真实记录的指标；二分查找 / 双指针扫描两种实现结果完全一致，
  由 select_strategy 按 n、m 自动选择。
"""

from .core import RESOLVERS, fill_missing_metrics
from .frame import fill_missing_metrics_df, metrics_from_frame, metrics_to_frame, split_series
from .nearest_binary import fill_missing_metrics_binary
from .nearest_scan import fill_missing_metrics_scan
from .schema import DEFAULT_DAYS, MS_PER_DAY, Metric
from .selector import SelectorConfig, Strategy, estimate_costs, select_strategy
from .target_dates import Clock, FixedClock, SystemClock, generate_target_dates, today_utc_midnight

__all__ = [
    "fill_missing_metrics",
    "fill_missing_metrics_binary",
    "fill_missing_metrics_scan",
    "fill_missing_metrics_df",
    "metrics_from_frame",
    "metrics_to_frame",
    "split_series",
    "RESOLVERS",
    "Metric",
    "MS_PER_DAY",
    "DEFAULT_DAYS",
    "SelectorConfig",
    "Strategy",
    "estimate_costs",
    "select_strategy",
    "Clock",
    "FixedClock",
    "SystemClock",
    "generate_target_dates",
    "today_utc_midnight",
]
