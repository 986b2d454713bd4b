"""
二分查找版缺日补全。

时间复杂度：O(m * log n)，m 为目标天数，n 为原始记录数。
"""

from __future__ import annotations

from typing import List, Optional, Sequence

import numpy as np

from .neighbors import pick_nearest, synthesize, validate_length, validate_series
from .schema import DEFAULT_DAYS, Metric
from .target_dates import Clock, generate_target_dates


def bisect_right(dates: np.ndarray, target: int) -> int:
    """
    返回第一个严格大于 target 的下标；全部 <= target 时返回 len(dates)。
    """
    if len(dates) == 0:
        raise ValueError("bisect_right: empty array not accepted")
    return int(np.searchsorted(dates, target, side="right"))


def _find_nearest(target: int, data: Sequence[Metric], dates: np.ndarray) -> Metric:
    idx = bisect_right(dates, target)
    left = data[idx - 1] if idx > 0 else None
    right = data[idx] if idx < len(dates) else None
    return pick_nearest(target, left, right)


def fill_missing_metrics_binary(
    data: Sequence[Metric],
    length: int = DEFAULT_DAYS,
    clock: Optional[Clock] = None,
) -> List[Metric]:
    """
    用二分查找为每个目标日期找最近的真实记录。

    - 目标日期有真实记录：原样复制（取该日期的第一条）
    - 否则：取最近记录的指标，日期改成目标日期；距离相等取更早的一条
    """
    validate_series(data)
    validate_length(length)
    return resolve_binary(data, generate_target_dates(length, clock))


def resolve_binary(data: Sequence[Metric], target_dates: Sequence[int]) -> List[Metric]:
    """不做校验的查找本体；data 须已满足非空、升序。"""
    dates = np.fromiter((m.date for m in data), dtype=np.int64, count=len(data))

    result: List[Metric] = []
    for target in target_dates:
        first = int(np.searchsorted(dates, target, side="left"))
        if first < len(dates) and dates[first] == target:
            result.append(data[first].copy())
            continue

        nearest = _find_nearest(target, data, dates)
        result.append(synthesize(nearest, target))

    return result
