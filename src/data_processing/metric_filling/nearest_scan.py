"""
双指针线性扫描版缺日补全。

原始记录和目标日期都已升序，游标只前进不后退，
全部目标日期处理完总共只走 m + n 步。
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from .neighbors import pick_nearest, synthesize, validate_length, validate_series
from .schema import DEFAULT_DAYS, Metric
from .target_dates import Clock, generate_target_dates


def fill_missing_metrics_scan(
    data: Sequence[Metric],
    length: int = DEFAULT_DAYS,
    clock: Optional[Clock] = None,
) -> List[Metric]:
    """时间复杂度：O(m + n)。结果与 fill_missing_metrics_binary 逐条相同。"""
    validate_series(data)
    validate_length(length)
    return resolve_scan(data, generate_target_dates(length, clock))


def resolve_scan(data: Sequence[Metric], target_dates: Sequence[int]) -> List[Metric]:
    """不做校验的扫描本体；data 和 target_dates 须已升序，data 非空。"""
    n = len(data)
    p = 0
    result: List[Metric] = []

    for target in target_dates:
        # 游标推进到第一条 date >= target 的记录
        while p < n and data[p].date < target:
            p += 1

        # 精确命中：直接复制，游标不动
        if p < n and data[p].date == target:
            result.append(data[p].copy())
            continue

        left = data[p - 1] if p > 0 else None
        right = data[p] if p < n else None
        result.append(synthesize(pick_nearest(target, left, right), target))

    return result
