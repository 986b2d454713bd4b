"""
两种查找算法共用的输入校验与"最近邻"取舍规则。

规则只在这里实现一次，二分查找和双指针扫描都调用它，
保证两者在边界和距离相等时给出完全一样的结果。
"""

from __future__ import annotations

from numbers import Integral
from typing import Optional, Sequence

from .schema import Metric


def validate_series(data: Sequence[Metric]) -> None:
    """输入序列必须非空，且按 date 升序（允许相等）。"""
    if len(data) == 0:
        raise ValueError("input must contain at least one record")

    for i in range(1, len(data)):
        if data[i].date < data[i - 1].date:
            raise ValueError("input must be sorted ascending by date")


def validate_length(length: int) -> None:
    if isinstance(length, bool) or not isinstance(length, Integral):
        raise TypeError(f"target length must be an integer, got {type(length).__name__}")
    if length <= 0:
        raise ValueError("target length must be positive")


def pick_nearest(
    target: int,
    left: Optional[Metric],
    right: Optional[Metric],
) -> Metric:
    """
    在左右两个候选中选出离 target 最近的记录：
    - 只有右侧：目标日期早于所有数据，取右侧
    - 只有左侧：目标日期晚于所有数据，取左侧
    - 两侧都有：距离相等时取左侧（更早的日期）
    """
    if left is None:
        if right is None:
            raise RuntimeError(f"no candidate record available for target date {target}")
        return right
    if right is None:
        return left

    dist_left = target - left.date
    dist_right = right.date - target
    return left if dist_left <= dist_right else right


def synthesize(record: Metric, target: int) -> Metric:
    """用选中记录的指标 + 目标日期生成新记录。"""
    return record.with_date(target)
