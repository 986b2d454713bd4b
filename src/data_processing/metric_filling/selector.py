"""
算法选择：按理论复杂度在二分查找和双指针扫描之间二选一。

两种算法输出完全一致，选择只影响运行速度，不影响结果。
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class Strategy(str, Enum):
    BINARY = "binary"
    SCAN = "scan"


@dataclass(frozen=True)
class SelectorConfig:
    # 理论代价相同时优先二分查找（n 较小时常数开销更低）
    prefer_binary: bool = True


DEFAULT_SELECTOR_CONFIG = SelectorConfig()


def estimate_costs(data_length: int, target_length: int) -> Tuple[float, float]:
    """
    返回 (binary_cost, scan_cost)：
        binary_cost = m * log2(n)
        scan_cost   = m + n
    n = 1 时 log2(n) = 0，单条记录永远选二分。
    """
    if data_length < 1:
        raise ValueError("data length must be at least 1")
    if target_length < 1:
        raise ValueError("target length must be positive")

    binary_cost = target_length * math.log2(data_length)
    scan_cost = float(target_length + data_length)
    return binary_cost, scan_cost


def select_strategy(
    data_length: int,
    target_length: int,
    config: Optional[SelectorConfig] = None,
) -> Strategy:
    config = config or DEFAULT_SELECTOR_CONFIG
    binary_cost, scan_cost = estimate_costs(data_length, target_length)

    if binary_cost < scan_cost:
        return Strategy.BINARY
    if binary_cost > scan_cost:
        return Strategy.SCAN
    return Strategy.BINARY if config.prefer_binary else Strategy.SCAN
