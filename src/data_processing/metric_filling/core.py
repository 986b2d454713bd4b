"""
缺日补全总入口（metric_filling）

核心逻辑：
- 输入一条按日期升序、可能缺日的社媒指标序列
- 输出以今天（UTC 零点）结尾、连续 length 天、每天一条的序列
- 缺失的日期用最近的真实记录的指标补齐（日期改为目标日期），
  距离相等时取更早的记录
- 根据 n（原始记录数）和 m（目标天数）自动选择二分查找或双指针扫描
"""

from __future__ import annotations

from typing import Callable, Dict, List, Optional, Sequence

from .nearest_binary import resolve_binary
from .nearest_scan import resolve_scan
from .neighbors import validate_length, validate_series
from .schema import DEFAULT_DAYS, Metric
from .selector import SelectorConfig, Strategy, select_strategy
from .target_dates import Clock, generate_target_dates

# 不做校验的查找本体：(升序非空的 data, 升序目标日期) -> 补全结果
Resolver = Callable[[Sequence[Metric], Sequence[int]], List[Metric]]

RESOLVERS: Dict[Strategy, Resolver] = {
    Strategy.BINARY: resolve_binary,
    Strategy.SCAN: resolve_scan,
}


def fill_missing_metrics(
    data: Sequence[Metric],
    length: int = DEFAULT_DAYS,
    *,
    config: Optional[SelectorConfig] = None,
    clock: Optional[Clock] = None,
) -> List[Metric]:
    """
    补全最近 length 天的日度指标。

    输入：
        - data: 已按 date 升序的 Metric 序列，至少一条；不会被修改
        - length: 目标天数，正整数，默认 7
        - config: 算法选择配置（理论代价相同时的偏好）
        - clock: 提供"今天"的时钟，默认读系统时间
    输出：
        - 恰好 length 条、按日期升序的新 Metric 列表
    """
    validate_series(data)
    validate_length(length)

    strategy = select_strategy(len(data), length, config)
    # 只校验一次、只读一次时钟，再交给选中的算法
    return RESOLVERS[strategy](data, generate_target_dates(length, clock))
