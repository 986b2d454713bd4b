"""
目标日期轴：从今天（UTC 零点）往前推 length 天，按天升序排列。

"当前时间"通过 Clock 注入，测试里用 FixedClock 固定今天，
不需要去 mock 系统时间。
"""

from __future__ import annotations

from datetime import datetime
from numbers import Real
from typing import List, Optional, Protocol, Union

import pandas as pd

from .schema import MS_PER_DAY


class Clock(Protocol):
    def now(self) -> pd.Timestamp:
        """返回带 UTC 时区的当前时刻。"""
        ...


class SystemClock:
    """读取系统时间。"""

    def now(self) -> pd.Timestamp:
        return pd.Timestamp.now(tz="UTC")


class FixedClock:
    """
    固定的时钟。

    moment 可以是毫秒时间戳（含 numpy 整数）、datetime 或 pd.Timestamp 能解析的字符串；
    不带时区的值按 UTC 处理。
    """

    def __init__(self, moment: Union[int, float, str, datetime, pd.Timestamp]):
        # numpy.int64 等也按毫秒处理，不能交给 pd.Timestamp（会当成纳秒）
        if isinstance(moment, Real) and not isinstance(moment, bool):
            ts = pd.Timestamp(int(moment), unit="ms")
        else:
            ts = pd.Timestamp(moment)
        if ts.tzinfo is None:
            ts = ts.tz_localize("UTC")
        self._moment = ts.tz_convert("UTC")

    def now(self) -> pd.Timestamp:
        return self._moment


_SYSTEM_CLOCK = SystemClock()


def today_utc_midnight(clock: Optional[Clock] = None) -> int:
    """今天 UTC 零点的毫秒时间戳。"""
    now = (clock or _SYSTEM_CLOCK).now()
    today = now.tz_convert("UTC").normalize()
    # 零点的 timestamp() 一定是整数秒
    return int(today.timestamp()) * 1000


def generate_target_dates(length: int, clock: Optional[Clock] = None) -> List[int]:
    """
    生成目标日期列表：[today-(length-1)d, ..., today-1d, today]

    同一个 UTC 自然日内多次调用，结果完全相同。
    """
    today = today_utc_midnight(clock)
    return [today - i * MS_PER_DAY for i in range(length - 1, -1, -1)]
