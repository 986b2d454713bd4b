"""
DataFrame 版缺日补全：按账号等维度拆成时间序列，逐条调用 fill_missing_metrics。

- ts 统一规整为 UTC 零点；也可以直接给毫秒时间戳列 date
- 每个序列先按日期排序（满足核心算法的升序前提），再补全最近 length 天
- 输出增加 is_synthetic_row 标记：该日期在原始数据里不存在
"""

from __future__ import annotations

from typing import Iterable, Iterator, List, Optional, Tuple

import pandas as pd

from .core import fill_missing_metrics
from .schema import DEFAULT_DAYS, METRIC_COLS, WIRE_FIELDS, Metric
from .selector import SelectorConfig
from .target_dates import Clock, FixedClock, SystemClock

# 一个时间序列的粒度；数据里不存在的字段会被自动过滤
GROUP_KEY_CANDIDATES: List[str] = [
    "account_id",
    "platform",
    "handle",
]

_EPOCH = pd.Timestamp(0, tz="UTC")


def _rename_wire_cols(df: pd.DataFrame) -> pd.DataFrame:
    """averageLikesCount 等 camelCase 列名统一成 snake_case。"""
    mapping = {k: v for k, v in WIRE_FIELDS.items() if k in df.columns and k != v}
    return df.rename(columns=mapping) if mapping else df


def _detect_group_cols(df: pd.DataFrame) -> List[str]:
    return [c for c in GROUP_KEY_CANDIDATES if c in df.columns]


def _date_ms(df: pd.DataFrame) -> pd.Series:
    """优先使用 ts 列（规整到 UTC 零点），否则使用毫秒时间戳列 date。"""
    if "ts" in df.columns:
        ts = pd.to_datetime(df["ts"], utc=True).dt.normalize()
        return ((ts - _EPOCH) // pd.Timedelta(milliseconds=1)).astype("int64")
    if "date" in df.columns:
        return pd.to_numeric(df["date"], errors="raise").astype("int64")
    raise ValueError("metric frame needs a 'ts' or 'date' column")


def metrics_from_frame(df: pd.DataFrame) -> List[Metric]:
    """DataFrame -> 按日期升序的 Metric 列表。"""
    df = _rename_wire_cols(df)
    missing = [c for c in METRIC_COLS if c not in df.columns]
    if missing:
        raise ValueError(f"metric frame is missing columns: {missing}")

    out = df[METRIC_COLS].copy()
    out["date"] = _date_ms(df)
    out = out.sort_values("date", kind="mergesort")

    return [
        Metric(date=int(d), average_likes_count=likes, followers_count=followers,
               average_engagement_rate=rate)
        for d, likes, followers, rate in zip(
            out["date"].tolist(),
            out["average_likes_count"].tolist(),
            out["followers_count"].tolist(),
            out["average_engagement_rate"].tolist(),
        )
    ]


def metrics_to_frame(
    metrics: Iterable[Metric],
    source_dates: Optional[Iterable[int]] = None,
) -> pd.DataFrame:
    """
    Metric 列表 -> DataFrame（ts / date / 指标列 / is_synthetic_row）。

    source_dates 为原始数据里出现过的日期；不给时全部视为真实记录。
    """
    records = [
        {"date": m.date, **{c: getattr(m, c) for c in METRIC_COLS}}
        for m in metrics
    ]
    out = pd.DataFrame(records, columns=["date"] + METRIC_COLS)
    out["date"] = out["date"].astype("int64")
    out.insert(0, "ts", pd.to_datetime(out["date"], unit="ms", utc=True))

    if source_dates is None:
        out["is_synthetic_row"] = False
    else:
        out["is_synthetic_row"] = ~out["date"].isin(set(source_dates))
    return out


def split_series(
    df: pd.DataFrame,
    group_cols: Optional[List[str]] = None,
) -> Iterator[Tuple[Tuple, List[Metric]]]:
    """
    按分组字段拆出各条时间序列，逐个产出 (分组取值, 升序 Metric 列表)。
    没有分组字段时整张表是一个序列，分组取值为 ()。
    """
    df = _rename_wire_cols(df)
    if group_cols is None:
        group_cols = _detect_group_cols(df)

    if not group_cols:
        yield (), metrics_from_frame(df)
        return

    for keys, g in df.groupby(group_cols, dropna=False, sort=True):
        if not isinstance(keys, tuple):
            keys = (keys,)
        yield keys, metrics_from_frame(g)


def _fill_one_series(
    metrics: List[Metric],
    length: int,
    config: Optional[SelectorConfig],
    clock: Clock,
) -> pd.DataFrame:
    filled = fill_missing_metrics(metrics, length, config=config, clock=clock)
    return metrics_to_frame(filled, source_dates=(m.date for m in metrics))


def fill_missing_metrics_df(
    df: pd.DataFrame,
    length: int = DEFAULT_DAYS,
    group_cols: Optional[List[str]] = None,
    *,
    config: Optional[SelectorConfig] = None,
    clock: Optional[Clock] = None,
) -> pd.DataFrame:
    """
    DataFrame 总入口。

    输入：
        - df: 至少包含 ts（或 date）和三列指标；可包含 account_id / platform 等分组字段
        - group_cols: 分组字段；None 时从 GROUP_KEY_CANDIDATES 自动检测，
          检测不到则整张表视为一个序列
    输出：
        - 每个序列恰好 length 行，按分组字段 + ts 排序
    """
    if df.empty:
        return df.copy()

    if group_cols is None:
        group_cols = _detect_group_cols(_rename_wire_cols(df))

    # 所有分组共用同一个"今天"
    if clock is None:
        clock = FixedClock(SystemClock().now())

    filled_groups = []
    for keys, metrics in split_series(df, group_cols):
        filled = _fill_one_series(metrics, length, config, clock)
        for pos, (col, value) in enumerate(zip(group_cols, keys)):
            filled.insert(pos, col, value)
        filled_groups.append(filled)

    if not group_cols:
        return filled_groups[0]

    full_df = pd.concat(filled_groups, ignore_index=True)
    return full_df.sort_values(group_cols + ["ts"], kind="mergesort").reset_index(drop=True)
