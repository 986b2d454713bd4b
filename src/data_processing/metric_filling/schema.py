"""
日度社媒指标记录的数据结构。

一条 Metric 只由日期区分，没有其它身份；补全时从不原地修改，
而是复制出新的记录（必要时替换 date）。
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Dict, Mapping

# 每天的毫秒数
MS_PER_DAY = 24 * 60 * 60 * 1000

# 默认补全天数
DEFAULT_DAYS = 7

# 对外 JSON 字段名 -> dataclass 字段名
WIRE_FIELDS: Dict[str, str] = {
    "date": "date",
    "averageLikesCount": "average_likes_count",
    "followersCount": "followers_count",
    "averageEngagementRate": "average_engagement_rate",
}

METRIC_COLS = [
    "average_likes_count",
    "followers_count",
    "average_engagement_rate",
]


@dataclass(frozen=True)
class Metric:
    # UTC 零点的毫秒时间戳
    date: int
    average_likes_count: float
    followers_count: float
    average_engagement_rate: float

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Metric":
        """
        从字典构造，支持 camelCase（averageLikesCount）和 snake_case 两种字段名。
        """
        values = {}
        for wire_name, field_name in WIRE_FIELDS.items():
            if wire_name in data:
                values[field_name] = data[wire_name]
            elif field_name in data:
                values[field_name] = data[field_name]
            else:
                raise KeyError(f"metric record is missing field: {wire_name}")
        values["date"] = int(values["date"])
        return cls(**values)

    def to_dict(self) -> Dict[str, Any]:
        """输出 camelCase 字段名的字典。"""
        return {
            wire_name: getattr(self, field_name)
            for wire_name, field_name in WIRE_FIELDS.items()
        }

    def with_date(self, date: int) -> "Metric":
        """复制指标字段，把日期换成目标日期。"""
        return replace(self, date=int(date))

    def copy(self) -> "Metric":
        return replace(self)
