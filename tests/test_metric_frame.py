# tests/test_metric_frame.py
import json

import pandas as pd
import pytest

from src.data_processing.metric_filling import (
    FixedClock,
    Metric,
    fill_missing_metrics,
    fill_missing_metrics_df,
    metrics_from_frame,
    metrics_to_frame,
    split_series,
)
from src.utils.metric_io import load_metrics_csv, load_metrics_json, save_frame_csv

CLOCK = FixedClock("2025-02-12T09:30:00Z")
TODAY = pd.Timestamp("2025-02-12", tz="UTC")


def _account_frame() -> pd.DataFrame:
    """两个账号，ts 带时分秒且顺序打乱。"""
    return pd.DataFrame(
        [
            {"account_id": "b", "ts": "2025-02-12 08:00:00", "average_likes_count": 30,
             "followers_count": 300, "average_engagement_rate": 0.03},
            {"account_id": "a", "ts": "2025-02-12 00:00:00", "average_likes_count": 150,
             "followers_count": 220, "average_engagement_rate": 0.025},
            {"account_id": "a", "ts": "2025-02-07 23:00:00", "average_likes_count": 120,
             "followers_count": 208, "average_engagement_rate": 0.02},
        ]
    )


def test_metrics_from_frame_normalizes_and_sorts():
    df = _account_frame()
    metrics = metrics_from_frame(df[df["account_id"] == "a"])

    assert [m.date for m in metrics] == [
        int(pd.Timestamp("2025-02-07", tz="UTC").timestamp()) * 1000,
        int(TODAY.timestamp()) * 1000,
    ]
    assert metrics[0].average_likes_count == 120


def test_fill_df_per_account():
    """
    每个账号各补 7 天；a 只有 2 天真实数据，b 只有 1 天。
    """
    out = fill_missing_metrics_df(_account_frame(), 7, clock=CLOCK)

    assert len(out) == 14
    assert list(out.columns[:2]) == ["account_id", "ts"]
    assert out.groupby("account_id").size().to_dict() == {"a": 7, "b": 7}

    a = out[out["account_id"] == "a"].reset_index(drop=True)
    assert a["ts"].iloc[-1] == TODAY
    assert a["average_likes_count"].tolist() == [120, 120, 120, 120, 150, 150, 150]
    assert a["is_synthetic_row"].tolist() == [True, False, True, True, True, True, False]

    b = out[out["account_id"] == "b"]
    assert set(b["average_likes_count"]) == {30}
    assert int(b["is_synthetic_row"].sum()) == 6


def test_fill_df_matches_list_api():
    df = _account_frame()
    df = df[df["account_id"] == "a"].drop(columns="account_id")

    out = fill_missing_metrics_df(df, 5, clock=CLOCK)
    expected = fill_missing_metrics(metrics_from_frame(df), 5, clock=CLOCK)

    assert metrics_from_frame(out) == expected


def test_fill_df_accepts_wire_columns_and_ms_dates():
    today_ms = int(TODAY.timestamp()) * 1000
    df = pd.DataFrame(
        [{"date": today_ms, "averageLikesCount": 1, "followersCount": 2, "averageEngagementRate": 0.1}]
    )
    out = fill_missing_metrics_df(df, 3, clock=CLOCK)

    assert out["date"].tolist() == [today_ms - 2 * 86400000, today_ms - 86400000, today_ms]
    assert out["followers_count"].tolist() == [2, 2, 2]


def test_explicit_group_cols():
    df = _account_frame()
    df["platform"] = ["yt", "yt", "ig"]

    keys = [k for k, _ in split_series(df, ["account_id", "platform"])]
    assert keys == [("a", "ig"), ("a", "yt"), ("b", "yt")]

    out = fill_missing_metrics_df(df, 2, ["account_id", "platform"], clock=CLOCK)
    assert len(out) == 6


def test_fill_df_edge_cases():
    empty = pd.DataFrame(columns=["ts", "average_likes_count", "followers_count", "average_engagement_rate"])
    assert fill_missing_metrics_df(empty, 7).empty

    with pytest.raises(ValueError, match="'ts' or 'date'"):
        metrics_from_frame(pd.DataFrame([{"average_likes_count": 1, "followers_count": 1,
                                          "average_engagement_rate": 0.1}]))
    with pytest.raises(ValueError, match="missing columns"):
        metrics_from_frame(pd.DataFrame([{"ts": "2025-02-12"}]))


def test_metrics_to_frame_without_sources():
    out = metrics_to_frame([Metric(0, 1, 2, 0.3)])
    assert out["ts"].iloc[0] == pd.Timestamp("1970-01-01", tz="UTC")
    assert not out["is_synthetic_row"].any()


def test_metric_io(tmp_path):
    path = tmp_path / "metrics.json"
    path.write_text(
        json.dumps([{"date": 0, "averageLikesCount": 1, "followersCount": 2, "averageEngagementRate": 0.5}]),
        encoding="utf-8",
    )
    assert load_metrics_json(path) == [Metric(0, 1, 2, 0.5)]

    csv_path = save_frame_csv(_account_frame(), tmp_path / "out" / "metrics.csv")
    assert len(load_metrics_csv(csv_path)) == 3

    with pytest.raises(FileNotFoundError):
        load_metrics_json(tmp_path / "missing.json")
