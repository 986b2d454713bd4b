"""
缺日补全运行入口脚本：

读取各账号的日度指标：
    data/raw/account_metrics.csv

执行缺日补全（每个账号补齐最近 FILL_DEFAULT_DAYS 天）：
    fill_missing_metrics_df(df, length)

输出补全后的结果：
    data/processed/account_metrics_filled.csv

用法（在项目根目录）：
    python -m src.data_processing.metric_filling.run
"""

from __future__ import annotations

from collections import Counter
from pathlib import Path

from config.settings import settings
from src.utils.metric_io import load_metrics_csv, save_frame_csv

from .frame import fill_missing_metrics_df, split_series
from .nearest_binary import fill_missing_metrics_binary
from .nearest_scan import fill_missing_metrics_scan
from .selector import SelectorConfig, select_strategy
from .target_dates import FixedClock, SystemClock

# 项目根目录
ROOT = Path(__file__).resolve().parents[3]

INPUT_PATH = ROOT / "data" / "raw" / "account_metrics.csv"
OUTPUT_PATH = ROOT / "data" / "processed" / "account_metrics_filled.csv"


def main():
    if not INPUT_PATH.exists():
        raise FileNotFoundError(f"未找到指标文件：{INPUT_PATH}")

    length = settings.fill_default_days
    config = SelectorConfig(prefer_binary=settings.fill_prefer_binary)
    group_cols = settings.fill_group_cols or None
    clock = FixedClock(SystemClock().now())

    print(f"📥 读取日度指标：{INPUT_PATH}")
    df = load_metrics_csv(INPUT_PATH)
    print(f"📊 原始记录数：{len(df):,} 行")

    if df.empty:
        print("⚠ 输入为空，跳过补全。")
        return

    print(f"🧩 开始补全最近 {length} 天 ...")
    df_filled = fill_missing_metrics_df(
        df, length, group_cols, config=config, clock=clock
    )

    # 逐个序列核对：两种算法结果必须一致
    strategies: Counter = Counter()
    mismatched = []
    for keys, metrics in split_series(df, group_cols):
        strategies[select_strategy(len(metrics), length, config).value] += 1
        binary = fill_missing_metrics_binary(metrics, length, clock)
        scan = fill_missing_metrics_scan(metrics, length, clock)
        if binary != scan:
            mismatched.append(keys)

    print(f"🔍 算法选择分布：{dict(strategies)}")
    if mismatched:
        print(f"⚠ 二分/双指针结果不一致的序列：{mismatched}")

    n_synth = int(df_filled["is_synthetic_row"].sum())
    print(f"✅ 补全完成：共 {len(df_filled):,} 行，其中补出 {n_synth:,} 行")

    save_frame_csv(df_filled, OUTPUT_PATH)
    print(f"💾 已保存到：{OUTPUT_PATH}")


if __name__ == "__main__":
    main()
