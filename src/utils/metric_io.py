import json
from pathlib import Path
from typing import Iterable, List, Union

import pandas as pd

from src.data_processing.metric_filling.schema import Metric

PathLike = Union[str, Path]


def _require(path: PathLike) -> Path:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"未找到指标文件：{path}")
    return path


def load_metrics_json(path: PathLike) -> List[Metric]:
    """读取 JSON 数组（averageLikesCount 等 camelCase 字段）。"""
    with _require(path).open("r", encoding="utf-8") as f:
        raw = json.load(f)
    if not isinstance(raw, list):
        raise ValueError(f"指标文件应为 JSON 数组：{path}")
    return [Metric.from_dict(item) for item in raw]


def save_metrics_json(metrics: Iterable[Metric], path: PathLike) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        json.dump([m.to_dict() for m in metrics], f, ensure_ascii=False, indent=2)
    return path


def load_metrics_csv(path: PathLike) -> pd.DataFrame:
    return pd.read_csv(_require(path))


def save_frame_csv(df: pd.DataFrame, path: PathLike) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(path, index=False)
    return path
