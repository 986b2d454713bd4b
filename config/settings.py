"""
全局配置入口：从 .env / 环境变量加载配置。

- 缺日补全：FILL_DEFAULT_DAYS / FILL_PREFER_BINARY / FILL_GROUP_COLS
- 频道页面抓取：PAGE_BASE_URL / PAGE_TIMEOUT_SECONDS / PAGE_KEYS（逗号分隔）
"""

from functools import lru_cache
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings


def _split_csv(raw: str) -> List[str]:
    return [t.strip() for t in raw.split(",") if t.strip()]


class Settings(BaseSettings):
    # 运行环境（dev / stage / prod）
    env: str = Field("dev", alias="ENV")

    # --------------------------
    # 缺日补全
    # --------------------------
    # 默认补全天数（含今天）
    fill_default_days: int = Field(7, alias="FILL_DEFAULT_DAYS", gt=0)

    # 两种算法理论代价相同时是否优先二分查找
    fill_prefer_binary: bool = Field(True, alias="FILL_PREFER_BINARY")

    # 逗号分隔的分组字段，例如 "account_id,platform"；留空则自动检测
    fill_group_cols_raw: str = Field("", alias="FILL_GROUP_COLS")

    # --------------------------
    # 频道页面抓取
    # --------------------------
    page_base_url: str = Field("https://www.youtube.com", alias="PAGE_BASE_URL")
    page_timeout_seconds: float = Field(10.0, alias="PAGE_TIMEOUT_SECONDS", gt=0)

    # 逗号分隔的频道 key：例如 "@channelA,@channelB"
    page_keys_raw: str = Field("", alias="PAGE_KEYS")

    @property
    def fill_group_cols(self) -> List[str]:
        """
        返回拆分后的分组字段列表，已去掉空格和空字符串。
        示例：
            FILL_GROUP_COLS=account_id,platform

        -> ["account_id", "platform"]
        """
        return _split_csv(self.fill_group_cols_raw)

    @property
    def page_keys(self) -> List[str]:
        """返回拆分后的频道 key 列表。"""
        return _split_csv(self.page_keys_raw)

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


@lru_cache
def get_settings() -> Settings:
    """
    使用 lru_cache 确保全项目只初始化一次 Settings。
    """
    return Settings()


# 方便直接 from config.settings import settings
settings = get_settings()
