"""
频道页面抓取（channel_pages）

- 功能：每个频道 key 并行抓取首页和视频页，按 key 隔离失败。
"""

from .core import PageFetchResult, fetch_batch, fetch_key, is_valid_page

__all__ = ["PageFetchResult", "fetch_batch", "fetch_key", "is_valid_page"]
