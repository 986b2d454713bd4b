"""
频道页面批量抓取：每个 key 并行抓两页（频道首页 + 视频列表页）。

- 所有 key 同时进行，某个 key 失败不影响其它 key
- 网络错误、非法 URL、404 页面都记录到该 key 结果的 error 字段，不向上抛
- 输入为空时返回空列表
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

import httpx

DEFAULT_BASE_URL = "https://www.youtube.com"
DEFAULT_TIMEOUT_SECONDS = 10.0

# 出现这些内容即视为无效页面
INVALID_PAGE_MARKERS: Tuple[str, ...] = ("404 Not Found", "/error?src=404")


@dataclass
class PageFetchResult:
    key: str
    primary_page: Optional[str] = None
    secondary_page: Optional[str] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def is_valid_page(
    content: str,
    status_code: int = 200,
    markers: Sequence[str] = INVALID_PAGE_MARKERS,
) -> bool:
    if status_code == 404:
        return False
    return not any(marker in content for marker in markers)


async def get_page(client: httpx.AsyncClient, url: str) -> httpx.Response:
    return await client.get(url, follow_redirects=True)


async def fetch_key(
    client: httpx.AsyncClient,
    key: str,
    base_url: str = DEFAULT_BASE_URL,
) -> PageFetchResult:
    """抓取单个 key 的两页，两页同时请求。"""
    primary_url = f"{base_url.rstrip('/')}/{key}"
    secondary_url = f"{primary_url}/videos"

    # 两个请求都结束后再判断，避免一页失败时另一页被遗留在后台
    pages = await asyncio.gather(
        get_page(client, primary_url),
        get_page(client, secondary_url),
        return_exceptions=True,
    )
    # 任何异常（网络错误、非法 URL 等）都只记到当前 key 上；取消等非 Exception 照常抛出
    for page in pages:
        if isinstance(page, Exception):
            return PageFetchResult(key=key, error=f"page fetch failed: {page!s} ({type(page).__name__})")
        if isinstance(page, BaseException):
            raise page

    primary, secondary = pages

    if not is_valid_page(primary.text, primary.status_code):
        return PageFetchResult(key=key, error="invalid primary page (404 Not Found)")
    if not is_valid_page(secondary.text, secondary.status_code):
        return PageFetchResult(key=key, error="invalid secondary page (404 Not Found)")

    return PageFetchResult(key=key, primary_page=primary.text, secondary_page=secondary.text)


async def fetch_batch(
    keys: Sequence[str],
    *,
    base_url: Optional[str] = None,
    client: Optional[httpx.AsyncClient] = None,
    timeout: Optional[float] = None,
) -> List[PageFetchResult]:
    """
    批量抓取，返回与 keys 一一对应（顺序相同）的结果列表。

    client 不传时内部创建并在结束后关闭。
    """
    if not keys:
        return []

    base_url = base_url or DEFAULT_BASE_URL

    if client is not None:
        return list(await asyncio.gather(*(fetch_key(client, k, base_url) for k in keys)))

    async with httpx.AsyncClient(timeout=timeout or DEFAULT_TIMEOUT_SECONDS) as own_client:
        return list(
            await asyncio.gather(*(fetch_key(own_client, k, base_url) for k in keys))
        )
