"""
频道页面抓取运行入口：

    PAGE_KEYS=@channelA,@channelB python -m src.crawling.channel_pages.run
"""

from __future__ import annotations

import asyncio

from config.settings import settings

from .core import fetch_batch


def main():
    keys = settings.page_keys
    if not keys:
        print("⚠ 未配置 PAGE_KEYS，没有需要抓取的频道。")
        return

    print(f"📥 开始抓取 {len(keys)} 个频道：{settings.page_base_url}")
    results = asyncio.run(
        fetch_batch(
            keys,
            base_url=settings.page_base_url,
            timeout=settings.page_timeout_seconds,
        )
    )

    for r in results:
        if r.ok:
            print(f"✅ {r.key}：首页 {len(r.primary_page):,} 字符，视频页 {len(r.secondary_page):,} 字符")
        else:
            print(f"❌ {r.key}：{r.error}")

    n_ok = sum(r.ok for r in results)
    print(f"\n抓取完成：成功 {n_ok} / {len(results)}")


if __name__ == "__main__":
    main()
