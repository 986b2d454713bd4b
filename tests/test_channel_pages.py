# tests/test_channel_pages.py
import asyncio

import httpx

from src.crawling.channel_pages import PageFetchResult, fetch_batch, is_valid_page

BASE_URL = "https://pages.test"
VALID_PAGE = "<html>" + "x" * 1000 + "</html>"


def _handler(requested):
    def handle(request: httpx.Request) -> httpx.Response:
        requested.append(request.url.path)
        path = request.url.path
        if path.startswith("/@fail"):
            raise httpx.ConnectError("Network error", request=request)
        if path == "/@missing/videos":
            return httpx.Response(200, text='<a href="/error?src=404">')
        if path.startswith("/@gone"):
            return httpx.Response(404, text="")
        return httpx.Response(200, text=VALID_PAGE)

    return handle


def _run(keys, requested):
    async def go():
        transport = httpx.MockTransport(_handler(requested))
        async with httpx.AsyncClient(transport=transport) as client:
            return await fetch_batch(keys, base_url=BASE_URL, client=client)

    return asyncio.run(go())


def test_fetches_two_pages_per_key():
    requested = []
    results = _run(["@test1", "@test2"], requested)

    assert results == [
        PageFetchResult(key="@test1", primary_page=VALID_PAGE, secondary_page=VALID_PAGE),
        PageFetchResult(key="@test2", primary_page=VALID_PAGE, secondary_page=VALID_PAGE),
    ]
    assert sorted(requested) == sorted(
        [
            "/@test1",
            "/@test1/videos",
            "/@test2",
            "/@test2/videos",
        ]
    )


def test_failures_are_isolated_per_key():
    """某个 key 失败不影响其它 key，结果与输入一一对应。"""
    requested = []
    results = _run(["@success", "@fail", "@missing", "@gone"], requested)

    assert [r.key for r in results] == ["@success", "@fail", "@missing", "@gone"]
    assert results[0].ok and results[0].primary_page == VALID_PAGE

    assert not results[1].ok
    assert "Network error" in results[1].error
    assert results[1].primary_page is None

    assert results[2].error == "invalid secondary page (404 Not Found)"
    assert results[3].error == "invalid primary page (404 Not Found)"


def test_empty_keys_return_empty_list():
    assert asyncio.run(fetch_batch([])) == []


def test_is_valid_page():
    assert is_valid_page(VALID_PAGE)
    assert not is_valid_page("<title>404 Not Found</title>")
    assert not is_valid_page("redirect to /error?src=404")
    assert not is_valid_page(VALID_PAGE, status_code=404)


def test_invalid_url_key_does_not_abort_batch():
    """key 含不可打印字符时 URL 非法，只影响这个 key。"""
    requested = []
    results = _run(["@good", "@bad\x01key"], requested)

    assert [r.key for r in results] == ["@good", "@bad\x01key"]
    assert results[0].ok
    assert results[0].secondary_page == VALID_PAGE
    assert not results[1].ok
    assert "InvalidURL" in results[1].error
    assert requested.count("/@good") == 1
