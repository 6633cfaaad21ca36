import asyncio
import contextlib

import aiohttp
import pytest
from aiohttp import web

from toybox.pagetitle import extract_title, page_title, race_titles

FAST_PAGE = "<html><head><title>Fast page</title></head><body></body></html>"
SLOW_PAGE = "<html><head><title>Slow page</title></head><body></body></html>"
BARE_PAGE = "<html><body><p>nothing here</p></body></html>"


async def _fast(request):
    return web.Response(text=FAST_PAGE, content_type="text/html")


async def _slow(request):
    await asyncio.sleep(0.5)
    return web.Response(text=SLOW_PAGE, content_type="text/html")


async def _bare(request):
    return web.Response(text=BARE_PAGE, content_type="text/html")


@contextlib.asynccontextmanager
async def _server():
    app = web.Application()
    app.add_routes([web.get("/fast", _fast), web.get("/slow", _slow), web.get("/bare", _bare)])
    runner = web.AppRunner(app)
    await runner.setup()
    site = web.TCPSite(runner, "127.0.0.1", 0)
    await site.start()
    try:
        host, port = runner.addresses[0][:2]
        yield f"http://{host}:{port}"
    finally:
        await runner.cleanup()


def test_extract_title_simple():
    assert extract_title(FAST_PAGE) == "Fast page"


def test_extract_title_missing():
    assert extract_title(BARE_PAGE) is None


def test_extract_title_takes_first():
    document = "<title>one</title><title>two</title>"
    assert extract_title(document) == "one"


def test_extract_title_case_and_attributes():
    assert extract_title("<TITLE lang='en'>Shout</TITLE>") == "Shout"


def test_extract_title_keeps_escaped_text():
    assert extract_title("<title>a &amp; b</title>") == "a &amp; b"


def test_extract_title_unterminated_runs_to_end():
    assert extract_title("<head><title>open ended") == "open ended"


@pytest.mark.asyncio
async def test_page_title_fetches_title():
    async with _server() as base:
        async with aiohttp.ClientSession() as session:
            result = await page_title(session, f"{base}/fast")
    assert result == (f"{base}/fast", "Fast page")


@pytest.mark.asyncio
async def test_page_title_without_title():
    async with _server() as base:
        async with aiohttp.ClientSession() as session:
            result = await page_title(session, f"{base}/bare")
    assert result == (f"{base}/bare", None)


@pytest.mark.asyncio
async def test_race_titles_returns_faster_page():
    async with _server() as base:
        result = await race_titles(f"{base}/slow", f"{base}/fast")
    assert result == (f"{base}/fast", "Fast page")