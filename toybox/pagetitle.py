"""Fetch two pages at once and report the title of whichever answers first."""

from __future__ import annotations

import argparse
import asyncio
import re
import sys
from html import unescape

import aiohttp

_TITLE = re.compile(r"<title\b[^>]*>(.*?)(?:</title\s*>|\Z)", re.IGNORECASE | re.DOTALL)


def _serialize_text(text: str) -> str:
    return (
        text.replace("&", "&amp;")
        .replace("\u00a0", "&nbsp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
    )


def extract_title(html: str) -> str | None:
    """Return the inner HTML of the first ``<title>`` element, or None."""
    match = _TITLE.search(html)
    if match is None:
        return None
    return _serialize_text(unescape(match.group(1)))


async def page_title(
    session: aiohttp.ClientSession, url: str
) -> tuple[str, str | None]:
    """Fetch ``url`` and return it together with its page title."""
    async with session.get(url) as response:
        text = await response.text()
    return url, extract_title(text)


async def race_titles(first_url: str, second_url: str) -> tuple[str, str | None]:
    """Fetch both pages and return the result of the one that finishes first."""
    async with aiohttp.ClientSession() as session:
        tasks = [
            asyncio.create_task(page_title(session, url))
            for url in (first_url, second_url)
        ]
        try:
            done, _ = await asyncio.wait(tasks, return_when=asyncio.FIRST_COMPLETED)
        finally:
            for task in tasks:
                if not task.done():
                    task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
        winner = next(task for task in tasks if task in done)
        return winner.result()


def main(argv: list[str] | None = None) -> int:
    """Race two URLs and print which answered first and its title."""
    parser = argparse.ArgumentParser(description="Race two pages for their titles.")
    parser.add_argument("first_url")
    parser.add_argument("second_url")
    args = parser.parse_args(argv)
    try:
        url, title = asyncio.run(race_titles(args.first_url, args.second_url))
    except aiohttp.ClientError as error:
        print(f"Request failed: {error}", file=sys.stderr)
        return 1
    print(f"{url} returned first")
    if title is None:
        print("Its title could not be parsed.")
    else:
        print(f"Its page title is: '{title}'")
    return 0


if __name__ == "__main__":
    sys.exit(main())