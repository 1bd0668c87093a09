"""Preview the blog feed from the command line.

Usage:
    python -m scripts.preview_feed             # Print the full JSON envelope
    python -m scripts.preview_feed --summary   # Print source and one line per post
"""

import asyncio
import logging
import sys

import httpx

from api.config import get_settings
from api.models.blog import BlogFeed
from api.services.blog_feed import load_blog_feed

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)


def render_summary(feed: BlogFeed) -> str:
    lines = [f"source: {feed.source}"]
    for post in feed.blogs:
        lines.append(f"{post.published_date_iso}  {post.slug}")
    return "\n".join(lines)


async def main() -> int:
    summary = "--summary" in sys.argv
    settings = get_settings()

    async with httpx.AsyncClient(timeout=settings.blogger_timeout) as client:
        feed = await load_blog_feed(settings, client)

    if summary:
        print(render_summary(feed))
    else:
        print(feed.model_dump_json(by_alias=True, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
