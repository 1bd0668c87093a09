"""Blog feed assembly: live Blogger posts with a seed-data fallback ladder."""

import logging

import httpx

from api.config import Settings
from api.models.blog import BlogFeed, FeedSource
from api.services.blogger import (
    BloggerNotConfigured,
    BloggerUpstreamError,
    fetch_blogger_posts,
)
from api.services.seed import SEED_BLOGS

logger = logging.getLogger(__name__)


def seed_feed(source: FeedSource) -> BlogFeed:
    return BlogFeed(blogs=list(SEED_BLOGS), source=source)


async def load_blog_feed(settings: Settings, client: httpx.AsyncClient) -> BlogFeed:
    """Build the feed envelope.  Never raises.

    The ``source`` field records which path produced the posts:
    ``blogger`` on success, otherwise ``seed`` (not configured),
    ``seed-fallback`` (non-2xx from Blogger) or ``seed-error`` (anything else).
    """
    try:
        posts = await fetch_blogger_posts(client, settings)
    except BloggerNotConfigured:
        logger.info("Blogger API credentials not configured. Using seed data.")
        return seed_feed("seed")
    except BloggerUpstreamError as exc:
        logger.error("Blogger API error: %d", exc.status_code)
        return seed_feed("seed-fallback")
    except Exception:
        logger.exception("Error fetching blogs")
        return seed_feed("seed-error")

    return BlogFeed(blogs=posts, source="blogger")
