"""Blogger API v3 client and post normalization."""

import logging
import re
from datetime import date, datetime, timezone
from typing import Any

import httpx

from api.config import Settings
from api.models.blog import BlogPost

logger = logging.getLogger(__name__)

PAGE_SIZE = 100
PLACEHOLDER_THUMBNAIL = "/placeholder-blog.jpg"

_IMG_SRC_RE = re.compile(r'<img[^>]+src="([^">]+)"')
_NON_ALNUM_RE = re.compile(r"[^a-z0-9]+")

# Long dates are always rendered in en-US, independent of the process locale
_MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


class BloggerError(Exception):
    """Base class for Blogger feed failures that map to a seed fallback."""


class BloggerNotConfigured(BloggerError):
    """API key or blog ID is missing."""


class BloggerUpstreamError(BloggerError):
    """Blogger answered with a non-2xx status."""

    def __init__(self, status_code: int) -> None:
        super().__init__(f"Blogger API returned {status_code}")
        self.status_code = status_code


def create_slug(title: str) -> str:
    """Lower-case the title and collapse every non-alphanumeric run to one hyphen."""
    return _NON_ALNUM_RE.sub("-", title.lower()).strip("-")


def extract_thumbnail(content: str) -> str:
    """Return the first ``<img src="...">`` URL in the content, or the placeholder."""
    match = _IMG_SRC_RE.search(content)
    return match.group(1) if match else PLACEHOLDER_THUMBNAIL


def format_published_date(published: str) -> str:
    """Format an ISO-8601 timestamp as a long en-US date, e.g. ``June 1, 2025``.

    Naive timestamps are taken as UTC; aware ones are converted to UTC first.
    """
    dt = datetime.fromisoformat(published.replace("Z", "+00:00"))
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    dt = dt.astimezone(timezone.utc)
    return f"{_MONTH_NAMES[dt.month - 1]} {dt.day}, {dt.year}"


def published_date_iso(published: str) -> str:
    """Date portion of the timestamp, taken verbatim from before the ``T``."""
    return published.split("T")[0]


def normalize_post(item: dict[str, Any]) -> BlogPost:
    """Map one Blogger post resource onto a BlogPost.

    Raises KeyError if a required field is missing.
    """
    content = item["content"]
    published = item["published"]
    return BlogPost(
        id=item["id"],
        title=item["title"],
        content=content,
        thumbnail=extract_thumbnail(content),
        published_date=format_published_date(published),
        published_date_iso=published_date_iso(published),
        slug=create_slug(item["title"]),
    )


def sort_newest_first(posts: list[BlogPost]) -> list[BlogPost]:
    return sorted(
        posts,
        key=lambda p: date.fromisoformat(p.published_date_iso),
        reverse=True,
    )


def posts_url(settings: Settings) -> str:
    base = settings.blogger_api_base.rstrip("/")
    return f"{base}/blogs/{settings.blogger_blog_id}/posts"


async def fetch_blogger_posts(
    client: httpx.AsyncClient, settings: Settings
) -> list[BlogPost]:
    """Fetch up to ``PAGE_SIZE`` posts from Blogger, normalized and newest first.

    Raises BloggerNotConfigured when credentials are absent and
    BloggerUpstreamError on a non-2xx answer.  Transport errors, timeouts,
    invalid JSON and malformed items propagate unchanged.
    """
    if not settings.blogger_configured:
        raise BloggerNotConfigured("BLOGGER_API_KEY and BLOGGER_BLOG_ID are required")

    url = posts_url(settings)
    params = {
        "key": settings.blogger_api_key,
        "maxResults": str(PAGE_SIZE),
        "orderBy": "published",
    }
    resp = await client.get(url, params=params, timeout=settings.blogger_timeout)
    if not resp.is_success:
        raise BloggerUpstreamError(resp.status_code)

    data = resp.json()
    items = (data.get("items") if isinstance(data, dict) else None) or []
    posts = [normalize_post(item) for item in items]
    logger.info(
        "Fetched %d posts from Blogger blog %s", len(posts), settings.blogger_blog_id
    )
    return sort_newest_first(posts)
