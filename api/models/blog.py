"""Blog post data models."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

FeedSource = Literal["seed", "seed-fallback", "seed-error", "blogger"]


class BlogPost(BaseModel):
    """A normalized blog post as served to the frontend."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    title: str
    content: str
    thumbnail: str
    published_date: str = Field(..., alias="publishedDate")
    published_date_iso: str = Field(
        ..., alias="publishedDateISO", pattern=r"^\d{4}-\d{2}-\d{2}$"
    )
    slug: str = Field(..., pattern=r"^([a-z0-9]+(-[a-z0-9]+)*)?$")


class BlogFeed(BaseModel):
    """Response envelope: the posts plus which code path produced them."""

    blogs: list[BlogPost]
    source: FeedSource
