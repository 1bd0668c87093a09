"""Blog feed endpoint."""

from fastapi import APIRouter, Depends

from api.config import Settings, get_settings
from api.models.blog import BlogFeed
from api.services.blog_feed import load_blog_feed
from api.services.http_client import get_shared_client

router = APIRouter(prefix="/blogs", tags=["blogs"])


@router.get("", response_model=BlogFeed)
async def list_blogs(settings: Settings = Depends(get_settings)):
    """Get the blog feed.

    Always answers 200; when Blogger is unconfigured or failing the seed
    posts are returned and ``source`` says why.
    """
    return await load_blog_feed(settings, get_shared_client())
