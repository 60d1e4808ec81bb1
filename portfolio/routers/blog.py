"""Blog post endpoints."""

import logging

from fastapi import APIRouter, HTTPException, Path, Query
from fastapi.responses import HTMLResponse

from portfolio.models.blog import AdjacentPosts, BlogIndex, BlogPostDetail, TagList
from portfolio.services.blog import (
    get_adjacent_posts,
    get_post,
    list_posts,
    list_posts_by_tag,
    list_tags,
)
from portfolio.services.renderer import render_markdown

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/blog", tags=["blog"])

SLUG_PATTERN = r"^[A-Za-z0-9][A-Za-z0-9_-]*$"


@router.get("", response_model=BlogIndex)
async def list_blog_posts(
    tag: str | None = Query(default=None, min_length=1, max_length=100),
):
    """Get all posts, newest first, optionally filtered by tag."""
    posts = list_posts_by_tag(tag) if tag else list_posts()
    return BlogIndex(posts=posts, total=len(posts))


@router.get("/tags", response_model=TagList)
async def list_blog_tags():
    """Get every tag used across posts, sorted."""
    return TagList(tags=list_tags())


@router.get("/{slug}", response_model=BlogPostDetail)
async def get_blog_post(
    slug: str = Path(..., pattern=SLUG_PATTERN, max_length=200),
):
    """Get a single post with its previous/next neighbours."""
    post = get_post(slug)
    if post is None:
        logger.info("Blog post not found: %s", slug)
        raise HTTPException(status_code=404, detail="Blog post not found")

    adjacent = get_adjacent_posts(slug) or AdjacentPosts()
    return BlogPostDetail(post=post, adjacent=adjacent)


@router.get("/{slug}/content")
async def get_blog_post_content(
    slug: str = Path(..., pattern=SLUG_PATTERN, max_length=200),
):
    """Serve the post body rendered to HTML."""
    post = get_post(slug)
    if post is None:
        raise HTTPException(status_code=404, detail="Blog post not found")
    return HTMLResponse(content=render_markdown(post.content))
