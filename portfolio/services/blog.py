"""Blog content loader: reads MDX posts from the content directory.

Posts are flat ``<slug>.mdx`` files with YAML frontmatter. Nothing is cached:
every call re-reads and re-parses the files, so edits on disk show up on the
next request.
"""

import logging
from datetime import date, datetime, timezone
from pathlib import Path
from typing import Any

import frontmatter
import yaml

from portfolio.config import get_settings
from portfolio.models.blog import AdjacentPosts, BlogPost, BlogPostMeta
from portfolio.services.reading_time import estimate_reading_time

logger = logging.getLogger(__name__)

POST_EXTENSION = ".mdx"


def _blog_dir() -> Path:
    return get_settings().resolved_blog_dir()


def _is_safe_slug(slug: str) -> bool:
    """Reject slugs that could escape the content directory."""
    return bool(slug) and "/" not in slug and "\\" not in slug and ".." not in slug


def _as_str(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    return str(value)


def _as_tags(value: Any) -> list[str]:
    if not value:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, (list, tuple)):
        return [str(tag) for tag in value if tag is not None and str(tag)]
    return [str(value)]


def _parse_iso(value: str) -> datetime | None:
    if not value:
        return None
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None


def parse_date(value: str) -> datetime | None:
    """Parse an ISO date or datetime string into a naive UTC datetime.

    Offsets are applied before dropping tzinfo, so dates compare by instant.
    Naive values are taken as UTC. Returns None if unparseable.
    """
    parsed = _parse_iso(value)
    if parsed is None:
        return None
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc)
    return parsed.replace(tzinfo=None)


def format_date(date_string: str) -> str:
    """Format an ISO date for display, e.g. ``"January 15, 2024"``.

    The calendar date is the one written, not converted to UTC. Unparseable
    input is returned unchanged.
    """
    parsed = _parse_iso(date_string)
    if parsed is None:
        return date_string
    return f"{parsed:%B} {parsed.day}, {parsed.year}"


def _load_source(path: Path) -> tuple[dict[str, Any], str]:
    """Split a post file into (metadata, body).

    Malformed frontmatter is logged and treated as absent.
    """
    source = path.read_text(encoding="utf-8")
    try:
        post = frontmatter.loads(source)
    except (yaml.YAMLError, ValueError):
        logger.warning("Malformed frontmatter in %s, using defaults", path.name)
        return {}, source

    # An unclosed "---" block parses as no frontmatter plus the raw file
    if source.startswith("---") and post.content.strip() == source.strip():
        logger.warning("Malformed frontmatter in %s, using defaults", path.name)
        return {}, source

    metadata = post.metadata if isinstance(post.metadata, dict) else {}
    return metadata, post.content


def list_slugs() -> list[str]:
    """Return the slugs of all posts, in filename order.

    A missing content directory yields an empty list.
    """
    blog_dir = _blog_dir()
    if not blog_dir.is_dir():
        logger.debug("Blog directory %s does not exist", blog_dir)
        return []

    return sorted(
        path.name[: -len(POST_EXTENSION)]
        for path in blog_dir.iterdir()
        if path.is_file() and path.name.endswith(POST_EXTENSION)
    )


def get_post(slug: str) -> BlogPost | None:
    """Load a single post by slug, or return None if there is no such post."""
    if not _is_safe_slug(slug):
        return None

    path = _blog_dir() / f"{slug}{POST_EXTENSION}"
    if not path.is_file():
        return None

    settings = get_settings()
    data, content = _load_source(path)
    post_date = _as_str(data.get("date"))

    return BlogPost(
        slug=slug,
        title=_as_str(data.get("title")),
        description=_as_str(data.get("description")),
        date=post_date,
        formatted_date=format_date(post_date),
        tags=_as_tags(data.get("tags")),
        author=_as_str(data.get("author")) or settings.default_author,
        reading_time=estimate_reading_time(content, settings.words_per_minute).text,
        content=content,
    )


def list_posts() -> list[BlogPostMeta]:
    """Return metadata for all posts, newest first.

    Ties keep filename order. Posts without a parseable date sort last.
    """
    posts = [post.to_meta() for slug in list_slugs() if (post := get_post(slug))]

    dated = [(parse_date(p.date), p) for p in posts]
    with_date = [(d, p) for d, p in dated if d is not None]
    without_date = [p for d, p in dated if d is None]

    # sorted() is stable, and stays stable with reverse=True
    with_date.sort(key=lambda pair: pair[0], reverse=True)
    return [p for _, p in with_date] + without_date


def list_posts_by_tag(tag: str) -> list[BlogPostMeta]:
    """Return posts carrying *tag* (case-insensitive), newest first."""
    wanted = tag.lower()
    return [
        post
        for post in list_posts()
        if wanted in (t.lower() for t in post.tags)
    ]


def list_tags() -> list[str]:
    """Return every tag used by any post, deduplicated and sorted."""
    tags: set[str] = set()
    for post in list_posts():
        tags.update(post.tags)
    return sorted(tags)


def get_adjacent_posts(slug: str) -> AdjacentPosts | None:
    """Return the posts either side of *slug* in newest-first order.

    ``previous`` is older, ``next`` is newer. None if the slug is unknown.
    """
    posts = list_posts()
    index = next((i for i, p in enumerate(posts) if p.slug == slug), None)
    if index is None:
        return None

    return AdjacentPosts(
        previous=posts[index + 1] if index < len(posts) - 1 else None,
        next=posts[index - 1] if index > 0 else None,
    )
