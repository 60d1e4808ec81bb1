"""Blog post data models."""

from pydantic import BaseModel, ConfigDict


class BlogPostMeta(BaseModel):
    """Blog post metadata for index display (no body content)."""

    model_config = ConfigDict(frozen=True)

    slug: str
    title: str = ""
    description: str = ""
    date: str = ""
    formatted_date: str = ""
    tags: list[str] = []
    author: str = ""
    reading_time: str = ""


class BlogPost(BlogPostMeta):
    """A fully parsed blog post, including the raw MDX body."""

    content: str = ""

    def to_meta(self) -> BlogPostMeta:
        return BlogPostMeta(**self.model_dump(exclude={"content"}))


class BlogIndex(BaseModel):
    """Blog post index."""

    posts: list[BlogPostMeta]
    total: int


class AdjacentPosts(BaseModel):
    """Neighbouring posts in newest-first order.

    ``previous`` is the next-older post, ``next`` the next-newer one.
    """

    previous: BlogPostMeta | None = None
    next: BlogPostMeta | None = None


class BlogPostDetail(BaseModel):
    """Single post response: the post plus its navigation neighbours."""

    post: BlogPost
    adjacent: AdjacentPosts


class TagList(BaseModel):
    tags: list[str]
