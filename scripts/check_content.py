"""Check blog content from the command line.

Lists every post with its date, reading time and tags, and fails when a post
is missing a title or a parseable date.

Usage:
    python -m scripts.check_content
    python -m scripts.check_content --blog-dir path/to/posts
"""

import argparse
import logging
import os
import sys

from portfolio.config import get_settings
from portfolio.services.blog import get_post, list_slugs, parse_date

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)


def check_posts() -> list[str]:
    """Print a summary line per post and return a list of problems found."""
    problems: list[str] = []
    slugs = list_slugs()
    print(f"Found {len(slugs)} post(s) in {get_settings().resolved_blog_dir()}\n")

    for slug in slugs:
        post = get_post(slug)
        if post is None:
            problems.append(f"{slug}: could not be read")
            continue

        tags = ", ".join(post.tags) or "-"
        print(f"  {post.date or '????-??-??':<12} {post.reading_time:<12} {slug}  [{tags}]")

        if not post.title:
            problems.append(f"{slug}: missing title")
        if parse_date(post.date) is None:
            problems.append(f"{slug}: missing or invalid date {post.date!r}")

    return problems


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--blog-dir", help="Directory of .mdx posts to check")
    args = parser.parse_args(argv)

    if args.blog_dir:
        os.environ["BLOG_DIR"] = args.blog_dir
        get_settings.cache_clear()

    problems = check_posts()
    if problems:
        print(f"\n{len(problems)} problem(s):")
        for problem in problems:
            print(f"  ERROR: {problem}")
        return 1

    print("\nAll posts OK.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
