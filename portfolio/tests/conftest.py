"""Shared fixtures for portfolio tests."""

from pathlib import Path

import pytest

SITE_YAML = """\
site:
  name: Test Owner
  role: Full-Stack Engineer | Smart Contract Developer
  email: owner@example.com
  github: https://github.com/test-owner

about:
  title: About
  subtitle: Engineering systems that scale.
  intro: Test intro.
  focus:
    - title: Backend
      description: APIs and databases.
      technologies: [Python, PostgreSQL]
  education:
    institution: Test Institute
    degree: B.Tech
    period: 2024 - 2028
  achievements:
    - First place

projects:
  - id: alpha
    title: Alpha
    description: A full-stack app.
    category: fullstack
    technologies: [React, FastAPI]
    links:
      github: https://github.com/test-owner/alpha
      live_demo: https://alpha.example.com
    highlights: [Fast]
  - id: beta
    title: Beta
    description: A smart contract.
    category: blockchain
    technologies: [Solidity]
    links:
      github: https://github.com/test-owner/beta
  - id: gamma
    title: Gamma
    description: Another full-stack app.
    category: fullstack
    links:
      github: https://github.com/test-owner/gamma

navigation:
  - {label: Home, href: /}
  - {label: Blog, href: /blog}

skills:
  languages: [Python, Solidity]
  tools: [Git]
"""


def _write_post(
    blog_dir: Path, slug: str, frontmatter: str = "", body: str = "Body.\n"
) -> Path:
    path = blog_dir / f"{slug}.mdx"
    if frontmatter:
        path.write_text(f"---\n{frontmatter}---\n\n{body}", encoding="utf-8")
    else:
        path.write_text(body, encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def _reset_global_state():
    """Reset all module-level singletons and caches between tests."""
    yield

    # 1. Settings LRU cache
    from portfolio.config import get_settings

    get_settings.cache_clear()

    # 2. Site data (loaded once per process)
    from portfolio.services.site_data import load_site_data

    load_site_data.cache_clear()


@pytest.fixture
def blog_dir(tmp_path) -> Path:
    path = tmp_path / "blog"
    path.mkdir()
    return path


@pytest.fixture
def site_yaml(tmp_path) -> Path:
    path = tmp_path / "site.yaml"
    path.write_text(SITE_YAML, encoding="utf-8")
    return path


@pytest.fixture
def mock_settings(monkeypatch, blog_dir, site_yaml):
    """Provide a Settings object pointing at temporary content."""
    from portfolio.config import Settings, get_settings
    from portfolio.services.site_data import load_site_data

    test_settings = Settings(
        blog_dir=str(blog_dir),
        site_data_path=str(site_yaml),
        default_author="Test Owner",
        words_per_minute=200,
    )

    get_settings.cache_clear()
    load_site_data.cache_clear()
    monkeypatch.setattr("portfolio.config.get_settings", lambda: test_settings)

    # Patch get_settings in all modules that import it directly
    # (from portfolio.config import get_settings creates a local binding that
    # the portfolio.config monkeypatch above does not affect)
    for mod_path in [
        "portfolio.services.blog",
        "portfolio.services.site_data",
        "portfolio.main",
        "scripts.check_content",
    ]:
        monkeypatch.setattr(f"{mod_path}.get_settings", lambda: test_settings)

    return test_settings


@pytest.fixture
def make_post(blog_dir):
    """Write ``<slug>.mdx`` into the temp blog dir.

    ``frontmatter`` is the YAML block without its ``---`` fences.
    """

    def _make(slug: str, frontmatter: str = "", body: str = "Body.\n") -> Path:
        return _write_post(blog_dir, slug, frontmatter, body)

    return _make
