"""Static site data: site config, about page, projects, navigation, skills.

Loaded from config/site.yaml once per process. Errors propagate so a broken
data file fails at startup instead of serving partial pages.
"""

import logging
from functools import lru_cache
from pathlib import Path

import yaml

from portfolio.config import get_settings
from portfolio.models.site import Project, ProjectCategory, SiteData

logger = logging.getLogger(__name__)


def read_site_data(path: Path) -> SiteData:
    """Parse and validate a site data YAML file.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        yaml.YAMLError: If the YAML is malformed.
        pydantic.ValidationError: If the data doesn't match the schema.
    """
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    site_data = SiteData.model_validate(data)
    logger.info(
        "Loaded site data from %s (%d projects)", path, len(site_data.projects)
    )
    return site_data


@lru_cache
def load_site_data() -> SiteData:
    return read_site_data(get_settings().resolved_site_data_path())


def list_projects(category: ProjectCategory | None = None) -> list[Project]:
    """Return projects in declared order, optionally limited to one category."""
    projects = load_site_data().projects
    if category is None:
        return list(projects)
    return [p for p in projects if p.category == category]


def get_project(project_id: str) -> Project | None:
    for project in load_site_data().projects:
        if project.id == project_id:
            return project
    return None
