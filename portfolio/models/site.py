"""Static site data models: site config, about page, projects, navigation."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

ProjectCategory = Literal["fullstack", "blockchain"]


class SiteConfig(BaseModel):
    """Owner and contact details shown across the site."""

    name: str
    role: str
    tagline: str = ""
    email: str
    phone: str = ""
    location: str = ""
    github: str = ""
    linkedin: str = ""
    site_url: str = ""
    description: str = ""


class FocusArea(BaseModel):
    title: str
    description: str
    technologies: list[str] = []


class Education(BaseModel):
    institution: str
    degree: str
    period: str


class AboutData(BaseModel):
    title: str = "About"
    subtitle: str = ""
    intro: str = ""
    focus: list[FocusArea] = []
    education: Education | None = None
    achievements: list[str] = []


class ProjectLinks(BaseModel):
    github: str
    live_demo: str | None = None


class Project(BaseModel):
    """A portfolio project. Statically defined, never mutated."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., pattern=r"^[a-z0-9][a-z0-9-]*$")
    title: str
    description: str
    long_description: str = ""
    category: ProjectCategory
    technologies: list[str] = []
    links: ProjectLinks
    image: str | None = None
    highlights: list[str] = []


class ProjectList(BaseModel):
    projects: list[Project]
    total: int


class NavItem(BaseModel):
    label: str
    href: str


class SiteData(BaseModel):
    """Everything parsed from config/site.yaml."""

    site: SiteConfig
    about: AboutData
    projects: list[Project] = []
    navigation: list[NavItem] = []
    skills: dict[str, list[str]] = {}
