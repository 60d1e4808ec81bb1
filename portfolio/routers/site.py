"""Site-wide static data: owner details, about page, navigation, skills."""

from fastapi import APIRouter

from portfolio.models.site import AboutData, NavItem, SiteConfig
from portfolio.services.site_data import load_site_data

router = APIRouter(prefix="/site", tags=["site"])


@router.get("", response_model=SiteConfig)
async def get_site_config():
    return load_site_data().site


@router.get("/about", response_model=AboutData)
async def get_about():
    return load_site_data().about


@router.get("/navigation", response_model=list[NavItem])
async def get_navigation():
    return load_site_data().navigation


@router.get("/skills", response_model=dict[str, list[str]])
async def get_skills():
    """Skills grouped by area (languages, frontend, backend, ...)."""
    return load_site_data().skills
