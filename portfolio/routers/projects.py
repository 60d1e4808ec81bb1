"""Portfolio project endpoints."""

from fastapi import APIRouter, HTTPException, Path, Query

from portfolio.models.site import Project, ProjectCategory, ProjectList
from portfolio.services.site_data import get_project, list_projects

router = APIRouter(prefix="/projects", tags=["projects"])


@router.get("", response_model=ProjectList)
async def list_all_projects(category: ProjectCategory | None = Query(default=None)):
    """Get projects, optionally filtered to ``fullstack`` or ``blockchain``."""
    projects = list_projects(category)
    return ProjectList(projects=projects, total=len(projects))


@router.get("/{project_id}", response_model=Project)
async def get_single_project(
    project_id: str = Path(..., pattern=r"^[a-z0-9][a-z0-9-]*$", max_length=100),
):
    project = get_project(project_id)
    if project is None:
        raise HTTPException(status_code=404, detail="Project not found")
    return project
