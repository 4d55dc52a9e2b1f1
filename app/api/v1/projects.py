"""Customer projects, scoped to the authenticated owner."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy import select
from sqlalchemy.orm import Session

from app.api.v1.auth import AuthUser
from app.core.clock import Clock, get_clock
from app.core.database import get_db
from app.models.project import Project
from app.schemas.base import ApiResponse, envelope
from app.schemas.project import ProjectCreate, ProjectOut, ProjectStats, ProjectUpdate
from app.services.crud import apply_updates, changes_of, get_or_404
from app.services.dashboard import record_activity, round_half_up

router = APIRouter()

NOT_FOUND = "Project not found"


def project_stats(projects: list[Project]) -> ProjectStats:
    progress = [p.links_built / p.target_links for p in projects if p.target_links]
    return ProjectStats(
        total_projects=len(projects),
        active_projects=sum(1 for p in projects if p.status == "Active"),
        total_links_built=sum(p.links_built for p in projects),
        avg_progress=round_half_up(sum(progress) / len(projects) * 100) if projects else 0,
    )


@router.get("", response_model=ApiResponse, response_model_exclude_unset=True)
def list_projects(user: AuthUser, db: Annotated[Session, Depends(get_db)]) -> ApiResponse:
    projects = list(
        db.scalars(
            select(Project)
            .where(Project.user_id == user.id)
            .order_by(Project.created_at.desc(), Project.id.desc())
        )
    )
    return envelope(
        "Projects retrieved successfully",
        projects=[ProjectOut.model_validate(p) for p in projects],
        stats=project_stats(projects),
    )


@router.get("/{project_id}", response_model=ApiResponse, response_model_exclude_unset=True)
def get_project(project_id: int, user: AuthUser, db: Annotated[Session, Depends(get_db)]) -> ApiResponse:
    project = get_or_404(db, Project, project_id, NOT_FOUND, user_id=user.id)
    return envelope("Project retrieved successfully", project=ProjectOut.model_validate(project))


@router.post(
    "",
    response_model=ApiResponse,
    response_model_exclude_unset=True,
    status_code=status.HTTP_201_CREATED,
)
def create_project(
    body: ProjectCreate,
    user: AuthUser,
    db: Annotated[Session, Depends(get_db)],
    clock: Annotated[Clock, Depends(get_clock)],
) -> ApiResponse:
    now = clock()
    project = Project(
        user_id=user.id,
        name=body.name,
        domain=body.domain,
        target_links=body.target_links,
        status="Active",
        start_date=now,
        last_activity=now,
    )
    db.add(project)
    db.flush()
    record_activity(db, user.id, "New project created", now, site=project.domain, project_id=project.id)
    db.commit()
    db.refresh(project)
    return envelope("Project created successfully", project=ProjectOut.model_validate(project))


@router.patch("/{project_id}", response_model=ApiResponse, response_model_exclude_unset=True)
def update_project(
    project_id: int,
    body: ProjectUpdate,
    user: AuthUser,
    db: Annotated[Session, Depends(get_db)],
    clock: Annotated[Clock, Depends(get_clock)],
) -> ApiResponse:
    project = get_or_404(db, Project, project_id, NOT_FOUND, user_id=user.id)
    apply_updates(project, changes_of(body))
    project.last_activity = clock()
    db.commit()
    db.refresh(project)
    return envelope("Project updated successfully", project=ProjectOut.model_validate(project))


@router.delete("/{project_id}", response_model=ApiResponse, response_model_exclude_unset=True)
def delete_project(project_id: int, user: AuthUser, db: Annotated[Session, Depends(get_db)]) -> ApiResponse:
    project = get_or_404(db, Project, project_id, NOT_FOUND, user_id=user.id)
    db.delete(project)
    db.commit()
    return envelope("Project deleted successfully")
