"""Team members invited onto the authenticated owner's account."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy import select
from sqlalchemy.orm import Session

from app.api.v1.auth import AuthUser
from app.core.clock import Clock, get_clock
from app.core.database import get_db
from app.core.exceptions import ConflictError, ValidationError
from app.models.team_member import TeamMember
from app.schemas.base import ApiResponse, envelope
from app.schemas.team import TeamInvite, TeamListItem, TeamMemberOut
from app.services.crud import get_or_404

router = APIRouter()


def initials(words: list[str]) -> str:
    """First letter of up to the first two non-empty words, upper-cased."""
    return "".join(w[0] for w in words if w).upper()[:2]


@router.get("", response_model=ApiResponse, response_model_exclude_unset=True)
def list_members(user: AuthUser, db: Annotated[Session, Depends(get_db)]) -> ApiResponse:
    """The owner first, then every invited member with a name derived from their email."""
    owner = TeamListItem(name=user.name, email=user.email, role="Owner", initials=initials(user.name.split(" ")))
    members = [owner]
    for member in db.scalars(select(TeamMember).where(TeamMember.user_id == user.id).order_by(TeamMember.id)):
        local_part = member.email.split("@")[0]
        members.append(
            TeamListItem(
                id=member.id,
                name=local_part,
                email=member.email,
                role=member.role,
                initials=initials(local_part.split(".")),
                status=member.status,
            )
        )
    return envelope(
        "Team members retrieved successfully",
        members=[m.model_dump(by_alias=True, exclude_none=True) for m in members],
    )


@router.post(
    "/invite",
    response_model=ApiResponse,
    response_model_exclude_unset=True,
    status_code=status.HTTP_201_CREATED,
)
def invite_member(
    body: TeamInvite,
    user: AuthUser,
    db: Annotated[Session, Depends(get_db)],
    clock: Annotated[Clock, Depends(get_clock)],
) -> ApiResponse:
    if body.email == user.email:
        raise ValidationError("You cannot invite yourself")
    existing = db.scalars(
        select(TeamMember).where(TeamMember.user_id == user.id, TeamMember.email == body.email)
    ).first()
    if existing is not None:
        raise ConflictError("Team member already invited")
    member = TeamMember(
        user_id=user.id,
        email=body.email,
        role=body.role,
        status="Pending",
        invited_by=user.id,
        invited_at=clock(),
    )
    db.add(member)
    db.commit()
    db.refresh(member)
    return envelope("Team member invited successfully", teamMember=TeamMemberOut.model_validate(member))


@router.delete("/{member_id}", response_model=ApiResponse, response_model_exclude_unset=True)
def remove_member(member_id: int, user: AuthUser, db: Annotated[Session, Depends(get_db)]) -> ApiResponse:
    member = get_or_404(db, TeamMember, member_id, "Team member not found", user_id=user.id)
    db.delete(member)
    db.commit()
    return envelope("Team member removed successfully")
