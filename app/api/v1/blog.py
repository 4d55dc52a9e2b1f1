"""Blog posts: public listing of published posts plus staff management."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy import or_, select
from sqlalchemy.orm import Session

from app.api.v1.auth import StaffUser
from app.core.clock import Clock, get_clock
from app.core.database import get_db
from app.core.exceptions import NotFoundError
from app.models.blog_post import BlogPost
from app.schemas.base import ApiResponse, envelope
from app.schemas.blog import BlogPostCreate, BlogPostOut, BlogPostUpdate
from app.services import seed_data
from app.services.crud import apply_updates, changes_of, fields_of, get_or_404, ordered
from app.services.seeding import ensure_seeded

router = APIRouter()

NOT_FOUND = "Blog post not found"


def _posts(db: Session, *criteria) -> list[BlogPostOut]:
    ensure_seeded(db, BlogPost, seed_data.BLOG_POSTS)
    return [BlogPostOut.model_validate(p) for p in ordered(db, BlogPost, *criteria, newest_first=True)]


@router.get("", response_model=ApiResponse, response_model_exclude_unset=True)
def list_published(db: Annotated[Session, Depends(get_db)]) -> ApiResponse:
    return envelope("Blog posts retrieved", posts=_posts(db, BlogPost.status == "published"))


@router.get("/admin/all", response_model=ApiResponse, response_model_exclude_unset=True)
def list_all(_staff: StaffUser, db: Annotated[Session, Depends(get_db)]) -> ApiResponse:
    return envelope("All blog posts retrieved", posts=_posts(db))


@router.get("/admin/{key}", response_model=ApiResponse, response_model_exclude_unset=True)
def get_post(key: str, _staff: StaffUser, db: Annotated[Session, Depends(get_db)]) -> ApiResponse:
    """Look up a post by numeric id or by slug."""
    criteria = [BlogPost.slug == key]
    if key.isdigit():
        criteria.append(BlogPost.id == int(key))
    post = db.scalars(select(BlogPost).where(or_(*criteria))).first()
    if post is None:
        raise NotFoundError(NOT_FOUND)
    return envelope("Blog post retrieved", post=BlogPostOut.model_validate(post))


@router.post(
    "",
    response_model=ApiResponse,
    response_model_exclude_unset=True,
    status_code=status.HTTP_201_CREATED,
)
def create_post(
    body: BlogPostCreate,
    _staff: StaffUser,
    db: Annotated[Session, Depends(get_db)],
    clock: Annotated[Clock, Depends(get_clock)],
) -> ApiResponse:
    """Create a post. date defaults to today; meta title and description fall back to title and excerpt."""
    values = fields_of(body)
    values["date"] = body.date or clock().date().isoformat()
    values["meta_title"] = body.meta_title or body.title
    values["meta_description"] = body.meta_description or body.excerpt
    post = BlogPost(**values)
    db.add(post)
    db.commit()
    db.refresh(post)
    return envelope("Blog post created", post=BlogPostOut.model_validate(post))


@router.patch("/{post_id}", response_model=ApiResponse, response_model_exclude_unset=True)
def update_post(
    post_id: int,
    body: BlogPostUpdate,
    _staff: StaffUser,
    db: Annotated[Session, Depends(get_db)],
) -> ApiResponse:
    post = get_or_404(db, BlogPost, post_id, NOT_FOUND)
    apply_updates(post, changes_of(body))
    db.commit()
    db.refresh(post)
    return envelope("Blog post updated", post=BlogPostOut.model_validate(post))


@router.delete("/{post_id}", response_model=ApiResponse, response_model_exclude_unset=True)
def delete_post(post_id: int, _staff: StaffUser, db: Annotated[Session, Depends(get_db)]) -> ApiResponse:
    post = get_or_404(db, BlogPost, post_id, NOT_FOUND)
    db.delete(post)
    db.commit()
    return envelope("Blog post deleted")
