"""
Routers for singleton configuration collections: theme, navigation, live chat
and global settings.

Each collection exposes the same routes:
  GET    /            active record (public; seeded on first use)
  PATCH  /            update the active record (any authenticated user)
  GET    /admin/all   every record, newest first (admin, moderator)
  GET    /admin/{id}  one record (admin, moderator)
  POST   /admin       create; isActive true makes it the only active record (admin)
  PATCH  /admin/{id}  update; isActive true activates it (admin)
  DELETE /admin/{id}  delete (admin)
"""

from dataclasses import dataclass
from typing import Annotated, Any

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel
from sqlalchemy import select
from sqlalchemy.orm import Session

from app.api.v1.auth import AdminUser, AuthUser, StaffUser
from app.core.database import get_db
from app.models import GlobalSettings, LiveChat, Navigation, Theme
from app.models.base import Base
from app.schemas.base import ApiResponse, envelope
from app.schemas.global_settings import (
    GlobalSettingsActiveUpdate,
    GlobalSettingsCreate,
    GlobalSettingsOut,
    GlobalSettingsUpdate,
)
from app.schemas.live_chat import LiveChatActiveUpdate, LiveChatCreate, LiveChatOut, LiveChatUpdate
from app.schemas.navigation import (
    NavigationActiveUpdate,
    NavigationCreate,
    NavigationOut,
    NavigationUpdate,
)
from app.schemas.theme import ThemeActiveUpdate, ThemeCreate, ThemeOut, ThemeUpdate
from app.services import seed_data, singleton
from app.services.crud import changes_of, fields_of, get_or_404


@dataclass(frozen=True)
class SingletonResource:
    model: type[Base]
    defaults: dict[str, Any]
    create_schema: type[BaseModel]
    update_schema: type[BaseModel]
    active_update_schema: type[BaseModel]
    out_schema: type[BaseModel]
    label: str
    plural: str
    key: str
    list_key: str

    @property
    def not_found(self) -> str:
        return f"{self.label} not found"

    def out(self, record: Base) -> BaseModel:
        return self.out_schema.model_validate(record)


def build_router(resource: SingletonResource) -> APIRouter:
    router = APIRouter()
    model = resource.model
    lower = resource.label.lower()

    @router.get("", response_model=ApiResponse, response_model_exclude_unset=True)
    def get_active(db: Annotated[Session, Depends(get_db)]) -> ApiResponse:
        record = singleton.get_active(db, model, resource.defaults, resource.label)
        return envelope(f"Active {lower} retrieved successfully", **{resource.key: resource.out(record)})

    @router.patch("", response_model=ApiResponse, response_model_exclude_unset=True)
    def update_active(
        body: resource.active_update_schema,
        _user: AuthUser,
        db: Annotated[Session, Depends(get_db)],
    ) -> ApiResponse:
        record = singleton.get_active(db, model, resource.defaults, resource.label)
        record = singleton.update_record(db, model, record, changes_of(body))
        return envelope(f"Active {lower} updated successfully", **{resource.key: resource.out(record)})

    @router.get("/admin/all", response_model=ApiResponse, response_model_exclude_unset=True)
    def list_all(_staff: StaffUser, db: Annotated[Session, Depends(get_db)]) -> ApiResponse:
        records = db.scalars(select(model).order_by(model.created_at.desc(), model.id.desc()))
        return envelope(
            f"All {resource.plural} retrieved successfully",
            **{resource.list_key: [resource.out(r) for r in records]},
        )

    @router.get("/admin/{record_id}", response_model=ApiResponse, response_model_exclude_unset=True)
    def get_one(record_id: int, _staff: StaffUser, db: Annotated[Session, Depends(get_db)]) -> ApiResponse:
        record = get_or_404(db, model, record_id, resource.not_found)
        return envelope(f"{resource.label} retrieved successfully", **{resource.key: resource.out(record)})

    @router.post(
        "/admin",
        response_model=ApiResponse,
        response_model_exclude_unset=True,
        status_code=status.HTTP_201_CREATED,
    )
    def create(
        body: resource.create_schema,
        _admin: AdminUser,
        db: Annotated[Session, Depends(get_db)],
    ) -> ApiResponse:
        record = singleton.create(db, model, fields_of(body))
        return envelope(f"{resource.label} created successfully", **{resource.key: resource.out(record)})

    @router.patch("/admin/{record_id}", response_model=ApiResponse, response_model_exclude_unset=True)
    def update(
        record_id: int,
        body: resource.update_schema,
        _admin: AdminUser,
        db: Annotated[Session, Depends(get_db)],
    ) -> ApiResponse:
        record = get_or_404(db, model, record_id, resource.not_found)
        record = singleton.update_record(db, model, record, changes_of(body))
        return envelope(f"{resource.label} updated successfully", **{resource.key: resource.out(record)})

    @router.delete("/admin/{record_id}", response_model=ApiResponse, response_model_exclude_unset=True)
    def delete(record_id: int, _admin: AdminUser, db: Annotated[Session, Depends(get_db)]) -> ApiResponse:
        record = get_or_404(db, model, record_id, resource.not_found)
        deleted = resource.out(record)
        singleton.delete_record(db, record)
        return envelope(f"{resource.label} deleted successfully", **{resource.key: deleted})

    return router


THEME = SingletonResource(
    model=Theme,
    defaults=seed_data.THEME,
    create_schema=ThemeCreate,
    update_schema=ThemeUpdate,
    active_update_schema=ThemeActiveUpdate,
    out_schema=ThemeOut,
    label="Theme",
    plural="themes",
    key="theme",
    list_key="themes",
)

NAVIGATION = SingletonResource(
    model=Navigation,
    defaults=seed_data.NAVIGATION,
    create_schema=NavigationCreate,
    update_schema=NavigationUpdate,
    active_update_schema=NavigationActiveUpdate,
    out_schema=NavigationOut,
    label="Navigation",
    plural="navigations",
    key="navigation",
    list_key="navigations",
)

LIVE_CHAT = SingletonResource(
    model=LiveChat,
    defaults=seed_data.LIVE_CHAT,
    create_schema=LiveChatCreate,
    update_schema=LiveChatUpdate,
    active_update_schema=LiveChatActiveUpdate,
    out_schema=LiveChatOut,
    label="Live chat settings",
    plural="live chat settings",
    key="liveChat",
    list_key="liveChats",
)

GLOBAL_SETTINGS = SingletonResource(
    model=GlobalSettings,
    defaults=seed_data.GLOBAL_SETTINGS,
    create_schema=GlobalSettingsCreate,
    update_schema=GlobalSettingsUpdate,
    active_update_schema=GlobalSettingsActiveUpdate,
    out_schema=GlobalSettingsOut,
    label="Global settings",
    plural="global settings",
    key="settings",
    list_key="settings",
)

theme_router = build_router(THEME)
navigation_router = build_router(NAVIGATION)
live_chat_router = build_router(LIVE_CHAT)
settings_router = build_router(GLOBAL_SETTINGS)
