"""Schemas for theme configuration."""

from typing import Any

from pydantic import Field

from app.schemas.base import CamelModel, RecordOut


class ColorPreset(CamelModel):
    name: str = Field(..., min_length=1)
    hue: int = Field(..., ge=0, le=360)
    color: str = Field(..., min_length=1)


class ThemeActiveUpdate(CamelModel):
    """Fields editable through PATCH on the active theme."""

    active_color_hue: int | None = Field(default=None, ge=0, le=360)
    dark_mode: bool | None = None
    primary_font: str | None = Field(default=None, min_length=1)
    heading_font: str | None = Field(default=None, min_length=1)
    base_font_size: str | None = Field(default=None, min_length=1)
    border_radius: float | None = Field(default=None, ge=0)


class ThemeUpdate(ThemeActiveUpdate):
    color_presets: list[ColorPreset] | None = None
    is_active: bool | None = None


class ThemeCreate(CamelModel):
    active_color_hue: int = Field(default=155, ge=0, le=360)
    dark_mode: bool = False
    primary_font: str = "Inter"
    heading_font: str = "Inter"
    base_font_size: str = "16px"
    border_radius: float = Field(default=0.625, ge=0)
    color_presets: list[ColorPreset] = Field(default_factory=list)
    is_active: bool = False


class ThemeOut(RecordOut):
    active_color_hue: int
    dark_mode: bool
    primary_font: str
    heading_font: str
    base_font_size: str
    border_radius: float
    color_presets: list[dict[str, Any]]
    is_active: bool
