"""ORM model for site theme configuration."""

from sqlalchemy import Boolean, Column, Float, Integer, String

from app.models.base import Base, JSONType, SingletonMixin, TimestampMixin


class Theme(SingletonMixin, TimestampMixin, Base):
    """color_presets: list of {name, hue, color}."""

    __tablename__ = "themes"

    id = Column(Integer, primary_key=True, autoincrement=True)
    active_color_hue = Column(Integer, nullable=False, default=155)
    dark_mode = Column(Boolean, nullable=False, default=False)
    primary_font = Column(String(100), nullable=False, default="Inter")
    heading_font = Column(String(100), nullable=False, default="Inter")
    base_font_size = Column(String(16), nullable=False, default="16px")
    border_radius = Column(Float, nullable=False, default=0.625)
    color_presets = Column(JSONType, nullable=False, default=list)
