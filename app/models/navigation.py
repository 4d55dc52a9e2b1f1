"""ORM model for header/footer navigation configuration."""

from sqlalchemy import Column, Integer, String

from app.models.base import Base, JSONType, SingletonMixin, TimestampMixin


class Navigation(SingletonMixin, TimestampMixin, Base):
    """
    header_links: list of {label, href, visible}.
    *_button: {text, href, visible} (dashboard adds showWhenLoggedIn).
    footer_sections: list of {title, links: [{label, href}]}.
    """

    __tablename__ = "navigations"

    id = Column(Integer, primary_key=True, autoincrement=True)
    header_links = Column(JSONType, nullable=False, default=list)
    login_button = Column(JSONType, nullable=False)
    sign_up_button = Column(JSONType, nullable=False)
    dashboard_button = Column(JSONType, nullable=False)
    footer_sections = Column(JSONType, nullable=False, default=list)
    contact_email = Column(String(255), nullable=False, default="")
    whatsapp_number = Column(String(64), nullable=False, default="")
    twitter_url = Column(String(2048), nullable=False, default="")
    linked_in_url = Column(String(2048), nullable=False, default="")
