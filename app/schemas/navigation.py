"""Schemas for navigation configuration."""

from typing import Any

from pydantic import Field

from app.schemas.base import CamelModel, RecordOut


class NavLink(CamelModel):
    label: str = Field(..., min_length=1)
    href: str = Field(..., min_length=1)
    visible: bool = True


class NavButton(CamelModel):
    text: str = Field(..., min_length=1)
    href: str = Field(..., min_length=1)
    visible: bool = True
    show_when_logged_in: bool | None = None


class FooterLink(CamelModel):
    label: str = Field(..., min_length=1)
    href: str = Field(..., min_length=1)


class FooterSection(CamelModel):
    title: str = Field(..., min_length=1)
    links: list[FooterLink] = Field(default_factory=list)


class NavigationActiveUpdate(CamelModel):
    header_links: list[NavLink] | None = None
    login_button: NavButton | None = None
    sign_up_button: NavButton | None = None
    dashboard_button: NavButton | None = None
    footer_sections: list[FooterSection] | None = None
    contact_email: str | None = None
    whatsapp_number: str | None = None
    twitter_url: str | None = None
    linked_in_url: str | None = None


class NavigationUpdate(NavigationActiveUpdate):
    is_active: bool | None = None


class NavigationCreate(CamelModel):
    header_links: list[NavLink] = Field(default_factory=list)
    login_button: NavButton = NavButton(text="Log In", href="/login")
    sign_up_button: NavButton = NavButton(text="Sign Up", href="/signup")
    dashboard_button: NavButton = NavButton(text="Dashboard", href="/dashboard", show_when_logged_in=True)
    footer_sections: list[FooterSection] = Field(default_factory=list)
    contact_email: str = ""
    whatsapp_number: str = ""
    twitter_url: str = ""
    linked_in_url: str = ""
    is_active: bool = False


class NavigationOut(RecordOut):
    header_links: list[dict[str, Any]]
    login_button: dict[str, Any]
    sign_up_button: dict[str, Any]
    dashboard_button: dict[str, Any]
    footer_sections: list[dict[str, Any]]
    contact_email: str
    whatsapp_number: str
    twitter_url: str
    linked_in_url: str
    is_active: bool
