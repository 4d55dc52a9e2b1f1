"""Schemas for site-wide settings."""

from app.schemas.base import CamelModel, RecordOut


class GlobalSettingsActiveUpdate(CamelModel):
    site_logo: str | None = None
    favicon: str | None = None
    site_name: str | None = None
    tagline: str | None = None
    contact_email: str | None = None
    support_email: str | None = None
    whatsapp_number: str | None = None
    business_address: str | None = None
    calendly_link: str | None = None
    dashboard_url: str | None = None
    case_studies_external_url: str | None = None
    default_meta_title: str | None = None
    default_meta_description: str | None = None
    google_analytics_id: str | None = None
    admin_email: str | None = None
    two_factor_auth_enabled: bool | None = None
    session_expiry_enabled: bool | None = None
    activity_logging_enabled: bool | None = None
    brute_force_protection_enabled: bool | None = None


class GlobalSettingsUpdate(GlobalSettingsActiveUpdate):
    is_active: bool | None = None


class GlobalSettingsCreate(CamelModel):
    site_logo: str = ""
    favicon: str = ""
    site_name: str = "Backlinkse"
    tagline: str = "Professional Link Building Agency"
    contact_email: str = "hello@backlinkse.com"
    support_email: str = "support@backlinkse.com"
    whatsapp_number: str = ""
    business_address: str = ""
    calendly_link: str = ""
    dashboard_url: str = "/dashboard"
    case_studies_external_url: str = ""
    default_meta_title: str = ""
    default_meta_description: str = ""
    google_analytics_id: str = ""
    admin_email: str = "admin@backlinkse.com"
    two_factor_auth_enabled: bool = False
    session_expiry_enabled: bool = True
    activity_logging_enabled: bool = True
    brute_force_protection_enabled: bool = True
    is_active: bool = False


class GlobalSettingsOut(RecordOut):
    site_logo: str
    favicon: str
    site_name: str
    tagline: str
    contact_email: str
    support_email: str
    whatsapp_number: str
    business_address: str
    calendly_link: str
    dashboard_url: str
    case_studies_external_url: str
    default_meta_title: str
    default_meta_description: str
    google_analytics_id: str
    admin_email: str
    two_factor_auth_enabled: bool
    session_expiry_enabled: bool
    activity_logging_enabled: bool
    brute_force_protection_enabled: bool
    is_active: bool
