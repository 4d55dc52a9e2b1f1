"""ORM model for site-wide settings (branding, contact, SEO, security toggles)."""

from sqlalchemy import Boolean, Column, Integer, String, Text

from app.models.base import Base, SingletonMixin, TimestampMixin


class GlobalSettings(SingletonMixin, TimestampMixin, Base):
    __tablename__ = "global_settings"

    id = Column(Integer, primary_key=True, autoincrement=True)
    site_logo = Column(String(2048), nullable=False, default="")
    favicon = Column(String(2048), nullable=False, default="")
    site_name = Column(String(255), nullable=False, default="Backlinkse")
    tagline = Column(String(255), nullable=False, default="Professional Link Building Agency")
    contact_email = Column(String(255), nullable=False, default="hello@backlinkse.com")
    support_email = Column(String(255), nullable=False, default="support@backlinkse.com")
    whatsapp_number = Column(String(64), nullable=False, default="+1 234 567 890")
    business_address = Column(String(500), nullable=False, default="")
    calendly_link = Column(String(2048), nullable=False, default="")
    dashboard_url = Column(String(2048), nullable=False, default="/dashboard")
    case_studies_external_url = Column(String(2048), nullable=False, default="")
    default_meta_title = Column(
        String(255), nullable=False, default="Backlinkse - Professional Link Building Agency"
    )
    default_meta_description = Column(
        Text,
        nullable=False,
        default=(
            "Build high-quality backlinks and improve your search rankings with Backlinkse. "
            "Trusted by 500+ companies worldwide."
        ),
    )
    google_analytics_id = Column(String(64), nullable=False, default="")
    admin_email = Column(String(255), nullable=False, default="admin@backlinkse.com")
    two_factor_auth_enabled = Column(Boolean, nullable=False, default=False)
    session_expiry_enabled = Column(Boolean, nullable=False, default=True)
    activity_logging_enabled = Column(Boolean, nullable=False, default=True)
    brute_force_protection_enabled = Column(Boolean, nullable=False, default=True)
