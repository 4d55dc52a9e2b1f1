"""SQLAlchemy ORM models."""

from app.models.activity import Activity
from app.models.base import Base
from app.models.blog_post import BlogPost
from app.models.case_study import CaseStudy
from app.models.faq import FAQ
from app.models.global_settings import GlobalSettings
from app.models.guest_posting_package import GuestPostingPackage
from app.models.homepage_section import HomepageSection
from app.models.link_building_package import LinkBuildingPackage
from app.models.live_chat import LiveChat
from app.models.navigation import Navigation
from app.models.order import Order
from app.models.payment_method import PaymentMethod
from app.models.pricing_plan import PricingPlan
from app.models.project import Project
from app.models.report import Report
from app.models.seed_marker import SeedMarker
from app.models.service import Service
from app.models.subscription import Subscription
from app.models.support_ticket import SupportTicket
from app.models.team_member import TeamMember
from app.models.testimonial import Testimonial
from app.models.theme import Theme
from app.models.user import User

__all__ = [
    "Activity",
    "Base",
    "BlogPost",
    "CaseStudy",
    "FAQ",
    "GlobalSettings",
    "GuestPostingPackage",
    "HomepageSection",
    "LinkBuildingPackage",
    "LiveChat",
    "Navigation",
    "Order",
    "PaymentMethod",
    "PricingPlan",
    "Project",
    "Report",
    "SeedMarker",
    "Service",
    "Subscription",
    "SupportTicket",
    "TeamMember",
    "Testimonial",
    "Theme",
    "User",
]
