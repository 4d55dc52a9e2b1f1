"""API v1 routes."""

from fastapi import APIRouter

from app.api.v1 import (
    auth,
    blog,
    case_studies,
    dashboard,
    faqs,
    guest_posting,
    health,
    homepage,
    link_building,
    orders,
    payments,
    pricing,
    projects,
    reports,
    services,
    singletons,
    subscriptions,
    support,
    team,
    testimonials,
    users,
)

router = APIRouter()
router.include_router(health.router, prefix="/health", tags=["health"])
router.include_router(auth.router, prefix="/auth", tags=["auth"])
router.include_router(users.router, prefix="/users", tags=["users"])

# Public site content
router.include_router(blog.router, prefix="/blog", tags=["blog"])
router.include_router(case_studies.router, prefix="/case-studies", tags=["case-studies"])
router.include_router(faqs.router, prefix="/faqs", tags=["faqs"])
router.include_router(testimonials.router, prefix="/testimonials", tags=["testimonials"])
router.include_router(pricing.router, prefix="/pricing", tags=["pricing"])
router.include_router(services.router, prefix="/services", tags=["services"])
router.include_router(homepage.router, prefix="/homepage", tags=["homepage"])
router.include_router(link_building.router, prefix="/link-building", tags=["link-building"])
router.include_router(guest_posting.router, prefix="/guest-posting", tags=["guest-posting"])

# Singleton configuration
router.include_router(singletons.theme_router, prefix="/theme", tags=["theme"])
router.include_router(singletons.navigation_router, prefix="/navigation", tags=["navigation"])
router.include_router(singletons.live_chat_router, prefix="/live-chat", tags=["live-chat"])
router.include_router(singletons.settings_router, prefix="/settings", tags=["settings"])

# Customer dashboard
router.include_router(dashboard.router, prefix="/dashboard", tags=["dashboard"])
router.include_router(projects.router, prefix="/projects", tags=["projects"])
router.include_router(orders.router, prefix="/orders", tags=["orders"])
router.include_router(reports.router, prefix="/reports", tags=["reports"])
router.include_router(support.router, prefix="/support", tags=["support"])
router.include_router(team.router, prefix="/team", tags=["team"])
router.include_router(payments.router, prefix="/payment", tags=["payment"])
router.include_router(subscriptions.router, prefix="/subscriptions", tags=["subscriptions"])
